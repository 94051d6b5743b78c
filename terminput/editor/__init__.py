"""
module terminput.editor

Contains the definition of the LineEditor class which turns raw keystrokes
into finished candidate strings
"""

from .enums import InputStyle
from .lineeditor import InputFunction, LineEditor
