"""
module terminput.editor.enums

Contains the definitions of all enum classes used to configure the
line editor
"""

from .inputstyle import InputStyle
