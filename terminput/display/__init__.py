"""
module terminput.display

Contains the definitions of the display backends that render prompts,
echoed keystrokes and validation errors
"""

from .abstract import DisplayBackend
from .backends import display_backends_by_name
