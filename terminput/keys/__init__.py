"""
module terminput.keys

Contains the definitions of the key readers that acquire single, unbuffered
keystrokes from a console for the line editor
"""

from .abstract import KeyReader
from .backends import platform_key_reader
from .exceptions import UnsupportedPlatformException
