"""
module terminput.keys.abstract

Contains the definition of the KeyReader abstract base class that
is implemented by individual platform key readers (i.e., termios)
"""

from .keyreader import KeyReader
