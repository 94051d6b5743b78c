"""
module terminput.__init__

Contains the imports of the TermInput session class and the module-level
convenience functions used to prompt for validated input. Also contains
definitions that indicate the current version of terminput.
"""

__version_info__: tuple[int, ...] = (0, 1, 0)
__version__: str = ".".join(map(str, __version_info__))

from . import checks
from .editor.enums import InputStyle
from .terminput import TermInput, ask, get, prompt, read
