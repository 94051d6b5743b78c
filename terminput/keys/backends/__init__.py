"""
module terminput.keys.backends

Contains the definitions of all supported key reader backends and the
lookup of the key reader for the running platform
"""

import os
from typing import Type

from ..abstract import KeyReader
from ..exceptions import UnsupportedPlatformException
from .stream import StreamKeyReader


def platform_key_reader() -> Type[KeyReader]:
    """
    Returns the key reader class for the operating system terminput is running on.
    Platform modules are imported lazily since termios and msvcrt are each only
    available on their own platform

    Args:
        None

    Returns:
        Type[KeyReader]: The key reader class to instantiate

    Raises:
        UnsupportedPlatformException: If there is no key reader for this platform
    """

    # pylint: disable=import-outside-toplevel
    match os.name:
        case "posix":
            from .posix import PosixKeyReader

            return PosixKeyReader
        case "nt":
            from .windows import WindowsKeyReader

            return WindowsKeyReader

    raise UnsupportedPlatformException(f"OS {os.name!r} support not available")
