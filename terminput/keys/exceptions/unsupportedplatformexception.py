"""
module terminput.keys.exceptions.unsupportedplatformexception

Contains the definition of the UnsupportedPlatformException class which is
thrown when no key reader is available for the running operating system
"""

from ...terminputexception import TermInputException


class UnsupportedPlatformException(TermInputException):
    """
    class UnsupportedPlatformException

    Thrown when no key reader is available for the running operating system
    """
