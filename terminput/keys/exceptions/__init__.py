"""
module terminput.keys.exceptions

Contains all definitions of exceptions specifically thrown by
terminput key readers
"""

from .unsupportedplatformexception import UnsupportedPlatformException
