"""
module terminput.checks.exceptions

Contains all definitions of exceptions specifically thrown by
checks and the functions that construct them
"""

from .checkconfigurationexception import CheckConfigurationException
from .invalidinput import InvalidInput
