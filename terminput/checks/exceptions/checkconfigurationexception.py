"""
module terminput.checks.exceptions.checkconfigurationexception

Contains the definition of the CheckConfigurationException class which is
thrown when a check is constructed with arguments that cannot work
"""

from ...terminputexception import TermInputException


class CheckConfigurationException(TermInputException):
    """
    class CheckConfigurationException

    Thrown when a check is constructed with arguments that cannot work
    (i.e., a numeric check for a kind that isn't numeric). This represents a
    mistake by the caller and is never converted into a retry
    """
