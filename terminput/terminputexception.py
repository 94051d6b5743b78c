"""
module terminput.terminputexception

Contains the definition of the TermInputException class, the parent of all
exceptions directly thrown by terminput and its backend classes
"""


class TermInputException(RuntimeError):
    """
    class TermInputException

    The parent class of all exceptions directly thrown by terminput
    and its backend classes
    """
