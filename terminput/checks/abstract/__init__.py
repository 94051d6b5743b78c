"""
module terminput.checks.abstract

Contains the definition of the Check abstract base class that is implemented
by every check returned from the functions in terminput.checks
"""

from .check import Check, CheckFunction, passes
