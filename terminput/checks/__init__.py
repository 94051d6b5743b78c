"""
module terminput.checks

Contains the Check abstract base class, the InvalidInput exception raised by
rejecting checks, and the functions that construct and combine checks
"""

from .abstract import Check, CheckFunction, passes
from .constructors import (
    any_of,
    charset,
    equals,
    in_range,
    length,
    matches,
    negate,
    numeric,
    with_message,
)
from .enums import NumericKind
from .exceptions import CheckConfigurationException, InvalidInput
