"""
module terminput.checks.enums

Contains the definitions of all enum classes used to configure checks
"""

from .numerickind import NumericKind
