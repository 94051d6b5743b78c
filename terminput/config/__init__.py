"""
module terminput.config

Contains the definitions of all classes related to the persisted
configuration of terminput
"""

from .displaybackendtype import DisplayBackendType
from .terminputconfig import TermInputConfig
