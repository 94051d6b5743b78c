"""
module terminput.display.backends

Contains the definitions of all supported display backends
"""

from typing import Dict, Type
from ..abstract import DisplayBackend
from ...config import DisplayBackendType

from . import plain
from . import prompt_toolkit

display_backends_by_name: Dict[DisplayBackendType, Type[DisplayBackend]] = {
    DisplayBackendType.PLAIN: plain.PlainDisplay,
    DisplayBackendType.PROMPT_TOOLKIT: prompt_toolkit.PromptToolkitDisplay,
}
