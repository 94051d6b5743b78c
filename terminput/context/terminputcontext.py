"""
module terminput.context.terminputcontext

Contains the definition of the TermInputContext dataclass which contains
all of the required backends and configuration details for an
individual terminput session
"""

from dataclasses import dataclass

from .backendset import BackendSet
from ..config import TermInputConfig


@dataclass(frozen=True)
class TermInputContext:
    """
    class TermInputContext

    Dataclass which contains all of the required backends and configuration
    details for an individual terminput session
    """

    backends: BackendSet
    config: TermInputConfig
    config_path: str | None = None
