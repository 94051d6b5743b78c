"""
module terminput.context.backendset

Contains the definition of the BackendSet dataclass which stores the set
of backends that an individual terminput session depends on
"""

from dataclasses import dataclass

from ..display import DisplayBackend
from ..keys import KeyReader


@dataclass(frozen=True)
class BackendSet:
    """
    class BackendSet

    Dataclass which stores the set of backends that an individual
    terminput session depends on
    """

    display: DisplayBackend
    keys: KeyReader
