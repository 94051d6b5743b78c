"""
module terminput.context

Contains dataclass definitions related to the representation of the context
of an individual terminput session
"""

from .backendset import BackendSet
from .terminputcontext import TermInputContext
