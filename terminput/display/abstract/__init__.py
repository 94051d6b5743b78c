"""
module terminput.display.abstract

Contains the definition of the DisplayBackend abstract base class that
is implemented by individual display integrations (i.e., prompt_toolkit)
"""

from .displaybackend import DisplayBackend
