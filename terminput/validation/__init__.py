"""
module terminput.validation

Contains the definition of the validate() function which re-prompts for
input until every provided check accepts it
"""

from .validationloop import validate
