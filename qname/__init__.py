"""
Qualified name parsing & validation: ``prefix:localname`` strings checked
against a grammar derived from the XML qualified name rules.
"""

__version__ = "1.0.0"

from .exceptions import IllegalNameException
from .grammar import isValidName, split
from .qname import QName, parse
