"""
jisho-cli: look up English or Japanese terms on jisho.org.

This package contains:
- The search-results parser (entries, readings, meanings)
- The HTTP client that fetches result pages
- Terminal rendering and the command-line interface
"""

__version__ = "1.2.0"

from .errors import FetchError, JishoError, StructureError, StructureProblem
from .models import Entry, Meaning, SeeAlso, Tag
from .parsing import JishoParser, parse
from .lookup import JishoClient

__all__ = [
    'Entry',
    'Meaning',
    'SeeAlso',
    'Tag',
    'JishoError',
    'StructureError',
    'StructureProblem',
    'FetchError',
    'JishoParser',
    'parse',
    'JishoClient',
]
