"""
LLAP launcher options.

Parses and validates the command line used to size and launch an LLAP
cluster, producing an immutable LlapConfiguration for the launcher.
"""

from .errors import FormatError, LlapOptionsError, ParseSyntaxError, ValidationError
from .models import UNSPECIFIED, LlapConfiguration
from .options import OptionSchema, OptionSpec, default_schema
from .processor import LlapOptionsProcessor

__all__ = [
    'LlapConfiguration',
    'LlapOptionsProcessor',
    'OptionSchema',
    'OptionSpec',
    'default_schema',
    'UNSPECIFIED',

    # Errors
    'LlapOptionsError',
    'ParseSyntaxError',
    'FormatError',
    'ValidationError',
]

__version__ = "0.1.0"
