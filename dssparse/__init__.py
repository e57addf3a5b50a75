"""
DSS Parse

Tokenizing and inline-math evaluation for circuit-description command lines.
"""

__version__ = "0.1.0"

import warnings
from pathlib import Path

# Configure warning format to be more concise (single line, no source code repetition)
# This applies globally whenever the dssparse package is imported
def _warning_on_one_line(message, category, filename, lineno, file=None, line=None):
    return f'{Path(filename).name}:{lineno}: {category.__name__}: {message}\n'

warnings.formatwarning = _warning_on_one_line


from .data import *
from .rpn import RegisterStack, MAX_STACK_SIZE
from .variables import VariableTable, VariableResolver, INTRINSIC_VARIABLES
from .lex import Tokenizer
from .convert import ValueReader, KEYWORDS
from .parse import parse_line, iter_params
