"""
# Command-Line Parsing

Single-call entry points over `Tokenizer`.
"""

from typing import Iterator, List, Optional

# Local Imports
from .data import TokenizerOptions, Param
from .lex import Tokenizer
from .variables import VariableResolver


def iter_params(
    line: str,
    *,
    options: Optional[TokenizerOptions] = None,
    resolver: Optional[VariableResolver] = None,
) -> Iterator[Param]:
    """Iterate over the parameters of command-line `line`"""
    t = Tokenizer(options, resolver=resolver)
    t.set_cmd_string(line)
    yield from t


def parse_line(
    line: str,
    *,
    options: Optional[TokenizerOptions] = None,
    resolver: Optional[VariableResolver] = None,
) -> List[Param]:
    """
    Primary command-line parsing entry point.
    Split `line` into a list of `Param`s, positional parameters having an empty `name`.
    Optional argument `options` sets the delimiters, per the `TokenizerOptions` class.
    Optional argument `resolver`, typically a `VariableTable`, enables `@variable` substitution.
    """
    return list(iter_params(line, options=options, resolver=resolver))
