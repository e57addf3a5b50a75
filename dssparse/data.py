"""

# Command-Line Data Model

Error types, options and records shared by the tokenizer,
the variable table and the value-conversion layer.

"""

# Std-Lib Imports
from enum import Enum
from typing import Optional

# PyPi Imports
from pydantic import ConfigDict, field_validator
from pydantic.dataclasses import dataclass


# First character of a variable reference
VARIABLE_SIGIL = "@"

# Default delimiter configuration.
# Quote pairing is positional, and the defaults are asymmetric:
# `(` closes on `)`, `"` on `}`, `'` on `'`, `[` on `]`, and `{` has no closing partner.
DEFAULT_WHITESPACE = " \t"
DEFAULT_DELIMITERS = ",="
DEFAULT_BEGIN_QUOTES = "(\"'[{"
DEFAULT_END_QUOTES = ")}']"
DEFAULT_MATRIX_ROW_TERMINATOR = "|"
DEFAULT_COMMENT_CHAR = "!"


class DssParseError(Exception):
    """Command-Line Parse Error"""

    @classmethod
    def throw(cls, *args, **kwargs):
        """Exception-raising debug wrapper. Breakpoint to catch `DssParseError`s and their sub-types."""
        raise cls(*args, **kwargs)


class ConversionError(DssParseError):
    """Numeric conversion failure. Carries the offending text."""

    def __init__(self, msg: str, text: str = ""):
        super().__init__(msg)
        self.text = text


class InlineMathError(ConversionError):
    """Unrecognized word inside a quoted inline-math expression."""


class ErrorMode(Enum):
    """Enumerated Error-Response Strategies"""

    RAISE = "raise"  # Raise any generated exceptions
    STORE = "store"  # Warn, store the error, and return a zero value


@dataclass(config=ConfigDict(validate_assignment=True))
class TokenizerOptions:
    """Tokenizer Delimiter Configuration"""

    whitespace: str = DEFAULT_WHITESPACE  # Characters skipped between tokens
    delimiters: str = DEFAULT_DELIMITERS  # Separator characters, consumed after a token
    begin_quotes: str = DEFAULT_BEGIN_QUOTES  # Quote-open characters
    end_quotes: str = DEFAULT_END_QUOTES  # Quote-close characters, paired by position
    matrix_row_terminator: str = DEFAULT_MATRIX_ROW_TERMINATOR
    comment_char: str = DEFAULT_COMMENT_CHAR  # `//` is always a comment as well
    auto_increment: bool = False  # Whether value readers call `next_param` first

    @field_validator("matrix_row_terminator", "comment_char")
    @classmethod
    def _single_char(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError(f"Expected a single character, got {v!r}")
        return v

    def reset_delims(self) -> None:
        """Restore the default delimiter configuration.
        Leaves `auto_increment` alone."""
        self.whitespace = DEFAULT_WHITESPACE
        self.delimiters = DEFAULT_DELIMITERS
        self.begin_quotes = DEFAULT_BEGIN_QUOTES
        self.end_quotes = DEFAULT_END_QUOTES
        self.matrix_row_terminator = DEFAULT_MATRIX_ROW_TERMINATOR
        self.comment_char = DEFAULT_COMMENT_CHAR

    def end_quote_for(self, ch: str) -> Optional[str]:
        """Get the closing partner of begin-quote `ch`, matched by ordinal position.
        Returns `None` if `ch` is not a begin-quote, or has no partner."""
        idx = self.begin_quotes.find(ch)
        if idx < 0 or idx >= len(self.end_quotes):
            return None
        return self.end_quotes[idx]


@dataclass
class Param:
    """A single `name=value` parameter.
    `name` is empty for positional (un-named) parameters."""

    name: str
    value: str
    quoted: bool = False  # Whether `value` came from a quoted span or literal variable
