"""
# Command-Line Tokenizer

Splits a single command line into `name=value` parameters,
handling quoting, comments, separators and `@variable` references.
"""

# Std-Lib Imports
from typing import Iterator, Optional

# Local Imports
from .data import TokenizerOptions, Param, VARIABLE_SIGIL
from .variables import VariableResolver


class Tokenizer:
    """
    # Command-Line Tokenizer

    Usage:
    ```
    t = Tokenizer()
    t.set_cmd_string("New Line.L1 bus1=a.1.2 phases=3")
    name = t.next_param()  # "" - positional parameter
    t.token                # "New"
    ```

    Each call to `next_param` returns the parameter's name, empty for positional parameters.
    The value is left in `token`.
    """

    def __init__(
        self,
        options: Optional[TokenizerOptions] = None,
        *,
        resolver: Optional[VariableResolver] = None,
    ):
        if options is None:  # If not provided, create the default `TokenizerOptions`.
            options = TokenizerOptions()
        self.options = options
        self.resolver = resolver
        self.cmd_buffer = ""
        self._position = 0
        self.param_name = ""  # Most recent parameter name
        self.token = ""  # Most recent token, i.e. parameter value
        self.last_delimiter = " "
        self.is_quoted_string = False

    def __iter__(self) -> Iterator[Param]:
        """Iterate over the remaining parameters on the current line"""
        while not self.at_end and not self.at_comment:
            name = self.next_param()
            yield Param(name=name, value=self.token, quoted=self.is_quoted_string)

    @property
    def cmd_string(self) -> str:
        return self.cmd_buffer

    @property
    def position(self) -> int:
        return self._position

    @position.setter
    def position(self, pos: int) -> None:
        self._position = max(0, min(pos, len(self.cmd_buffer)))

    @property
    def at_end(self) -> bool:
        return self._position >= len(self.cmd_buffer)

    @property
    def at_comment(self) -> bool:
        """Whether the cursor sits on a comment, i.e. nothing but a comment remains"""
        if self.at_end or self.cmd_buffer[self._position] in self.options.begin_quotes:
            return False
        return self.is_comment_at(self._position)

    @property
    def remainder(self) -> str:
        """Unconsumed portion of the command line"""
        return self.cmd_buffer[self._position :]

    def set_cmd_string(self, line: str) -> None:
        """Load a new command line, resetting the cursor to its first non-whitespace character.
        A trailing space guarantees the final token ends on a delimiter."""
        self.cmd_buffer = line + " "
        self._position = 0
        self.skip_whitespace()

    def reset_delims(self) -> None:
        self.options.reset_delims()

    def is_whitespace(self, ch: str) -> bool:
        return ch in self.options.whitespace

    def is_delim_char(self, ch: str) -> bool:
        return ch in self.options.delimiters

    def is_comment_at(self, pos: int) -> bool:
        """Whether a comment starts at position `pos`: the comment character, or `//`."""
        ch = self.cmd_buffer[pos]
        if ch == self.options.comment_char:
            return True
        return ch == "/" and pos + 1 < len(self.cmd_buffer) and self.cmd_buffer[pos + 1] == "/"

    def is_delimiter_at(self, pos: int) -> bool:
        ch = self.cmd_buffer[pos]
        return self.is_comment_at(pos) or self.is_delim_char(ch) or self.is_whitespace(ch)

    def skip_whitespace(self) -> None:
        while not self.at_end and self.is_whitespace(self.cmd_buffer[self._position]):
            self._position += 1

    def get_token(self) -> str:
        """Extract the next raw token, advancing the cursor past it and its delimiter."""
        buf = self.cmd_buffer
        end = len(buf)
        if self._position >= end:
            return ""

        self.is_quoted_string = False
        ch = buf[self._position]

        if ch in self.options.begin_quotes:
            # Quoted span. Runs to its positional partner, or to the end of the line.
            end_quote = self.options.end_quote_for(ch)
            self._position += 1
            start = self._position
            while self._position < end and buf[self._position] != end_quote:
                self._position += 1
            token = buf[start : self._position]
            if self._position < end:
                self._position += 1  # Skip the closing quote
            self.is_quoted_string = True
        else:
            start = self._position
            while self._position < end and not self.is_delimiter_at(self._position):
                self._position += 1
            token = buf[start : self._position]

        # Sort out the delimiter which ended the token
        if self._position < end:
            self.last_delimiter = buf[self._position]
            if self.is_comment_at(self._position):
                self._position = end  # Discard the rest of the line
            else:
                if self.is_delim_char(self.last_delimiter):
                    self._position += 1
                self.skip_whitespace()

        return token

    def next_param(self) -> str:
        """Advance one parameter.
        Returns the parameter name, or an empty string for positional parameters.
        The value is left in `self.token`."""
        if not self.at_end:
            self.last_delimiter = " "
            self.token = self.get_token()
            if self.last_delimiter == "=":
                self.param_name = self.token
                self.token = self.get_token()
            else:
                self.param_name = ""
        else:
            self.param_name = ""
            self.token = ""

        self.check_for_var()
        return self.param_name

    def check_for_var(self) -> bool:
        """Substitute a leading `@variable` reference in `self.token`.

        The variable name runs up to the first `^`, or failing that the first `.`;
        anything from there on is kept as a suffix, e.g. `@bus.1.2` => `mybus.1.2`.
        Values stored as `{literal}` are unwrapped and flag the token as quoted.

        Returns whether the token is unchanged."""
        original = self.token
        if len(original) <= 1 or not original.startswith(VARIABLE_SIGIL):
            return True
        if self.resolver is None:
            return True

        cut = original.find("^")
        if cut < 0:
            cut = original.find(".")
        if cut < 0:
            name, suffix = original, ""
        else:
            name, suffix = original[:cut], original[cut:]

        if not self.resolver.lookup(name):
            return True

        value = self.resolver.get_value()
        if value.startswith("{") and value.endswith("}"):
            self.token = value[1:-1] + suffix
            self.is_quoted_string = True
        else:
            self.token = value + suffix

        return self.token == original
