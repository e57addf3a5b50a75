"""
# Value Conversion

Reads the tokenizer's current token as strings, numbers, vectors, matrices and bus names.
Quoted numeric tokens are evaluated as reverse-polish inline math on a `RegisterStack`, e.g.
`length=(2 3 *)` reads as `6.0`, and `angle=(1 1 atan2)` as `45.0`.
"""

# Std-Lib Imports
from warnings import warn
from typing import Callable, Dict, List, Optional, Tuple, Type

# PyPi Imports
import numpy as np

# Local Imports
from .data import ConversionError, InlineMathError, ErrorMode
from .lex import Tokenizer
from .rpn import RegisterStack

# Inline-math keywords, matched case-insensitively
KEYWORDS: Dict[str, Callable[[RegisterStack], None]] = {
    "+": RegisterStack.add,
    "-": RegisterStack.subtract,
    "*": RegisterStack.multiply,
    "/": RegisterStack.divide,
    "sqrt": RegisterStack.sqrt,
    "sqr": RegisterStack.square,
    "^": RegisterStack.y_to_the_x_power,
    "sin": RegisterStack.sin_deg,
    "cos": RegisterStack.cos_deg,
    "tan": RegisterStack.tan_deg,
    "asin": RegisterStack.asin_deg,
    "acos": RegisterStack.acos_deg,
    "atan": RegisterStack.atan_deg,
    "atan2": RegisterStack.atan2_deg,
    "swap": RegisterStack.swap_xy,
    "rollup": RegisterStack.roll_up,
    "rolldn": RegisterStack.roll_down,
    "ln": RegisterStack.nat_log,
    "pi": RegisterStack.enter_pi,
    "log10": RegisterStack.ten_log,
    "exp": RegisterStack.etothex,
    "inv": RegisterStack.inv,
}

# Note Python's `int` and `float` accept digit-group underscores and padding; command lines don't.
def parse_float(text: str) -> Optional[float]:
    """Parse `text` as a float, returning `None` on failure"""
    if not text or "_" in text or text != text.strip():
        return None
    try:
        return float(text)
    except ValueError:
        return None


def parse_int(text: str) -> Optional[int]:
    """Parse `text` as an integer, returning `None` on failure"""
    if not text or "_" in text or text != text.strip():
        return None
    try:
        return int(text)
    except ValueError:
        return None


def round_half_away(value: float) -> int:
    """Round to the nearest integer, with halves rounded away from zero.
    Raises `ValueError` or `OverflowError` for non-finite input."""
    return int(np.copysign(np.floor(np.abs(value) + 0.5), value))


class ValueReader:
    """
    # Value Reader

    Converts the current token of a `Tokenizer`.
    When the tokenizer's `auto_increment` option is set, every reader first advances to the next parameter.

    Failures are handled per `errormode`:
    `ErrorMode.RAISE` raises a `ConversionError`;
    `ErrorMode.STORE` issues a warning, stores the error in `self.errors`, and returns a zero value.
    """

    def __init__(
        self,
        tokenizer: Tokenizer,
        *,
        calculator: Optional[RegisterStack] = None,
        errormode: ErrorMode = ErrorMode.RAISE,
    ):
        self.tokenizer = tokenizer
        self.calculator = calculator if calculator is not None else RegisterStack()
        self.errormode = errormode
        self.convert_error = False
        self.errors: List[Tuple[str, str]] = []  # (text, message) pairs

    def _advance(self) -> None:
        self.convert_error = False
        if self.tokenizer.options.auto_increment:
            self.tokenizer.next_param()

    def fail(self, msg: str, text: str, err_type: Type[ConversionError] = ConversionError) -> None:
        """Handle a conversion error, based on the `ErrorMode`"""
        self.convert_error = True
        if self.errormode == ErrorMode.RAISE:
            err_type.throw(msg, text)
        warn(msg)
        self.errors.append((text, msg))

    def make_string(self) -> str:
        self._advance()
        return self.tokenizer.token

    def make_integer(self) -> int:
        """Read the current token as an integer. Quoted tokens are evaluated as inline math."""
        self._advance()
        text = self.tokenizer.token
        if not text:
            return 0

        if self.tokenizer.is_quoted_string:
            value = self.interpret_inline_math(text)
        else:
            ival = parse_int(text)
            if ival is not None:
                return ival
            value = parse_float(text)

        if value is not None:
            try:
                return round_half_away(value)
            except (ValueError, OverflowError):
                pass
        if not self.convert_error:
            self.fail(f'Integer number conversion error for string: "{text}"', text)
        return 0

    def make_double(self) -> float:
        """Read the current token as a float. Quoted tokens are evaluated as inline math."""
        self._advance()
        text = self.tokenizer.token
        if not text:
            return 0.0

        if self.tokenizer.is_quoted_string:
            value = self.interpret_inline_math(text)
            return 0.0 if value is None else value

        value = parse_float(text)
        if value is None:
            self.fail(f'Floating point number conversion error for string: "{text}"', text)
            return 0.0
        return value

    def interpret_inline_math(self, text: str) -> Optional[float]:
        """Evaluate whitespace-separated reverse-polish `text` on our calculator.
        Returns the resulting X register, or `None` if an unknown word is found (and not raised)."""
        for word in text.split():
            number = parse_float(word)
            if number is not None:
                self.calculator.set_x(number)
                continue
            op = KEYWORDS.get(word.lower(), None)
            if op is None:
                self.fail(f'Invalid inline math entry: "{word}"', word, InlineMathError)
                return None
            op(self.calculator)
        return self.calculator.x

    def _split_row(self, text: str) -> List[str]:
        """Split a vector's text on whitespace and separators"""
        opts = self.tokenizer.options
        seps = set(opts.whitespace) | set(opts.delimiters)
        words, cur = [], ""
        for ch in text:
            if ch in seps:
                if cur:
                    words.append(cur)
                cur = ""
            else:
                cur += ch
        if cur:
            words.append(cur)
        return words

    def _parse_row(self, text: str, size: int) -> Tuple[List[float], int]:
        """Parse up to `size` numbers from `text`. Returns the (zero-padded) row and the count found."""
        row = [0.0] * size
        words = self._split_row(text)
        for i, word in enumerate(words[:size]):
            value = parse_float(word)
            if value is None:
                self.fail(f'Vector element conversion error for string: "{word}"', word)
                continue
            row[i] = value
        return row, min(len(words), size)

    def parse_as_vector(self, expected_size: int) -> List[float]:
        """Read the current token as a vector of exactly `expected_size` floats.
        Missing entries are zero, extras are ignored. Reading stops at the matrix-row terminator."""
        self._advance()
        text = self.tokenizer.token
        text = text.split(self.tokenizer.options.matrix_row_terminator, 1)[0]
        row, _ = self._parse_row(text, expected_size)
        return row

    def parse_as_matrix(self, order: int) -> List[List[float]]:
        """Read the current token as an `order` x `order` matrix, rows separated by the matrix-row terminator.
        Short rows are taken as the lower triangle; their missing entries mirror the upper triangle."""
        self._advance()
        text = self.tokenizer.token
        rows = text.split(self.tokenizer.options.matrix_row_terminator)
        matrix = [[0.0] * order for _ in range(order)]
        counts = [order] * order
        for i, row_text in enumerate(rows[:order]):
            matrix[i], counts[i] = self._parse_row(row_text, order)
        for i in range(order):
            for j in range(counts[i], order):
                matrix[i][j] = matrix[j][i]
        return matrix

    def parse_as_bus_name(self) -> Tuple[str, List[int]]:
        """Split the current token into a bus name and its node numbers, e.g. `bus1.1.2.3` => `("bus1", [1, 2, 3])`.
        Invalid or empty node numbers, as in `bus1..2`, are conversion errors, stored as -1."""
        self._advance()
        text = self.tokenizer.token
        if "." not in text:
            return text.strip(), []

        bus, node_text = text.split(".", 1)
        nodes = []
        for part in node_text.split("."):
            node = parse_int(part)
            if node is None:
                self.fail(f'Node number conversion error for string: "{part}"', part)
                node = -1
            nodes.append(node)
        return bus.strip(), nodes
