"""
# Parser Variables

Named string values referenced from command lines as `@name`.
"""

# Std-Lib Imports
from typing import Dict, List, Optional, Protocol

# Local Imports
from .data import VARIABLE_SIGIL

# Variables defined before any user command runs
INTRINSIC_VARIABLES = (
    "@lastfile",
    "@lastexportfile",
    "@lastshowfile",
    "@lastplotfile",
    "@lastredirectfile",
    "@lastcompilefile",
    "@result",
)


class VariableResolver(Protocol):
    """Anything the tokenizer can resolve `@name` references against."""

    def lookup(self, name: str) -> bool:
        ...

    def get_value(self) -> str:
        ...


class VariableTable:
    """
    # Variable Table

    Maps variable names (including their leading `@`) to string values.
    Reads and writes go through an "active" variable, selected by `lookup`.

    Values which themselves contain a variable reference are stored wrapped in `{}`,
    so that substituting them inserts their text literally rather than expanding again.
    """

    def __init__(self):
        self.variables: Dict[str, str] = {name: "null" for name in INTRINSIC_VARIABLES}
        self.active: Optional[str] = None

    def __len__(self) -> int:
        return len(self.variables)

    def __contains__(self, name: str) -> bool:
        return name in self.variables

    def names(self) -> List[str]:
        return list(self.variables.keys())

    def add(self, name: str, value: str) -> bool:
        """Define (or redefine) variable `name`. Always succeeds."""
        if VARIABLE_SIGIL in value:
            value = "{" + value + "}"
        self.variables[name] = value
        return True

    def lookup(self, name: str) -> bool:
        """Make `name` the active variable. Clears the active variable if not found."""
        if name in self.variables:
            self.active = name
            return True
        self.active = None
        return False

    def get_value(self) -> str:
        """Value of the active variable, or an empty string if none is active"""
        if self.active is None:
            return ""
        return self.variables.get(self.active, "")

    def set_value(self, value: str) -> None:
        """Overwrite the active variable's value. No-op if none is active."""
        if self.active is not None:
            self.variables[self.active] = value

    def get_var_string(self, name: str) -> str:
        """Format variable `name` for display"""
        if name not in self.variables:
            return "Variable not found"
        value = self.variables[name] or "null"
        return f"{name}. {value}"

    def num_variables(self) -> int:
        return len(self.variables)
