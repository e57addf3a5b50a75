"""
# Inline-Math Register Stack

A fixed ten-slot, HP-style shift register of floating-point values.
Slot 0 is X (the top), slot 1 is Y, slot 2 is Z.
Pushing ages every value one slot toward the bottom; the bottom value is silently discarded.
Binary operators combine Y and X into Y, then collapse the stack toward the top.

Trigonometric functions work in degrees.
No operation raises: domain errors produce NaN or infinity, following IEEE-754.
"""

# Std-Lib Imports
from typing import Tuple

# PyPi Imports
import numpy as np

# Fixed number of registers
MAX_STACK_SIZE = 10

DEG_TO_RAD = np.pi / 180.0
RAD_TO_DEG = 180.0 / np.pi


class RegisterStack:
    """# Register-Stack Calculator"""

    def __init__(self):
        self._stack = np.zeros(MAX_STACK_SIZE, dtype=np.float64)

    def __len__(self) -> int:
        return MAX_STACK_SIZE

    def __repr__(self) -> str:
        return f"RegisterStack(x={self.x}, y={self.y}, z={self.z})"

    @property
    def x(self) -> float:
        return float(self._stack[0])

    @property
    def y(self) -> float:
        return float(self._stack[1])

    @property
    def z(self) -> float:
        return float(self._stack[2])

    @property
    def registers(self) -> Tuple[float, ...]:
        """Copy of all ten registers, top first."""
        return tuple(float(v) for v in self._stack)

    def get_x(self) -> float:
        return self.x

    def get_y(self) -> float:
        return self.y

    def get_z(self) -> float:
        return self.z

    def set_x(self, value: float) -> None:
        """Push `value` onto the stack"""
        self.roll_up()
        self._stack[0] = value

    def set_y(self, value: float) -> None:
        self._stack[1] = value

    def set_z(self, value: float) -> None:
        self._stack[2] = value

    def clear(self) -> None:
        self._stack[:] = 0.0

    # Binary operators: Y (op) X lands in Y, then the stack rolls down.

    def _binary(self, func) -> None:
        with np.errstate(all="ignore"):
            self._stack[1] = func(self._stack[1], self._stack[0])
        self.roll_down()

    def add(self) -> None:
        self._binary(np.add)

    def subtract(self) -> None:
        self._binary(np.subtract)

    def multiply(self) -> None:
        self._binary(np.multiply)

    def divide(self) -> None:
        self._binary(np.divide)

    def y_to_the_x_power(self) -> None:
        self._binary(np.power)

    def atan2_deg(self) -> None:
        """atan2(Y, X), in degrees"""
        self._binary(lambda y, x: RAD_TO_DEG * np.arctan2(y, x))

    # Unary operators replace X in place.

    def _unary(self, func) -> None:
        with np.errstate(all="ignore"):
            self._stack[0] = func(self._stack[0])

    def sqrt(self) -> None:
        self._unary(np.sqrt)

    def square(self) -> None:
        self._unary(np.square)

    def inv(self) -> None:
        self._unary(np.reciprocal)

    def sin_deg(self) -> None:
        self._unary(lambda x: np.sin(DEG_TO_RAD * x))

    def cos_deg(self) -> None:
        self._unary(lambda x: np.cos(DEG_TO_RAD * x))

    def tan_deg(self) -> None:
        self._unary(lambda x: np.tan(DEG_TO_RAD * x))

    def asin_deg(self) -> None:
        self._unary(lambda x: RAD_TO_DEG * np.arcsin(x))

    def acos_deg(self) -> None:
        self._unary(lambda x: RAD_TO_DEG * np.arccos(x))

    def atan_deg(self) -> None:
        self._unary(lambda x: RAD_TO_DEG * np.arctan(x))

    def nat_log(self) -> None:
        self._unary(np.log)

    def ten_log(self) -> None:
        self._unary(np.log10)

    def etothex(self) -> None:
        self._unary(np.exp)

    def enter_pi(self) -> None:
        self.set_x(np.pi)

    # Stack manipulation

    def swap_xy(self) -> None:
        self._stack[[0, 1]] = self._stack[[1, 0]]

    def roll_up(self) -> None:
        """Shift every slot one toward the bottom. X keeps its value; the bottom slot is lost."""
        self._stack[1:] = self._stack[:-1].copy()

    def roll_down(self) -> None:
        """Shift every slot one toward the top. The bottom slot keeps its value."""
        self._stack[:-1] = self._stack[1:].copy()
