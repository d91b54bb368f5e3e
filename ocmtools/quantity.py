"""Kubernetes-style resource quantities such as "100m", "128Mi" or "1e3"."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from functools import total_ordering


class QuantityFormat(str, Enum):
    DECIMAL_SI = "DecimalSI"
    BINARY_SI = "BinarySI"
    DECIMAL_EXPONENT = "DecimalExponent"


_BINARY = {"Ki": 1, "Mi": 2, "Gi": 3, "Ti": 4, "Pi": 5, "Ei": 6}
_BINARY_SUFFIX = {power: suffix for suffix, power in _BINARY.items()}
_BINARY_SUFFIX[0] = ""

_DECIMAL = {
    "n": -9, "u": -6, "m": -3, "": 0,
    "k": 3, "M": 6, "G": 9, "T": 12, "P": 15, "E": 18,
}
_DECIMAL_SUFFIX = {exponent: suffix for suffix, exponent in _DECIMAL.items()}
_MAX_SI_EXPONENT = 18

_NUMBER = re.compile(r"([+-]?)([0-9]+(?:\.[0-9]*)?|\.[0-9]+)(.*)", re.DOTALL)
_EXPONENT = re.compile(r"[eE]([+-]?[0-9]+)")
_FORMAT_ERROR = (
    "quantities must match the regular expression "
    "'^([+-]?[0-9.]+)([eEinumkKMGTP]*[-+]?[0-9]*)$'"
)
_NANO = 10**9


def _round_nano(value: Fraction) -> Fraction:
    scaled = value * _NANO
    if scaled.denominator == 1:
        return value
    magnitude = math.ceil(abs(scaled))
    return Fraction(magnitude if scaled > 0 else -magnitude, _NANO)


@total_ordering
@dataclass(frozen=True, eq=False)
class Quantity:
    """An exact amount together with the notation it was written in."""

    value: Fraction
    format: QuantityFormat = QuantityFormat.DECIMAL_SI

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", Fraction(self.value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other: "Quantity") -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.value < other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def cmp(self, other: "Quantity") -> int:
        """-1, 0 or 1 as this quantity is smaller, equal or larger."""
        return (self.value > other.value) - (self.value < other.value)

    def __str__(self) -> str:
        value = self.value
        if value == 0:
            return "0"
        if (
            self.format is QuantityFormat.BINARY_SI
            and value.denominator == 1
            and abs(value) >= 1024
        ):
            mantissa, power = value.numerator, 0
            while power < 6 and mantissa % 1024 == 0:
                mantissa //= 1024
                power += 1
            return f"{mantissa}{_BINARY_SUFFIX[power]}"

        exponential = self.format is QuantityFormat.DECIMAL_EXPONENT
        mantissa = int(value * _NANO)
        exponent = -9
        while mantissa % 1000 == 0 and (
            exponential or exponent + 3 <= _MAX_SI_EXPONENT
        ):
            mantissa //= 1000
            exponent += 3
        if exponential:
            return f"{mantissa}" if exponent == 0 else f"{mantissa}e{exponent}"
        return f"{mantissa}{_DECIMAL_SUFFIX[exponent]}"


def parse_quantity(text: str) -> Quantity:
    """Parse a quantity string; raise ValueError when it is malformed."""
    match = _NUMBER.fullmatch(text)
    if match is None:
        raise ValueError(_FORMAT_ERROR)
    sign, number, suffix = match.groups()
    value = Fraction(number)
    if suffix in _BINARY:
        value *= 1024 ** _BINARY[suffix]
        fmt = QuantityFormat.BINARY_SI
    elif suffix in _DECIMAL:
        value *= Fraction(10) ** _DECIMAL[suffix]
        fmt = QuantityFormat.DECIMAL_SI
    else:
        exponent = _EXPONENT.fullmatch(suffix)
        if exponent is None:
            raise ValueError("unable to parse quantity's suffix")
        value *= Fraction(10) ** int(exponent.group(1))
        fmt = QuantityFormat.DECIMAL_EXPONENT
    if sign == "-":
        value = -value
    return Quantity(_round_nano(value), fmt)