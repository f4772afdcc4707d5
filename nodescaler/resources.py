"""Resource quantities and totals over pods."""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_UP, Context, Decimal, InvalidOperation
from enum import Enum
from functools import total_ordering
from typing import Any

from nodescaler.model import Pod

NVIDIA_GPU = "nvidia.com/gpu"
AMD_GPU = "amd.com/gpu"
AWS_NEURON = "aws.amazon.com/neuron"
AWS_POD_ENI = "vpc.amazonaws.com/pod-eni"

_GPU_RESOURCES = frozenset({AMD_GPU, AWS_NEURON, NVIDIA_GPU})

_DECIMAL_SUFFIXES = {
    "n": -9, "u": -6, "m": -3, "": 0, "k": 3, "M": 6, "G": 9, "T": 12, "P": 15, "E": 18,
}
_SUFFIX_BY_EXPONENT = {exp: suffix for suffix, exp in _DECIMAL_SUFFIXES.items()}
_BINARY_SUFFIXES = {"Ki": 10, "Mi": 20, "Gi": 30, "Ti": 40, "Pi": 50, "Ei": 60}
_NUMBER = re.compile(r"([+-]?)(\d+(?:\.\d*)?|\.\d+)(.*)", re.DOTALL)
_EXPONENT = re.compile(r"[eE]([+-]?\d+)")
_NANO = Decimal("1e-9")
_CTX = Context(prec=80)


class QuantityFormat(str, Enum):
    DECIMAL_SI = "DecimalSI"
    BINARY_SI = "BinarySI"
    DECIMAL_EXPONENT = "DecimalExponent"


@total_ordering
@dataclass(frozen=True, eq=False)
class Quantity:
    """An exact amount of a resource, kept to nano precision."""

    value: Decimal = Decimal(0)
    format: QuantityFormat = QuantityFormat.DECIMAL_SI

    @classmethod
    def parse(cls, value: str) -> Quantity:
        """Parse a quantity such as "100m", "1Gi" or "2e3"; raise ValueError if invalid."""
        match = _NUMBER.fullmatch(value)
        if not match:
            raise ValueError(f"invalid quantity {value!r}")
        sign, digits, suffix = match.groups()
        number = Decimal(sign + digits)
        try:
            if suffix in _DECIMAL_SUFFIXES:
                scaled = number.scaleb(_DECIMAL_SUFFIXES[suffix], context=_CTX)
                fmt = QuantityFormat.DECIMAL_SI
            elif suffix in _BINARY_SUFFIXES:
                scaled = _CTX.multiply(number, Decimal(2 ** _BINARY_SUFFIXES[suffix]))
                fmt = QuantityFormat.BINARY_SI
            elif exponent := _EXPONENT.fullmatch(suffix):
                scaled = number.scaleb(int(exponent[1]), context=_CTX)
                fmt = QuantityFormat.DECIMAL_EXPONENT
            else:
                raise ValueError(f"invalid quantity {value!r}")
            rounded = scaled.quantize(_NANO, rounding=ROUND_UP, context=_CTX)
        except InvalidOperation as err:
            raise ValueError(f"invalid quantity {value!r}") from err
        return cls(rounded, fmt)

    def __add__(self, other: Any) -> Quantity:
        if not isinstance(other, Quantity):
            return NotImplemented
        fmt = other.format if self.value == 0 else self.format
        return Quantity(_CTX.add(self.value, other.value), fmt)

    def __radd__(self, other: Any) -> Quantity:
        if isinstance(other, int) and other == 0:
            return self
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.value < other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        value = self.value
        if value == 0:
            return "0"
        integral = value == value.to_integral_value()
        if self.format is QuantityFormat.BINARY_SI and integral and abs(value) >= 1024:
            amount = int(value)
            for suffix, exp in reversed(_BINARY_SUFFIXES.items()):
                if amount % (1 << exp) == 0:
                    return f"{amount >> exp}{suffix}"
        for exp in sorted(_SUFFIX_BY_EXPONENT, reverse=True):
            mantissa = value.scaleb(-exp, context=_CTX)
            if mantissa == mantissa.to_integral_value():
                if self.format is QuantityFormat.DECIMAL_EXPONENT:
                    suffix = f"e{exp}" if exp else ""
                else:
                    suffix = _SUFFIX_BY_EXPONENT[exp]
                return f"{int(mantissa)}{suffix}"
        return str(value)


ResourceList = dict[str, Quantity]


def quantity(value: str) -> Quantity:
    """Parse the string into a Quantity."""
    return Quantity.parse(value)


def _as_quantity(value: Any) -> Quantity:
    if isinstance(value, Quantity):
        return value
    if isinstance(value, str):
        return Quantity.parse(value)
    raise TypeError(f"not a quantity: {value!r}")


def merge(*resource_lists: dict[str, Any]) -> ResourceList:
    """Sum the resource lists into one."""
    result: ResourceList = {}
    for resource_list in resource_lists:
        for name, amount in resource_list.items():
            result[name] = result.get(name, Quantity()) + _as_quantity(amount)
    return result


def requests_for_pods(*pods: Pod) -> ResourceList:
    """Return the total requests of all containers of the pods."""
    return merge(*(c.requests for pod in pods for c in pod.containers))


def limits_for_pods(*pods: Pod) -> ResourceList:
    """Return the total limits of all containers of the pods."""
    return merge(*(c.limits for pod in pods for c in pod.containers))


def gpu_limits_for(pod: Pod) -> ResourceList:
    """Return the accelerator limits of the pod."""
    return {
        name: amount
        for name, amount in limits_for_pods(pod).items()
        if name in _GPU_RESOURCES
    }