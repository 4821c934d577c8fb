import enum
import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping

from calculator.utils import PrintableEnum

BinaryOperationImpl = Callable[[float, float], float]


class Associativity(PrintableEnum):
    LEFT = enum.auto()
    RIGHT = enum.auto()


@dataclass(frozen=True)
class OperatorContract:
    symbol: str
    precedence: int
    associativity: Associativity
    apply: BinaryOperationImpl

    def yields_to(self, other: "OperatorContract") -> bool:
        """Whether ``other``, sitting on the operator stack, must be applied before ``self`` is pushed"""
        if self.associativity is Associativity.LEFT:
            return self.precedence <= other.precedence
        return self.precedence < other.precedence


def _divide(a: float, b: float) -> float:
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x.is_integer() and int(x) % 2 == 1


def _power(a: float, b: float) -> float:
    # math.pow raises where C's pow returns inf or nan
    try:
        return math.pow(a, b)
    except OverflowError:
        return -math.inf if a < 0 and _is_odd_integer(b) else math.inf
    except ValueError:
        if a == 0.0 and b < 0:
            return math.copysign(math.inf, a) if _is_odd_integer(b) else math.inf
        return math.nan


OPERATOR_CONTRACTS: Mapping[str, OperatorContract] = MappingProxyType(
    {
        c.symbol: c
        for c in [
            OperatorContract("+", 1, Associativity.LEFT, lambda a, b: a + b),
            OperatorContract("-", 1, Associativity.LEFT, lambda a, b: a - b),
            OperatorContract("*", 2, Associativity.LEFT, lambda a, b: a * b),
            OperatorContract("/", 2, Associativity.LEFT, _divide),
            OperatorContract("^", 3, Associativity.RIGHT, _power),
        ]
    }
)
