"""Comparison operators for search values."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class CompareOp(str, Enum):
    """Operators Scryfall accepts between a field name and its value."""

    LTE = "<="
    LT = "<"
    GTE = ">="
    GT = ">"
    EQ = "="
    NEQ = "!="

    def __str__(self) -> str:
        return self.value


def op_str(op: CompareOp | None) -> str:
    """Wire separator for *op*; a missing operator is the default ``:``."""
    return ":" if op is None else op.value


@dataclass(frozen=True)
class Compare(Generic[T]):
    """A value paired with a comparison operator.

    Accepted by a search function whenever the wrapped value is.

    Example::

        cmc(gte(5))                      # cmc>=5
        power(gt(NumProperty.TOUGHNESS))  # power>toughness
    """

    op: CompareOp
    value: T


def lt(value: T) -> Compare[T]:
    """Less than *value*."""
    return Compare(CompareOp.LT, value)


def lte(value: T) -> Compare[T]:
    """Less than or equal to *value*."""
    return Compare(CompareOp.LTE, value)


def gt(value: T) -> Compare[T]:
    """Greater than *value*."""
    return Compare(CompareOp.GT, value)


def gte(value: T) -> Compare[T]:
    """Greater than or equal to *value*."""
    return Compare(CompareOp.GTE, value)


def eq(value: T) -> Compare[T]:
    """Equal to *value*."""
    return Compare(CompareOp.EQ, value)


def neq(value: T) -> Compare[T]:
    """Not equal to *value*."""
    return Compare(CompareOp.NEQ, value)
