"""Leaf search terms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .compare import CompareOp, op_str
from .query import Query

if TYPE_CHECKING:
    from .criteria import CardIs, PrintingIs
    from .value import NumProperty, ValueKind


@dataclass(frozen=True)
class Param(Query):
    """A ``field<op>value`` term, e.g. ``cmc>=3`` or ``name:"Yargle"``.

    ``value`` is already rendered to wire syntax. Build these through the
    search functions rather than directly, so the value is checked
    against the field.
    """

    kind: ValueKind | NumProperty
    value: str
    op: CompareOp | None = None

    def __str__(self) -> str:
        if self.op is None and self.kind.is_exact:
            return f"!{self.value}"
        return f"{self.kind}{op_str(self.op)}{self.value}"


@dataclass(frozen=True)
class Flag(Query):
    """A yes/no criterion such as ``is:foil`` or ``has:watermark``."""

    criterion: CardIs | PrintingIs

    def __str__(self) -> str:
        return self.criterion.value
