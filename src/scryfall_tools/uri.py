"""Typed handles to fetchable API resources."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter

T = TypeVar("T")


@dataclass(frozen=True)
class Uri(Generic[T]):
    """A deferred fetch of a resource of shape ``T``.

    Holds only the URL and the type the response body should validate
    into. Nothing is requested until a connection fetches it::

        uri = Uri(url, Card)
        card = sdk.fetch(uri)

    Two ``Uri`` objects are equal when their URLs are equal; the target
    type is a tag, not part of the identity.
    """

    url: str
    target: Any = field(default=Any, compare=False, repr=False)

    def __str__(self) -> str:
        return self.url

    @property
    def adapter(self) -> TypeAdapter[T]:
        return _adapter_for(self.target)

    def with_target(self, target: Any) -> Uri[Any]:
        """Return the same URL tagged with a different target type."""
        return Uri(self.url, target)


_ADAPTERS: dict[Any, TypeAdapter[Any]] = {}


def _adapter_for(target: Any) -> TypeAdapter[Any]:
    try:
        return _ADAPTERS[target]
    except KeyError:
        adapter = _ADAPTERS[target] = TypeAdapter(target)
        return adapter
    except TypeError:
        # unhashable target types are validated without caching
        return TypeAdapter(target)
