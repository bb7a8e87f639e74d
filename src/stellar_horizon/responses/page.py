"""Paged collections.

Horizon returns collections in HAL form::

    {
        "_links": {"self": {...}, "next": {"href": ...}, "prev": {"href": ...}},
        "_embedded": {"records": [...]}
    }

A ``Page`` keeps the decoded records and the navigation links. Following a
link goes back through the fetcher that produced the page, with the same
record type. Ordering across pages is entirely up to the server's cursors.
"""

from typing import TYPE_CHECKING, Any, Generic, Optional, TypeVar

from pydantic import Field, PrivateAttr, model_validator

from stellar_horizon.errors import ConfigurationError
from stellar_horizon.responses.base import Response

if TYPE_CHECKING:
    from stellar_horizon.fetcher import TypedFetcher

T = TypeVar("T")


class Page(Response, Generic[T]):
    """One slice of a resource collection plus links to its neighbours."""

    records: list[T] = Field(default_factory=list)

    _fetcher: Any = PrivateAttr(default=None)

    @model_validator(mode="before")
    @classmethod
    def _unwrap_embedded(cls, data: Any) -> Any:
        if isinstance(data, dict) and "_embedded" in data:
            data = dict(data)
            embedded = data.pop("_embedded") or {}
            data.setdefault("records", embedded.get("records", []))
        return data

    def bind(self, fetcher: "TypedFetcher") -> "Page[T]":
        """Attach the fetcher used to follow ``next``/``prev`` links."""
        self._fetcher = fetcher
        return self

    @property
    def next_link(self) -> Optional[str]:
        return self.link("next")

    @property
    def prev_link(self) -> Optional[str]:
        return self.link("prev")

    def next_page(self) -> Optional["Page[T]"]:
        """Fetch the next page, or None if there is no next link."""
        return self._follow(self.next_link)

    def prev_page(self) -> Optional["Page[T]"]:
        """Fetch the previous page, or None if there is no prev link."""
        return self._follow(self.prev_link)

    def _follow(self, url: Optional[str]) -> Optional["Page[T]"]:
        if not url:
            return None
        if self._fetcher is None:
            raise ConfigurationError("Page is not bound to a fetcher; cannot follow links")
        return self._fetcher.get(url, type(self))
