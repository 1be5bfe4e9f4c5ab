"""Paginated result wrappers and the empty delete response."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .content import Content
from .space import Space


@dataclass
class ContentResultList:
    """One page of content results as returned by the server.

    Attributes:
        results: Content in server order
        start: Offset of the first result
        limit: Page size the server applied
        size: Number of results in this page
        links: The "_links" object (contains "next" when more results exist)
    """
    results: List[Content] = field(default_factory=list)
    start: int = 0
    limit: int = 0
    size: int = 0
    links: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ContentResultList":
        results = [Content.from_dict(item) for item in data.get("results") or []]
        return cls(
            results=results,
            start=data.get("start", 0),
            limit=data.get("limit", 0),
            size=data.get("size", len(results)),
            links=dict(data.get("_links") or {}),
        )

    @property
    def contents(self) -> List[Content]:
        """The results as a new plain list."""
        return list(self.results)


@dataclass
class SpaceResultList:
    """One page of space results as returned by the server."""
    results: List[Space] = field(default_factory=list)
    start: int = 0
    limit: int = 0
    size: int = 0
    links: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SpaceResultList":
        results = [Space.from_dict(item) for item in data.get("results") or []]
        return cls(
            results=results,
            start=data.get("start", 0),
            limit=data.get("limit", 0),
            size=data.get("size", len(results)),
            links=dict(data.get("_links") or {}),
        )

    @property
    def spaces(self) -> List[Space]:
        """The results as a new plain list."""
        return list(self.results)


@dataclass
class NoContent:
    """Marker for an empty response body (HTTP 204)."""
    status_code: Optional[int] = None
