"""Confluence space data model."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class Space:
    """A named container for content, identified by its key.

    Attributes:
        key: Space key (e.g. "DEV")
        id: Numeric space id as returned by the server
        name: Human readable space name
        type: Space type ("global" or "personal")
        links: The "_links" object of the response
    """
    key: str
    id: Optional[int] = None
    name: Optional[str] = None
    type: Optional[str] = None
    links: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Space":
        return cls(
            key=data.get("key", ""),
            id=data.get("id"),
            name=data.get("name"),
            type=data.get("type"),
            links=dict(data.get("_links") or {}),
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"key": self.key}
        if self.id is not None:
            result["id"] = self.id
        if self.name is not None:
            result["name"] = self.name
        if self.type is not None:
            result["type"] = self.type
        return result
