"""Storage format data model."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class Representation(str, Enum):
    """Body representations understood by the content conversion endpoint."""
    STORAGE = "storage"
    VIEW = "view"
    EXPORT_VIEW = "export_view"
    STYLED_VIEW = "styled_view"
    EDITOR = "editor"
    ANONYMOUS_EXPORT_VIEW = "anonymous_export_view"

    def __str__(self) -> str:
        return self.value


@dataclass
class Storage:
    """A content body in one representation.

    Sent as the request body of a conversion and returned as its response.

    Attributes:
        value: The body markup (e.g. "<p>Hello</p>")
        representation: Wire name of the representation (e.g. "storage", "view")
    """
    value: str
    representation: str = Representation.STORAGE.value

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Storage":
        return cls(
            value=data.get("value", ""),
            representation=data.get("representation", Representation.STORAGE.value),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"value": self.value, "representation": str(self.representation)}


@dataclass
class Body:
    """Content body holder, keyed by representation."""
    storage: Optional[Storage] = None
    view: Optional[Storage] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Body":
        storage = data.get("storage")
        view = data.get("view")
        return cls(
            storage=Storage.from_dict(storage) if storage else None,
            view=Storage.from_dict(view) if view else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        if self.storage is not None:
            result["storage"] = self.storage.to_dict()
        if self.view is not None:
            result["view"] = self.view.to_dict()
        return result
