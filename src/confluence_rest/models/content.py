"""Confluence content (page and blog post) data model."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .space import Space
from .storage import Body, Storage


class Type(str, Enum):
    """Content types accepted by the space content endpoints."""
    PAGE = "page"
    BLOGPOST = "blogpost"

    def __str__(self) -> str:
        return self.value


@dataclass
class Version:
    """Version metadata of a piece of content."""
    number: int
    when: Optional[str] = None
    message: Optional[str] = None
    minor_edit: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Version":
        return cls(
            number=data.get("number", 0),
            when=data.get("when"),
            message=data.get("message"),
            minor_edit=data.get("minorEdit"),
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"number": self.number}
        if self.when is not None:
            result["when"] = self.when
        if self.message is not None:
            result["message"] = self.message
        if self.minor_edit is not None:
            result["minorEdit"] = self.minor_edit
        return result


@dataclass
class Content:
    """A Confluence page or blog post.

    Every field is optional because the server only returns what was
    expanded, and create requests leave the id unset.

    Attributes:
        id: Content id (None for content not yet created)
        type: "page" or "blogpost"
        status: Content status (e.g. "current", "trashed")
        title: Content title
        space: Space the content lives in
        body: Body in one or more representations
        version: Version metadata
        ancestors: Parent chain, root first (only present when expanded)
        links: The "_links" object of the response
    """
    id: Optional[str] = None
    type: Optional[str] = None
    status: Optional[str] = None
    title: Optional[str] = None
    space: Optional[Space] = None
    body: Optional[Body] = None
    version: Optional[Version] = None
    ancestors: List["Content"] = field(default_factory=list)
    links: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def new_page(
        cls,
        space_key: str,
        title: str,
        storage_value: str,
        ancestor_id: Optional[str] = None,
        content_type: Type = Type.PAGE,
    ) -> "Content":
        """Build a content instance ready to be posted.

        Args:
            space_key: Key of the space to create the content in
            title: Title of the new content
            storage_value: Body in storage format
            ancestor_id: Optional parent page id
            content_type: Type.PAGE or Type.BLOGPOST

        Returns:
            Content without an id
        """
        ancestors = [cls(id=ancestor_id)] if ancestor_id else []
        return cls(
            type=str(content_type),
            title=title,
            space=Space(key=space_key),
            body=Body(storage=Storage(value=storage_value)),
            ancestors=ancestors,
        )

    @property
    def storage_value(self) -> Optional[str]:
        """The storage format body, if it was expanded."""
        if self.body is None or self.body.storage is None:
            return None
        return self.body.storage.value

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Content":
        space = data.get("space")
        body = data.get("body")
        version = data.get("version")
        content_id = data.get("id")
        return cls(
            id=str(content_id) if content_id is not None else None,
            type=data.get("type"),
            status=data.get("status"),
            title=data.get("title"),
            space=Space.from_dict(space) if space else None,
            body=Body.from_dict(body) if body else None,
            version=Version.from_dict(version) if version else None,
            ancestors=[cls.from_dict(a) for a in data.get("ancestors") or []],
            links=dict(data.get("_links") or {}),
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        for key in ("id", "type", "status", "title"):
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.space is not None:
            result["space"] = self.space.to_dict()
        if self.body is not None:
            result["body"] = self.body.to_dict()
        if self.version is not None:
            result["version"] = self.version.to_dict()
        if self.ancestors:
            result["ancestors"] = [a.to_dict() for a in self.ancestors]
        return result
