"""Data models for Confluence content, spaces and storage bodies."""

from .content import Content, Type, Version
from .results import ContentResultList, NoContent, SpaceResultList
from .space import Space
from .storage import Body, Representation, Storage

__all__ = [
    'Body',
    'Content',
    'ContentResultList',
    'NoContent',
    'Representation',
    'Space',
    'SpaceResultList',
    'Storage',
    'Type',
    'Version',
]
