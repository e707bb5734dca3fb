"""Request descriptor models.

A descriptor is the structured form of one REST API call, produced upstream
by a URI parser (or loaded from a file by :mod:`api_snippet_gen.parser.loader`)
and consumed by the snippet generators.
"""

import enum
from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class ModifierKind(str, enum.Enum):
    """Recognized query modifiers, declared in canonical rendering order."""

    FILTER = "filter"
    SEARCH = "search"
    EXPAND = "expand"
    SELECT = "select"
    ORDERBY = "orderby"
    SKIP = "skip"
    SKIPTOKEN = "skiptoken"
    TOP = "top"


MULTI_VALUED_KINDS = frozenset({ModifierKind.FILTER, ModifierKind.SELECT, ModifierKind.ORDERBY})


class SegmentKind(str, enum.Enum):
    ENTITY_SET = "entity_set"
    NAVIGATION_PROPERTY = "navigation_property"
    KEY = "key"
    OPERATION = "operation"
    PROPERTY = "property"
    OTHER = "other"


class PathSegment(BaseModel):
    """One addressed resource segment of the request path."""

    model_config = ConfigDict(frozen=True)

    identifier: str
    kind: SegmentKind = SegmentKind.OTHER
    type_name: str | None = None  # e.g. microsoft.graph.message

    @property
    def is_operation(self) -> bool:
        return self.kind is SegmentKind.OPERATION

    @property
    def short_type_name(self) -> str:
        """Last dotted component of the type, e.g. ``microsoft.graph.data`` -> ``data``.

        Without a ``type_name`` the identifier itself is used, so ``users``
        stays plural. Upstream parsers should set ``type_name`` on every
        non-operation segment that can carry a body.
        """
        return (self.type_name or self.identifier).split(".")[-1]


ModifierValue = str | int | tuple[str, ...]


class RequestDescriptor(BaseModel):
    """Immutable description of a single API call."""

    model_config = ConfigDict(frozen=True)

    method: str  # GET / POST / PATCH / PUT / DELETE
    path: str  # /users/123/messages, no query string
    segments: tuple[PathSegment, ...] = ()
    api_version: str = "v1.0"
    query_string: str = ""  # ?$top=5&customParam=1, used verbatim with custom options
    custom_query_options: frozenset[str] = frozenset()
    modifiers: Mapping[ModifierKind, ModifierValue] = Field(default_factory=lambda: MappingProxyType({}))
    headers: tuple[tuple[str, str], ...] = ()
    request_body: str | None = None
    response_variable_name: str = "res"

    @field_validator("method")
    @classmethod
    def _normalize_method(cls, value: str) -> str:
        return value.strip().upper()

    @field_validator("headers", mode="before")
    @classmethod
    def _headers_from_mapping(cls, value):
        if isinstance(value, dict):
            return tuple(value.items())
        return value

    @field_validator("modifiers")
    @classmethod
    def _check_modifier_values(cls, value: Mapping) -> Mapping:
        checked = {}
        for kind, item in value.items():
            if kind in MULTI_VALUED_KINDS:
                checked[kind] = tuple(item) if isinstance(item, tuple) else (str(item),)
            elif isinstance(item, tuple):
                raise ValueError(f"modifier '{kind.value}' takes a single value, got a list")
            else:
                checked[kind] = item
        return MappingProxyType(checked)

    @field_serializer("modifiers")
    def _plain_modifiers(self, value: Mapping) -> dict:
        return {kind: list(item) if isinstance(item, tuple) else item for kind, item in value.items()}

    @property
    def has_body(self) -> bool:
        return bool(self.request_body and self.request_body.strip())

    @property
    def has_custom_query(self) -> bool:
        return bool(self.custom_query_options)

    @property
    def last_segment(self) -> PathSegment | None:
        return self.segments[-1] if self.segments else None
