"""Language grammar model.

A grammar is the only place target-language syntax lives. The generators in
:mod:`api_snippet_gen.generator` run one assembly algorithm for every language
and read all fragments from a grammar instance.

Templates use :meth:`str.format` placeholders:

- modifier templates take ``{0}`` (the value, already delimiter-joined)
- ``header_template`` takes ``{0}`` (name) and ``{1}`` (value)
- ``request_template`` takes ``{path}``
- ``version_template`` takes ``{0}`` (the API version)
- ``verb_templates`` take ``{argument}``
- ``body_declaration_template`` takes ``{name}`` and ``{body}``
- ``typed_body_template`` takes ``{type}`` and ``{name}``
- ``object_key_template`` takes ``{0}`` (the unquoted key)
"""

from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

from api_snippet_gen.parser.base import MULTI_VALUED_KINDS, ModifierKind

SUPPORTED_METHODS = ("GET", "POST", "PATCH", "PUT", "DELETE")


class LanguageGrammar(BaseModel):
    """Declarative, read-only syntax table for one target language."""

    model_config = ConfigDict(frozen=True)

    name: str
    file_extension: str

    # query modifiers
    modifier_templates: Mapping[ModifierKind, str]
    filter_delimiter: str
    select_delimiter: str
    orderby_delimiter: str
    header_template: str

    # lexical rules
    reserved_names: frozenset[str]
    reserved_name_escape_sequence: str
    double_quotes_escape_sequence: str
    single_quote_escape_sequence: str

    # snippet layout
    preamble: str
    request_template: str
    version_template: str
    preview_version: str
    verb_templates: Mapping[str, str]
    body_declaration_template: str
    typed_body_template: str
    object_key_template: str
    methods_requiring_body: frozenset[str] = frozenset({"PATCH", "PUT"})
    skipped_headers: frozenset[str] = Field(default_factory=lambda: frozenset({"host"}))

    @field_validator("modifier_templates", "verb_templates")
    @classmethod
    def _read_only(cls, value: Mapping) -> Mapping:
        return MappingProxyType(dict(value))

    @field_serializer("modifier_templates", "verb_templates")
    def _plain_dict(self, value: Mapping) -> dict:
        return dict(value)

    @model_validator(mode="after")
    def _check_complete(self) -> "LanguageGrammar":
        missing = [kind.value for kind in ModifierKind if kind not in self.modifier_templates]
        if missing:
            raise ValueError(f"grammar '{self.name}' has no template for: {', '.join(missing)}")
        missing_verbs = [m for m in SUPPORTED_METHODS if m not in self.verb_templates]
        if missing_verbs:
            raise ValueError(f"grammar '{self.name}' has no verb template for: {', '.join(missing_verbs)}")
        return self

    def template_for(self, kind: ModifierKind) -> str:
        return self.modifier_templates[ModifierKind(kind)]

    def delimiter_for(self, kind: ModifierKind) -> str:
        """Return the join delimiter of a multi-valued modifier kind."""
        kind = ModifierKind(kind)
        if kind not in MULTI_VALUED_KINDS:
            raise ValueError(f"modifier '{kind.value}' is single-valued and has no delimiter")
        return {
            ModifierKind.FILTER: self.filter_delimiter,
            ModifierKind.SELECT: self.select_delimiter,
            ModifierKind.ORDERBY: self.orderby_delimiter,
        }[kind]

    def escape_string(self, value: str) -> str:
        """Escape quotes so ``value`` can sit inside a generated string literal."""
        return value.replace("'", self.single_quote_escape_sequence).replace('"', self.double_quotes_escape_sequence)

    def is_reserved(self, name: str) -> bool:
        return name in self.reserved_names

    def is_preview(self, api_version: str) -> bool:
        return api_version == self.preview_version

    def verb_for(self, method: str) -> str | None:
        return self.verb_templates.get(method)
