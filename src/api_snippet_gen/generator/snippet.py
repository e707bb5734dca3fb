"""Snippet generator — renders a request descriptor as a fluent SDK call.

The same assembly runs for every language; all syntax comes from the
:class:`~api_snippet_gen.grammar.base.LanguageGrammar` the generator is built
with. A snippet is laid out as::

    <preamble>
    [<body declaration>]
    <request line>[<version selector>]<method suffix>
"""

import logging

from pydantic import BaseModel, ConfigDict

from api_snippet_gen.errors import (
    ErrorKind,
    MissingBodyError,
    SnippetAssemblyError,
    SnippetError,
    UnsupportedMethodError,
)
from api_snippet_gen.generator.body import generate_object_from_json
from api_snippet_gen.generator.common import (
    ensure_variable_name_is_not_reserved,
    generate_query_section,
    resolve_request_path,
)
from api_snippet_gen.grammar.base import LanguageGrammar
from api_snippet_gen.grammar.loader import get_grammar
from api_snippet_gen.parser.base import RequestDescriptor

logger = logging.getLogger(__name__)

BODY_METHODS = frozenset({"POST", "PATCH", "PUT"})


class SnippetResult(BaseModel):
    """Outcome of one generation call: either a full snippet or an error."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    language: str
    snippet: str | None = None
    error: SnippetError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> ErrorKind | None:
        return self.error.kind if self.error else None

    def unwrap(self) -> str:
        """Return the snippet, or raise the recorded error."""
        if self.error is not None:
            raise self.error
        return self.snippet


class SnippetGenerator:
    """Generates code snippets for one target language."""

    def __init__(self, grammar: LanguageGrammar | str = "javascript"):
        self.grammar = get_grammar(grammar) if isinstance(grammar, str) else grammar

    def generate(self, descriptor: RequestDescriptor) -> SnippetResult:
        """Generate a snippet without raising for failed generations."""
        try:
            snippet = self.render(descriptor)
        except SnippetError as e:
            logger.debug("%s snippet for %s %s failed: %s", self.grammar.name, descriptor.method, descriptor.path, e)
            return SnippetResult(language=self.grammar.name, error=e)
        return SnippetResult(language=self.grammar.name, snippet=snippet)

    def render(self, descriptor: RequestDescriptor) -> str:
        """Generate a snippet, raising a :class:`SnippetError` on failure."""
        try:
            return self._assemble(descriptor)
        except SnippetError:
            raise
        except Exception as e:
            raise SnippetAssemblyError(str(e)) from e

    # -- assembly -------------------------------------------------------------

    def _assemble(self, descriptor: RequestDescriptor) -> str:
        grammar = self.grammar
        method = descriptor.method
        logger.debug("Rendering %s %s as %s", method, descriptor.path, grammar.name)

        verb = grammar.verb_for(method)
        if verb is None:
            raise UnsupportedMethodError(f"HTTP method {method} not implemented for {grammar.name}")
        if method in grammar.methods_requiring_body and not descriptor.has_body:
            raise MissingBodyError(f"No body present for {method} method in {grammar.name}")

        variable_name = ensure_variable_name_is_not_reserved(descriptor.response_variable_name, grammar)

        parts = [grammar.preamble]
        if method == "GET":
            suffix = generate_query_section(descriptor, grammar) + verb.format(argument="")
        elif method in BODY_METHODS:
            parts.append(generate_object_from_json(descriptor.request_body, variable_name, grammar))
            suffix = verb.format(argument=self._action_argument(descriptor, variable_name))
        else:
            suffix = verb.format(argument="")
        parts.append(self._request_section(descriptor, suffix))
        return "".join(parts)

    def _action_argument(self, descriptor: RequestDescriptor, variable_name: str) -> str:
        """Argument of the verb call for a body-carrying request.

        Operations take the body object directly; anything else wraps it under
        the short name of the addressed type.
        """
        if not descriptor.has_body:
            return ""
        segment = descriptor.last_segment
        if segment is None or segment.is_operation:
            return variable_name
        return self.grammar.typed_body_template.format(type=segment.short_type_name, name=variable_name)

    def _request_section(self, descriptor: RequestDescriptor, suffix: str) -> str:
        section = self.grammar.request_template.format(path=resolve_request_path(descriptor))
        if self.grammar.is_preview(descriptor.api_version):
            section += self.grammar.version_template.format(descriptor.api_version)
        return section + suffix
