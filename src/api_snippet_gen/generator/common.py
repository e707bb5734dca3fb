"""Assembly helpers shared by every language."""

from api_snippet_gen.grammar.base import LanguageGrammar
from api_snippet_gen.parser.base import MULTI_VALUED_KINDS, ModifierKind, RequestDescriptor


def ensure_variable_name_is_not_reserved(name: str, grammar: LanguageGrammar) -> str:
    """Append the grammar's escape sequence when ``name`` is a reserved word."""
    if grammar.is_reserved(name):
        return name + grammar.reserved_name_escape_sequence
    return name


def join_values(values: tuple[str, ...], delimiter: str) -> str:
    return delimiter.join(str(v) for v in values)


def render_headers(descriptor: RequestDescriptor, grammar: LanguageGrammar) -> str:
    parts = []
    for name, value in descriptor.headers:
        if name.lower() in grammar.skipped_headers:
            continue
        parts.append(grammar.header_template.format(grammar.escape_string(name), grammar.escape_string(value)))
    return "".join(parts)


def render_modifiers(descriptor: RequestDescriptor, grammar: LanguageGrammar) -> str:
    """Render recognized modifiers in canonical order, one fragment per kind.

    String values are quote-escaped for the target language; numbers are not.
    """
    parts = []
    for kind in ModifierKind:
        if kind not in descriptor.modifiers:
            continue
        value = descriptor.modifiers[kind]
        if kind in MULTI_VALUED_KINDS:
            if not value:
                continue
            value = join_values(value, grammar.delimiter_for(kind))
        if isinstance(value, str):
            value = grammar.escape_string(value)
        parts.append(grammar.template_for(kind).format(value))
    return "".join(parts)


def generate_query_section(descriptor: RequestDescriptor, grammar: LanguageGrammar) -> str:
    """Header calls followed by the modifier chain.

    With custom query options the raw query string travels on the path instead
    (see :func:`resolve_request_path`) and no modifier fragment is rendered.
    """
    section = render_headers(descriptor, grammar)
    if descriptor.has_custom_query:
        return section
    return section + render_modifiers(descriptor, grammar)


def resolve_request_path(descriptor: RequestDescriptor) -> str:
    if descriptor.has_custom_query:
        return descriptor.path + descriptor.query_string
    return descriptor.path
