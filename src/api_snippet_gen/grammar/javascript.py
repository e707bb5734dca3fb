"""JavaScript grammar for the fluent ``Client.init(...).api(...)`` SDK."""

from api_snippet_gen.grammar.base import LanguageGrammar
from api_snippet_gen.parser.base import ModifierKind

RESERVED_NAMES = frozenset({
    "await", "abstract", "arguments", "boolean", "break", "byte", "case",
    "catch", "char", "const", "continue", "debugger", "default", "delete",
    "do", "double", "else", "enum", "export", "extends", "eval", "false", "final",
    "finally", "float", "for", "function", "goto", "if", "implements", "in",
    "instanceof", "int", "interface", "let", "long", "native", "new", "null",
    "package", "private", "protected", "public", "return", "short", "static",
    "switch", "synchronized", "this", "throw", "throws", "transient", "true",
    "try", "typeof", "var", "void", "volatile", "while", "with", "yield",
})

JAVASCRIPT = LanguageGrammar(
    name="JavaScript",
    file_extension="js",
    modifier_templates={
        ModifierKind.FILTER: "\n\t.filter('{0}')",
        ModifierKind.SEARCH: "\n\t.search('{0}')",
        ModifierKind.EXPAND: "\n\t.expand('{0}')",
        ModifierKind.SELECT: "\n\t.select('{0}')",
        ModifierKind.ORDERBY: "\n\t.orderby('{0}')",
        ModifierKind.SKIP: "\n\t.skip({0})",
        ModifierKind.SKIPTOKEN: "\n\t.skiptoken('{0}')",
        ModifierKind.TOP: "\n\t.top({0})",
    },
    filter_delimiter=",",
    select_delimiter=",",
    orderby_delimiter=" ",
    header_template="\n\t.header('{0}','{1}')",
    reserved_names=RESERVED_NAMES,
    reserved_name_escape_sequence="_",
    double_quotes_escape_sequence='"',
    single_quote_escape_sequence="\\'",
    preamble="const options = {\n\tauthProvider,\n};\n\nconst client = Client.init(options);\n\n",
    request_template="let res = await client.api('{path}')",
    version_template="\n\t.version('{0}')",
    preview_version="beta",
    verb_templates={
        "GET": "\n\t.get();",
        "POST": "\n\t.post({argument});",
        "PATCH": "\n\t.update({argument});",
        "PUT": "\n\t.put({argument});",
        "DELETE": "\n\t.delete();",
    },
    body_declaration_template="const {name} = {body};\n\n",
    typed_body_template="{{{type}: {name}}}",
    object_key_template="{0}:",
)
