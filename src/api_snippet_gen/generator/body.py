"""Request body -> object-literal declaration.

This is a token-level rewrite, not a JSON parser: every string token that is
followed by a colon is treated as an object key and unquoted, every other
string token is copied unchanged. Malformed JSON passes through as-is.
"""

import json
import logging
import re

from api_snippet_gen.grammar.base import LanguageGrammar

logger = logging.getLogger(__name__)

# a JSON string literal, optionally followed by the colon that makes it a key
STRING_TOKEN = re.compile(r'"((?:[^"\\]|\\.)*)"(\s*:)?', re.DOTALL)


def unquote_json_keys(text: str, key_template: str = "{0}:") -> str:
    """Rewrite every ``"key":`` token to ``key:``, leaving values untouched."""

    def _replace(match: re.Match) -> str:
        if match.group(2) is None:
            return match.group(0)
        return key_template.format(match.group(1).rstrip())

    return STRING_TOKEN.sub(_replace, text)


def generate_object_from_json(json_body: str | None, variable_name: str, grammar: LanguageGrammar) -> str:
    """Declare ``variable_name`` as an object literal built from the body.

    Returns an empty string when there is no body.
    """
    if not json_body or not json_body.strip():
        return ""

    body = json_body.strip()
    try:
        json.loads(body)
    except json.JSONDecodeError as e:
        logger.debug("Request body is not valid JSON (%s); rewriting keys anyway", e)

    literal = unquote_json_keys(body, grammar.object_key_template)
    return grammar.body_declaration_template.format(name=variable_name, body=literal)
