"""Grammar registry — selects the language grammar for a snippet request."""

from api_snippet_gen.errors import UnknownLanguageError
from api_snippet_gen.grammar.base import LanguageGrammar
from api_snippet_gen.grammar.javascript import JAVASCRIPT

GRAMMARS: dict[str, LanguageGrammar] = {
    "javascript": JAVASCRIPT,
}

ALIASES = {
    "js": "javascript",
}


def get_grammar(language: str) -> LanguageGrammar:
    """Return the grammar for a language name or alias (case-insensitive)."""
    key = language.strip().lower()
    key = ALIASES.get(key, key)
    try:
        return GRAMMARS[key]
    except KeyError:
        raise UnknownLanguageError(
            f"No grammar for language '{language}'. Available: {', '.join(available_languages())}"
        ) from None


def available_languages() -> list[str]:
    return sorted(GRAMMARS)
