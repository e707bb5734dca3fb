"""Structural checks for generated snippets.

These are lexical sanity checks (bracket balance, closed string literals,
terminated statement), not a parser for the target language.
"""

PAIRS = {")": "(", "]": "[", "}": "{"}
QUOTES = ("'", '"', "`")


def validate_snippet(snippet: str) -> list[str]:
    """Return a list of problems found in ``snippet`` (empty when it looks complete)."""
    if not snippet.strip():
        return ["snippet is empty"]

    problems = []
    stack: list[tuple[str, int]] = []
    quote = None
    quote_line = 0
    line = 1
    escaped = False

    for char in snippet:
        if char == "\n":
            line += 1
        if quote:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == quote:
                quote = None
            continue
        if char in QUOTES:
            quote, quote_line = char, line
        elif char in "([{":
            stack.append((char, line))
        elif char in PAIRS:
            if not stack or stack[-1][0] != PAIRS[char]:
                problems.append(f"unmatched '{char}' (line {line})")
            else:
                stack.pop()

    if quote:
        problems.append(f"unterminated {quote} string (line {quote_line})")
    for opener, opened_at in stack:
        problems.append(f"unclosed '{opener}' (line {opened_at})")
    if not snippet.rstrip().endswith(";"):
        problems.append("last statement is not terminated with ';'")
    return problems


def validate_snippets(files: dict[str, str]) -> dict[str, str]:
    """Check generated snippet files.

    Returns dict of {filename: error_message} for files with problems.
    """
    errors = {}
    for filename, content in files.items():
        problems = validate_snippet(content)
        if problems:
            errors[filename] = "; ".join(problems)
    return errors
