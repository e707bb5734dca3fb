from api_snippet_gen.generator.snippet import SnippetGenerator
from api_snippet_gen.generator.validator import validate_snippet, validate_snippets
from api_snippet_gen.parser.base import PathSegment, RequestDescriptor


class TestValidateSnippet:
    def test_generated_snippet_is_clean(self):
        desc = RequestDescriptor(
            method="POST",
            path="/me/sendMail",
            segments=[PathSegment(identifier="sendMail", kind="operation")],
            request_body='{"message": {"subject": "It\'s (not) [a] {test}"}}',
            response_variable_name="sendMail",
        )
        assert validate_snippet(SnippetGenerator("javascript").render(desc)) == []

    def test_unclosed_bracket(self):
        assert validate_snippet("const a = {b: [1, 2};") == [
            "unmatched '}' (line 1)",
            "unclosed '{' (line 1)",
            "unclosed '[' (line 1)",
        ]

    def test_unterminated_string(self):
        problems = validate_snippet("let res = await client.api('/me)\n\t.get();")
        assert problems == ["unterminated ' string (line 1)", "unclosed '(' (line 1)"]

    def test_missing_semicolon(self):
        assert validate_snippet("client.api('/me').get()") == ["last statement is not terminated with ';'"]

    def test_empty(self):
        assert validate_snippet("  ") == ["snippet is empty"]

    def test_escaped_quote_inside_string(self):
        assert validate_snippet('const a = "x\\"y";') == []


class TestValidateSnippets:
    def test_reports_only_bad_files(self):
        errors = validate_snippets({"ok.js": "f();", "bad.js": "f(;"})
        assert list(errors) == ["bad.js"]
        assert "unmatched ')'" not in errors["bad.js"]
        assert "unclosed '('" in errors["bad.js"]
