from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from api_snippet_gen.cli import main
from api_snippet_gen.config import ENV_LANGUAGES, ENV_OUTPUT_DIR

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv(ENV_LANGUAGES, raising=False)
    monkeypatch.delenv(ENV_OUTPUT_DIR, raising=False)


class TestCliLanguages:
    def test_lists_languages(self):
        result = CliRunner().invoke(main, ["languages"])
        assert result.exit_code == 0
        assert result.output.strip() == "javascript"


class TestCliGenSnippet:
    def test_prints_snippet(self):
        result = CliRunner().invoke(main, ["gen-snippet", str(FIXTURES / "send_mail.yaml")])
        assert result.exit_code == 0
        assert "const sendMailResponse = {" in result.output
        assert ".post(sendMailResponse);" in result.output

    def test_writes_output_file(self, tmp_path):
        output_file = tmp_path / "out" / "send_mail.js"
        result = CliRunner().invoke(main, [
            "gen-snippet", str(FIXTURES / "send_mail.yaml"),
            "-l", "js",
            "-o", str(output_file),
            "--check",
        ])
        assert result.exit_code == 0
        assert output_file.read_text(encoding="utf-8").endswith(".post(sendMailResponse);")
        assert "Warning" not in result.output

    def test_missing_body_fails(self, tmp_path):
        descriptor = tmp_path / "patch.yaml"
        descriptor.write_text("method: PATCH\npath: /me\n", encoding="utf-8")
        result = CliRunner().invoke(main, ["gen-snippet", str(descriptor)])
        assert result.exit_code == 3
        assert "No body present for PATCH method in JavaScript" in result.output

    def test_unknown_language_fails(self):
        result = CliRunner().invoke(main, ["gen-snippet", str(FIXTURES / "send_mail.yaml"), "-l", "cobol"])
        assert result.exit_code == 2
        assert "cobol" in result.output

    def test_batch_file_rejected(self):
        result = CliRunner().invoke(main, ["gen-snippet", str(FIXTURES / "requests.yaml")])
        assert result.exit_code == 2
        assert "expected one request" in result.output

    def test_check_reports_problems(self):
        with patch("api_snippet_gen.cli.validate_snippet", return_value=["unclosed '(' (line 1)"]):
            result = CliRunner().invoke(main, ["gen-snippet", str(FIXTURES / "send_mail.yaml"), "--check"])
        assert result.exit_code == 0
        assert "Warning: unclosed '('" in result.output


class TestCliBatch:
    def test_writes_snippet_per_request(self, tmp_path):
        output_dir = tmp_path / "snippets"
        result = CliRunner().invoke(main, [
            "batch", str(FIXTURES / "requests.yaml"),
            "-o", str(output_dir),
            "--workers", "2",
        ])
        assert result.exit_code == 0
        names = sorted(p.name for p in (output_dir / "javascript").iterdir())
        assert names == ["delete-group.js", "get-me-people.js", "list-messages.js", "update-event.js"]
        assert "Generated 4 snippets" in result.output

    def test_failures_reported_and_exit_nonzero(self, tmp_path):
        output_dir = tmp_path / "snippets"
        result = CliRunner().invoke(main, [
            "batch", str(FIXTURES / "broken_requests.yaml"),
            "-o", str(output_dir),
        ])
        assert result.exit_code == 1
        assert (output_dir / "javascript" / "ok.js").exists()
        assert not (output_dir / "javascript" / "update-user.js").exists()
        assert "Failed update-user (JavaScript)" in result.output

    def test_append_keeps_existing(self, tmp_path):
        output_dir = tmp_path / "snippets"
        existing = output_dir / "javascript" / "delete-group.js"
        existing.parent.mkdir(parents=True)
        existing.write_text("// hand-edited", encoding="utf-8")

        result = CliRunner().invoke(main, [
            "batch", str(FIXTURES / "requests.yaml"),
            "-o", str(output_dir),
            "--append",
        ])
        assert result.exit_code == 0
        assert existing.read_text(encoding="utf-8") == "// hand-edited"
        assert (output_dir / "javascript" / "list-messages.js").exists()
        assert "1 kept" in result.output

    def test_output_dir_from_config(self, tmp_path):
        config = tmp_path / "settings.yaml"
        config.write_text(f"output_dir: {tmp_path / 'from-config'}\ncheck: true\n", encoding="utf-8")
        result = CliRunner().invoke(main, ["--config", str(config), "batch", str(FIXTURES / "requests.yaml")])
        assert result.exit_code == 0
        assert (tmp_path / "from-config" / "javascript" / "list-messages.js").exists()
        assert "Check failed" not in result.output

    def test_unknown_language(self, tmp_path):
        result = CliRunner().invoke(main, [
            "batch", str(FIXTURES / "requests.yaml"),
            "-o", str(tmp_path),
            "-l", "klingon",
        ])
        assert result.exit_code == 2
        assert "klingon" in result.output
