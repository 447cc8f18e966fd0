"""
Unit Tests for the asc100 CLI
=============================
"""

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner(monkeypatch):
    for name in ("ASC100_CHARSET", "ASC100_STRATEGY", "ASC100_FILTER", "ASC100_ALPHABET"):
        monkeypatch.delenv(name, raising=False)
    return CliRunner()


class TestCli:
    """Tests for CLI commands."""

    def test_encode(self, runner):
        """Should print the encoded text."""
        from asc100_core.cli import cli

        result = runner.invoke(cli, ["encode", "AB"])

        assert result.exit_code == 0
        assert result.output.strip() == "Qog"

    def test_encode_stdin(self, runner):
        """Should read stdin when no argument is given."""
        from asc100_core.cli import cli

        result = runner.invoke(cli, ["encode"], input="AB\n")

        assert result.exit_code == 0
        assert result.output.strip() == "Qog"

    def test_encode_stdin_keeps_inner_newlines(self, runner):
        """Only the final newline of piped input should be dropped."""
        from asc100_core.cli import cli
        from asc100_core.codec import decode

        result = runner.invoke(cli, ["encode"], input="AB\n\n")

        assert result.exit_code == 0
        assert decode(result.output.strip()) == "AB\n"

    def test_encode_stdin_without_newline(self, runner):
        """Input without a trailing newline should be used as-is."""
        from asc100_core.cli import cli

        result = runner.invoke(cli, ["encode"], input="AB")

        assert result.exit_code == 0
        assert result.output.strip() == "Qog"

    def test_options_ignore_case(self, runner):
        """Choice options should accept any case."""
        from asc100_core.cli import cli

        result = runner.invoke(cli, ["encode", "-s", "EXTENSIONS", "-a", "URL_SAFE", "#EOF#"])

        assert result.exit_code == 0
        assert result.output.strip() == "yg"

    def test_encode_extensions(self, runner):
        """Strategy option should enable markers."""
        from asc100_core.cli import cli

        result = runner.invoke(cli, ["encode", "-s", "extensions", "#EOF#"])

        assert result.exit_code == 0
        assert result.output.strip() == "yg"

    def test_encode_invalid(self, runner):
        """Invalid characters should fail with an error message."""
        from asc100_core.cli import cli

        result = runner.invoke(cli, ["encode", "Héllo"])

        assert result.exit_code == 1
        assert "Non-ASCII character" in result.output

    def test_decode(self, runner):
        """Should print the decoded text."""
        from asc100_core.cli import cli

        result = runner.invoke(cli, ["decode", "Qog"])

        assert result.exit_code == 0
        assert result.output.strip() == "AB"

    def test_decode_strategy_mismatch(self, runner):
        """Marker indices under core should fail."""
        from asc100_core.cli import cli

        result = runner.invoke(cli, ["decode", "yg"])

        assert result.exit_code == 1
        assert "101" in result.output

    def test_unknown_charset(self, runner):
        """Unknown charset names should fail cleanly."""
        from asc100_core.cli import cli

        result = runner.invoke(cli, ["encode", "-c", "v9", "AB"])

        assert result.exit_code == 1
        assert "v9" in result.output

    def test_charsets(self, runner):
        """Should list versions and flag the default."""
        from asc100_core.cli import cli

        result = runner.invoke(cli, ["charsets", "--preview", "2"])

        assert result.exit_code == 0
        assert "* v1_standard" in result.output
        assert "v4_url_optimized" in result.output
        assert "[ 1]" in result.output

    def test_markers(self, runner):
        """Should list marker tokens with indices."""
        from asc100_core.cli import cli

        result = runner.invoke(cli, ["markers"])

        assert result.exit_code == 0
        assert "101  #EOF#" in result.output
        assert len(result.output.strip().splitlines()) == 19

    def test_compare(self, runner):
        """Should report every strategy/filter pair."""
        from asc100_core.cli import cli

        result = runner.invoke(cli, ["compare", "Héllo #EOF#"])

        assert result.exit_code == 0
        assert "core/strict" in result.output
        assert "error:" in result.output
        assert "extensions/sanitize" in result.output
        assert "exact=no" in result.output
