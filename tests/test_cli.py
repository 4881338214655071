"""Tests for the locerr CLI and config."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from locerr.cli import main
from locerr.config import ColorMode, RenderConfig, find_config, load_config


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def tmp_project(tmp_path):
    """A directory with a locerr.toml and a source file."""
    (tmp_path / "locerr.toml").write_text(
        '[render]\ncolor = "never"\nemphasize = true\nbase_dir = "."\n'
    )
    src = tmp_path / "src"
    src.mkdir()
    (src / "main.c").write_text("int main() {\n    return x;\n}\n")
    return tmp_path


# --- CLI tests ---


class TestCLI:
    def test_help(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "show" in result.output
        assert "locate" in result.output

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_show_range(self, runner, tmp_path):
        with runner.isolated_filesystem(temp_dir=tmp_path):
            Path("main.c").write_text("int main() {\n    return x;\n}\n")
            result = runner.invoke(main, [
                "show", "main.c", "undefined name 'x'",
                "--start", "24", "--end", "25", "--color", "never",
            ])
            assert result.exit_code == 0, result.output
            assert result.output == (
                "Error: undefined name 'x' (at main.c:2:12)\n"
                "\n"
                ">     return x;\n"
                "\n"
            )

    def test_show_point_with_notes(self, runner, tmp_path):
        with runner.isolated_filesystem(temp_dir=tmp_path):
            Path("main.c").write_text("int main() {\n    return x;\n}\n")
            result = runner.invoke(main, [
                "show", "main.c", "undefined name 'x'", "--start", "24",
                "--note", "declare it first", "--note", "or import it",
                "--color", "never",
            ])
            assert result.exit_code == 0, result.output
            assert result.output.startswith(
                "Error: undefined name 'x' (at main.c:2:12)\n"
                "  Note: declare it first\n"
                "  Note: or import it\n"
            )
            assert ">     return x;" in result.output

    def test_show_zero_length_has_no_snippet(self, runner, tmp_path):
        with runner.isolated_filesystem(temp_dir=tmp_path):
            Path("a.txt").write_text("abc")
            result = runner.invoke(main, [
                "show", "a.txt", "bad", "--start", "1", "--end", "1", "--color", "never",
            ])
            assert result.exit_code == 0
            assert result.output == "Error: bad (at a.txt:1:2)\n"

    def test_show_stdin(self, runner):
        result = runner.invoke(
            main, ["show", "-", "oops", "--start", "0", "--color", "never"], input="abc\n",
        )
        assert result.exit_code == 0, result.output
        assert result.output == "Error: oops (at <stdin>:1:1)\n\n> abc\n\n"

    def test_show_color_always(self, runner):
        result = runner.invoke(
            main, ["show", "-", "oops", "--start", "0", "--color", "always"], input="abc",
        )
        assert result.exit_code == 0
        assert "\033[31mError: \033[0m" in result.output

    def test_show_uses_config(self, runner, tmp_project, monkeypatch):
        monkeypatch.chdir(tmp_project / "src")
        result = runner.invoke(main, [
            "show", "main.c", "undefined name 'x'", "--start", "24", "--end", "25",
        ])
        assert result.exit_code == 0, result.output
        # base_dir = "." is relative to the config file
        assert f"(at {Path('src', 'main.c')}:2:12)" in result.output
        assert "\033[" not in result.output

    def test_show_explicit_config_and_override(self, runner, tmp_project):
        result = runner.invoke(main, [
            "show", str(tmp_project / "src" / "main.c"), "boom", "--start", "0",
            "--config", str(tmp_project / "locerr.toml"), "--color", "always",
        ])
        assert result.exit_code == 0, result.output
        assert "\033[1;4mint main() {\033[0m" in result.output

    def test_show_bad_config(self, runner, tmp_path):
        (tmp_path / "bad.toml").write_text('[render]\ncolor = "rainbow"\n')
        (tmp_path / "a.txt").write_text("abc")
        result = runner.invoke(main, [
            "show", str(tmp_path / "a.txt"), "boom", "--start", "0",
            "--config", str(tmp_path / "bad.toml"),
        ])
        assert result.exit_code == 1
        assert "error:" in result.output
        assert "rainbow" in result.output

    def test_show_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, ["show", str(tmp_path / "nope.c"), "boom", "--start", "0"])
        assert result.exit_code == 2

    def test_show_requires_start(self, runner):
        result = runner.invoke(main, ["show", "-", "boom"], input="abc")
        assert result.exit_code == 2

    def test_locate(self, runner, tmp_path):
        with runner.isolated_filesystem(temp_dir=tmp_path):
            Path("main.c").write_text("int main() {\n    return x;\n}\n")
            result = runner.invoke(main, ["locate", "main.c", "24"])
            assert result.exit_code == 0
            assert result.output == "main.c:2:12\n"

    def test_locate_stdin(self, runner):
        result = runner.invoke(main, ["locate", "-", "4"], input="abc\ndef")
        assert result.exit_code == 0
        assert result.output == "<stdin>:2:1\n"


# --- Config tests ---


class TestConfig:
    def test_load_config(self, tmp_project):
        config = load_config(tmp_project / "locerr.toml")
        assert config.color is ColorMode.NEVER
        assert config.emphasize
        assert config.base_dir == tmp_project.resolve()

    def test_load_config_defaults(self, tmp_path):
        toml = tmp_path / "locerr.toml"
        toml.write_text("[render]\n")
        config = load_config(toml)
        assert config == RenderConfig()
        assert config.color is ColorMode.AUTO
        assert not config.emphasize
        assert config.base_dir is None

    def test_load_config_without_render_table(self, tmp_path):
        toml = tmp_path / "locerr.toml"
        toml.write_text("")
        assert load_config(toml) == RenderConfig()

    def test_load_config_bad_color(self, tmp_path):
        toml = tmp_path / "locerr.toml"
        toml.write_text('[render]\ncolor = "rainbow"\n')
        with pytest.raises(ValueError, match="invalid color mode 'rainbow'"):
            load_config(toml)

    def test_find_config(self, tmp_project):
        # find_config from a subdirectory should find locerr.toml in parent
        sub = tmp_project / "src"
        found = find_config(sub)
        assert found == (tmp_project / "locerr.toml").resolve()

    def test_find_config_from_file(self, tmp_project):
        found = find_config(tmp_project / "src" / "main.c")
        assert found == (tmp_project / "locerr.toml").resolve()

    def test_find_config_not_found(self, tmp_path):
        empty = tmp_path / "empty"
        empty.mkdir()
        with pytest.raises(FileNotFoundError, match="No locerr.toml found"):
            find_config(empty)


class TestColorMode:
    def test_resolve(self):
        assert ColorMode.ALWAYS.resolve()
        assert not ColorMode.NEVER.resolve()
        assert not ColorMode.AUTO.resolve(None)
