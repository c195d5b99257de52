"""CLI smoke tests using typer's CliRunner."""

import json
import logging

import yaml
from typer.testing import CliRunner

from nazuke.cli.app import app
from nazuke.cli.utils import ExitCode

runner = CliRunner()


class TestGenerateCommand:
    """Tests for the generate command."""

    def test_generate_female(self):
        result = runner.invoke(app, ["generate", "-g", "female", "--seed", "1"])
        assert result.exit_code == 0
        assert "Pronunciation" in result.output
        assert "Meaning" in result.output

    def test_missing_gender(self):
        result = runner.invoke(app, ["generate"])
        assert result.exit_code == ExitCode.VALIDATION_ERROR
        assert "No gender selected" in result.output

    def test_invalid_gender(self):
        result = runner.invoke(app, ["generate", "-g", "robot"])
        assert result.exit_code == ExitCode.VALIDATION_ERROR
        assert "Invalid gender" in result.output

    def test_unknown_style_warns_and_falls_back(self):
        result = runner.invoke(app, ["generate", "-g", "male", "-s", "martian"])
        assert result.exit_code == 0
        assert "Unknown style" in result.output

    def test_json_output(self):
        result = runner.invoke(
            app, ["--json", "generate", "-g", "male", "-s", "strong", "-n", "3"]
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["status"] == "success"
        assert data["exit_code"] == 0
        assert len(data["names"]) == 3
        for name in data["names"]:
            assert name["kanji"].count(" ") == 1
            assert name["romaji"] == name["japanese"]
            assert len(name["elements"]) == 2

    def test_json_error(self):
        result = runner.invoke(app, ["--json", "generate"])
        assert result.exit_code == ExitCode.VALIDATION_ERROR
        data = json.loads(result.stdout)
        assert data["status"] == "error"
        assert data["errors"][0]["message"] == "No gender selected."

    def test_seed_is_reproducible(self):
        args = ["--json", "generate", "-g", "female", "--seed", "99", "-n", "2"]
        first = json.loads(runner.invoke(app, args).stdout)
        second = json.loads(runner.invoke(app, args).stdout)
        assert first["names"] == second["names"]

    def test_count_must_be_positive(self):
        result = runner.invoke(app, ["generate", "-g", "female", "-n", "0"])
        assert result.exit_code == ExitCode.VALIDATION_ERROR
        assert "count must be at least 1" in result.output

    def test_output_yaml(self, tmp_path):
        path = tmp_path / "names.yaml"
        result = runner.invoke(
            app, ["generate", "-g", "female", "-n", "2", "-o", str(path)]
        )
        assert result.exit_code == 0
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
        assert len(data["names"]) == 2

    def test_output_write_failure(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("x")
        result = runner.invoke(
            app, ["generate", "-g", "female", "-o", str(blocker / "names.yaml")]
        )
        assert result.exit_code == ExitCode.WRITE_ERROR
        assert "Failed to write" in result.output

    def test_output_without_suffix_uses_config_format(self, tmp_path):
        runner.invoke(app, ["config", "set", "defaults.output_format", "json"])
        result = runner.invoke(
            app, ["generate", "-g", "male", "-o", str(tmp_path / "names")]
        )
        assert result.exit_code == 0
        data = json.loads((tmp_path / "names.json").read_text(encoding="utf-8"))
        assert len(data["names"]) == 1

    def test_config_defaults_used(self):
        runner.invoke(app, ["config", "set", "defaults.count", "4"])
        result = runner.invoke(app, ["--json", "generate", "-g", "female"])
        assert len(json.loads(result.stdout)["names"]) == 4

    def test_missing_tables(self, tmp_path):
        runner.invoke(app, ["config", "set", "data.dir", str(tmp_path / "none")])
        result = runner.invoke(app, ["generate", "-g", "female"])
        assert result.exit_code == ExitCode.FILE_NOT_FOUND


class TestStylesCommand:
    def test_styles_table(self):
        result = runner.invoke(app, ["styles"])
        assert result.exit_code == 0
        assert "cute" in result.output
        assert "unique" in result.output

    def test_styles_json(self):
        result = runner.invoke(app, ["--json", "styles"])
        data = json.loads(result.stdout)
        assert [s["id"] for s in data["styles"]][:2] == ["cute", "elegant"]
        assert data["fallback"] == "unique"


class TestConfigCommand:
    """Tests for the config command."""

    def test_config_show(self):
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "Defaults" in result.output
        assert "Data" in result.output

    def test_config_set_and_reset(self, isolated_config):
        result = runner.invoke(app, ["config", "set", "defaults.style", "elegant"])
        assert result.exit_code == 0
        assert json.loads(isolated_config.read_text())["defaults"]["style"] == (
            "elegant"
        )

        result = runner.invoke(app, ["config", "reset"])
        assert result.exit_code == 0
        assert not isolated_config.exists()

    def test_config_set_invalid_key(self):
        result = runner.invoke(app, ["config", "set", "invalid.key", "value"])
        assert result.exit_code == 1
        assert "Unknown key" in result.output

    def test_config_set_invalid_int_value(self):
        result = runner.invoke(app, ["config", "set", "defaults.count", "abc"])
        assert result.exit_code == 1
        assert "Invalid integer" in result.output

    def test_config_set_unknown_style(self):
        result = runner.invoke(app, ["config", "set", "defaults.style", "martian"])
        assert result.exit_code == 1
        assert "Unknown style" in result.output

    def test_config_set_invalid_format(self):
        result = runner.invoke(app, ["config", "set", "defaults.output_format", "xml"])
        assert result.exit_code == 1

    def test_config_set_missing_args(self):
        result = runner.invoke(app, ["config", "set"])
        assert result.exit_code == 1

    def test_config_unknown_action(self):
        result = runner.invoke(app, ["config", "unknown_action"])
        assert result.exit_code == 1
        assert "Unknown action" in result.output


class TestVersionFlag:
    """Test the --version flag."""

    def test_version_output(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "nazuke" in result.output


class TestLoggingFlags:
    """Test the --verbose and --debug flags."""

    def test_default_level_is_warning(self):
        result = runner.invoke(app, ["generate", "-g", "female"])
        assert result.exit_code == 0
        assert logging.getLogger("nazuke").level == logging.WARNING

    def test_verbose_enables_info(self):
        result = runner.invoke(app, ["--verbose", "generate", "-g", "female"])
        assert result.exit_code == 0
        assert logging.getLogger("nazuke").level == logging.INFO

    def test_debug_enables_debug(self):
        result = runner.invoke(app, ["--debug", "generate", "-g", "male"])
        assert result.exit_code == 0
        assert logging.getLogger("nazuke").level == logging.DEBUG

    def test_verbose_keeps_json_stdout_clean(self):
        result = runner.invoke(app, ["--json", "-v", "generate", "-g", "male"])
        assert result.exit_code == 0
        assert len(json.loads(result.stdout)["names"]) == 1
