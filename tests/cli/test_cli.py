"""Tests for the command line."""

import json
import logging

import pytest
from typer.testing import CliRunner

from shccn import __version__
from shccn.cli import app

runner = CliRunner()

BRANCHY = """#!/bin/bash
check() {
    if [ -z "$1" ]; then
        return 1
    fi
    [ -f "$1" ] && [ -r "$1" ] || return 2
}
"""


@pytest.fixture(autouse=True)
def _isolated(isolated_config):
    yield isolated_config
    logger = logging.getLogger("shccn")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


class TestCli:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_text_report(self, two_functions_script):
        result = runner.invoke(app, [str(two_functions_script)])
        assert result.exit_code == 0
        assert "two_functions.sh" in result.stdout
        assert "build@two_functions.sh" in result.stdout
        assert "clean@two_functions.sh" in result.stdout

    def test_json_report(self, mixed_script):
        result = runner.invoke(app, [str(mixed_script), "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [fn["name"] for fn in data["functions"]] == ["BARE_CODE", "usage", "log"]

    def test_invalid_format(self, mixed_script):
        result = runner.invoke(app, [str(mixed_script), "--format", "xml"])
        assert result.exit_code == 1

    def test_verbose_and_quiet_conflict(self, mixed_script):
        result = runner.invoke(app, [str(mixed_script), "-v", "-q"])
        assert result.exit_code == 1

    def test_output_file(self, mixed_script, tmp_path):
        out = tmp_path / "report.csv"
        result = runner.invoke(app, [str(mixed_script), "-f", "csv", "-o", str(out)])
        assert result.exit_code == 0
        assert out.read_text().splitlines()[0] == "file,function,code,ccn"

    def test_fail_above_trips(self, write_script):
        path = write_script("branchy.sh", BRANCHY)
        result = runner.invoke(app, [str(path), "--fail-above", "3"])
        assert result.exit_code == 1

    def test_fail_above_passes(self, write_script):
        path = write_script("branchy.sh", BRANCHY)
        result = runner.invoke(app, [str(path), "--fail-above", "4"])
        assert result.exit_code == 0

    def test_missing_file_exit_code(self, write_script, tmp_path):
        good = write_script("ok.sh", "echo ok\n")
        result = runner.invoke(app, [str(good), str(tmp_path / "missing.sh")])
        assert result.exit_code == 1
        assert "BARE_CODE@ok.sh" in result.stdout

    def test_sort_option(self, mixed_script):
        result = runner.invoke(app, [str(mixed_script), "-f", "csv", "--sort", "ccn"])
        assert result.exit_code == 0
        rows = result.stdout.splitlines()[1:]
        assert rows[-1].split(",")[1] == "usage"

    def test_bad_sort_value(self, mixed_script):
        result = runner.invoke(app, [str(mixed_script), "--sort", "size"])
        assert result.exit_code == 1


class TestCliLogging:
    """Verbosity from the config reaches the log handlers."""

    def test_env_quiet_silences_warnings(self, write_script, tmp_path, monkeypatch):
        monkeypatch.setenv("SHCCN_VERBOSITY", "quiet")
        good = write_script("ok.sh", "echo ok\n")
        result = runner.invoke(app, [str(good), str(tmp_path / "missing.sh")])
        assert result.exit_code == 1
        assert logging.getLogger("shccn").level == logging.ERROR
        assert "Skipping" not in result.output

    def test_config_file_verbose(self, write_script, tmp_path):
        cfg = tmp_path / "custom.toml"
        cfg.write_text('verbosity = "verbose"\n')
        good = write_script("ok.sh", "echo ok\n")
        result = runner.invoke(app, [str(good), "--config", str(cfg)])
        assert result.exit_code == 0
        assert logging.getLogger("shccn").level == logging.DEBUG

    def test_quiet_flag_beats_env(self, write_script, monkeypatch):
        monkeypatch.setenv("SHCCN_VERBOSITY", "verbose")
        good = write_script("ok.sh", "echo ok\n")
        result = runner.invoke(app, [str(good), "-q"])
        assert result.exit_code == 0
        assert logging.getLogger("shccn").level == logging.ERROR

    def test_log_file_receives_skipped_files(self, write_script, tmp_path):
        log = tmp_path / "shccn.log"
        good = write_script("ok.sh", "echo ok\n")
        args = [str(good), str(tmp_path / "missing.sh"), "--log-file", str(log)]
        result = runner.invoke(app, args)
        assert result.exit_code == 1
        content = log.read_text()
        assert "WARNING" in content
        assert "Skipping" in content
        assert "missing.sh: No such file" in content

    def test_bad_env_verbosity_exits(self, mixed_script, monkeypatch):
        monkeypatch.setenv("SHCCN_VERBOSITY", "loud")
        result = runner.invoke(app, [str(mixed_script)])
        assert result.exit_code == 1
        assert "Error" in result.output


class TestCliUnexpectedErrors:
    def test_unexpected_exception_exits_1(self, mixed_script, monkeypatch):
        def boom(*args, **kwargs):
            raise RuntimeError("kaboom")

        monkeypatch.setattr("shccn.cli.analyze.analyze", boom)
        result = runner.invoke(app, [str(mixed_script)])
        assert result.exit_code == 1
        assert "kaboom" in result.output
