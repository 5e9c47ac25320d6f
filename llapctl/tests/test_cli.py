import json

from typer.testing import CliRunner

from llapctl.cli import app
from llapctl.config import Config

runner = CliRunner()


def run_cli_command(cmd):
    return runner.invoke(app, cmd.split())


def test_help():
    result = run_cli_command("--help")
    assert result.exit_code == 0
    assert "Usage" in result.stdout
    assert "--slider-principal" in result.stdout


def test_missing_instances_prints_usage():
    result = run_cli_command("--name mycluster")
    assert result.exit_code == 0
    assert "--instances" in result.stdout


def test_emits_configuration():
    result = run_cli_command("-i 4 -n mycluster -c 2g -w 1g -h false --hiveconf a=1")
    assert result.exit_code == 0
    document = json.loads(result.stdout)
    assert document["instances"] == 4
    assert document["name"] == "mycluster"
    assert document["cache_size"] == 2147483648
    assert document["heap_size"] == 1073741824
    assert document["include_hbase_jars"] is False
    assert document["properties"] == {"a": "1"}


def test_writes_configuration_to_directory(tmp_path):
    result = run_cli_command(f"--instances 2 --directory {tmp_path}")
    assert result.exit_code == 0
    written = json.loads((tmp_path / "llap-config.json").read_text())
    assert written["instances"] == 2
    assert written["directory"] == str(tmp_path)


def test_unknown_flag_fails():
    result = run_cli_command("-i 1 --bogus")
    assert result.exit_code == 1
    assert "Error" in result.output
    assert "Usage" in result.output


def test_invalid_instances_fail():
    result = run_cli_command("--instances 0")
    assert result.exit_code == 1
    assert "should be greater than 0" in result.output

    result = run_cli_command("--instances four")
    assert result.exit_code == 1
    assert "Invalid number" in result.output


def test_unwritable_directory_fails_cleanly(tmp_path):
    existing_file = tmp_path / "not-a-dir"
    existing_file.write_text("")
    result = run_cli_command(f"-i 1 -d {existing_file}")
    assert result.exit_code == 1
    assert not isinstance(result.exception, OSError)
    assert "Error" in result.output
    assert '"instances"' not in result.output


def test_invalid_log_level_setting_fails_cleanly(monkeypatch):
    monkeypatch.setattr(Config, "LOG_LEVEL", "BOGUS")
    result = run_cli_command("-i 1")
    assert result.exit_code == 1
    assert "Unknown log level: BOGUS" in result.output
