import io

import pytest
import yaml
from rich.console import Console

from rooMaestro import main_cli
from rooMaestro.main import main


@pytest.fixture
def consoles(mocker):
    out = Console(file=io.StringIO(), width=200)
    err = Console(file=io.StringIO(), width=200)
    mocker.patch.object(main_cli, "console", out)
    mocker.patch.object(main_cli, "error_console", err)
    return out, err


def test_cli_without_arguments_writes_project_roomodes(tmp_path, monkeypatch, consoles):
    # Arrange
    monkeypatch.chdir(tmp_path)
    out, _ = consoles

    # Act
    exit_code = main_cli.cli_main([])

    # Assert
    assert exit_code == 0
    entries = yaml.safe_load((tmp_path / ".roomodes").read_text(encoding="utf-8"))["customModes"]
    assert [e["name"] for e in entries] == ["code-analyst", "coder", "maestro", "planner", "prodigy"]
    assert "with 5 modes" in out.file.getvalue()


def test_cli_modes_and_output_options(tmp_path, consoles):
    # Arrange
    target = tmp_path / "modes.yaml"

    # Act
    exit_code = main_cli.cli_main(["--modes", "Planner", "Maestro", "-o", str(target)])

    # Assert
    assert exit_code == 0
    entries = yaml.safe_load(target.read_text(encoding="utf-8"))["customModes"]
    assert [(e["name"], e["slug"]) for e in entries] == [("Maestro", "maestro"), ("Planner", "planner")]


def test_cli_global_flag_writes_global_settings(tmp_path, monkeypatch, consoles):
    monkeypatch.setenv("ROO_GLOBAL_SETTINGS_DIR", str(tmp_path / "global"))
    assert main_cli.cli_main(["--global", "--format", "json"]) == 0
    assert (tmp_path / "global" / "custom_modes.json").exists()


def test_cli_global_and_output_conflict(tmp_path, consoles):
    with pytest.raises(SystemExit) as excinfo:
        main_cli.cli_main(["--global", "-o", str(tmp_path / "x")])
    assert excinfo.value.code == 2


def test_cli_write_failure_exits_non_zero(tmp_path, consoles):
    # Arrange
    _, err = consoles
    target = tmp_path / "missing" / ".roomodes"

    # Act
    exit_code = main_cli.cli_main(["-o", str(target)])

    # Assert
    assert exit_code == 1
    assert "Error:" in err.file.getvalue()
    assert not target.exists()


def test_cli_invalid_mode_list_exits_non_zero(tmp_path, consoles):
    exit_code = main_cli.cli_main(["--modes", "coder", "Coder", "-o", str(tmp_path / ".roomodes")])
    assert exit_code == 1
    assert not (tmp_path / ".roomodes").exists()


def test_cli_verbose_prints_mode_table(tmp_path, consoles):
    out, _ = consoles
    assert main_cli.cli_main(["-v", "-o", str(tmp_path / ".roomodes"), "--log-dir", str(tmp_path / "logs")]) == 0
    assert "Generated Modes" in out.file.getvalue()
    assert (tmp_path / "logs" / "rooMaestro.log").exists()


def test_cli_interrupt_returns_failure(tmp_path, mocker, consoles):
    _, err = consoles
    mocker.patch.object(main_cli, "generate_modes_config", side_effect=KeyboardInterrupt)
    assert main_cli.cli_main(["-o", str(tmp_path / ".roomodes")]) == 1
    assert "Operation cancelled by user." in err.file.getvalue()


def test_main_exits_with_cli_status(mocker):
    mocker.patch("rooMaestro.main.cli_main", return_value=1)
    with pytest.raises(SystemExit) as excinfo:
        main()
    assert excinfo.value.code == 1


def test_cli_write_failure_reports_one_clear_error(tmp_path, consoles, capsys):
    # Arrange
    _, err = consoles
    target = tmp_path / "missing" / ".roomodes"

    # Act
    exit_code = main_cli.cli_main(["-o", str(target)])

    # Assert
    stderr = capsys.readouterr().err
    assert exit_code == 1
    assert stderr.count("Error generating modes configuration") == 1
    assert f"cannot write {target}" in stderr
    assert "Traceback" not in stderr
    assert "..roomodes." not in err.file.getvalue()
    assert str(target) in err.file.getvalue()


def test_cli_invalid_mode_list_prints_short_message(tmp_path, consoles, capsys):
    # Arrange
    _, err = consoles

    # Act
    exit_code = main_cli.cli_main(["--modes", "coder", "Coder", "-o", str(tmp_path / ".roomodes")])

    # Assert
    assert exit_code == 1
    message = err.file.getvalue()
    assert 'duplicate mode slug "coder"' in message
    assert "errors.pydantic.dev" not in message
    assert "Traceback" not in capsys.readouterr().err
