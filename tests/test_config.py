from pathlib import Path

import pytest

from core.config import DEFAULT_MAX_LINES, Settings
from core.models import ServerInfo
from core.package_info import load_server_info


def test_defaults(_isolate_home, monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    settings = Settings.from_env({})
    assert settings.project_dir == tmp_path
    assert settings.cargo_home == _isolate_home / ".cargo"
    assert settings.max_lines == DEFAULT_MAX_LINES
    assert settings.log_level == "INFO"


def test_values_from_environment(tmp_path):
    settings = Settings.from_env({
        "BEVY_EXAMPLES_PROJECT_DIR": str(tmp_path / "game"),
        "CARGO_HOME": str(tmp_path / "cargo"),
        "BEVY_EXAMPLES_MAX_LINES": "50",
        "BEVY_EXAMPLES_LOG_LEVEL": "debug",
    })
    assert settings.project_dir == tmp_path / "game"
    assert settings.cargo_home == tmp_path / "cargo"
    assert settings.max_lines == 50
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("value", ["zero", "0", "-5"])
def test_invalid_max_lines(value):
    with pytest.raises(ValueError, match="BEVY_EXAMPLES_MAX_LINES"):
        Settings.from_env({"BEVY_EXAMPLES_MAX_LINES": value})


def test_server_info_from_pyproject(tmp_path):
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text(
        '[project]\nname = "bevy-examples-mcp"\nversion = "1.2.3"\ndescription = "Bevy examples"\n'
    )
    assert load_server_info(pyproject) == ServerInfo("bevy-examples-mcp", "1.2.3", "Bevy examples")


def test_server_info_from_repository_pyproject():
    info = load_server_info()
    assert info.name == "bevy-examples-mcp"
    assert info.version
    assert info.description
