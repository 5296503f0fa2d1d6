"""Unit tests for ConfigFileLoader."""

from pathlib import Path

from adjacent_overloads.infrastructure.config_file_loader import ConfigFileLoader


def test_loads_tool_table_from_start_directory(tmp_path: Path):
    (tmp_path / "pyproject.toml").write_text(
        '[tool.adjacent-overloads]\nexclude_paths = ["gen/"]\n\n[tool.other]\nx = 1\n',
        encoding="utf-8",
    )
    assert ConfigFileLoader.load_config_from_fs(tmp_path) == {"exclude_paths": ["gen/"]}


def test_walks_up_to_nearest_pyproject(tmp_path: Path):
    (tmp_path / "pyproject.toml").write_text(
        "[tool.adjacent-overloads]\ncheck_python = false\n", encoding="utf-8"
    )
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert ConfigFileLoader.load_config_from_fs(nested) == {"check_python": False}


def test_nearest_file_wins_even_without_tool_table(tmp_path: Path):
    (tmp_path / "pyproject.toml").write_text(
        "[tool.adjacent-overloads]\ncheck_python = false\n", encoding="utf-8"
    )
    inner = tmp_path / "inner"
    inner.mkdir()
    (inner / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
    assert ConfigFileLoader.load_config_from_fs(inner) == {}


def test_invalid_toml_yields_empty_config(tmp_path: Path, caplog):
    (tmp_path / "pyproject.toml").write_text("[tool\n", encoding="utf-8")
    with caplog.at_level("WARNING"):
        assert ConfigFileLoader.load_config_from_fs(tmp_path) == {}
    assert "Ignoring invalid" in caplog.text
