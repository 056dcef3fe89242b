from __future__ import annotations

from pathlib import Path

import pytest

from hivetap.io.config import HiveSettings
from hivetap.io.errors import IoConfigError

_ENV_KEYS = [
    "HIVETAP_IO_WAREHOUSE_DIR",
    "HIVETAP_IO_STRICT_SCHEMA",
    "HIVETAP_IO_NULL_FORMAT",
]


def _clear_env(monkeypatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def _write_hivetap_toml(tmp: Path, content: str) -> Path:
    p = tmp / "hivetap.toml"
    p.write_text(content)
    return p


def test_settings_precedence_env_over_toml(tmp_path: Path, monkeypatch) -> None:
    _write_hivetap_toml(
        tmp_path,
        """
        [io]
        warehouse_dir = "wh_toml"
        strict_schema = true
        """.strip(),
    )
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)
    monkeypatch.setenv("HIVETAP_IO_WAREHOUSE_DIR", "wh_env")
    monkeypatch.setenv("HIVETAP_IO_STRICT_SCHEMA", "off")

    s = HiveSettings.load()

    assert s.warehouse_dir == "wh_env"
    assert s.strict_schema is False


def test_settings_from_toml_when_no_env(tmp_path: Path, monkeypatch) -> None:
    _write_hivetap_toml(
        tmp_path,
        """
        warehouse_dir = "wh_top_level"
        null_format = "NULL"
        """.strip(),
    )
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)

    s = HiveSettings.load()

    assert s.warehouse_dir == "wh_top_level"
    assert s.null_format == "NULL"
    assert s.strict_schema is True


def test_settings_from_pyproject_tool_table(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / "pyproject.toml").write_text(
        """
        [tool.hivetap.io]
        warehouse_dir = "/user/hive/warehouse"
        """.strip()
    )
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)

    assert HiveSettings.load().warehouse_dir == "/user/hive/warehouse"


def test_settings_explicit_path(tmp_path: Path, monkeypatch) -> None:
    cfg = tmp_path / "conf" / "custom.toml"
    cfg.parent.mkdir()
    cfg.write_text('[io]\nwarehouse_dir = "explicit"\n')
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)

    assert HiveSettings.load(cfg).warehouse_dir == "explicit"


def test_settings_defaults_when_no_config(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)

    s = HiveSettings.load()

    assert s.warehouse_dir == "warehouse"
    assert s.strict_schema is True
    assert s.null_format == "\\N"


def test_invalid_toml_raises(tmp_path: Path, monkeypatch) -> None:
    _write_hivetap_toml(tmp_path, "[io\nwarehouse_dir = ")
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)

    with pytest.raises(IoConfigError):
        HiveSettings.load()


def test_empty_warehouse_dir_rejected() -> None:
    with pytest.raises(IoConfigError):
        HiveSettings(warehouse_dir="")


@pytest.mark.parametrize(
    "content",
    [
        '[tool]\nhivetap = "x"\n',
        'tool = "x"\n',
        "[tool.hivetap]\nio = 3\n",
    ],
)
def test_pyproject_with_non_table_tool_section_uses_defaults(tmp_path: Path, monkeypatch, content: str) -> None:
    (tmp_path / "pyproject.toml").write_text(content)
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)

    s = HiveSettings.load()

    assert s.warehouse_dir == "warehouse"
    assert s.strict_schema is True
