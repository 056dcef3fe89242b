"""
Configuration for the hivetap.io module.

Defines HiveSettings, a frozen dataclass carrying runtime configuration for locating
tables in a warehouse and validating frames against descriptors. Defaults come from
hivetap.core.constants where a Hive default exists.

Source of truth
- hivetap.core.constants.DEFAULT_NULL_FORMAT
- Table layout (``<db>.db/<table>``) comes from TableDescriptor.filesystem_path()

Import DAG discipline
- Depends only on stdlib and hivetap.core.constants.

Notes
- Precedence for loaders is env > TOML > defaults.
- TOML is searched in ./hivetap.toml ([io] table or top-level keys), then
  ./pyproject.toml under [tool.hivetap.io].
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from hivetap.core.constants import DEFAULT_NULL_FORMAT

from .errors import IoConfigError

logger = logging.getLogger(__name__)

_TRUE_STRINGS = {"1", "true", "t", "yes", "y", "on"}


def _bool(v: Any) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, (int, float)):
        return bool(v)
    if isinstance(v, str):
        return v.strip().lower() in _TRUE_STRINGS
    return False


@dataclass(frozen=True)
class HiveSettings:
    """
    Runtime settings for the hivetap.io layer.

    Attributes:
        warehouse_dir (str): Root directory of the Hive warehouse; tables resolve to
            ``<warehouse_dir>/<TableDescriptor.filesystem_path()>``.
        strict_schema (bool): If True, frames with columns outside the descriptor are rejected.
        null_format (str): NULL marker used by text schemes (Hive default ``\\N``).

    Raises:
        IoConfigError: If warehouse_dir is empty.

    Examples:
        >>> from hivetap.io import HiveSettings
        >>> HiveSettings(warehouse_dir="/user/hive/warehouse")  # doctest: +ELLIPSIS
        HiveSettings(...)
    """

    warehouse_dir: str = "warehouse"
    strict_schema: bool = True
    null_format: str = DEFAULT_NULL_FORMAT

    def __post_init__(self) -> None:
        if not self.warehouse_dir:
            raise IoConfigError("warehouse_dir cannot be empty")

    @classmethod
    def _apply_mapping(cls, base: HiveSettings, cfg: dict[str, Any] | None) -> HiveSettings:
        """Apply a loose config mapping onto HiveSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base
        if "warehouse_dir" in cfg and isinstance(cfg["warehouse_dir"], str):
            s = replace(s, warehouse_dir=cfg["warehouse_dir"])
        if "strict_schema" in cfg:
            s = replace(s, strict_schema=_bool(cfg["strict_schema"]))
        if "null_format" in cfg and isinstance(cfg["null_format"], str):
            s = replace(s, null_format=cfg["null_format"])
        return s

    @classmethod
    def from_env(cls, base: HiveSettings | None = None, prefix: str = "HIVETAP_IO_") -> HiveSettings:
        """
        Build HiveSettings from environment variables. Precedence is env > base (if provided) > defaults.

        Recognized variables:
            - HIVETAP_IO_WAREHOUSE_DIR
            - HIVETAP_IO_STRICT_SCHEMA (1/0/true/false/yes/no/on/off)
            - HIVETAP_IO_NULL_FORMAT
        """
        s = base or cls()

        mapping: dict[str, Any] = {}
        for key in ("warehouse_dir", "strict_schema", "null_format"):
            v = os.getenv(prefix + key.upper())
            if v:
                mapping[key] = v
        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> HiveSettings:
        """
        Build HiveSettings from a TOML file.

        Search order when `path` is None:
            1) ./hivetap.toml (with either top-level [io] or direct keys)
            2) ./pyproject.toml under [tool.hivetap.io]

        Returns defaults if no file is present.

        Raises:
            IoConfigError: If a candidate file exists but is not valid TOML.
        """
        s = cls()

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "hivetap.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        cfg: dict[str, Any] | None = None
        for p in cand:
            if not p.exists():
                continue
            try:
                with p.open("rb") as fh:
                    data = tomllib.load(fh)
            except tomllib.TOMLDecodeError as exc:
                raise IoConfigError(f"invalid TOML in {p}: {exc}") from exc
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                section = tool.get("hivetap") if isinstance(tool, dict) else None
                cfg = section.get("io") if isinstance(section, dict) else None
            elif isinstance(data.get("io"), dict):
                cfg = data["io"]
            else:
                cfg = data
            if cfg:
                logger.debug("loaded hivetap io settings from %s", p)
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> HiveSettings:
        """
        Load HiveSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults (hivetap.toml, pyproject.toml).

        Returns:
            HiveSettings
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s
