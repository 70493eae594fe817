"""Linter configuration loading helpers."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .core.base import Severity

LOG = logging.getLogger(__name__)

CONFIG_FILENAME = ".sqldbalint.toml"
PYPROJECT_FILENAME = "pyproject.toml"
PYPROJECT_TABLE = "sqldbalint"
SETTINGS_SECTION = "sqlDbaLinter"


class ConfigError(Exception):
    """Raised when a configuration file holds invalid option values."""


class LinterConfig(BaseModel):
    """Snapshot of the options consulted by one validation pass."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    require_use_statement: bool = Field(default=True, alias="requireUseStatement")
    require_three_part_naming: bool = Field(default=True, alias="requireThreePartNaming")
    disallow_or_operator: bool = Field(default=True, alias="disallowOrOperator")
    disallow_order_by: bool = Field(default=True, alias="disallowOrderBy")
    disallow_count_star: bool = Field(default=True, alias="disallowCountStar")
    expected_database: str = Field(default="", alias="expectedDatabase")
    severity_overrides: dict[str, Severity] = Field(default_factory=dict, alias="severityOverrides")

    def severity_for(self, code: str, default: Severity) -> Severity:
        """Severity to report for ``code``, honouring overrides."""
        return self.severity_overrides.get(code, default)

    def with_overrides(self, **updates: object) -> LinterConfig:
        """Return a copy with the given fields updated."""
        return self.model_copy(update=updates)


def load_config(path: Path | None = None, *, cwd: Path | None = None) -> LinterConfig:
    """Load configuration from disk; fall back to defaults if missing.

    Args:
        path: Explicit TOML file. When omitted, ``.sqldbalint.toml`` and then
            the ``[tool.sqldbalint]`` table of ``pyproject.toml`` are tried.
        cwd: Directory searched when ``path`` is omitted.

    Raises:
        ConfigError: If the file contains invalid option values.
    """
    if path is None:
        path = _find_config_file(cwd or Path.cwd())
        if path is None:
            return LinterConfig()

    try:
        data = _read_config_file(path)
    except FileNotFoundError:
        LOG.warning("Config file %s not found; using defaults", path)
        return LinterConfig()
    except (tomllib.TOMLDecodeError, OSError) as exc:
        LOG.warning("Could not read config file %s: %s", path, exc)
        return LinterConfig()

    try:
        return LinterConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {path}: {exc}") from exc


def _find_config_file(directory: Path) -> Path | None:
    candidate = directory / CONFIG_FILENAME
    if candidate.is_file():
        return candidate
    pyproject = directory / PYPROJECT_FILENAME
    if pyproject.is_file():
        return pyproject
    return None


def _read_config_file(path: Path) -> dict[str, Any]:
    with path.open("rb") as handle:
        raw = tomllib.load(handle)
    if path.name == PYPROJECT_FILENAME:
        tool = raw.get("tool")
        section = tool.get(PYPROJECT_TABLE) if isinstance(tool, dict) else None
        return dict(section) if isinstance(section, Mapping) else {}
    section = raw.get(SETTINGS_SECTION)
    if isinstance(section, Mapping):
        return dict(section)
    return raw


__all__ = ["ConfigError", "LinterConfig", "load_config"]
