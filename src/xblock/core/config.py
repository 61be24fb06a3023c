"""
xblock configuration management (YAML layers + environment overrides).
"""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

import jsonschema

from xblock.core.utils import deep_merge, read_yaml
from xblock.data import get_data_path
from xblock.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "XBLOCK_"
PROJECT_CONFIG_NAMES = ("xblock.yaml", "xblock.yml")


class ConfigManager:
    """Load, merge, and validate xblock configuration.

    Configuration sources (highest to lowest priority):
    1. Environment variables: XBLOCK_<SECTION>__<KEY>
    2. Project config: <repo-root>/xblock.yaml (or xblock.yml)
    3. Bundled defaults: xblock.data/config/defaults.yaml
    """

    def __init__(self, repo_root: Optional[Path] = None) -> None:
        self.repo_root = Path(repo_root or Path.cwd()).expanduser().resolve()
        self.defaults_path = get_data_path("config", "defaults.yaml")
        self.schema_path = get_data_path("schemas", "config.schema.yaml")

    @property
    def project_config_path(self) -> Optional[Path]:
        for name in PROJECT_CONFIG_NAMES:
            candidate = self.repo_root / name
            if candidate.exists():
                return candidate
        return None

    def _as_bool(self, v: str) -> Optional[bool]:
        low = v.strip().lower()
        if low in {"true", "false"}:
            return low == "true"
        return None

    def _as_int(self, v: str) -> Optional[int]:
        if re.fullmatch(r"[-+]?\d+", v.strip() or " "):
            return int(v)
        return None

    def _coerce_type(self, value: str) -> Any:
        for caster in (self._as_bool, self._as_int):
            result = caster(value)
            if result is not None:
                return result
        return value.strip()

    def _iter_env_overrides(self) -> Iterator[Tuple[List[str], Any]]:
        for key in sorted(os.environ.keys()):
            if not key.startswith(ENV_PREFIX):
                continue
            raw = key[len(ENV_PREFIX):]
            segs = [seg.lower() for seg in raw.split("__")]
            if not raw or any(seg == "" for seg in segs):
                logger.warning("Ignoring malformed %s* key: %s", ENV_PREFIX, key)
                continue
            yield segs, self._coerce_type(os.environ[key])

    def _env_overrides(self) -> Dict[str, Any]:
        overrides: Dict[str, Any] = {}
        for path, value in self._iter_env_overrides():
            current = overrides
            for seg in path[:-1]:
                nxt = current.get(seg)
                if not isinstance(nxt, dict):
                    nxt = {}
                    current[seg] = nxt
                current = nxt
            current[path[-1]] = value
        return overrides

    def validate_schema(self, config: Dict[str, Any]) -> None:
        schema = read_yaml(self.schema_path, default=None, raise_on_error=True)
        validator = jsonschema.Draft202012Validator(schema)
        errors = sorted(validator.iter_errors(config), key=lambda e: list(e.path))
        if errors:
            lines = [
                f"- {'/'.join(str(p) for p in err.path) or '<root>'}: {err.message}"
                for err in errors
            ]
            raise ConfigValidationError(
                "Invalid xblock configuration:\n" + "\n".join(lines),
                context={"errors": [err.message for err in errors]},
            )

    def load_config(self, validate: bool = True) -> Dict[str, Any]:
        """Return the merged configuration dictionary."""
        cfg: Dict[str, Any] = read_yaml(self.defaults_path, default={}, raise_on_error=True)

        project_path = self.project_config_path
        if project_path is not None:
            # Fail closed: invalid project YAML must never be silently ignored.
            project_cfg = read_yaml(project_path, default={}, raise_on_error=True)
            if not isinstance(project_cfg, dict):
                raise ConfigValidationError(
                    f"Project config must be a YAML mapping: {project_path}",
                    context={"path": str(project_path)},
                )
            cfg = deep_merge(cfg, project_cfg)
            logger.debug("Loaded project config from %s", project_path)

        cfg = deep_merge(cfg, self._env_overrides())

        logging_cfg = cfg.get("logging")
        if isinstance(logging_cfg, dict) and isinstance(logging_cfg.get("level"), str):
            cfg["logging"] = {**logging_cfg, "level": logging_cfg["level"].upper()}

        if validate:
            self.validate_schema(cfg)
        return cfg


@dataclass(frozen=True)
class XBlockSettings:
    """Resolved engine settings."""

    host_suffix: str = ".svelte"
    block_suffix: str = ".svelte.xblock"
    template_tag: str = "template"
    encoding: str = "utf-8"
    log_level: str = "WARNING"

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "XBlockSettings":
        section = config.get("xblock", {}) or {}
        logging_cfg = config.get("logging", {}) or {}
        return cls(
            host_suffix=section.get("host_suffix", cls.host_suffix),
            block_suffix=section.get("block_suffix", cls.block_suffix),
            template_tag=section.get("template_tag", cls.template_tag),
            encoding=section.get("encoding", cls.encoding),
            log_level=str(logging_cfg.get("level", cls.log_level)).upper(),
        )

    @classmethod
    def load(cls, repo_root: Optional[Path] = None) -> "XBlockSettings":
        return cls.from_config(ConfigManager(repo_root=repo_root).load_config())


__all__ = ["ConfigManager", "XBlockSettings"]
