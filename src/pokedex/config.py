"""Configuration loader for the Pokedex console (global + project TOML with defaults)."""

from __future__ import annotations

import os
import platform
from pathlib import Path
from typing import Any, Dict, Optional

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for Python <3.11
    import tomli as tomllib  # type: ignore


class ConfigLoader:
    """
    Handles configuration loading from multiple sources with priority resolution.

    Priority (highest → lowest):
    1. Command-line arguments (not handled here)
    2. Environment variables (POKEDEX_<SECTION>__<KEY>)
    3. Project config (.pokedex/config.toml)
    4. Global config (~/.config/pokedex/config.toml)
    5. Built-in defaults
    """

    ENV_PREFIX = "POKEDEX_"

    def __init__(self, global_dir: Optional[Path] = None, project_dir: Optional[Path] = None) -> None:
        self.global_dir = global_dir or self.get_global_config_dir()
        self.project_dir = project_dir or self.get_project_config_dir()

        self.config: Dict[str, Any] = {}
        self._load_all()

    # ------------------------------------------------------------------ #
    # Public getters
    # ------------------------------------------------------------------ #
    def get(self, key: str, default: Any = None) -> Any:
        """Get config value by dot-separated key."""
        keys = key.split(".")
        value: Any = self.config
        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default
        return value if value is not None else default

    def get_float(self, key: str, default: float) -> float:
        """Get a numeric value; environment overrides arrive as strings."""
        value = self.get(key, default)
        try:
            return float(value)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Config value {key}={value!r} is not a number") from exc

    def get_int(self, key: str, default: int) -> int:
        value = self.get(key, default)
        try:
            return int(value)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Config value {key}={value!r} is not an integer") from exc

    def get_path(self, key: str) -> Optional[Path]:
        value = self.get(key)
        if not value:
            return None
        return Path(str(value)).expanduser()

    # ------------------------------------------------------------------ #
    # Load/merge helpers
    # ------------------------------------------------------------------ #
    def _load_all(self) -> None:
        """Load all configuration files with proper priority."""
        self._load_global_config()
        if self.project_dir:
            self._load_project_config()
        self._apply_env_overrides()

    def _load_global_config(self) -> None:
        """Load global configuration on top of the built-in defaults."""
        self.config = self._get_default_config()
        config_file = self.global_dir / "config.toml"
        if config_file.exists():
            with open(config_file, "rb") as f:
                self._deep_merge(self.config, tomllib.load(f))
        else:
            self._create_default_config()

    def _load_project_config(self) -> None:
        """Load project-specific config and merge with global."""
        config_file = self.project_dir / "config.toml"
        if config_file.exists():
            with open(config_file, "rb") as f:
                project_config = tomllib.load(f)
                self._deep_merge(self.config, project_config)

    def _apply_env_overrides(self) -> None:
        """Apply environment variable overrides, e.g. POKEDEX_CACHE__REAP_INTERVAL_SECONDS."""
        for key, value in os.environ.items():
            if not key.startswith(self.ENV_PREFIX):
                continue
            config_key = key[len(self.ENV_PREFIX) :].lower().replace("__", ".")
            self._set_nested(self.config, config_key, value)

    # ------------------------------------------------------------------ #
    # Static paths/helpers
    # ------------------------------------------------------------------ #
    @staticmethod
    def get_global_config_dir() -> Path:
        """Get platform-specific global config directory following XDG spec."""
        system = platform.system()
        if system == "Windows":
            base = Path(os.environ.get("APPDATA", "~\\AppData\\Roaming")).expanduser()
        elif system == "Darwin":
            xdg = os.environ.get("XDG_CONFIG_HOME")
            base = Path(xdg) if xdg else Path.home() / ".config"
        else:
            base = Path(os.environ.get("XDG_CONFIG_HOME", "~/.config")).expanduser()
        return base / "pokedex"

    @staticmethod
    def get_project_config_dir() -> Path | None:
        """Find .pokedex directory in current or parent directories."""
        current = Path.cwd()
        for parent in [current] + list(current.parents):
            config_dir = parent / ".pokedex"
            if config_dir.is_dir():
                return config_dir
        return None

    # ------------------------------------------------------------------ #
    # Persistence helpers
    # ------------------------------------------------------------------ #
    def _create_default_config(self) -> None:
        self.global_dir.mkdir(parents=True, exist_ok=True)
        config_file = self.global_dir / "config.toml"
        with open(config_file, "w", encoding="utf-8") as f:
            f.write(self._get_default_config_toml())

    # ------------------------------------------------------------------ #
    # Default content
    # ------------------------------------------------------------------ #
    def _get_default_config(self) -> Dict[str, Any]:
        """Built-in defaults."""
        return {
            "general": {
                "log_level": "info",
                "log_file": "~/.config/pokedex/pokedex.log",
            },
            "api": {
                "base_url": "https://pokeapi.co/api/v2",
                "timeout_seconds": 10.0,
                "page_size": 20,
            },
            "cache": {
                "reap_interval_seconds": 30.0,
                "max_age_seconds": 86400.0,
            },
            "catch": {
                "max_chance": 100,
                "difficulty_divisor": 5,
            },
        }

    def _get_default_config_toml(self) -> str:
        """Default config TOML text for first-run creation."""
        default = self._get_default_config()
        return "\n".join(
            [
                "[general]",
                f'log_level = "{default["general"]["log_level"]}"',
                f'log_file = "{default["general"]["log_file"]}"',
                "",
                "[api]",
                f'base_url = "{default["api"]["base_url"]}"',
                f'timeout_seconds = {default["api"]["timeout_seconds"]}',
                f'page_size = {default["api"]["page_size"]}',
                "",
                "[cache]",
                "# Reaper period; entries older than this are swept.",
                f'reap_interval_seconds = {default["cache"]["reap_interval_seconds"]}',
                "# Entries older than this are never served, reaper or not.",
                f'max_age_seconds = {default["cache"]["max_age_seconds"]}',
                "",
                "[catch]",
                f'max_chance = {default["catch"]["max_chance"]}',
                f'difficulty_divisor = {default["catch"]["difficulty_divisor"]}',
                "",
            ]
        )

    # ------------------------------------------------------------------ #
    # Utility helpers
    # ------------------------------------------------------------------ #
    def _deep_merge(self, base: dict, override: dict) -> None:
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def _set_nested(self, d: dict, path: str, value: Any) -> None:
        keys = path.split(".")
        for key in keys[:-1]:
            d = d.setdefault(key, {})
        d[keys[-1]] = value


Config = ConfigLoader

__all__ = ["ConfigLoader", "Config"]
