"""Configuration management for nazuke.

Two config sections:
- defaults: CLI defaults (style, count, output format)
- data: where the name tables are read from

Config resolution order (highest priority first):
1. Programmatic (NazukeConfig constructed in code, installed with configure())
2. Environment variables (NAZUKE_DEFAULT_STYLE, NAZUKE_DATA_DIR, etc.)
3. Config file (~/.config/nazuke/config.json, managed by `nazuke config`)
4. Hardcoded defaults
"""

import json
import logging
import os
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any


logger = logging.getLogger(__name__)


# =============================================================================
# Config file location
# =============================================================================

CONFIG_DIR = Path.home() / ".config" / "nazuke"
CONFIG_FILE = CONFIG_DIR / "config.json"

OUTPUT_FORMATS = ("yaml", "json")


# =============================================================================
# Config dataclasses
# =============================================================================


@dataclass
class DefaultsConfig:
    """Defaults used by the CLI when options are omitted."""

    style: str = ""  # empty = fallback style templates
    count: int = 1
    output_format: str = "yaml"


@dataclass
class DataConfig:
    """Name table location."""

    dir: str = ""  # empty = bundled tables


@dataclass
class NazukeConfig:
    """Top-level nazuke configuration.

    Examples:
        # Package use, no files needed
        config = NazukeConfig(data=DataConfig(dir="/srv/names"))

        # CLI use, loads from ~/.config/nazuke/config.json
        config = NazukeConfig.load()
    """

    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    data: DataConfig = field(default_factory=DataConfig)

    @classmethod
    def load(cls) -> "NazukeConfig":
        """Load config from file + env vars.

        Priority: env var values > config.json values > defaults.
        """
        config = cls()

        # Layer 1: Load from config file if it exists
        if CONFIG_FILE.exists():
            try:
                with open(CONFIG_FILE) as f:
                    data = json.load(f)
                _apply_dict(config, data)
            except (json.JSONDecodeError, OSError, ValueError) as exc:
                logger.warning("Failed to load config from %s: %s", CONFIG_FILE, exc)

        # Layer 2: Env var overrides
        if val := os.environ.get("NAZUKE_DEFAULT_STYLE"):
            config.defaults.style = val
        if val := os.environ.get("NAZUKE_DEFAULT_COUNT"):
            try:
                config.defaults.count = int(val)
            except ValueError:
                logger.warning("Invalid NAZUKE_DEFAULT_COUNT=%r, ignoring", val)
        if val := os.environ.get("NAZUKE_OUTPUT_FORMAT"):
            if val.lower() in OUTPUT_FORMATS:
                config.defaults.output_format = val.lower()
            else:
                logger.warning("Invalid NAZUKE_OUTPUT_FORMAT=%r, ignoring", val)
        if val := os.environ.get("NAZUKE_DATA_DIR"):
            config.data.dir = val

        return config

    def save(self) -> None:
        """Save config to ~/.config/nazuke/config.json."""
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        with open(CONFIG_FILE, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for display."""
        return {
            "defaults": asdict(self.defaults),
            "data": asdict(self.data),
        }

    @property
    def data_dir(self) -> Path | None:
        """Resolved table directory, or None for the bundled tables."""
        if not self.data.dir:
            return None
        return Path(self.data.dir).expanduser()


# =============================================================================
# Config dict application
# =============================================================================


def _apply_dict(config: NazukeConfig, data: dict) -> None:
    """Apply a dict of values onto a NazukeConfig."""
    if "defaults" in data and isinstance(data["defaults"], dict):
        for k, v in data["defaults"].items():
            if hasattr(config.defaults, k):
                if k == "count":
                    v = int(v)
                setattr(config.defaults, k, v)
    if "data" in data and isinstance(data["data"], dict):
        for k, v in data["data"].items():
            if hasattr(config.data, k):
                setattr(config.data, k, v)


# =============================================================================
# Global config singleton
# =============================================================================

_config: NazukeConfig | None = None


def get_config() -> NazukeConfig:
    """Get the global NazukeConfig instance.

    First call loads from file + env vars. Subsequent calls return cached instance.
    Use configure() to replace the global config programmatically.
    """
    global _config
    if _config is None:
        _config = NazukeConfig.load()
    return _config


def configure(config: NazukeConfig) -> None:
    """Set the global NazukeConfig programmatically.

    Use this when nazuke is used as a package:
        from nazuke.config import configure, NazukeConfig, DataConfig
        configure(NazukeConfig(data=DataConfig(dir="/srv/names")))
    """
    global _config
    _config = config


def reset_config() -> None:
    """Reset the global config (forces reload on next get_config())."""
    global _config
    _config = None
