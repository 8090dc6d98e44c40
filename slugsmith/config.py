"""Configuration management for slugsmith.

Two config zones:
- generate: default name request (word count, separator, casing, size tier)
- wordlists: where word lists live and where `slugsmith fetch` downloads from

Config resolution order (highest priority first):
1. Programmatic (SlugsmithConfig constructed in code)
2. Environment variables (SLUGSMITH_SEPARATOR, SLUGSMITH_WORDS_DIR, etc.)
3. Config file (~/.config/slugsmith/config.json, managed by `slugsmith config`)
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

CONFIG_DIR = Path.home() / ".config" / "slugsmith"
CONFIG_FILE = CONFIG_DIR / "config.json"

DEFAULT_WORDS_DIR = "~/.local/share/slugsmith/wordlists"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def parse_bool(value: str) -> bool:
    """Parse a boolean string ("true"/"false", "1"/"0", "yes"/"no", "on"/"off").

    Raises:
        ValueError: If the string is not a recognized boolean.
    """
    token = value.strip().lower()
    if token in _TRUE_VALUES:
        return True
    if token in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")


# =============================================================================
# Config dataclasses
# =============================================================================


@dataclass
class GenerateConfig:
    """Defaults for `slugsmith generate` when options are not given."""

    words_per_name: int = 3
    separator: str = "-"
    number_of_names: int = 1
    pascal_case: bool = False
    size: str = "small"


@dataclass
class WordListsConfig:
    """Word-list storage and fetch source.

    source_url is a template with {category} and {size} placeholders.
    Empty means no remote source is configured.
    """

    directory: str = DEFAULT_WORDS_DIR
    source_url: str = ""
    timeout: float = 30.0


@dataclass
class SlugsmithConfig:
    """Top-level slugsmith configuration.

    Examples:
        # Package use, no files needed
        config = SlugsmithConfig(generate=GenerateConfig(separator="_"))

        # CLI use, loads from ~/.config/slugsmith/config.json
        config = SlugsmithConfig.load()
    """

    generate: GenerateConfig = field(default_factory=GenerateConfig)
    wordlists: WordListsConfig = field(default_factory=WordListsConfig)

    @classmethod
    def load(cls, *, env: bool = True) -> "SlugsmithConfig":
        """Load config from file + env vars.

        Priority: env var values > config.json values > defaults.
        With env=False only the file layer is applied, which is what
        `slugsmith config set` writes back.
        """
        config = cls()

        # Layer 1: Load from config file if it exists
        if CONFIG_FILE.exists():
            try:
                with open(CONFIG_FILE) as f:
                    data = json.load(f)
                _apply_dict(config, data)
            except (json.JSONDecodeError, OSError, TypeError, ValueError) as exc:
                logger.warning("Failed to load config from %s: %s", CONFIG_FILE, exc)

        # Layer 2: Env var overrides
        if env:
            _apply_env_vars(config)

        return config

    def save(self) -> None:
        """Save config to ~/.config/slugsmith/config.json."""
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        with open(CONFIG_FILE, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for display."""
        return {
            "generate": asdict(self.generate),
            "wordlists": asdict(self.wordlists),
        }

    @property
    def words_dir(self) -> Path:
        """Word-list root directory with ~ expanded."""
        return Path(self.wordlists.directory).expanduser()


# =============================================================================
# Config dict / env application
# =============================================================================

INT_FIELDS = {"words_per_name", "number_of_names"}
FLOAT_FIELDS = {"timeout"}
BOOL_FIELDS = {"pascal_case"}


def coerce_field(field_name: str, value: Any) -> Any:
    """Coerce a raw config value to the field's type.

    Raises:
        ValueError: If the value cannot be converted.
    """
    if field_name in INT_FIELDS:
        return int(value)
    if field_name in FLOAT_FIELDS:
        return float(value)
    if field_name in BOOL_FIELDS:
        return value if isinstance(value, bool) else parse_bool(str(value))
    return str(value)


def _apply_dict(config: SlugsmithConfig, data: dict) -> None:
    """Apply a dict of values onto a SlugsmithConfig."""
    if not isinstance(data, dict):
        raise TypeError(f"expected a JSON object, got {type(data).__name__}")
    for zone_name in ("generate", "wordlists"):
        zone_data = data.get(zone_name)
        if not isinstance(zone_data, dict):
            continue
        target = getattr(config, zone_name)
        for k, v in zone_data.items():
            if hasattr(target, k):
                setattr(target, k, coerce_field(k, v))


_ENV_VARS: dict[str, tuple[str, str]] = {
    "SLUGSMITH_WORDS_PER_NAME": ("generate", "words_per_name"),
    "SLUGSMITH_SEPARATOR": ("generate", "separator"),
    "SLUGSMITH_NUMBER_OF_NAMES": ("generate", "number_of_names"),
    "SLUGSMITH_PASCAL_CASE": ("generate", "pascal_case"),
    "SLUGSMITH_SIZE": ("generate", "size"),
    "SLUGSMITH_WORDS_DIR": ("wordlists", "directory"),
    "SLUGSMITH_SOURCE_URL": ("wordlists", "source_url"),
    "SLUGSMITH_FETCH_TIMEOUT": ("wordlists", "timeout"),
}


def _apply_env_vars(config: SlugsmithConfig) -> None:
    for env_name, (zone_name, field_name) in _ENV_VARS.items():
        val = os.environ.get(env_name)
        # The separator may legitimately be an empty string
        if val is None or (val == "" and field_name != "separator"):
            continue
        try:
            setattr(
                getattr(config, zone_name), field_name, coerce_field(field_name, val)
            )
        except ValueError:
            logger.warning("Invalid %s=%r, ignoring", env_name, val)


# =============================================================================
# Global config singleton
# =============================================================================

_config: SlugsmithConfig | None = None


def get_config() -> SlugsmithConfig:
    """Get the global SlugsmithConfig instance.

    First call loads from file + env vars. Subsequent calls return cached instance.
    Use configure() to replace the global config programmatically.
    """
    global _config
    if _config is None:
        _config = SlugsmithConfig.load()
    return _config


def configure(config: SlugsmithConfig) -> None:
    """Set the global SlugsmithConfig programmatically."""
    global _config
    _config = config


def reset_config() -> None:
    """Reset the global config (forces reload on next get_config())."""
    global _config
    _config = None
