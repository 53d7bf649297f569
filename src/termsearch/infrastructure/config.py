"""Global configuration persistence.

Handles reading and writing config.json with schema versioning
and atomic write operations.
"""

from __future__ import annotations

import json
import math
import tempfile
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any

import structlog

from termsearch.infrastructure.paths import PathResolver, default_resolver

__all__ = [
    "ConfigError",
    "SearchConfig",
    "load_config",
    "save_config",
    "update_config",
]

logger = structlog.get_logger()

# v1: default_threshold, case_sensitive
SCHEMA_VERSION = "1"

MAX_CONFIG_SIZE = 1 * 1024 * 1024


class ConfigError(Exception):
    """Raised when configuration operations fail."""


@dataclass(frozen=True)
class SearchConfig:
    """Immutable configuration for the termsearch CLI.

    Attributes:
        default_threshold: Threshold used when --threshold is not given.
        case_sensitive: When false, the CLI lowercases the term and
            candidates before matching.
    """

    default_threshold: float = 0.5
    case_sensitive: bool = True


def save_config(config: SearchConfig, resolver: PathResolver | None = None) -> None:
    """Save configuration to a JSON file.

    Uses atomic write (temp file + rename) to prevent corruption.

    Args:
        config: Configuration to save.
        resolver: Path resolver (defaults to default_resolver).

    Raises:
        ConfigError: If saving fails.
    """
    if resolver is None:
        resolver = default_resolver

    path = resolver.global_config()
    data = asdict(config)
    data["version"] = SCHEMA_VERSION

    tmp_path: Path | None = None
    try:
        resolver.ensure_base()
        with tempfile.NamedTemporaryFile(
            mode="w",
            dir=path.parent,
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        ) as tmp:
            json.dump(data, tmp, indent=2)
            tmp_path = Path(tmp.name)

        tmp_path.replace(path)
        logger.debug("config_saved", path=str(path))

    except OSError as e:
        if tmp_path is not None:
            tmp_path.unlink(missing_ok=True)
        raise ConfigError(f"Failed to save config: {e}") from e


def load_config(resolver: PathResolver | None = None) -> SearchConfig:
    """Load configuration from a JSON file.

    Missing, oversized, or malformed files yield the default config.

    Args:
        resolver: Path resolver (defaults to default_resolver).

    Returns:
        SearchConfig instance.
    """
    if resolver is None:
        resolver = default_resolver

    path = resolver.global_config()

    if not path.exists():
        logger.debug("config_not_found", path=str(path))
        return SearchConfig()

    try:
        file_size = path.stat().st_size
        if file_size > MAX_CONFIG_SIZE:
            logger.warning(
                "config_too_large",
                path=str(path),
                size=file_size,
                max_size=MAX_CONFIG_SIZE,
            )
            return SearchConfig()

        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise TypeError("config root must be an object")

        version = data.get("version")
        if version and version != SCHEMA_VERSION:
            logger.warning(
                "config_version_mismatch",
                path=str(path),
                expected=SCHEMA_VERSION,
                found=version,
            )

        config = _dict_to_config(data)
        logger.debug("config_loaded", path=str(path))
        return config

    except json.JSONDecodeError as e:
        logger.warning("config_invalid_json", path=str(path), error=str(e))
        return SearchConfig()
    except (TypeError, ValueError) as e:
        logger.warning("config_parse_error", path=str(path), error=str(e))
        return SearchConfig()
    except OSError as e:
        logger.warning("config_read_error", path=str(path), error=str(e))
        return SearchConfig()


def update_config(config: SearchConfig, key: str, value: str) -> SearchConfig:
    """Return a copy of config with one field set from its string form.

    Args:
        config: Current configuration.
        key: Field name (dashes are accepted in place of underscores).
        value: New value as typed on the command line.

    Returns:
        Updated SearchConfig.

    Raises:
        ConfigError: If the key is unknown or the value cannot be parsed.
    """
    name = key.replace("-", "_")
    known = {f.name for f in fields(SearchConfig)}
    if name not in known:
        raise ConfigError(
            f"Unknown config key '{key}' (expected one of: {', '.join(sorted(known))})"
        )

    try:
        if name == "default_threshold":
            threshold = float(value)
            if not math.isfinite(threshold):
                raise ValueError(value)
            return replace(config, default_threshold=threshold)
        return replace(config, case_sensitive=_parse_bool(value))
    except ValueError as e:
        raise ConfigError(f"Invalid value for '{key}': {value}") from e


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    raise ValueError(value)


def _dict_to_config(data: dict[str, Any]) -> SearchConfig:
    """Convert dict to SearchConfig.

    Raises:
        TypeError: If a field has an invalid type.
        ValueError: If the threshold is not finite.
    """
    threshold = data.get("default_threshold", SearchConfig.default_threshold)
    case_sensitive = data.get("case_sensitive", SearchConfig.case_sensitive)

    # bool is an int subclass; reject it as a threshold
    if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
        raise TypeError(f"default_threshold must be a number, got {threshold!r}")
    if not math.isfinite(threshold):
        raise ValueError(f"default_threshold must be finite, got {threshold!r}")
    if not isinstance(case_sensitive, bool):
        raise TypeError(f"case_sensitive must be a boolean, got {case_sensitive!r}")

    return SearchConfig(
        default_threshold=float(threshold),
        case_sensitive=case_sensitive,
    )
