from __future__ import annotations

"""
Configuration Domain Management.

Handles the persistent JSON preferences stored in the user data directory,
type validation of merged settings, and the environment overrides that carry
the model credentials. The API key is read from the environment only and is
never written to disk.
"""

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

from scaffold4ai.domain.constants import (
    CURRENT_CONFIG_VERSION,
    DEFAULT_API_URL,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_TEMPERATURE,
    ENV_API_KEY,
    ENV_API_URL,
    ENV_MODEL,
)
from scaffold4ai.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"

# -----------------------------------------------------------------------------
# Settings Models
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class LLMSettings:
    """
    Resolved connection settings for the text-generation endpoint.

    Attributes:
        api_key: Bearer token for the endpoint.
        model: Model identifier sent with each request.
        api_url: Chat-completions URL.
        temperature: Sampling temperature.
        timeout: Request timeout in seconds.
    """
    api_key: str
    model: str
    api_url: str = DEFAULT_API_URL
    temperature: float = DEFAULT_TEMPERATURE
    timeout: int = DEFAULT_REQUEST_TIMEOUT


class ConfigurationError(ValueError):
    """Raised when required settings (api key, model) are missing."""


# -----------------------------------------------------------------------------
# Defaults
# -----------------------------------------------------------------------------

def get_config_path() -> str:
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Endpoint
        "api_url": DEFAULT_API_URL,
        "model": "",
        "temperature": DEFAULT_TEMPERATURE,
        "timeout": DEFAULT_REQUEST_TIMEOUT,

        # Output
        "output_dir": "",
        "color": True,

        # Diagnostics
        "debug": False,
        "save_log": False,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------

def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load preferences from disk merged over the defaults.

    Args:
        path: Optional explicit config file path.

    Returns:
        Dict[str, Any]: Merged configuration, or defaults on a missing or
                        corrupted file.
    """
    config_path = path or get_config_path()
    defaults = get_default_config()

    if not os.path.exists(config_path):
        logger.debug("Config file not found. Returning defaults.")
        return defaults

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return defaults

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return defaults

    data.pop("version", None)
    data.pop("api_key", None)
    defaults.update({k: v for k, v in data.items() if k in defaults})
    return defaults


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> bool:
    """
    Persist preferences to disk. Secrets are stripped before writing.

    Args:
        config: The configuration dictionary to save.
        path: Optional explicit config file path.

    Returns:
        bool: True on success.
    """
    config_path = path or get_config_path()
    payload = {k: v for k, v in config.items() if k in get_default_config()}
    payload["version"] = CURRENT_CONFIG_VERSION
    try:
        os.makedirs(os.path.dirname(os.path.abspath(config_path)), exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=4)
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
        return False
    logger.debug(f"Configuration saved to {config_path}")
    return True


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------

def validate_config(config: Any) -> Tuple[Dict[str, Any], List[str]]:
    """
    Coerce a raw configuration into the expected types.

    Unknown keys are dropped, invalid values are replaced by their default and
    reported in the warnings list.

    Args:
        config: Raw configuration data.

    Returns:
        Tuple[Dict[str, Any], List[str]]: (normalized config, warnings).
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if k in defaults})

    for field in ("api_url", "model", "output_dir"):
        merged[field] = _as_str(merged[field], defaults[field], field, warnings)

    for field in ("color", "debug", "save_log"):
        merged[field] = _as_bool(merged[field], defaults[field], field, warnings)

    merged["temperature"] = _as_number(
        merged["temperature"], defaults["temperature"], "temperature", warnings, float
    )
    merged["timeout"] = _as_number(merged["timeout"], defaults["timeout"], "timeout", warnings, int)

    if not merged["api_url"]:
        merged["api_url"] = DEFAULT_API_URL
    if merged["timeout"] <= 0:
        warnings.append(f"Field 'timeout' must be positive. Using {DEFAULT_REQUEST_TIMEOUT}.")
        merged["timeout"] = DEFAULT_REQUEST_TIMEOUT

    return merged, warnings


# -----------------------------------------------------------------------------
# Environment Resolution
# -----------------------------------------------------------------------------

def resolve_settings(
        config: Mapping[str, Any],
        environ: Optional[Mapping[str, str]] = None,
) -> LLMSettings:
    """
    Build endpoint settings from the config with environment overrides.

    GROQ_API_KEY supplies the key, MODEL and GROQ_API_URL override the
    configured model and URL when set.

    Raises:
        ConfigurationError: If the api key or the model is missing.
    """
    env = os.environ if environ is None else environ

    api_key = (env.get(ENV_API_KEY) or "").strip()
    model = (env.get(ENV_MODEL) or config.get("model") or "").strip()
    api_url = (env.get(ENV_API_URL) or config.get("api_url") or DEFAULT_API_URL).strip()

    if not api_key or not model:
        raise ConfigurationError(
            f"{ENV_API_KEY} and {ENV_MODEL} environment variables must be set."
        )

    return LLMSettings(
        api_key=api_key,
        model=model,
        api_url=api_url,
        temperature=float(config.get("temperature", DEFAULT_TEMPERATURE)),
        timeout=int(config.get("timeout", DEFAULT_REQUEST_TIMEOUT)),
    )


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str]) -> str:
    if value is None:
        return fallback
    if isinstance(value, str):
        return value.strip()
    warnings.append(f"Invalid field '{field}': expected str, received {type(value).__name__}. Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str]) -> bool:
    """Coerce booleans, 0/1 and human-friendly keywords."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback
    if isinstance(value, (int, float)) and value in (0, 1):
        warnings.append(f"Field '{field}' converted from number {value} to bool.")
        return bool(value)
    if isinstance(value, str):
        s = value.strip().lower()
        if s in ("true", "1", "yes", "y", "on"):
            warnings.append(f"Field '{field}' converted from '{value}' to True.")
            return True
        if s in ("false", "0", "no", "n", "off"):
            warnings.append(f"Field '{field}' converted from '{value}' to False.")
            return False
    warnings.append(f"Invalid field '{field}': expected bool, received {type(value).__name__}. Using fallback.")
    return fallback


def _as_number(value: Any, fallback: Any, field: str, warnings: List[str], kind: type) -> Any:
    if isinstance(value, bool):
        warnings.append(f"Invalid field '{field}': expected number, received bool. Using fallback.")
        return fallback
    if isinstance(value, (int, float)):
        return kind(value)
    if isinstance(value, str):
        try:
            converted = kind(value.strip())
        except ValueError:
            pass
        else:
            warnings.append(f"Field '{field}' converted from '{value}' to {converted}.")
            return converted
    warnings.append(f"Invalid field '{field}': expected number, received {type(value).__name__}. Using fallback.")
    return fallback
