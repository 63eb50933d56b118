# src/griddata/utils/json_utils.py
import logging
from typing import Any, Dict, List, Mapping, Optional

logger = logging.getLogger(__name__)


def get_str(obj: Mapping[str, Any], key: str, default: Optional[str] = None) -> Optional[str]:
    """Reads `key` as a string. Numbers and booleans are converted, anything else yields `default`."""
    value = obj.get(key)
    if value is None:
        return default
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float, bool)):
        return str(value)
    return default


def get_int(obj: Mapping[str, Any], key: str, default: int = 0) -> int:
    """Reads `key` as an integer, accepting numeric strings such as "12"."""
    value = obj.get(key)
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return default


def get_optional_int(obj: Mapping[str, Any], key: str) -> Optional[int]:
    if obj.get(key) is None:
        return None
    value = get_int(obj, key, default=-1)
    return None if value < 0 else value


def get_float(obj: Mapping[str, Any], key: str, default: float = 0.0) -> float:
    value = obj.get(key)
    if isinstance(value, bool):
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def get_bool(obj: Mapping[str, Any], key: str, default: bool = False) -> bool:
    value = obj.get(key)
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    if isinstance(value, (int, float)):
        return value != 0
    return default


def get_dict(obj: Mapping[str, Any], key: str) -> Dict[str, Any]:
    """Reads `key` as an object. Missing or malformed values yield an empty dict."""
    value = obj.get(key)
    if isinstance(value, dict):
        return dict(value)
    if value is not None:
        logger.debug("Expected an object for '%s', got %s. Using empty dict.", key, type(value).__name__)
    return {}


def get_str_list(obj: Mapping[str, Any], key: str) -> List[str]:
    value = obj.get(key)
    if not isinstance(value, list):
        return []
    return [str(item) for item in value if item is not None]
