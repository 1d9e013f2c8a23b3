from typing import Any


class DecodeError(ValueError):
    """Raised when a JSON value does not have the shape a decoder expects."""


def as_object(value: Any, what: str = "value") -> dict[str, Any]:
    if not isinstance(value, dict):
        raise DecodeError(f"{what} must be a JSON object")
    return value


def _require(payload: dict[str, Any], key: str) -> Any:
    if key not in payload:
        raise DecodeError(f"Missing '{key}'")
    return payload[key]


def as_int(payload: dict[str, Any], key: str, *, minimum: int | None = None) -> int:
    value = _require(payload, key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"'{key}' must be an integer")
    if minimum is not None and value < minimum:
        raise DecodeError(f"'{key}' must be >= {minimum}")
    return value


def as_str(payload: dict[str, Any], key: str) -> str:
    value = _require(payload, key)
    if not isinstance(value, str):
        raise DecodeError(f"'{key}' must be a string")
    return value


def as_bool(payload: dict[str, Any], key: str, *, default: bool | None = None) -> bool:
    if key not in payload and default is not None:
        return default
    value = _require(payload, key)
    if not isinstance(value, bool):
        raise DecodeError(f"'{key}' must be a boolean")
    return value


def as_list(payload: dict[str, Any], key: str) -> list[Any]:
    value = _require(payload, key)
    if not isinstance(value, list):
        raise DecodeError(f"'{key}' must be a list")
    return value


def as_int_list(payload: dict[str, Any], key: str) -> list[int]:
    items = as_list(payload, key)
    for item in items:
        if isinstance(item, bool) or not isinstance(item, int):
            raise DecodeError(f"'{key}' must only contain integers")
    return items


def optional_object(payload: dict[str, Any], key: str) -> dict[str, Any] | None:
    if key not in payload or payload[key] is None:
        return None
    return as_object(payload[key], f"'{key}'")
