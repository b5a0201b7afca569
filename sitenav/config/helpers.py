"""Field validators shared by the sitenav configuration loader."""

from __future__ import annotations

import collections.abc as cabc
import re
import typing as typ
from urllib.parse import urlsplit

from .._constants import SOCIAL_ICONS
from .models import SchemaError, UnknownIconError

_PATH_PATTERN = re.compile(r"^/[A-Za-z0-9._~!$&'()*+,;=:@%/-]*$")
_URL_SCHEMES = frozenset({"http", "https"})


def _require_mapping(value: object, field: str) -> cabc.Mapping[str, typ.Any]:
    """Return ``value`` when it is a mapping, otherwise raise SchemaError."""
    if not isinstance(value, cabc.Mapping):
        raise SchemaError(field, value, "expected a mapping")
    return value


def _require_list(value: object, field: str) -> list[typ.Any]:
    """Return ``value`` as a list, treating ``None`` as empty."""
    if value is None:
        return []
    if not isinstance(value, list | tuple):
        raise SchemaError(field, value, "expected a list")
    return list(value)


def _reject_unknown_keys(
    payload: cabc.Mapping[str, typ.Any], allowed: cabc.Set[str], field: str
) -> None:
    """Raise SchemaError naming the first key not listed in ``allowed``."""
    for key in payload:
        if key not in allowed:
            expected = ", ".join(sorted(allowed))
            raise SchemaError(
                f"{field}.{key}" if field else str(key),
                payload[key],
                f"unexpected key; expected one of {expected}",
            )


def _require_text(
    payload: cabc.Mapping[str, typ.Any], key: str, field: str
) -> str:
    """Return a stripped, non-empty string stored under ``key``."""
    path = f"{field}.{key}" if field else key
    if key not in payload:
        raise SchemaError(path, None, "missing required field")
    value = payload[key]
    if not isinstance(value, str):
        raise SchemaError(path, value, "expected a string")
    text = value.strip()
    if not text:
        raise SchemaError(path, value, "must not be empty")
    return text


def _validate_absolute_url(value: str, field: str) -> str:
    """Ensure ``value`` is an absolute http(s) URL with a host."""
    try:
        parts = urlsplit(value)
        parts.port  # noqa: B018 - port is parsed lazily
    except ValueError as exc:
        raise SchemaError(field, value, f"malformed URL: {exc}") from exc
    if parts.scheme not in _URL_SCHEMES or not parts.hostname:
        raise SchemaError(field, value, "expected an absolute http(s) URL")
    if any(char.isspace() for char in value):
        raise SchemaError(field, value, "URL must not contain whitespace")
    return value


def _check_segments(value: str, field: str, *, allow_trailing: bool) -> None:
    """Reject empty, ``.`` and ``..`` segments in an absolute path."""
    segments = value[1:].split("/")
    if allow_trailing and segments and segments[-1] == "":
        segments = segments[:-1]
    for segment in segments:
        if segment in {"", ".", ".."}:
            raise SchemaError(
                field, value, "path must be normalized (no empty, '.' or '..' segments)"
            )


def _validate_base_path(value: str, field: str) -> str:
    """Ensure ``value`` is a usable base path prefix such as ``/docs``."""
    if not value.startswith("/"):
        raise SchemaError(field, value, "base path must start with '/'")
    if value == "/":
        return value
    if not _PATH_PATTERN.match(value):
        raise SchemaError(field, value, "base path contains invalid characters")
    _check_segments(value, field, allow_trailing=True)
    return value


def _validate_route(value: str, field: str) -> str:
    """Ensure ``value`` is a normalized, root-relative route like ``/guides/x/``."""
    if not value.startswith("/"):
        raise SchemaError(field, value, "route must be an absolute path starting with '/'")
    if value == "/":
        return value
    if not _PATH_PATTERN.match(value):
        raise SchemaError(
            field, value, "route must not contain a query, fragment or whitespace"
        )
    _check_segments(value, field, allow_trailing=True)
    return value


def _validate_icon(value: str, field: str) -> str:
    """Ensure ``value`` belongs to the generator's closed icon vocabulary."""
    if value not in SOCIAL_ICONS:
        raise UnknownIconError(field, value, SOCIAL_ICONS)
    return value


def _canonical_route(route: str) -> str:
    """Return ``route`` with a trailing slash for comparison purposes."""
    return route if route.endswith("/") else f"{route}/"


__all__ = [
    "_canonical_route",
    "_reject_unknown_keys",
    "_require_list",
    "_require_mapping",
    "_require_text",
    "_validate_absolute_url",
    "_validate_base_path",
    "_validate_icon",
    "_validate_route",
]
