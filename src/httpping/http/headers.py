# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header normalization utilities.

Header field names are case-insensitive, while HttpResponse stores them in a
plain dict, so lookups go through these helpers.
"""

from __future__ import annotations

from collections.abc import Mapping


def normalize_headers(headers: Mapping[str, str] | None) -> dict[str, str]:
    """Return a lowercase-keyed copy of a header mapping."""
    if not headers:
        return {}
    out: dict[str, str] = {}
    for key, value in headers.items():
        name = str(key).strip().lower()
        if not name:
            continue
        out[name] = "" if value is None else str(value)
    return out


def header_value(headers: Mapping[str, str] | None, name: str, default: str = "") -> str:
    """Return a header value using case-insensitive key matching."""
    if not headers or not name:
        return default
    lower = name.lower()
    if lower in headers:
        return str(headers[lower]).strip()
    for key, value in headers.items():
        if str(key).lower() == lower:
            return default if value is None else str(value).strip()
    return default


__all__ = ["header_value", "normalize_headers"]
