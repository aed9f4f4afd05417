"""
Shared typing utilities for mxm-werotracker.

`JSONLike` is a recursive type alias for any value that round-trips through
Python's `json` module.

- `JSONScalar` covers primitive JSON values.
- `JSONObject` is a JSON object with string keys (a parsed `data.json`).
"""

from __future__ import annotations

from typing import TypeAlias

JSONScalar: TypeAlias = str | int | float | bool | None
JSONLike: TypeAlias = JSONScalar | list["JSONLike"] | dict[str, "JSONLike"]
JSONObject: TypeAlias = dict[str, JSONLike]

__all__ = ["JSONScalar", "JSONLike", "JSONObject"]
