"""
JSON files on disk: contributor records in, the bundle out.

Records are read strictly: a file that is not UTF-8 JSON with an object at
the top level raises `JSONFileError`, carrying the offending path.

The bundle is written via a sibling temp file and `os.replace`, so readers
of the output (and a failed run) never observe a half-written document.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

from mxm.werotracker.common.types import JSONLike, JSONObject


class JSONFileError(ValueError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


def read_json_object(path: Path) -> JSONObject:
    """Read a JSON object from `path`.

    Raises:
        FileNotFoundError: If `path` does not exist.
        JSONFileError: If the content is not UTF-8 JSON, or not an object.
    """
    try:
        loaded = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise JSONFileError(path, f"unreadable JSON ({exc})") from exc
    if not isinstance(loaded, dict):
        raise JSONFileError(path, f"expected a JSON object, got {type(loaded).__name__}")
    return loaded


def replace_json(path: Path, data: JSONLike) -> Path:
    """Pretty-print `data` to `path` (2-space indent, non-ASCII kept), atomically."""
    text = json.dumps(data, ensure_ascii=False, indent=2)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
        os.replace(tmp, path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise
    return path


__all__ = ["JSONFileError", "read_json_object", "replace_json"]
