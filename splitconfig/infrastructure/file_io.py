"""File-system and JSON helpers for config persistence.

Errors are not swallowed here: read/write failures surface as `OSError` and
malformed documents as `json.JSONDecodeError`.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from loguru import logger

ENCODING = "utf-8"


def read_bytes(path: str | Path) -> bytes:
    """Read the whole file at `path`."""
    data = Path(path).read_bytes()
    logger.debug("Read {} bytes from {}", len(data), path)
    return data


def write_bytes(path: str | Path, data: bytes) -> None:
    """Write `data` to `path`. Missing parent directories are not created."""
    with Path(path).open("wb") as f:
        f.write(data)
    logger.debug("Wrote {} bytes to {}", len(data), path)


def is_file(path: str | Path) -> bool:
    return os.path.isfile(path)


def encode_json(value: Any) -> bytes:
    """Compact UTF-8 JSON; raises TypeError/ValueError for unserializable values."""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":")).encode(ENCODING)


def decode_json(data: bytes) -> Any:
    return json.loads(data.decode(ENCODING))


def relative_to_dir(base_dir: str, target: str) -> str:
    """Path of `target` relative to `base_dir`, using forward slashes."""
    return Path(os.path.relpath(target, base_dir)).as_posix()


def resolve_in_dir(base_dir: str, relative_path: str) -> str:
    """Absolute, normalized path for `relative_path` under `base_dir`."""
    return os.path.abspath(os.path.join(base_dir, relative_path))
