"""File I/O utilities — atomic writes, YAML and JSON handling."""

from __future__ import annotations

import json
import tempfile
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML

_yaml = YAML()
_yaml.preserve_quotes = True
_yaml.default_flow_style = False


def write_atomic(path: Path | str, data: Any, *, as_yaml: bool = False) -> None:
    """Write data to a file atomically (write to temp, then rename).

    Strings are written verbatim as UTF-8 with no newline translation. The
    temp file is removed if the write or the rename fails.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with tempfile.NamedTemporaryFile(
        mode="w",
        encoding="utf-8",
        newline="",
        dir=path.parent,
        suffix=path.suffix,
        delete=False,
    ) as tmp:
        tmp_path = Path(tmp.name)
        try:
            if as_yaml:
                _yaml.dump(data, tmp)
            else:
                tmp.write(data)
        except BaseException:
            tmp.close()
            tmp_path.unlink(missing_ok=True)
            raise

    try:
        tmp_path.replace(path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


def read_yaml(path: Path | str) -> dict:
    """Read a YAML file and return as dict."""
    with open(path, encoding="utf-8") as f:
        return dict(_yaml.load(f) or {})


def load_yaml(path: Path | str) -> Any:
    """Read a YAML file and return whatever top-level value it holds."""
    with open(path, encoding="utf-8") as f:
        return _yaml.load(f)


def write_yaml(path: Path | str, data: dict) -> None:
    """Write a dict to a YAML file atomically."""
    write_atomic(path, data, as_yaml=True)


def read_json(path: Path | str) -> Any:
    """Read a JSON file."""
    with open(path, encoding="utf-8") as f:
        return json.load(f)
