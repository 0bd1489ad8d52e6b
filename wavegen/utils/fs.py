"""File I/O for option files and rendered SVGs.

Rendered images and dumped options are written through a sibling
``<name>.tmp`` file that is fsynced and then renamed over the target, so
a reader never sees a half-written document. Option files are read and
written as YAML with PyYAML's safe loader/dumper.

Only the config loader and the CLI use this module; the geometry engine
does no I/O.

Usage:
    from wavegen.utils import fs
    fs.atomic_write_text("out/header.svg", Wave(cfg).render())
    fs.atomic_yaml_dump(cfg.to_dict(), "out/header.yaml")
    options = fs.load_yaml("waves/header.yaml")
"""

import os
from pathlib import Path
from typing import Any, Union

import yaml

PathLike = Union[str, Path]

TMP_SUFFIX = ".tmp"


def ensure_dir(p: PathLike) -> Path:
    """Create ``p`` (and parents) if missing; return it as a Path."""
    p = Path(p)
    p.mkdir(parents=True, exist_ok=True)
    return p


def atomic_write_bytes(path: PathLike, data: bytes) -> None:
    """Replace ``path`` with ``data`` in one rename.

    Parameters
    ----------
    path : PathLike
        Target file; missing parent directories are created.
    data : bytes
        Full file contents.

    Raises
    ------
    RuntimeError
        If writing the temporary file or renaming it fails. The
        temporary file is removed and the previous target, if any, is
        left untouched.
    """
    path = Path(path)
    ensure_dir(path.parent)
    tmp_path = path.with_name(path.name + TMP_SUFFIX)

    try:
        with open(tmp_path, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        tmp_path.replace(path)
    except OSError as e:
        tmp_path.unlink(missing_ok=True)
        raise RuntimeError(f"Could not write {path}: {e}") from e


def atomic_write_text(path: PathLike, text: str, encoding: str = "utf-8") -> None:
    """Text variant of :func:`atomic_write_bytes` (SVG markup, logs)."""
    atomic_write_bytes(path, text.encode(encoding))


def atomic_yaml_dump(obj: Any, path: PathLike) -> None:
    """Write ``obj`` as block-style YAML, keeping mapping key order."""
    text = yaml.safe_dump(obj, default_flow_style=False, sort_keys=False, allow_unicode=True)
    atomic_write_text(path, text)


def load_yaml(path: PathLike) -> Any:
    """Parse a YAML file with the safe loader.

    Returns
    -------
    Any
        Parsed document; ``None`` for an empty file.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    yaml.YAMLError
        If the document is not valid YAML; the message names the file.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            return yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"{path}: {e}") from e
