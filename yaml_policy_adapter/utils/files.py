# yaml_policy_adapter/utils/files.py
"""
Whole-file read/write helpers.

Writes replace the file in full. write_text_atomic never leaves a torn
file behind: readers see either the old or the new content.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union
import os
import shutil
import tempfile


PathArg = Union[str, "os.PathLike[str]"]


def is_empty_path(path: object) -> bool:
    """True for None or a path whose string form is empty"""
    if path is None:
        return True
    try:
        return os.fspath(path) == ""  # type: ignore[arg-type]
    except TypeError:
        return True


def read_text(path: PathArg, encoding: str = "utf-8") -> str:
    with open(path, "r", encoding=encoding) as f:
        return f.read()


def write_text(path: PathArg, text: str, encoding: str = "utf-8") -> None:
    """Overwrite path in place (not atomic)"""
    with open(path, "w", encoding=encoding, newline="") as f:
        f.write(text)


def _default_file_mode() -> int:
    """Mode plain open() would give a new file under the current umask"""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_text_atomic(path: PathArg, text: str, encoding: str = "utf-8", fsync: bool = False) -> None:
    """
    Replace path with text via a temp file in the same directory.

    Symlinks are followed: the file they point to is replaced and the link
    stays. The temp file is removed if anything fails before the rename. An
    existing file's permission bits carry over to the replacement; a new
    file gets the umask default.
    """
    target = Path(os.path.realpath(path))
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{target.name}.",
        suffix=".tmp",
        dir=str(target.parent),
    )
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as f:
            f.write(text)
            f.flush()
            if fsync:
                os.fsync(f.fileno())
        if target.exists():
            shutil.copymode(target, tmp_name)
        else:
            os.chmod(tmp_name, _default_file_mode())
        os.replace(tmp_name, target)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except OSError:
            pass
        raise


__all__ = [
    "is_empty_path",
    "read_text",
    "write_text",
    "write_text_atomic",
]
