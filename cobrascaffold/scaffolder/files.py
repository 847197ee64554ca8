"""File materialization with fixed permissions and explicit write policies."""

from __future__ import annotations

import enum
import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO

DIR_MODE = 0o755
FILE_MODE = 0o644


class WritePolicy(enum.Enum):
    """How an existing file at the target path is treated."""

    TRUNCATE = "truncate"
    CREATE_ONLY = "create_only"


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    A directory that is already present is not an error.

    Returns:
        The directory as a ``Path``.
    """
    dir_path = Path(path)
    dir_path.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
    return dir_path


@contextmanager
def open_file(path: str | Path, policy: WritePolicy) -> Iterator[BinaryIO]:
    """Open *path* for binary writing according to *policy*.

    Parent directories are created first.  With ``CREATE_ONLY`` an existing
    file raises ``FileExistsError``.  The handle is closed on every exit path.
    """
    file_path = Path(path)
    ensure_dir(file_path.parent)

    flags = os.O_WRONLY | os.O_CREAT
    if policy is WritePolicy.CREATE_ONLY:
        flags |= os.O_EXCL
    else:
        flags |= os.O_TRUNC

    fd = os.open(file_path, flags, FILE_MODE)
    with os.fdopen(fd, "wb") as handle:
        yield handle


def write_file(path: str | Path, data: bytes, policy: WritePolicy) -> Path:
    """Write *data* to *path* under *policy* and return the path."""
    with open_file(path, policy) as handle:
        handle.write(data)
    return Path(path)


def replace_file(path: str | Path, data: bytes) -> Path:
    """Replace the content of *path* with *data*.

    The bytes go to a temporary sibling file that is renamed over the
    target, so a failed write leaves the original content in place.
    """
    target = Path(path)
    fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
        os.chmod(tmp_name, FILE_MODE)
        os.replace(tmp_name, target)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    return target
