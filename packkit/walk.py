"""Directory walking that follows symbolic links to directories."""

from __future__ import annotations

import os
import stat
from typing import Callable, Optional

WalkFunc = Callable[[str, Optional[os.stat_result], Optional[OSError]], None]


class SkipDir(Exception):
    """Raised by a walk function to skip the directory being visited."""


def walk(root: str, walk_fn: WalkFunc) -> None:
    """Walk ``root`` in lexical order, calling ``walk_fn(path, info, err)``.

    ``walk_fn`` aborts the walk by raising; raising :class:`SkipDir` on a
    directory skips its contents. Symbolic links are followed.
    """
    try:
        try:
            info = os.lstat(root)
        except OSError as err:
            walk_fn(root, None, err)
        else:
            _symwalk(root, info, walk_fn)
    except SkipDir:
        return


def _symwalk(path: str, info: os.stat_result, walk_fn: WalkFunc) -> None:
    if stat.S_ISLNK(info.st_mode):
        try:
            resolved = os.path.realpath(path, strict=True)
        except OSError as err:
            raise OSError(f"error evaluating symlink: {err}") from err
        info = os.lstat(resolved)
        try:
            _symwalk(path, info, walk_fn)
        except SkipDir:
            pass
        return

    walk_fn(path, info, None)

    if not stat.S_ISDIR(info.st_mode):
        return

    try:
        names = sorted(os.listdir(path))
    except OSError as err:
        walk_fn(path, info, err)
        return

    for name in names:
        filename = os.path.join(path, name)
        try:
            file_info = os.lstat(filename)
        except OSError as err:
            try:
                walk_fn(filename, None, err)
            except SkipDir:
                pass
            continue
        try:
            _symwalk(filename, file_info, walk_fn)
        except SkipDir:
            mode = file_info.st_mode
            if not stat.S_ISDIR(mode) and not stat.S_ISLNK(mode):
                raise