"""Copying of files and directory trees."""

from __future__ import annotations

import errno
import os
import shutil
import stat
from contextlib import contextmanager
from typing import Iterator

from packkit.logger import Logger


@contextmanager
def _logged(logger: Logger, action: str) -> Iterator[None]:
    try:
        yield
    except OSError as err:
        logger.debug(f"error {action}: {err}")
        raise


def copy_file(source_path: str, destination_path: str, logger: Logger) -> None:
    """Copy a file's content and permission bits to ``destination_path``."""
    with _logged(logger, "opening source file"):
        source = open(source_path, "rb")
    with source:
        with _logged(logger, "opening destination file"):
            destination = open(destination_path, "wb")
        with destination:
            with _logged(logger, "copying file"):
                shutil.copyfileobj(source, destination)
            with _logged(logger, "syncing destination file"):
                destination.flush()
                os.fsync(destination.fileno())

    with _logged(logger, "getting source file info"):
        info = os.stat(source_path)
    with _logged(logger, "getting setting destination file permissions"):
        os.chmod(destination_path, stat.S_IMODE(info.st_mode))


def copy_dir(source_dir: str, destination_dir: str, overwrite: bool, logger: Logger) -> None:
    """Recursively copy ``source_dir`` to ``destination_dir``, skipping symlinks.

    Unless ``overwrite`` is true the destination must not exist; it is then
    created with the source directory's permissions.
    """
    source_dir = os.path.normpath(source_dir)
    destination_dir = os.path.normpath(destination_dir)

    with _logged(logger, "getting source directory info"):
        source_info = os.stat(source_dir)

    if not stat.S_ISDIR(source_info.st_mode):
        message = "source is not a directory"
        logger.debug(message)
        raise NotADirectoryError(message)

    try:
        os.stat(destination_dir)
        exists = True
    except FileNotFoundError:
        exists = False
    except OSError as err:
        logger.debug(f"error getting destination file info: {err}")
        raise

    if not overwrite:
        if exists:
            message = "destination already exists"
            logger.debug(message)
            raise FileExistsError(message)
        with _logged(logger, "creating destination directory"):
            maybe_create_destination_dir(
                destination_dir,
                mode=stat.S_IMODE(source_info.st_mode),
                err_on_exists=True,
            )

    with _logged(logger, "reading source directory entries"):
        with os.scandir(source_dir) as it:
            entries = sorted(it, key=lambda entry: entry.name)

    for entry in entries:
        source_path = os.path.join(source_dir, entry.name)
        destination_path = os.path.join(destination_dir, entry.name)
        if entry.is_dir(follow_symlinks=False):
            copy_dir(source_path, destination_path, overwrite, logger)
        elif entry.is_symlink():
            continue
        else:
            copy_file(source_path, destination_path, logger)


def maybe_create_destination_dir(path: str, *, mode: int = 0o755, err_on_exists: bool = False) -> None:
    """Create ``path`` and its parents if it does not exist.

    Raises :class:`FileExistsError` when it exists and ``err_on_exists`` is set.
    """
    try:
        os.stat(path)
    except FileNotFoundError:
        os.makedirs(path, mode=mode, exist_ok=True)
        return
    except OSError:
        return
    if err_on_exists:
        raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), path)