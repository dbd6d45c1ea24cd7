"""Bounded file reading and permission-preserving file and directory copies."""

import os
import shutil
import stat

from ascendkit.paths import check_path, is_exist

FILE_MODE = 0o600
SIZE_10M = 10 * 1024 * 1024
_MAX_SIZE = 1024 * 1024 * 1024


def read_limit_bytes(path: str, limit_length: int) -> bytes:
    """Read at most ``limit_length`` bytes from a checked, non-symlinked path."""
    if limit_length < 0 or limit_length > _MAX_SIZE:
        raise ValueError("the limit length is not valid")
    key = check_path(path)
    try:
        file = open(key, "rb")
    except OSError as err:
        raise OSError(f"open file with read-only and {FILE_MODE:04o} mode failed") from err
    with file:
        try:
            data = file.read(limit_length)
        except OSError as err:
            raise OSError(f"read file failed: {err}") from err
    if limit_length > 0 and not data:
        raise OSError("read file failed: EOF")
    return data


def load_file(file_path: str) -> "bytes | None":
    """Return up to 10 MiB of a file's content, or ``None`` if the path is empty or missing."""
    if not file_path:
        return None
    abs_path = os.path.abspath(file_path)
    if not is_exist(abs_path):
        return None
    return read_limit_bytes(abs_path, SIZE_10M)


def copy_file(src: str, dst: str) -> None:
    """Copy ``src`` to ``dst``, giving ``dst`` the permissions of ``src``."""
    src = check_path(src)
    if is_exist(dst):
        dst = check_path(dst)
    with open(src, "rb") as src_file:
        mode = stat.S_IMODE(os.stat(src).st_mode)
        fd = os.open(dst, os.O_RDWR | os.O_CREAT | os.O_TRUNC, mode)
        with os.fdopen(fd, "wb") as dst_file:
            shutil.copyfileobj(src_file, dst_file)
    os.chmod(dst, mode)


def _sub_folder(src: str, dst: str) -> bool:
    if src == dst:
        return True
    try:
        src_real = os.path.realpath(src, strict=True)
        dst_real = os.path.realpath(dst, strict=True)
    except OSError:
        return False
    src_parts = src_real.split(os.sep)
    dst_parts = dst_real.split(os.sep)
    if len(src_parts) > len(dst_parts):
        return False
    return src_parts == dst_parts[:len(src_parts)]


def copy_dir(src: str, dst: str) -> None:
    """Recursively copy the directory ``src`` into ``dst``."""
    src_mode = stat.S_IMODE(os.stat(src).st_mode)
    os.makedirs(dst, src_mode, exist_ok=True)
    if _sub_folder(src, dst):
        raise ValueError("the destination directory is a subdirectory of the source directory")
    with os.scandir(src) as entries:
        children = sorted(entries, key=lambda entry: entry.name)
    for entry in children:
        src_child = os.path.join(src, entry.name)
        dst_child = os.path.join(dst, entry.name)
        if entry.is_dir(follow_symlinks=False):
            copy_dir(src_child, dst_child)
        else:
            copy_file(src_child, dst_child)