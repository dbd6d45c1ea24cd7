"""Safety checks for file and directory paths: ownership, permissions, links, size."""

import os
import stat
import string

MAX_ALLOW_FILE_SIZE = 1024 * 100  # in megabytes
ONE_MEGABYTE = 1024 * 1024
DEFAULT_WHITE_LIST = "-_./~"
DEFAULT_STRING_LENGTH = 256
DEFAULT_PATH_LENGTH = 4096
_MAX_DEPTH = 99
_VALID_CODES = frozenset(string.ascii_letters + string.digits)


class FileCheckError(ValueError):
    """Raised when a path fails a safety check."""


def _parent(path: str) -> str:
    return os.path.normpath(os.path.dirname(path) or ".")


def _check_size_limit(size: int) -> None:
    if size > MAX_ALLOW_FILE_SIZE or size < 0:
        raise FileCheckError("invalid size")


def string_checker(text: str, min_length: int, max_length: int) -> bool:
    """True if ``text`` length is strictly between the bounds and uses allowed characters."""
    length = len(text.encode("utf-8"))
    if length <= min_length or length >= max_length:
        return False
    return all(c in _VALID_CODES or c in DEFAULT_WHITE_LIST for c in text)


def _checked_abs_path(path: str) -> str:
    real_path = os.path.abspath(path)
    if len(real_path) > DEFAULT_PATH_LENGTH:
        raise FileCheckError("path over max path length")
    if not string_checker(real_path, 0, DEFAULT_PATH_LENGTH):
        raise FileCheckError("invalid path")
    return real_path


def _path_depth_checker(path: str) -> None:
    deep = 0
    while True:
        if deep > _MAX_DEPTH:
            raise FileCheckError(f"over maxDepth {_MAX_DEPTH}")
        if path == "/":
            return
        path = _parent(path)
        deep += 1


def _check_owner_and_permission(info: os.stat_result, file_path: str) -> None:
    perm = "-" + stat.filemode(stat.S_IMODE(info.st_mode) & 0o777)[1:]
    if info.st_mode & (stat.S_IWGRP | stat.S_IWOTH):
        raise FileCheckError(f"write permission not right {file_path} {perm}")
    if info.st_uid not in (0, os.getuid()):
        raise FileCheckError(f"owner not right {file_path} {info.st_uid}")


def normal_file_check(file_path: str, allow_dir: bool, allow_link: bool) -> os.stat_result:
    """Check that ``file_path`` exists, is regular (or a directory), and has no setuid/setgid."""
    expected = file_path if os.path.isabs(file_path) else os.path.abspath(file_path)
    try:
        resolved = os.path.realpath(file_path, strict=True)
    except OSError as err:
        raise FileCheckError(f"symlinks or not existed, failed {file_path}, {err}") from err
    if resolved != expected and not allow_link:
        raise FileCheckError(f"symlinks or not existed, failed {file_path}, None")
    try:
        info = os.stat(file_path)
    except OSError as err:
        raise FileCheckError(f"get file stat failed {err}") from err
    is_regular = stat.S_ISREG(info.st_mode)
    if allow_dir and not is_regular and not stat.S_ISDIR(info.st_mode):
        raise FileCheckError(f"not regular file/dir {file_path}")
    if not allow_dir and not is_regular:
        raise FileCheckError(f"not regular file {file_path}")
    if info.st_mode & stat.S_ISUID:
        raise FileCheckError(f"setuid not allowed {file_path}")
    if info.st_mode & stat.S_ISGID:
        raise FileCheckError(f"setgid not allowed {file_path}")
    return info


def file_checker(path: str, allow_dir: bool, check_parent: bool, allow_link: bool,
                 deep: int = 0) -> None:
    """Check ``path`` and, if ``check_parent``, every ancestor up to the root."""
    while True:
        if deep > _MAX_DEPTH:
            raise FileCheckError(f"over maxDepth {_MAX_DEPTH}")
        info = normal_file_check(path, allow_dir, allow_link)
        _check_owner_and_permission(info, path)
        if path == "/" or not check_parent:
            return
        path = _parent(path)
        allow_dir = True
        deep += 1


def _real_path_checker(path: str, check_parent: bool,
                       allow_link: bool) -> tuple[str, os.stat_result]:
    real_path = _checked_abs_path(path)
    file_checker(real_path, True, check_parent, allow_link, 0)
    return real_path, os.stat(real_path)


def real_file_checker(path: str, check_parent: bool, allow_link: bool, size: int) -> str:
    """Validate a regular file no larger than ``size`` megabytes; return its absolute path."""
    real_path, info = _real_path_checker(path, check_parent, allow_link)
    if stat.S_ISDIR(info.st_mode):
        raise FileCheckError("invalid dir")
    if not stat.S_ISREG(info.st_mode):
        raise FileCheckError("invalid regular file")
    _check_size_limit(size)
    if info.st_size > size * ONE_MEGABYTE:
        raise FileCheckError("size too large")
    return real_path


def real_dir_checker(path: str, check_parent: bool, allow_link: bool) -> str:
    """Validate a directory; return its absolute path."""
    real_path, info = _real_path_checker(path, check_parent, allow_link)
    if not stat.S_ISDIR(info.st_mode):
        raise FileCheckError("is not dir")
    return real_path


def path_string_checker(path: str) -> str:
    """Validate the characters, length and depth of a path string; return it absolute."""
    real_path = _checked_abs_path(path)
    _path_depth_checker(real_path)
    return real_path


def verify_file(file, size: int) -> os.stat_result:
    """Verify an open file's size, type and owner; return its stat result."""
    info = os.fstat(file.fileno())
    _check_size_limit(size)
    if info.st_size > size * ONE_MEGABYTE:
        raise FileCheckError(f"file size error {info.st_size}")
    if stat.S_ISLNK(info.st_mode):
        raise FileCheckError("file is softlink")
    if info.st_uid != os.geteuid():
        raise FileCheckError("file owner incorrect")
    return info


def safe_chmod(path: str, size: int, mode: int) -> None:
    """Open ``path``, verify it, then change its mode through the open handle."""
    with open(path, "rb") as file:
        verify_file(file, size)
        os.fchmod(file.fileno(), mode)