"""Path inspection and validation helpers, including driver library lookup."""

import os
import posixpath
import stat
import subprocess

DIR_MODE = 0o700
ROOT_UID = 0
MAX_PATH_DEPTH = 20
MAX_PATH_LENGTH = 1024
DEFAULT_WRITE_FILE_MODE = 0o022

_LD_SPLIT_LEN = 2
_LD_COMMAND = "/sbin/ldconfig"
_LD_PARAM = "--print-cache"
_LD_LIB_PATH = "LD_LIBRARY_PATH"
_GREP_COMMAND = "/bin/grep"


def _parent(path: str) -> str:
    return os.path.normpath(os.path.dirname(path) or ".")


def is_exist(path: str) -> bool:
    """True if ``path`` exists, following symbolic links."""
    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True


def is_lexist(path: str) -> bool:
    """True if ``path`` exists, without following a final symbolic link."""
    try:
        os.lstat(path)
    except (OSError, ValueError):
        return False
    return True


def is_dir(path: str) -> bool:
    """True if ``path`` is a directory, or does not exist and ends with a slash."""
    if not path:
        return False
    if not is_exist(path):
        return path.endswith("/")
    try:
        return stat.S_ISDIR(os.stat(path).st_mode)
    except OSError:
        return False


def is_file(path: str) -> bool:
    """True if ``path`` is non-empty and not a directory."""
    if not path:
        return False
    return not is_dir(path)


def is_softlink(path: str) -> bool:
    """Report whether the opened target of ``path`` is a symbolic link.

    The path is resolved when it is opened, so an existing path is never
    reported as a link; a missing path raises ``OSError``.
    """
    with open(path, "rb") as file:
        return stat.S_ISLNK(os.fstat(file.fileno()).st_mode)


def check_path(path: str) -> str:
    """Validate ``path`` and return it as an absolute path.

    The deepest existing ancestor must not involve symbolic links.
    Raises ``FileNotFoundError`` when nothing along a relative path exists
    and ``ValueError`` for symbolic links or resolution failures.
    """
    if not path:
        return path
    origin = path
    while not is_lexist(path):
        path = _parent(path)
        if path == ".":
            raise FileNotFoundError("file does not exist")
    abs_path = os.path.abspath(path)
    try:
        resolved = os.path.realpath(abs_path, strict=True)
    except FileNotFoundError as err:
        raise FileNotFoundError("file does not exist") from err
    except OSError as err:
        raise ValueError(f"get the symlinks path failed: {err}") from err
    if abs_path != resolved:
        raise ValueError("can't support symlinks")
    return os.path.abspath(origin)


def make_sure_dir(path: str) -> None:
    """Create the parent directory of ``path`` if it does not exist."""
    directory = os.path.dirname(path) or "."
    if is_exist(directory):
        return
    try:
        os.makedirs(directory, DIR_MODE, exist_ok=True)
    except OSError as err:
        raise OSError(f"create directory failed: {err}") from err


def check_mode(mode: int, target_mode: int = DEFAULT_WRITE_FILE_MODE) -> bool:
    """True if ``mode`` has none of the bits in ``target_mode``."""
    return mode & target_mode == 0


def check_owner_and_permission(verify_path: str, mode: int, uid: int) -> str:
    """Check owner and forbidden mode bits of a path; return the resolved path."""
    if not verify_path:
        raise ValueError("empty path")
    abs_path = os.path.abspath(verify_path)
    try:
        resolved = os.path.realpath(abs_path, strict=True)
    except OSError as err:
        raise ValueError(f"evalSymlinks failed {err}") from err
    if abs_path != resolved:
        try:
            link_info = os.lstat(abs_path)
        except OSError as err:
            raise ValueError(f"lstat failed, {err}") from err
        if link_info.st_uid != uid:
            raise ValueError("symlinks owner may not root")
    try:
        info = os.stat(resolved)
    except OSError as err:
        raise ValueError(f"stat failed {err}") from err
    if info.st_uid != uid or not check_mode(info.st_mode, mode):
        raise ValueError("check uid or mode failed")
    return resolved


def _check_abs_path(lib_path: str) -> str:
    try:
        abs_lib_path = check_owner_and_permission(lib_path, DEFAULT_WRITE_FILE_MODE, ROOT_UID)
    except ValueError as err:
        raise ValueError(f"{lib_path}: {err}") from err
    current = abs_lib_path
    for _ in range(MAX_PATH_DEPTH):
        if current == "/":
            return abs_lib_path
        current = os.path.dirname(current) or "/"
        try:
            check_owner_and_permission(current, DEFAULT_WRITE_FILE_MODE, ROOT_UID)
        except ValueError as err:
            raise ValueError(f"{current}: {err}") from err
    raise ValueError("absolute path check failed")


def _check_libs_path(library_paths: list) -> str:
    errors = []
    for name in library_paths:
        try:
            return _check_abs_path(name)
        except ValueError as err:
            errors.append(f"{err};")
    raise ValueError(f"lib path is invalid, {errors}")


def _join(directory: str, name: str) -> str:
    joined = posixpath.join(directory, name)
    return posixpath.normpath(joined) if joined else ""


def _get_lib_from_env(library_name: str) -> str:
    ld_library_path = os.environ.get(_LD_LIB_PATH, "")
    if len(ld_library_path) > MAX_PATH_LENGTH:
        raise ValueError("invalid library path env")
    candidates = [
        full
        for full in (_join(d, library_name) for d in ld_library_path.split(":"))
        if len(full) <= MAX_PATH_LENGTH and is_lexist(full)
    ]
    return _check_libs_path(candidates)


def _trim_space_table(data: str) -> str:
    return data.replace(" ", "").replace("\t", "").replace("\n", "")


def parse_lib_path(line: str, library_name: str) -> str:
    """Extract the library path from one ``ldconfig --print-cache`` line, or ``""``."""
    ld_info = line.split("=>")
    if len(ld_info) < _LD_SPLIT_LEN:
        return ""
    for index, lib_name in enumerate(ld_info[0].split(" ")):
        if index >= MAX_PATH_DEPTH:
            break
        if not lib_name:
            continue
        if _trim_space_table(lib_name) != library_name:
            continue
        return _trim_space_table(ld_info[1])
    return ""


def _parse_lib_from_ld_cmd(library_name: str) -> str:
    try:
        with subprocess.Popen([_LD_COMMAND, _LD_PARAM], stdout=subprocess.PIPE) as ld_proc:
            with subprocess.Popen(
                [_GREP_COMMAND, library_name],
                stdin=ld_proc.stdout,
                stdout=subprocess.PIPE,
                text=True,
            ) as grep_proc:
                ld_proc.stdout.close()
                output, _ = grep_proc.communicate()
            ld_code = ld_proc.wait()
    except OSError as err:
        raise ValueError(f"command exec failed: {err}") from err
    if ld_code != 0:
        raise ValueError(f"command exec failed: exit status {ld_code}")
    reason = "EOF"
    lines = output.splitlines(keepends=True)
    for count, line in enumerate(lines):
        if count >= MAX_PATH_LENGTH:
            reason = "too many items in command stdout"
            break
        if not line.endswith("\n"):
            break
        lib_path = parse_lib_path(line, library_name)
        if lib_path:
            return lib_path
    raise ValueError(f"can't find valid lib: {reason}")


def _get_lib_from_ld_cmd(library_name: str) -> str:
    library_abs_name = _parse_lib_from_ld_cmd(library_name)
    try:
        return _check_abs_path(library_abs_name)
    except ValueError as err:
        raise ValueError(
            f"driver lib is not exist or it's permission is invalid, {err}"
        ) from err


def get_driver_lib_path(library_name: str) -> str:
    """Find a trusted driver library via LD_LIBRARY_PATH, then the ldconfig cache."""
    try:
        return _get_lib_from_env(library_name)
    except (ValueError, OSError) as err:
        env_err = err
    try:
        return _get_lib_from_ld_cmd(library_name)
    except (ValueError, OSError) as err:
        cmd_err = err
    raise ValueError(
        f"cannot found valid driver lib, fromEnv: {env_err}, fromLdCmd: {cmd_err}"
    )