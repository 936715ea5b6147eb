"""File-system, hashing, archive and stream helpers."""

from __future__ import annotations

import contextlib
import hashlib
import io
import logging
import os
import shutil
import socket
import stat
import sys
import tempfile
import uuid
import zipfile
from typing import BinaryIO, Optional

log = logging.getLogger(__name__)

_CHUNK = 1024
_COPY_CHUNK = 64 * 1024


def get_uuid() -> bytes:
    """Return a fresh random UUID as its 16-byte binary form."""
    return uuid.uuid4().bytes


def _go_dir(path: str) -> str:
    parent = os.path.dirname(path)
    return os.path.normpath(parent) if parent else "."


def _go_base(path: str) -> str:
    if not path:
        return "."
    stripped = path.rstrip("/" + os.sep)
    if not stripped:
        return "/"
    return os.path.basename(stripped)


def _remove_any(path: str) -> None:
    if os.path.isdir(path) and not os.path.islink(path):
        shutil.rmtree(path)
    elif os.path.lexists(path):
        os.remove(path)


def _read_some(conn, size: int) -> bytes:
    recv = getattr(conn, "recv", None)
    if recv is not None:
        return recv(size)
    return conn.read(size)


def _read_exactly(conn, size: int) -> Optional[bytes]:
    if size <= 0:
        return None
    parts = []
    remaining = size
    while remaining > 0:
        chunk = _read_some(conn, remaining)
        if not chunk:
            return None
        parts.append(chunk)
        remaining -= len(chunk)
    return b"".join(parts)


def _copy(dst, src) -> int:
    total = 0
    while True:
        chunk = src.read(_COPY_CHUNK)
        if not chunk:
            return total
        dst.write(chunk)
        total += len(chunk)


def _is_os_file(obj) -> bool:
    if isinstance(obj, socket.socket):
        return False
    try:
        obj.fileno()
    except (AttributeError, OSError, ValueError):
        return False
    return True


def create_file_and_del_if_exists(path: str) -> BinaryIO:
    """Replace whatever is at ``path`` with a new empty file and open it."""
    if exists(path) or is_dir(path):
        _remove_any(path)
    os.makedirs(_go_dir(path), exist_ok=True)
    return open(path, "w+b")


def create_file_if_not_exists(path: str) -> BinaryIO:
    """Open an existing file for appending, or create it (replacing a directory)."""
    if exists(path) and is_file(path):
        return open(path, "ab")
    if exists(path) or is_dir(path):
        _remove_any(path)
    os.makedirs(_go_dir(path), exist_ok=True)
    return open(path, "w+b")


def exists(path: str) -> bool:
    """Tell whether a file or directory exists at ``path``."""
    return os.path.exists(path)


def is_dir(path: str) -> bool:
    """Tell whether ``path`` is an existing directory."""
    return os.path.isdir(path)


def is_file(path: str) -> bool:
    """Tell whether ``path`` is not a directory (true for missing paths too)."""
    return not is_dir(path)


def tcp_to_file(conn, file: BinaryIO, length: int) -> int:
    """Copy exactly ``length`` bytes from a connection or stream into ``file``."""
    written = 0
    remaining = length
    while remaining > 0:
        chunk = _read_some(conn, min(remaining, 32768))
        if not chunk:
            raise EOFError(f"connection closed after {written} of {length} bytes")
        file.write(chunk)
        written += len(chunk)
        remaining -= len(chunk)
    file.flush()
    log.info("wn: %d", written)
    return written


def get_bytes(conn, file_name: str, file_length: int) -> bool:
    """Receive ``file_length`` bytes from ``conn`` into a fresh file; report success."""
    log.info("-->getBytes(fileName:%s,fileLength:%d)", file_name, file_length)
    with contextlib.suppress(OSError):
        _remove_any(file_name)
    if not make_sure_file_exists(file_name):
        log.warning("cannot make sure the file exists: %s", file_name)
        return False
    with open(file_name, "wb") as out:
        received = 0
        while True:
            wanted = min(_CHUNK, file_length - received)
            chunk = _read_exactly(conn, wanted)
            if chunk is None:
                log.warning("cannot read the complete data")
                return False
            out.write(chunk)
            out.flush()
            received += wanted
            if received == file_length:
                break
    log.info("file receive success")
    return True


def make_sure_file_exists(path: str) -> bool:
    """Create ``path`` (and its parent directories) unless it exists."""
    if exists(path):
        return True
    parent = get_parent_directory(path)
    if not exists(parent):
        with contextlib.suppress(OSError):
            os.makedirs(parent, exist_ok=True)
    try:
        open(path, "wb").close()
    except OSError:
        return False
    return True


def get_parent_directory(file_path: str) -> str:
    """Return the directory part of ``file_path``."""
    return _go_dir(file_path)


def zip_dir(src: str, target: str) -> None:
    """Pack the contents of directory ``src`` into the zip archive ``target``."""
    src = file_path(src)
    target = file_path(target)
    with contextlib.suppress(OSError):
        _remove_any(target)
    with zipfile.ZipFile(target, "w") as archive:
        for root, dirs, files in os.walk(src):
            dirs.sort()
            root_norm = opt_separator(root)
            if root_norm != src:
                rel = root_norm[len(src) + 1:] if root_norm.startswith(src + "/") else root_norm
                archive.write(root, arcname=rel + "/")
            for name in sorted(files):
                full = opt_separator(os.path.join(root, name))
                if full == target:
                    continue
                rel = full[len(src) + 1:] if full.startswith(src + "/") else full
                archive.write(full, arcname=rel, compress_type=zipfile.ZIP_DEFLATED)


def unzip(src: str, out: str) -> None:
    """Extract the zip archive ``src`` into directory ``out``."""
    out_root = os.path.abspath(out)
    with zipfile.ZipFile(src) as archive:
        for info in archive.infolist():
            dest = opt_separator(os.path.join(out, info.filename))
            resolved = os.path.abspath(dest)
            if os.path.commonpath([out_root, resolved]) != out_root:
                raise ValueError(f"archive entry escapes the target directory: {info.filename}")
            if info.is_dir():
                os.makedirs(dest, exist_ok=True)
                continue
            os.makedirs(_go_dir(dest), exist_ok=True)
            with archive.open(info) as fsrc, open(dest, "wb") as fdst:
                shutil.copyfileobj(fsrc, fdst)


def opt_separator(path: str) -> str:
    """Turn backslashes into forward slashes."""
    return path.replace("\\", "/")


def md5_bytes(data: bytes) -> str:
    """Return the hex MD5 digest of ``data``."""
    return hashlib.md5(data).hexdigest()


def md5_string(text: str) -> str:
    """Return the hex MD5 digest of the UTF-8 encoding of ``text``."""
    return hashlib.md5(text.encode("utf-8")).hexdigest()


def file_path(path: str) -> str:
    """Return the absolute form of ``path`` with forward slashes."""
    return opt_separator(os.path.abspath(path))


def file_name_prefix(path: str) -> str:
    """Return the last path element without its extension."""
    base = _go_base(path)
    suffix = file_name_suffix(path)
    return base[: len(base) - len(suffix)]


def file_name_suffix(path: str) -> str:
    """Return the extension of the last path element, dot included."""
    base = os.path.basename(path)
    index = base.rfind(".")
    return base[index:] if index >= 0 else ""


def dir_create(path: str) -> None:
    """Ensure the parent directory of ``path`` exists unless ``path`` itself does."""
    path = opt_separator(path)
    if exists(path):
        return
    parent = _go_dir(path)
    if not exists(parent):
        os.makedirs(parent, exist_ok=True)


def file_create(path: str) -> Optional[BinaryIO]:
    """Create ``path`` for appending; return None when it already exists."""
    path = opt_separator(path)
    if exists(path):
        return None
    parent = _go_dir(path)
    if not exists(parent):
        os.makedirs(parent, exist_ok=True)
    return open(path, "ab")


def file_recreate(path: str) -> Optional[BinaryIO]:
    """Remove ``path`` if present and create it anew."""
    path = opt_separator(path)
    if exists(path):
        os.remove(path)
    return file_create(path)


def file_joins(*args: str) -> str:
    """Join path elements and return the absolute result."""
    return file_path(os.path.join(*args) if args else "")


def to_file(path: str) -> BinaryIO:
    """Open ``path`` for reading and writing, creating it if needed."""
    fd = os.open(path, os.O_RDWR | os.O_CREAT, 0o777)
    return os.fdopen(fd, "r+b")


def file_suffix_rename(path: str, new_suffix: str) -> str:
    """Return ``path`` with its extension replaced by ``new_suffix``."""
    path = file_path(path)
    return file_path(f"{_go_dir(path)}/{file_name_prefix(path)}{new_suffix}")


def file_stream_copy(target_file: BinaryIO, reader, count: int) -> BinaryIO:
    """Copy ``reader`` into ``target_file`` and check that ``count`` bytes landed."""
    written = _copy(target_file, reader)
    if written != count:
        raise OSError(f"FileStreamCopy: wrote {written} bytes, expected {count}")
    target_file.flush()
    size = os.fstat(target_file.fileno()).st_size
    if size != count:
        raise OSError(f"FileStreamCopy: file size {size}, expected {count}")
    return target_file


def file_copy(src: str, target: str) -> None:
    """Copy file ``src`` over ``target``, creating ``target`` when missing."""
    src = file_path(src)
    target = file_path(target)
    created = file_create(target)
    if created is not None:
        created.close()
    with open(src, "rb") as fsrc, open(target, "r+b") as fdst:
        shutil.copyfileobj(fsrc, fdst)


def file_temp_dir(path: str) -> str:
    """Create a new temporary directory named ``devcom-*`` inside ``path``."""
    return tempfile.mkdtemp(prefix="devcom-", dir=path or None)


def file_delete(path: str) -> None:
    """Delete a file or a whole directory tree; missing paths are ignored."""
    path = file_path(path)
    if not exists(path):
        return
    if file_is_dir(path):
        shutil.rmtree(path)
    else:
        os.remove(path)


def file_is_dir(path: str) -> bool:
    """Tell whether ``path`` is a directory; raise if it cannot be stat'ed."""
    return stat.S_ISDIR(os.stat(path).st_mode)


def file_dir(path: str) -> str:
    """Return the absolute directory part of ``path``."""
    return file_path(_go_dir(path))


def io_copy(dst, src) -> int:
    """Copy everything from ``src`` to ``dst``; close ``src`` if it is an OS file."""
    written = _copy(dst, src)
    if isinstance(src, io.IOBase) and _is_os_file(src):
        src.close()
    return written


def get_bool_env(key: str) -> bool:
    """Tell whether environment variable ``key`` is ``true`` (any case)."""
    return os.environ.get(key, "").lower() == "true"


def get_app_dir() -> str:
    """Return the directory of the running program (``./`` when APP_DEBUG is true)."""
    if get_bool_env("APP_DEBUG"):
        return opt_separator("./")
    program = shutil.which(sys.argv[0]) if sys.argv and sys.argv[0] else None
    return file_dir(program or "")