"""Descriptions of where log lines come from: local files, folders and SSH paths."""

from __future__ import annotations

import enum
import os
import posixpath
import sys
from collections import Counter
from dataclasses import dataclass
from typing import Iterable

_WHITESPACE = " \t\n\v\f\r"
_SSH_SCHEME = "ssh://"
_REMOTE_FORMAT_ERROR = (
    "Remote source must include a host and absolute path, "
    "for example ssh://user@host/var/log/app.log"
)


class LogSourceKind(enum.Enum):
    LOCAL_FILE = "local_file"
    LOCAL_FOLDER = "local_folder"
    SSH_REMOTE_FILE = "ssh_remote_file"


@dataclass(frozen=True)
class LogSource:
    """A parsed source specification; only the fields of its kind are set."""

    kind: LogSourceKind = LogSourceKind.LOCAL_FILE
    spec: str = ""
    local_path: str = ""
    local_folder_path: str = ""
    ssh_target: str = ""
    remote_path: str = ""


def _trim(text: str) -> str:
    return text.strip(_WHITESPACE)


def parse_log_source(text: str) -> LogSource:
    """Parse a local path or an ``ssh://[user@]host/absolute/path`` spec.

    Raises ValueError for an empty spec or a malformed remote spec.
    """
    spec = _trim(text)
    if not spec:
        raise ValueError("Source path must not be empty")

    if not spec.startswith(_SSH_SCHEME):
        return LogSource(kind=LogSourceKind.LOCAL_FILE, spec=spec, local_path=spec)

    authority_and_path = spec[len(_SSH_SCHEME):]
    ssh_target, slash, rest = authority_and_path.partition("/")
    if not slash:
        raise ValueError(_REMOTE_FORMAT_ERROR)

    remote_path = slash + rest
    if not ssh_target or remote_path == "/":
        raise ValueError(_REMOTE_FORMAT_ERROR)

    return LogSource(
        kind=LogSourceKind.SSH_REMOTE_FILE,
        spec=spec,
        ssh_target=ssh_target,
        remote_path=remote_path,
    )


def make_local_folder_source(text: str) -> LogSource:
    """Build a source for a local folder; raises ValueError if the path is empty."""
    spec = _trim(text)
    if not spec:
        raise ValueError("Folder path must not be empty")
    return LogSource(kind=LogSourceKind.LOCAL_FOLDER, spec=spec, local_folder_path=spec)


def source_display_path(source: LogSource) -> str:
    """The full path or spec shown to the user for ``source``."""
    if source.kind is LogSourceKind.LOCAL_FOLDER:
        return source.local_folder_path
    if source.kind is LogSourceKind.SSH_REMOTE_FILE:
        return source.spec
    return source.local_path


def _folder_basename(path: str) -> str:
    return os.path.basename(os.path.normpath(path)) if path else ""


def source_basename(source: LogSource) -> str:
    """The last path component of ``source``; folders ignore a trailing separator."""
    if source.kind is LogSourceKind.LOCAL_FOLDER:
        return _folder_basename(source.local_folder_path)
    if source.kind is LogSourceKind.SSH_REMOTE_FILE:
        return posixpath.basename(source.remote_path)
    return os.path.basename(source.local_path)


def _normalize_local_path(path: str) -> str:
    normalized = os.path.realpath(path)
    if sys.platform == "win32":
        normalized = os.path.normcase(normalized)
    return normalized


def _normalize_ssh_target(target: str) -> str:
    user_prefix, at_sign, host = target.rpartition("@")
    return user_prefix + at_sign + host.lower()


def _normalize_remote_path(path: str) -> str:
    normalized = posixpath.normpath(path)
    if path.endswith("/") and not normalized.endswith("/"):
        normalized += "/"
    return normalized


def _source_identity(source: LogSource) -> str:
    if source.kind is LogSourceKind.SSH_REMOTE_FILE:
        return (
            _SSH_SCHEME
            + _normalize_ssh_target(source.ssh_target)
            + _normalize_remote_path(source.remote_path)
        )
    if source.kind is LogSourceKind.LOCAL_FOLDER:
        return "folder://" + _normalize_local_path(source.local_folder_path)
    return _normalize_local_path(source.local_path)


def same_source(lhs: LogSource, rhs: LogSource) -> bool:
    """True if both sources refer to the same file, folder or remote path."""
    return _source_identity(lhs) == _source_identity(rhs)


def build_source_labels(sources: Iterable[LogSource]) -> list[str]:
    """Short labels: the basename when unique, otherwise the full display path."""
    source_list = list(sources)
    basenames = [source_basename(source) for source in source_list]
    counts = Counter(basenames)
    return [
        basename if basename and counts[basename] == 1 else source_display_path(source)
        for source, basename in zip(source_list, basenames)
    ]