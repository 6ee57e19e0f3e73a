"""The list of timestamp formats tried when detecting line timestamps."""

from __future__ import annotations

import threading
from typing import Iterable, Iterator

_ISO = "YYYY-MM-DDThh:mm:ss"
_SPACED = "YYYY-MM-DD hh:mm:ss"
_COMPACT = "YYYYMMDDThhmmss"

_DEFAULT_FORMATS = (
    # ISO 8601 with a "T" separator, most specific first.
    f"{_ISO}.ffffffZZZ",
    f"{_ISO}ZZZ",
    f"{_ISO}ZZ",
    f"{_ISO}Z",
    f"{_ISO}.f",
    f"{_ISO}.fff",
    _ISO,
    f"[{_ISO}]",
    # Date and time separated by a space.
    _SPACED,
    f"[{_SPACED}]",
    f"{_SPACED}.fff",
    f"{_SPACED},fff",
    # Month names: syslog, access logs and similar.
    "DD-MMM-YYYY hh:mm:ss",
    "MMM DD hh:mm:ss",
    "DD/MMM/YYYY:hh:mm:ss ZZ",
    # Basic ISO 8601 without separators.
    f"{_COMPACT}Z",
    f"{_COMPACT}ZZ",
)


def default_timestamp_formats() -> list[str]:
    """The built-in formats, in the order they are tried."""
    return list(_DEFAULT_FORMATS)


class TimestampFormatCatalog:
    """An ordered, immutable set of timestamp format strings.

    Empty format strings are dropped; if nothing remains the defaults are used.
    """

    def __init__(self, formats: Iterable[str]) -> None:
        kept = tuple(fmt for fmt in formats if fmt)
        self._formats = kept or _DEFAULT_FORMATS

    @property
    def formats(self) -> tuple[str, ...]:
        return self._formats

    def __iter__(self) -> Iterator[str]:
        return iter(self._formats)

    def __len__(self) -> int:
        return len(self._formats)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimestampFormatCatalog):
            return NotImplemented
        return self._formats == other._formats

    def __hash__(self) -> int:
        return hash(self._formats)

    def __repr__(self) -> str:
        return f"TimestampFormatCatalog({list(self._formats)!r})"


class _DefaultCatalogHolder:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._catalog = TimestampFormatCatalog(_DEFAULT_FORMATS)

    def get(self) -> TimestampFormatCatalog:
        with self._lock:
            return self._catalog

    def set(self, catalog: TimestampFormatCatalog) -> None:
        with self._lock:
            self._catalog = catalog


_default_holder = _DefaultCatalogHolder()


def default_timestamp_format_catalog() -> TimestampFormatCatalog:
    """The process-wide catalog used when none is given explicitly."""
    return _default_holder.get()


def set_default_timestamp_format_catalog(catalog: TimestampFormatCatalog | None) -> None:
    """Replace the process-wide catalog; ``None`` restores the defaults."""
    if catalog is None:
        catalog = TimestampFormatCatalog(_DEFAULT_FORMATS)
    _default_holder.set(catalog)