"""Merging log entries from several sources into one time-ordered stream."""

from __future__ import annotations

import copy
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, Iterator, Optional, Protocol, Sequence, TypeVar


class _Metadata(Protocol):
    timestamp: Optional[datetime]
    source_index: int
    source_label: str


class _Entry(Protocol):
    metadata: Any


EntryT = TypeVar("EntryT", bound=_Entry)


@dataclass
class LogBatchSourceRange:
    """The tail of one source's entries, starting at ``first_entry_index``.

    Unless ``preserve_source_metadata`` is set, merged copies are relabelled
    with ``source_index`` and ``source_label``.
    """

    entries: Optional[Sequence[Any]] = None
    first_entry_index: int = 0
    source_index: int = 0
    source_label: str = ""
    preserve_source_metadata: bool = False


def _merge_streams(streams: Sequence[deque]) -> Iterator[tuple[int, Any]]:
    """Yield ``(stream_index, entry)`` in merged order.

    Entries without a timestamp are emitted as soon as they reach the head of
    their stream; otherwise the stream with the earliest head timestamp wins,
    ties going to the lower stream index.
    """
    while True:
        for index, stream in enumerate(streams):
            while stream and stream[0].metadata.timestamp is None:
                yield index, stream.popleft()

        best_index: Optional[int] = None
        best_timestamp = None
        for index, stream in enumerate(streams):
            if not stream:
                continue
            timestamp = stream[0].metadata.timestamp
            if best_index is None or timestamp < best_timestamp:
                best_index = index
                best_timestamp = timestamp

        if best_index is None:
            return
        yield best_index, streams[best_index].popleft()


def merge_log_batch(batch: Iterable[EntryT]) -> list[EntryT]:
    """Merge entries tagged with ``metadata.source_index`` into time order.

    The order within each source is kept; the entries themselves are not copied.
    """
    entries = list(batch)
    if not entries:
        return []

    highest_source_index = max(entry.metadata.source_index for entry in entries)
    streams: list[deque] = [deque() for _ in range(highest_source_index + 1)]
    for entry in entries:
        streams[entry.metadata.source_index].append(entry)

    return [entry for _, entry in _merge_streams(streams)]


def _clone_for_range(entry: Any, source_range: LogBatchSourceRange) -> Any:
    cloned = copy.copy(entry)
    cloned.metadata = copy.copy(entry.metadata)
    if not source_range.preserve_source_metadata:
        cloned.metadata.source_index = source_range.source_index
        cloned.metadata.source_label = source_range.source_label
    return cloned


def merge_source_ranges(source_ranges: Iterable[LogBatchSourceRange]) -> list[Any]:
    """Merge the given ranges into time order, returning copies of the entries.

    Ranges without entries, or starting past their end, are skipped.
    """
    active: list[LogBatchSourceRange] = []
    streams: list[deque] = []
    for source_range in source_ranges:
        entries = source_range.entries
        if entries is None or source_range.first_entry_index >= len(entries):
            continue
        active.append(source_range)
        streams.append(deque(entries[source_range.first_entry_index:]))

    return [
        _clone_for_range(entry, active[index]) for index, entry in _merge_streams(streams)
    ]