"""A small INI document model that keeps repeated keys and ordering."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

_WHITESPACE = " \t\n\v\f\r"


class SettingsError(ValueError):
    """Raised when settings cannot be parsed, read or written."""


@dataclass
class IniKeyValue:
    key: str
    value: str


@dataclass
class IniSection:
    name: str = ""
    entries: list[IniKeyValue] = field(default_factory=list)


def _trim(text: str) -> str:
    return text.strip(_WHITESPACE)


class SettingsIni:
    """INI contents with ordered sections and repeatable keys."""

    def __init__(self) -> None:
        self._sections: list[IniSection] = []

    @property
    def sections(self) -> tuple[IniSection, ...]:
        return tuple(self._sections)

    def parse(self, text: str) -> None:
        """Replace the contents with ``text``; raises SettingsError if malformed."""
        self._sections = []
        current: IniSection | None = None

        for line_number, raw_line in enumerate(text.split("\n"), start=1):
            line = raw_line[:-1] if raw_line.endswith("\r") else raw_line
            parsed = _trim(line)
            if not parsed or parsed[0] in ";#":
                continue

            if parsed[0] == "[":
                if len(parsed) < 2 or parsed[-1] != "]":
                    self._fail(f"Invalid section header at line {line_number}")
                section_name = _trim(parsed[1:-1])
                if not section_name:
                    self._fail(f"Empty section name at line {line_number}")
                current = self._find_section(section_name)
                if current is None:
                    current = IniSection(section_name)
                    self._sections.append(current)
                continue

            key, separator, value = parsed.partition("=")
            if not separator:
                self._fail(f"Invalid key-value entry at line {line_number}")
            key = _trim(key)
            if not key:
                self._fail(f"Empty key at line {line_number}")

            if current is None:
                current = IniSection()
                self._sections.append(current)
            current.entries.append(IniKeyValue(key, _trim(value)))

    def serialize(self) -> str:
        """Render the contents back to INI text."""
        blocks = []
        for section in self._sections:
            lines = []
            if section.name:
                lines.append(f"[{section.name}]\n")
            lines.extend(f"{entry.key}={entry.value}\n" for entry in section.entries)
            blocks.append("".join(lines))
        return "\n".join(blocks)

    def values(self, section: str, key: str) -> list[str]:
        """All values stored under ``key`` in ``section``, in order."""
        found = self._find_section(section)
        if found is None:
            return []
        return [entry.value for entry in found.entries if entry.key == key]

    def set_values(self, section: str, key: str, values: Iterable[str]) -> None:
        """Replace every ``key`` entry in ``section`` with ``values``."""
        target = self._find_section(section)
        if target is None:
            target = IniSection(section)
            self._sections.append(target)
        target.entries = [entry for entry in target.entries if entry.key != key]
        target.entries.extend(IniKeyValue(key, value) for value in values)

    def _find_section(self, name: str) -> IniSection | None:
        return next((section for section in self._sections if section.name == name), None)

    def _fail(self, message: str) -> None:
        self._sections = []
        raise SettingsError(message)