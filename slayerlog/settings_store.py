"""Loading and saving the user's settings file."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Iterable

from .settings_ini import SettingsError, SettingsIni

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def _env_value(name: str) -> str:
    return os.environ.get(name) or ""


def _fallback_settings_file_path() -> Path:
    try:
        return Path.cwd() / "slayerlog_settings.ini"
    except OSError:
        return Path("slayerlog_settings.ini")


def default_settings_file_path() -> Path:
    """The platform-specific location of the settings file."""
    if sys.platform == "win32":
        for variable in ("LOCALAPPDATA", "APPDATA"):
            base = _env_value(variable)
            if base:
                return Path(base) / "slayerlog" / "settings.ini"
    elif sys.platform == "darwin":
        home = _env_value("HOME")
        if home:
            return Path(home) / "Library" / "Application Support" / "slayerlog" / "settings.ini"
    else:
        xdg_config_home = _env_value("XDG_CONFIG_HOME")
        if xdg_config_home:
            return Path(xdg_config_home) / "slayerlog" / "settings.ini"
        home = _env_value("HOME")
        if home:
            return Path(home) / ".config" / "slayerlog" / "settings.ini"

    return _fallback_settings_file_path()


class SettingsStore:
    """A settings INI bound to a file on disk."""

    def __init__(self, file_path: str | os.PathLike[str]) -> None:
        self._file_path = Path(file_path)
        self._ini = SettingsIni()

    @property
    def file_path(self) -> Path:
        return self._file_path

    @property
    def ini(self) -> SettingsIni:
        return self._ini

    def load(self) -> None:
        """Read the file if it exists; a missing file leaves the settings empty.

        Raises SettingsError if the file cannot be read or parsed.
        """
        if not self._file_path.exists():
            return
        try:
            data = self._file_path.read_bytes()
        except OSError as error:
            raise SettingsError(
                f"Failed to open settings file for reading: {self._file_path}"
            ) from error
        self._ini.parse(data.decode(_ENCODING, _ERRORS))

    def save(self) -> None:
        """Write the settings through a temporary file; raises SettingsError."""
        parent = self._file_path.parent
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError as error:
            raise SettingsError(f"Failed to create settings directory: {parent}") from error

        temporary_path = Path(f"{self._file_path}.tmp")
        try:
            with open(temporary_path, "wb") as output:
                output.write(self._ini.serialize().encode(_ENCODING, _ERRORS))
        except OSError as error:
            temporary_path.unlink(missing_ok=True)
            raise SettingsError(f"Failed to write settings file: {temporary_path}") from error

        try:
            os.replace(temporary_path, self._file_path)
        except OSError as error:
            temporary_path.unlink(missing_ok=True)
            raise SettingsError(f"Failed to finalize settings file: {self._file_path}") from error

    def ensure_default_values(self, section: str, key: str, values: Iterable[str]) -> bool:
        """Store ``values`` under ``key`` and save, unless the key already has values.

        Returns True when the defaults were written.
        """
        if self._ini.values(section, key):
            return False
        self._ini.set_values(section, key, values)
        self.save()
        return True