# slayerlog

The core pieces of a log viewer that follows several log sources at once
and shows them as one time-ordered stream: describing sources, merging
their entries by timestamp, searching lines, and keeping user settings in
an INI file.

## Modules

- `slayerlog.log_source`: `parse_log_source` turns a spec into a frozen
  `LogSource`. A plain path is a local file (`LogSourceKind.LOCAL_FILE`),
  and `ssh://[user@]host/absolute/path` is a remote file
  (`LogSourceKind.SSH_REMOTE_FILE`). `make_local_folder_source` describes a
  folder (`LogSourceKind.LOCAL_FOLDER`). Empty or malformed specs raise
  `ValueError`. `source_display_path` and `source_basename` give the full
  and short names. `same_source` tells whether two specs name the same log:
  local paths are resolved, remote hosts compared case-insensitively and
  remote paths normalized. `build_source_labels` uses each source's
  basename when it is unique and the full display path when basenames
  collide.
- `slayerlog.log_batch`: merge entries from several sources into one list
  ordered by `metadata.timestamp`. Entries without a timestamp are emitted
  as soon as they reach the front of their source, so they stay right
  after the entries that preceded them there; on equal timestamps the
  lower source wins. `merge_log_batch` takes a flat batch grouped by
  `metadata.source_index` and returns the same entry objects.
  `merge_source_ranges` takes `LogBatchSourceRange` slices and returns
  copies, relabelled with the range's `source_index` and `source_label`
  unless `preserve_source_metadata` is set.
- `slayerlog.search_pattern`: `compile_search_pattern` turns text into a
  `SearchPattern`. Text is trimmed and matched as a plain substring; text
  starting with `re:` is compiled as a regular expression. Empty text or an
  invalid regex raises `ValueError`. `matches_pattern` and
  `matches_any_pattern` test a line; `trim_search_text` strips whitespace.
- `slayerlog.settings_ini`: `SettingsIni` reads (`parse`) and writes
  (`serialize`) INI text, keeping sections in order and repeated keys as
  separate `IniKeyValue` entries. `values` returns every value of a key;
  `set_values` replaces them. Malformed input raises `SettingsError` and
  leaves the document empty.
- `slayerlog.settings_store`: `SettingsStore` binds a `SettingsIni` to a
  file. `load` leaves the settings empty when the file does not exist;
  `save` writes through a `.tmp` file and an atomic replace;
  `ensure_default_values` stores and saves values only when the key has
  none, returning `True` when it wrote them. Failures raise `SettingsError`.
  `default_settings_file_path` gives the per-user location
  (`XDG_CONFIG_HOME` or `~/.config` on Linux, `~/Library/Application Support`
  on macOS, `LOCALAPPDATA`/`APPDATA` on Windows, else the current directory).
- `slayerlog.timestamp_format_catalog`: `TimestampFormatCatalog` is an
  immutable, ordered list of timestamp format strings such as
  `YYYY-MM-DDThh:mm:ss`; empty strings are dropped and an empty list falls
  back to `default_timestamp_formats()`. `default_timestamp_format_catalog`
  and `set_default_timestamp_format_catalog` get and replace the
  process-wide catalog (`None` restores the defaults).
- `slayerlog.debug_log`: the program's own diagnostic log. `initialize`
  works out `RuntimePaths` once per process from the program's directory.
  If a `logging.ini` there has a `[logger]` section (with `level`, a
  `Severity` name, and `format`, a logging format string), messages go to
  `slayerlog_debug.log` in that directory; otherwise a basic console
  configuration is used. `write(severity, message)` logs a message.

## Example

```python
from slayerlog.log_source import parse_log_source, build_source_labels
from slayerlog.search_pattern import compile_search_pattern, matches_pattern

sources = [
    parse_log_source("first/app.log"),
    parse_log_source("ssh://user@example.com/var/log/app.log"),
]
print(build_source_labels(sources))
# ['first/app.log', 'ssh://user@example.com/var/log/app.log']

pattern = compile_search_pattern(r"re:id=\d+")
print(matches_pattern("request id=12", pattern))  # True
```

Store repeated values in a settings file:

```python
from slayerlog.settings_store import SettingsStore
from slayerlog.timestamp_format_catalog import default_timestamp_formats

store = SettingsStore("settings.ini")
store.load()
store.ensure_default_values("timestamp_formats", "format", default_timestamp_formats())
print(store.ini.values("timestamp_formats", "format")[0])
# YYYY-MM-DDThh:mm:ss.ffffffZZZ
```

## What the package does not do

There is no viewer: no terminal screen, no command palette, no command
history and no command-line program. The package does not open, read,
tail or watch log files, folders or remote hosts; `LogSource` only
describes them. It does not detect or parse timestamps in log lines either:
`TimestampFormatCatalog` holds the format strings, and the merging
functions expect entries whose `metadata.timestamp` is already set.

## Running the tests

```
pip install -e ".[test]"
pytest
```