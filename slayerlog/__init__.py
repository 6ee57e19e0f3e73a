"""Log source specs, timestamp-ordered merging, search patterns, INI settings and a debug log."""

__version__ = "0.1.0"

__all__ = [
    "debug_log",
    "log_batch",
    "log_source",
    "search_pattern",
    "settings_ini",
    "settings_store",
    "timestamp_format_catalog",
]