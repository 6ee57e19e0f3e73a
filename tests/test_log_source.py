import pytest

from slayerlog.log_source import (
    LogSource,
    LogSourceKind,
    build_source_labels,
    make_local_folder_source,
    parse_log_source,
    same_source,
    source_basename,
    source_display_path,
)


def test_parses_local_path_as_local_file():
    source = parse_log_source("logs/app.log")

    assert source.kind is LogSourceKind.LOCAL_FILE
    assert source.local_path == "logs/app.log"
    assert source_display_path(source) == "logs/app.log"
    assert source_basename(source) == "app.log"


def test_parses_ssh_source():
    source = parse_log_source("ssh://user@example.com/var/log/app.log")

    assert source.kind is LogSourceKind.SSH_REMOTE_FILE
    assert source.ssh_target == "user@example.com"
    assert source.remote_path == "/var/log/app.log"
    assert source_display_path(source) == "ssh://user@example.com/var/log/app.log"
    assert source_basename(source) == "app.log"


def test_builds_local_folder_source():
    source = make_local_folder_source("logs/archive/")

    assert source.kind is LogSourceKind.LOCAL_FOLDER
    assert source.local_folder_path == "logs/archive/"
    assert source_display_path(source) == "logs/archive/"
    assert source_basename(source) == "archive"


@pytest.mark.parametrize("spec", ["ssh://example.com", "ssh://example.com/"])
def test_rejects_remote_source_without_absolute_path(spec):
    with pytest.raises(ValueError):
        parse_log_source(spec)


def test_rejects_remote_source_without_host():
    with pytest.raises(ValueError):
        parse_log_source("ssh:///var/log/app.log")


@pytest.mark.parametrize("spec", ["", "   \t\n"])
def test_rejects_empty_source(spec):
    with pytest.raises(ValueError):
        parse_log_source(spec)


@pytest.mark.parametrize("spec", ["", "  "])
def test_rejects_empty_folder(spec):
    with pytest.raises(ValueError):
        make_local_folder_source(spec)


def test_trims_surrounding_whitespace():
    source = parse_log_source("  logs/app.log \n")
    assert source == LogSource(
        kind=LogSourceKind.LOCAL_FILE, spec="logs/app.log", local_path="logs/app.log"
    )


def test_matches_equivalent_remote_sources():
    left = parse_log_source("ssh://user@EXAMPLE.com/var/log/../log/app.log")
    right = parse_log_source("ssh://user@example.com/var/log/app.log")

    assert same_source(left, right)


def test_remote_user_is_case_sensitive():
    left = parse_log_source("ssh://User@example.com/var/log/app.log")
    right = parse_log_source("ssh://user@example.com/var/log/app.log")

    assert not same_source(left, right)


def test_matches_equivalent_folder_sources():
    left = make_local_folder_source("logs/archive/../archive")
    right = make_local_folder_source("logs/archive")

    assert same_source(left, right)


def test_local_file_and_folder_with_same_path_differ():
    assert not same_source(parse_log_source("logs/archive"), make_local_folder_source("logs/archive"))


def test_matches_equivalent_local_files():
    assert same_source(parse_log_source("logs/./app.log"), parse_log_source("logs/app.log"))


def test_uses_full_source_when_basename_collides():
    sources = [
        parse_log_source("first/app.log"),
        parse_log_source("ssh://user@example.com/var/log/app.log"),
    ]

    labels = build_source_labels(sources)
    assert labels == ["first/app.log", "ssh://user@example.com/var/log/app.log"]


def test_uses_full_source_when_folder_basename_collides():
    sources = [
        make_local_folder_source("first/archive"),
        make_local_folder_source("second/archive"),
    ]

    labels = build_source_labels(sources)
    assert labels == ["first/archive", "second/archive"]


def test_uses_basename_when_unique():
    sources = [parse_log_source("first/alpha.log"), parse_log_source("second/beta.log")]

    assert build_source_labels(sources) == ["alpha.log", "beta.log"]