import pytest

from slayerlog.timestamp_format_catalog import (
    TimestampFormatCatalog,
    default_timestamp_format_catalog,
    default_timestamp_formats,
    set_default_timestamp_format_catalog,
)


@pytest.fixture(autouse=True)
def restore_default_catalog():
    yield
    set_default_timestamp_format_catalog(None)


def test_default_formats_start_and_end_with_source_order():
    formats = default_timestamp_formats()
    assert formats[0] == "YYYY-MM-DDThh:mm:ss.ffffffZZZ"
    assert formats[6] == "YYYY-MM-DDThh:mm:ss"
    assert formats[8] == "YYYY-MM-DD hh:mm:ss"
    assert formats[-1] == "YYYYMMDDThhmmssZZ"
    assert "DD/MMM/YYYY:hh:mm:ss ZZ" in formats
    assert len(formats) == 17
    assert len(set(formats)) == len(formats)


def test_default_formats_returns_fresh_list():
    first = default_timestamp_formats()
    expected = list(first)
    first.clear()
    second = default_timestamp_formats()
    assert second == expected
    assert len(second) == 17


def test_catalog_keeps_given_order():
    catalog = TimestampFormatCatalog(["YYYY/MM/DD hh:mm:ss", "MMM DD hh:mm:ss"])
    assert list(catalog.formats) == ["YYYY/MM/DD hh:mm:ss", "MMM DD hh:mm:ss"]
    assert list(catalog) == list(catalog.formats)
    assert len(catalog) == 2


def test_catalog_drops_empty_formats():
    catalog = TimestampFormatCatalog(["", "YYYY-MM-DD hh:mm:ss", ""])
    assert list(catalog.formats) == ["YYYY-MM-DD hh:mm:ss"]


@pytest.mark.parametrize("formats", [[], ["", ""]])
def test_catalog_falls_back_to_defaults(formats):
    catalog = TimestampFormatCatalog(formats)
    assert list(catalog.formats) == default_timestamp_formats()


def test_default_catalog_uses_default_formats():
    assert list(default_timestamp_format_catalog().formats) == default_timestamp_formats()


def test_set_default_catalog_replaces_and_resets():
    custom = TimestampFormatCatalog(["YYYY/MM/DD hh:mm:ss"])
    set_default_timestamp_format_catalog(custom)
    assert default_timestamp_format_catalog() is custom

    set_default_timestamp_format_catalog(None)
    assert default_timestamp_format_catalog() == TimestampFormatCatalog(default_timestamp_formats())