"""Unit tests for ticker symbol normalization."""

import pytest

from returns_app.core.symbols import normalize_ticker, to_source_symbol


@pytest.mark.parametrize(
    "ticker,expected",
    [
        ("AAPL", "aapl.us"),
        ("aapl", "aapl.us"),
        ("BRK.B", "brk-b.us"),
        (" brk.b ", "brk-b.us"),
        ("BF.B.X", "bf-b-x.us"),
    ],
)
def test_to_source_symbol(ticker, expected):
    assert to_source_symbol(ticker) == expected


def test_to_source_symbol_custom_suffix():
    assert to_source_symbol("VOD", "uk") == "vod.uk"


def test_normalize_ticker():
    assert normalize_ticker("  msft ") == "MSFT"
    assert normalize_ticker("") == ""
