import pytest

from fundboard.data.sanitize import sanitize_amount, split_urls


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("LKR 1,500.00", 1500),
        ("Rs. 2000", 2000),
        ("rs 750", 750),
        ("", 0),
        (None, 0),
        ("abc", 0),
        ("  =500 ", 500),
        ("1,234,567", 1234567),
        ("99.5", 100),
        ("12.49", 12),
        ("lkr2500/=", 2500),
        ("1.2.3", 1),
        ("-300", 300),
    ],
)
def test_sanitize_amount(raw, expected) -> None:
    assert sanitize_amount(raw) == expected


def test_sanitize_amount_never_negative_or_raising() -> None:
    for raw in ["-", ".", "...", "NaN", "Infinity", "LKR", "Rs.", "= ,"]:
        assert sanitize_amount(raw) == 0


def test_split_urls() -> None:
    assert split_urls("https://a, https://b ,,") == ["https://a", "https://b"]
    assert split_urls("") == []
    assert split_urls(None) == []
