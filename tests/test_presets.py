import pytest

from countdown.core.formatting import format_remaining
from countdown.core.presets import PRESETS, preset_for_label


@pytest.mark.parametrize(
    "millis, expected",
    [
        (0, "00:00"),
        (999, "00:00"),
        (25_000, "00:25"),
        (90_000, "01:30"),
        (300_000, "05:00"),
        (3_599_000, "59:59"),
        (-5_000, "00:00"),
    ],
)
def test_format_remaining(millis, expected) -> None:
    assert format_remaining(millis) == expected


def test_format_wraps_after_an_hour() -> None:
    assert format_remaining(3_600_000) == "00:00"
    assert format_remaining(3_661_000) == "01:01"


def test_preset_catalog() -> None:
    assert [p.seconds for p in PRESETS] == [30, 60, 90, 120, 150, 180, 210, 240, 270, 300]
    assert PRESETS[0].label == "00:30"
    assert PRESETS[-1].label == "05:00"


def test_preset_for_label() -> None:
    assert preset_for_label("01:30").millis == 90_000
    with pytest.raises(KeyError):
        preset_for_label("10:00")
