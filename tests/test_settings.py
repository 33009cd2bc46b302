import logging

import pytest

from isobands.exceptions import InvalidInputError
from isobands.model.settings import BandSettings


def test_defaults():
    settings = BandSettings()
    settings.validate()
    assert (settings.min, settings.max) == (0.0, 1.0)
    assert settings.band_count == 10
    assert settings.increment == pytest.approx(0.1)
    assert settings.normalize is True


@pytest.mark.parametrize("band_count", [0, -3, 2.5, True, "4"])
def test_invalid_band_count(band_count):
    with pytest.raises(InvalidInputError):
        BandSettings(band_count=band_count).validate()


@pytest.mark.parametrize("color", [(0.0, 0.0), (0.0, 0.0, 1.5), (-0.1, 0.0, 0.0)])
def test_invalid_default_color(color):
    with pytest.raises(InvalidInputError):
        BandSettings(default_color=color).validate()


def test_inverted_window_only_warns(caplog):
    with caplog.at_level(logging.WARNING, logger="isobands"):
        BandSettings(min=0.8, max=0.2).validate()
    assert "Scalar window is empty" in caplog.text


def test_with_changes_keeps_the_original():
    settings = BandSettings()
    changed = settings.with_changes(band_count=4, reversed=True)
    assert changed.band_count == 4 and changed.reversed
    assert settings.band_count == 10 and not settings.reversed


def test_dict_round_trip():
    settings = BandSettings(min=0.1, max=0.9, band_count=5, lut_name="Blackbody", default_color=(1.0, 0.0, 1.0))
    data = settings.to_dict()
    data["default_color"] = list(data["default_color"])
    assert BandSettings.from_dict(data) == settings


def test_settings_are_frozen():
    with pytest.raises(AttributeError):
        BandSettings().band_count = 3


@pytest.mark.parametrize("vmin, vmax, band_count, increment", [
    (0.0, 1.0, 4, 0.25),
    (0.2, 0.6, 4, 0.1),
    (0.5, 0.5, 3, 0.0),
])
def test_increment_splits_the_window(vmin, vmax, band_count, increment):
    assert BandSettings(min=vmin, max=vmax, band_count=band_count).increment == pytest.approx(increment)


def test_zero_width_window_warns(caplog):
    with caplog.at_level(logging.WARNING, logger="isobands"):
        BandSettings(min=0.4, max=0.4).validate()
    assert "Scalar window is empty" in caplog.text
