"""Unit tests for data models."""

from datetime import date, datetime, timezone

import pytest
from pydantic import ValidationError

from anitable.constants import DaySelector
from anitable.models import AnimeRecord, CaptionRecord

ANIME_WIRE = {
    "i": 4469,
    "s": "소드 아트 온라인 앨리시제이션 War of Underworld",
    "t": "0000",
    "g": "판타지 / 액션",
    "l": "https://sao-alicization.net    ",
    "a": True,
    "sd": "20191013",
    "ed": "00000000",
}


def test_anime_record_from_wire():
    """Test creating an anime record from wire keys."""
    anime = AnimeRecord.model_validate(ANIME_WIRE)

    assert anime.id == 4469
    assert anime.subject == "소드 아트 온라인 앨리시제이션 War of Underworld"
    assert anime.genre == "판타지 / 액션"
    assert anime.broadcast_time == "0000"
    assert anime.link == "https://sao-alicization.net"
    assert anime.alive is True
    assert anime.start_date == date(2019, 10, 13)
    assert anime.end_date is None


def test_anime_record_bad_date_is_none():
    """Test structurally invalid dates decode to None."""
    anime = AnimeRecord.model_validate({**ANIME_WIRE, "sd": "20191399"})
    assert anime.start_date is None


def test_anime_record_display_time():
    """Test HHMM is shown as HH:MM."""
    anime = AnimeRecord.model_validate({**ANIME_WIRE, "t": "2330"})
    assert anime.display_time == "23:30"


def test_anime_record_to_wire():
    """Test serializing back to the wire shape."""
    anime = AnimeRecord.model_validate(ANIME_WIRE)
    wire = anime.to_wire()

    assert wire["sd"] == "20191013"
    assert wire["ed"] == "00000000"
    assert wire["l"] == "https://sao-alicization.net"
    assert AnimeRecord.model_validate(wire) == anime


def test_anime_record_is_immutable():
    """Test records are frozen."""
    anime = AnimeRecord.model_validate(ANIME_WIRE)
    with pytest.raises(ValidationError):
        anime.subject = "changed"


def test_anime_record_missing_field():
    """Test a missing required key is a validation error."""
    wire = dict(ANIME_WIRE)
    del wire["i"]
    with pytest.raises(ValidationError):
        AnimeRecord.model_validate(wire)


def test_caption_record_from_wire():
    """Test creating a caption record."""
    caption = CaptionRecord.model_validate({"a": "http://x", "d": "20200101120000", "n": "author1", "s": "ep1"})

    assert caption.link == "http://x"
    assert caption.updated_at == datetime(2020, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
    assert caption.author == "author1"
    assert caption.episode == "ep1"
    assert caption.to_wire()["d"] == "20200101120000"


def test_caption_record_bad_timestamp():
    """Test an invalid timestamp fails validation."""
    with pytest.raises(ValidationError):
        CaptionRecord.model_validate({"a": "http://x", "d": "00000000000000", "n": "author1", "s": "ep1"})


def test_day_selector_codes():
    """Test the stable integer encoding."""
    assert [day.code for day in DaySelector] == list(range(9))
    assert DaySelector.SUNDAY.code == 0
    assert DaySelector.SATURDAY.code == 6
    assert DaySelector.ETC.code == 7
    assert DaySelector.NEW.code == 8
    assert DaySelector.from_code(3) is DaySelector.WEDNESDAY

    with pytest.raises(ValueError):
        DaySelector.from_code(9)


def test_day_selector_today():
    """Test the weekday mapping starts from Sunday."""
    assert DaySelector.today(date(2019, 10, 13)) is DaySelector.SUNDAY  # a Sunday
    assert DaySelector.today(date(2019, 10, 14)) is DaySelector.MONDAY
    assert DaySelector.today(date(2019, 10, 19)) is DaySelector.SATURDAY


def test_anime_record_missing_date_key():
    """Test date keys are required even though their values may be empty."""
    wire = dict(ANIME_WIRE)
    del wire["sd"]
    with pytest.raises(ValidationError):
        AnimeRecord.model_validate(wire)
