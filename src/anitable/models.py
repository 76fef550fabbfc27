"""Data models for schedule and caption entries."""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import DecodeError
from .format import decode_optional_date, decode_timestamp, encode_optional_date, encode_timestamp


class WireModel(BaseModel):
    """Immutable record populated from the service's short wire keys."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, strict=True)


class AnimeRecord(WireModel):
    """One entry of a schedule table (`list` endpoint)."""

    id: int = Field(alias="i")
    subject: str = Field(alias="s")
    genre: str = Field(alias="g")
    broadcast_time: str = Field(alias="t")
    link: str = Field(alias="l")
    alive: bool = Field(alias="a")
    start_date: Optional[date] = Field(alias="sd")
    end_date: Optional[date] = Field(alias="ed")

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def parse_optional_date(cls, v):
        """Wire dates are 8-digit strings; "00000000" or garbage means no date."""
        if isinstance(v, date):
            return v
        return decode_optional_date(v)

    @field_validator("link", mode="before")
    @classmethod
    def strip_link(cls, v):
        return v.strip() if isinstance(v, str) else v

    @property
    def display_time(self) -> str:
        """Broadcast time as `HH:MM`."""
        if len(self.broadcast_time) != 4:
            return self.broadcast_time
        return f"{self.broadcast_time[:2]}:{self.broadcast_time[2:]}"

    def to_wire(self) -> dict:
        """Serialize back to the service's JSON shape."""
        return {
            "a": self.alive,
            "ed": encode_optional_date(self.end_date),
            "g": self.genre,
            "i": self.id,
            "l": self.link,
            "s": self.subject,
            "sd": encode_optional_date(self.start_date),
            "t": self.broadcast_time,
        }


class CaptionRecord(WireModel):
    """One subtitle release for an anime (`cap` endpoint)."""

    link: str = Field(alias="a")
    updated_at: datetime = Field(alias="d")
    author: str = Field(alias="n")
    episode: str = Field(alias="s")

    @field_validator("updated_at", mode="before")
    @classmethod
    def parse_timestamp(cls, v):
        if isinstance(v, datetime):
            return v
        try:
            return decode_timestamp(v)
        except DecodeError as e:
            # pydantic only collects ValueError into ValidationError
            raise ValueError(str(e)) from e

    def to_wire(self) -> dict:
        return {
            "a": self.link,
            "d": encode_timestamp(self.updated_at),
            "n": self.author,
            "s": self.episode,
        }
