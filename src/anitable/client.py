"""Anissia schedule API client."""

import logging
from typing import Optional, Union

import requests
from pydantic import BaseModel, ValidationError

from .base_client import BaseAPIClient
from .constants import CAPTION_PARAM, CAPTION_PATH, DEFAULT_BASE_URL, LIST_PARAM, LIST_PATH, DaySelector
from .errors import DecodeError
from .models import AnimeRecord, CaptionRecord

logger = logging.getLogger(__name__)

SERVICE_NAME = "Anissia"


class AnitableClient(BaseAPIClient):
    """Client for the Anissia anime broadcast schedule.

    Example::

        with AnitableClient() as client:
            animes = client.fetch_schedule(DaySelector.SUNDAY)
            captions = client.fetch_captions(animes[0].id)
    """

    BASE_URL = DEFAULT_BASE_URL

    def __init__(self, base_url: Optional[str] = None, session: Optional[requests.Session] = None):
        """Initialize client; `base_url` overrides the production address (e.g. for tests)."""
        super().__init__(base_url=base_url or self.BASE_URL, session=session)

    def fetch_schedule(self, day: Union[DaySelector, int]) -> list[AnimeRecord]:
        """Fetch the schedule table for a weekday or special category."""
        if not isinstance(day, DaySelector):
            day = DaySelector.from_code(day)

        data = self._post_form(LIST_PATH, {LIST_PARAM: day.code}, SERVICE_NAME)
        animes = self._decode_list(data, AnimeRecord)

        logger.info(f"Fetched {len(animes)} anime entries for {day.name.lower()}")
        return animes

    def fetch_captions(self, anime_id: int) -> list[CaptionRecord]:
        """Fetch subtitle releases for an anime id."""
        data = self._post_form(CAPTION_PATH, {CAPTION_PARAM: anime_id}, SERVICE_NAME)
        captions = self._decode_list(data, CaptionRecord)

        logger.info(f"Fetched {len(captions)} captions for anime {anime_id}")
        return captions

    def fetch_captions_for(self, anime: AnimeRecord) -> list[CaptionRecord]:
        """Fetch subtitle releases for a schedule entry."""
        return self.fetch_captions(anime.id)

    def _decode_list(self, data, model: type[BaseModel]) -> list:
        """Decode a JSON array into records; any bad item fails the whole list."""
        if not isinstance(data, list):
            raise DecodeError(f"Expected a JSON array, got {type(data).__name__}")

        records = []
        for index, item in enumerate(data):
            try:
                records.append(model.model_validate(item))
            except ValidationError as e:
                logger.error(f"Invalid {model.__name__} at index {index}: {e}")
                raise DecodeError(f"Invalid {model.__name__} at index {index}: {e}") from e
        return records
