"""
Indistreet Source
=================
Live history source: https://indistreet.graphcdn.app/graphql
Detail pages:        https://indistreet.com/live/{id}

One GraphQL query per refresh; the service returns the full list for a
musician, already sorted newest first, so no pagination is done here.

`lives` entry fields:
  id          — opaque id, also used in the detail page URL
  title       — display name
  startDate   — ISO 8601 date-time
  isCanceled  — true | false | null  (null on records that were never edited)
"""

import httpx
import logging
import os
from typing import List, Optional

from pydantic import ValidationError

from livecount.sources.base import BaseShowSource, ShowFetchError
from livecount.models.schemas import ShowRecord

logger = logging.getLogger(__name__)

GRAPHQL_URL   = os.getenv("GRAPHQL_URL", "https://indistreet.graphcdn.app/graphql")
SUBJECT_ID    = os.getenv("SUBJECT_ID", "1")
FETCH_TIMEOUT = float(os.getenv("FETCH_TIMEOUT", "15"))

LIVES_QUERY = """
query findLiveByMusicianId {
  lives(where: { musicians: { id: "%s" } }, sort: "startDate:DESC") {
    id
    title
    startDate
    isCanceled
  }
}
"""

HEADERS = {
    "User-Agent":   "Mozilla/5.0 (compatible; livecount/1.0)",
    "Content-Type": "application/json",
    "Accept":       "application/json",
}


class IndistreetSource(BaseShowSource):
    source_id = "indistreet"

    def __init__(
        self,
        subject_id: str = SUBJECT_ID,
        url: str = GRAPHQL_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.subject_id = subject_id
        self.url = url
        self._transport = transport

    @property
    def query(self) -> str:
        return LIVES_QUERY % self.subject_id

    async def fetch_shows(self) -> List[ShowRecord]:
        async with httpx.AsyncClient(timeout=FETCH_TIMEOUT, transport=self._transport) as client:
            resp = await client.post(self.url, json={"query": self.query}, headers=HEADERS)
            resp.raise_for_status()
            try:
                payload = resp.json()
            except ValueError as e:
                raise ShowFetchError(f"Non-JSON response from {self.url}") from e

        return self._parse(payload)

    def _parse(self, payload) -> List[ShowRecord]:
        if not isinstance(payload, dict):
            raise ShowFetchError("GraphQL response is not an object")

        errors = payload.get("errors")
        if errors:
            messages = "; ".join(str(e.get("message", e)) if isinstance(e, dict) else str(e) for e in errors)
            raise ShowFetchError(f"GraphQL errors: {messages}")

        lives = (payload.get("data") or {}).get("lives")
        if not isinstance(lives, list):
            raise ShowFetchError("GraphQL response has no 'lives' list")

        try:
            shows = [ShowRecord.model_validate(entry) for entry in lives]
        except ValidationError as e:
            raise ShowFetchError(f"Malformed live record: {e}") from e

        logger.info(f"[{self.source_id}] Fetched {len(shows)} lives for subject {self.subject_id}.")
        return shows
