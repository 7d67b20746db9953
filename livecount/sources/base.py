from abc import ABC, abstractmethod
from typing import List
from livecount.models.schemas import ShowRecord


class ShowFetchError(Exception):
    """The source answered, but not with a usable list of shows."""


class BaseShowSource(ABC):
    """
    Abstract base class for show-history sources.
    Add a new source by creating a file in livecount/sources/ and extending this class.
    """
    source_id: str
    subject_id: str

    @abstractmethod
    async def fetch_shows(self) -> List[ShowRecord]:
        """Every record for the subject, newest first, cancelled ones included."""
        ...
