"""
Source registry — the one show source the page is built from.

To point the page at another backend:
  1. Create livecount/sources/yoursource.py extending BaseShowSource
  2. Import it here and assign it to SOURCE
"""

from livecount.sources.base import BaseShowSource, ShowFetchError
from livecount.sources.indistreet import IndistreetSource

SOURCE: BaseShowSource = IndistreetSource()


def get_source() -> BaseShowSource:
    return SOURCE


__all__ = ["BaseShowSource", "ShowFetchError", "IndistreetSource", "SOURCE", "get_source"]
