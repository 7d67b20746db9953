from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List
from datetime import datetime, timezone


# ──────────────────────────────────────────────
# Source records
# ──────────────────────────────────────────────

class ShowRecord(BaseModel):
    """One performance as returned by the GraphQL source."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    title: str = ""
    start_date: datetime = Field(alias="startDate")
    is_canceled: Optional[bool] = Field(default=None, alias="isCanceled")  # null on older records

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, v):
        # Strapi-style backends sometimes hand back numeric ids
        return str(v) if isinstance(v, int) else v

    @field_validator("title", mode="before")
    @classmethod
    def _blank_title(cls, v):
        # untitled drafts come back as null; render them as an empty cell
        return "" if v is None else v

    @field_validator("start_date")
    @classmethod
    def _assume_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @property
    def canceled(self) -> bool:
        return bool(self.is_canceled)


class ShowSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    subject_id: str
    last_updated: datetime
    shows: List[ShowRecord] = []


# ──────────────────────────────────────────────
# Page (view-only, recomputed on every render)
# ──────────────────────────────────────────────

class ShowRow(BaseModel):
    ordinal: int                 # total - index, "횟수" column
    id: str
    title: str
    start_date: datetime
    date_label: str              # e.g. "2022. 3. 5."
    detail_url: str
    is_completed: bool


class PageMeta(BaseModel):
    title: str = "밴드 이디어츠의 공연 기록"
    description: str = "이디어츠는 지금까지 몇번의 공연을 했을까요?"
    band_name: str = "이디어츠"
    image_url: str = "https://live.idiots.band/bg.jpeg"
    background_url: str = "https://live.idiots.band/bg.jpeg"
    twitter_site: str = "winterwolf0412"
