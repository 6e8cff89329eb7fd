from datetime import date
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class BreadcrumbEntry(BaseModel):
    """One step of the navigational path from the site root to a page."""

    model_config = ConfigDict(frozen=True)

    label: str
    href: Optional[str] = None
    icon: Optional[str] = None  # glyph shown before the label, e.g. an emoji

    @field_validator("label")
    @classmethod
    def _label_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Breadcrumb label must not be empty.")
        return value


class PageMetadata(BaseModel):
    """Static, build-time metadata of a single content page."""

    model_config = ConfigDict(frozen=True)

    title: str
    published_date: date
    reading_time_minutes: int = Field(gt=0, description="Display-only reading estimate.")
    breadcrumb_trail: Tuple[BreadcrumbEntry, ...] = Field(min_length=1)
    parent_section_name: str

    @field_validator("title", "parent_section_name")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Value must not be empty.")
        return value

    @model_validator(mode="after")
    def _trail_ends_at_current_page(self) -> "PageMetadata":
        *ancestors, current = self.breadcrumb_trail
        if current.href is not None:
            raise ValueError("The last breadcrumb entry is the current page and must not have an href.")
        for entry in ancestors:
            if not entry.href:
                raise ValueError(f"Breadcrumb entry '{entry.label}' must have an href.")
        return self
