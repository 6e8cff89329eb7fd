"""Blog post page: breadcrumb and theme switch, article, footer.

:class:`ContentPage` is a pure function of its metadata and content source:
rendering twice with the same inputs yields the same document.
"""

import logging
from datetime import date
from typing import Mapping, Optional

from app.models.page import PageMetadata
from app.models.theme import DEFAULT_THEME, Theme
from app.services import components as ui
from app.services.content import DEFAULT_COMPONENTS, Component, ContentSource

logger = logging.getLogger(__name__)


def format_long_date(value: date) -> str:
    """Return *value* as e.g. ``"January 31, 2025"``."""
    return f"{value:%B} {value.day}, {value.year}"


def format_byline(published_date: date, reading_time_minutes: int) -> str:
    return f"{format_long_date(published_date)} | {reading_time_minutes} min read"


class ContentPage:
    def __init__(
        self,
        metadata: PageMetadata,
        source: ContentSource,
        components: Optional[Mapping[str, Component]] = None,
    ) -> None:
        self.metadata = metadata
        self.source = source
        self.components = DEFAULT_COMPONENTS if components is None else components

    @property
    def byline(self) -> str:
        return format_byline(self.metadata.published_date, self.metadata.reading_time_minutes)

    @property
    def parent_href(self) -> Optional[str]:
        """Link of the breadcrumb entry just above the current page, if any."""
        trail = self.metadata.breadcrumb_trail
        return trail[-2].href if len(trail) > 1 else None

    def render(self, theme: Theme = DEFAULT_THEME, path: str = "/") -> str:
        """Render the full HTML document; *path* is where the theme switch returns to."""
        meta = self.metadata
        logger.debug("Rendering page %r", meta.title, extra={"theme": theme, "path": path})

        header = ui.header_row(
            ui.navigation_trail(meta.breadcrumb_trail),
            ui.theme_switch(theme, next_path=path),
        )
        body = ui.article(
            heading=ui.text_heading(meta.title, level=1),
            byline=ui.text(self.byline, variant="muted", size="xs", extra_class="mb-8"),
            content=self.source.render(self.components),
        )
        frame = ui.page_frame(ui.stack([header, body], gap="md"), size="md", padding_x="md", padding_y="lg")
        footer = ui.page_footer(meta.parent_section_name, parent_href=self.parent_href)

        return ui.document(meta.title, frame + footer, theme)
