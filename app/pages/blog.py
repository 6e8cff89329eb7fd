"""Blog posts published on the site."""

from datetime import date

from app.models.page import BreadcrumbEntry, PageMetadata
from app.services.content import ContentSource
from app.services.page import ContentPage

BLOG_HREF = "/blog"
BLOG_POSTS_PATH = "/blog/posts"

_HOME = BreadcrumbEntry(label="Home", href="/", icon="👾")
_BLOG = BreadcrumbEntry(label="Blog", href=BLOG_HREF)

episode_1_commentary = ContentPage(
    PageMetadata(
        title="Episode 1's commentary - translation",
        published_date=date(2025, 1, 31),
        reading_time_minutes=10,
        breadcrumb_trail=[_HOME, _BLOG, BreadcrumbEntry(label="Episode 1 commentary - translation")],
        parent_section_name="Blog",
    ),
    ContentSource.from_file("blog/episode-1-commentary.md"),
)

POSTS = {
    "episode-1-commentary": episode_1_commentary,
}
