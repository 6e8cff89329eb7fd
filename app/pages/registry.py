from typing import Dict

from app.pages.blog import POSTS
from app.services.page import ContentPage


class PageNotFoundError(LookupError):
    """Raised when no page is registered under a slug."""


PAGES: Dict[str, ContentPage] = dict(POSTS)


def get_page(slug: str) -> ContentPage:
    try:
        return PAGES[slug]
    except KeyError:
        raise PageNotFoundError(f"No page registered for '{slug}'.") from None
