import logging

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse

from app.pages.blog import BLOG_POSTS_PATH
from app.pages.registry import PageNotFoundError, get_page
from app.services.theme import THEME_COOKIE, ThemeContext

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Pages"])


@router.get(
    BLOG_POSTS_PATH + "/{slug}",
    response_class=HTMLResponse,
    summary="Render a blog post",
)
async def blog_post(request: Request, slug: str) -> HTMLResponse:
    """Render the post registered under *slug*, themed from the session cookie."""
    try:
        page = get_page(slug)
    except PageNotFoundError as exc:
        logger.warning("Unknown page requested: %s", slug)
        raise HTTPException(status_code=404, detail=str(exc))

    theme = ThemeContext.from_cookie(request.cookies.get(THEME_COOKIE)).get()
    logger.info("Page request", extra={"slug": slug, "theme": theme})
    return HTMLResponse(page.render(theme=theme, path=request.url.path))
