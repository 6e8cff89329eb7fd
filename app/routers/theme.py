import logging
from urllib.parse import urlparse

from fastapi import APIRouter, Form, Request
from fastapi.responses import RedirectResponse
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.models.theme import ThemeResponse
from app.services.theme import THEME_COOKIE, THEME_COOKIE_MAX_AGE, ThemeContext

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter(prefix="/theme", tags=["Theme"])


@router.get("", response_model=ThemeResponse, summary="Current theme preference")
async def current_theme(request: Request) -> ThemeResponse:
    return ThemeResponse(theme=ThemeContext.from_cookie(request.cookies.get(THEME_COOKIE)).get())


@router.post(
    "/toggle",
    summary="Switch between the light and dark theme",
    description=(
        "Flips the session's theme preference (stored in the `theme` cookie) "
        "and redirects back to `next`.  Only local paths are accepted as "
        "`next`; anything else redirects to `/`."
    ),
)
@limiter.limit("30/minute")
async def toggle_theme(request: Request, next_path: str = Form("/", alias="next")) -> RedirectResponse:
    context = ThemeContext.from_cookie(request.cookies.get(THEME_COOKIE))
    response = RedirectResponse(url=_local_path(next_path), status_code=303)

    def persist(theme: str) -> None:
        response.set_cookie(
            THEME_COOKIE,
            theme,
            max_age=THEME_COOKIE_MAX_AGE,
            httponly=True,
            samesite="lax",
        )

    unsubscribe = context.subscribe(persist)
    try:
        theme = context.toggle()
    finally:
        unsubscribe()

    logger.info("Theme toggled", extra={"theme": theme})
    return response


def _local_path(target: str) -> str:
    """Return *target* if it is a same-site absolute path, else ``/``."""
    target = target.strip()
    parsed = urlparse(target)
    if parsed.scheme or parsed.netloc or not target.startswith("/") or target.startswith(("//", "/\\")):
        logger.warning("Rejected non-local redirect target: %s", target)
        return "/"
    return target
