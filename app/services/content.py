"""Long-form page content: markdown source rendered to HTML with override components.

A :class:`ContentSource` owns the body text of one page.  It renders the
markdown with the ``markdown`` library and then hands every element of the
tags named in the *components* mapping to the matching override, which may
rewrite the element in place (add classes, attributes, anchors, …).

The page chrome never looks inside the rendered body; it only chooses which
override mapping to pass.
"""

import logging
import math
import re
import unicodedata
from pathlib import Path
from typing import Callable, Dict, Mapping, Optional, Union
from urllib.parse import urlparse

import markdown
from bs4 import BeautifulSoup, Tag
from markupsafe import Markup

logger = logging.getLogger(__name__)

CONTENT_DIR = Path(__file__).resolve().parent.parent / "content"
MARKDOWN_EXTENSIONS = ["extra", "sane_lists"]
WORDS_PER_MINUTE = 200

Component = Callable[[Tag], None]

_LANGUAGE_CLASS_RE = re.compile(r"^language-(?P<lang>[\w+#-]+)$")


class ContentSourceError(Exception):
    """Raised when a page's content cannot be loaded."""


class ContentSource:
    def __init__(self, text: str, name: str = "<inline>") -> None:
        self.text = text
        self.name = name

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "ContentSource":
        """Load markdown from *path*, relative paths resolving under ``CONTENT_DIR``."""
        path = Path(path)
        if not path.is_absolute():
            path = CONTENT_DIR / path
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ContentSourceError(f"Cannot read content file {path}: {exc}") from exc
        return cls(text, name=path.name)

    def render(self, components: Optional[Mapping[str, Component]] = None) -> Markup:
        """Render the markdown body to HTML, applying *components* per tag name."""
        html = markdown.markdown(self.text, extensions=MARKDOWN_EXTENSIONS)
        if not components:
            return Markup(html)

        # Fragment parser: no <html>/<head> wrapper, raw HTML stays where it was written.
        soup = BeautifulSoup(html, "html.parser")

        for tag_name, component in components.items():
            for element in soup.find_all(tag_name):
                component(element)
        _dedupe_ids(soup)

        logger.debug("Rendered content %s with overrides for %s", self.name, list(components))
        return Markup(str(soup))


def estimate_reading_time(text: str, words_per_minute: int = WORDS_PER_MINUTE) -> int:
    """Return the whole minutes needed to read *text*, never less than one."""
    if words_per_minute <= 0:
        raise ValueError("words_per_minute must be positive.")
    return max(1, math.ceil(len(text.split()) / words_per_minute))


def slugify(text: str) -> str:
    """Return a lowercase, ASCII-only, hyphen-separated anchor for *text*."""
    slug = unicodedata.normalize("NFKD", text)
    slug = slug.encode("ascii", "ignore").decode("ascii")
    slug = re.sub(r"[^a-z0-9]+", "-", slug.lower())
    return slug.strip("-") or "section"


def _dedupe_ids(soup: BeautifulSoup) -> None:
    """Suffix repeated ``id`` values (``notes``, ``notes-1``, …) in document order."""
    seen = set()
    for element in soup.find_all(id=True):
        base = element["id"]
        candidate, n = base, 0
        while candidate in seen:
            n += 1
            candidate = f"{base}-{n}"
        element["id"] = candidate
        seen.add(candidate)


# ---------------------------------------------------------------------------
# Default override components
# ---------------------------------------------------------------------------

def _add_class(element: Tag, name: str) -> None:
    classes = list(element.get("class") or [])
    if name not in classes:
        classes.append(name)
    element["class"] = classes


def external_link(element: Tag) -> None:
    """Open off-site links in a new tab without leaking the opener."""
    href = str(element.get("href", "")).strip()
    if urlparse(href).scheme in ("http", "https"):
        element["target"] = "_blank"
        element["rel"] = "noopener noreferrer"


def content_image(element: Tag) -> None:
    element["loading"] = "lazy"
    _add_class(element, "content-image")


def code_block(element: Tag) -> None:
    """Tag fenced code blocks with their language (from ``language-*`` classes)."""
    _add_class(element, "code-block")
    code = element.find("code")
    if code is None:
        return
    for cls in code.get("class") or []:
        match = _LANGUAGE_CLASS_RE.match(cls)
        if match:
            element["data-language"] = match.group("lang")
            break


def heading_anchor(element: Tag) -> None:
    if not element.get("id"):
        element["id"] = slugify(element.get_text())


DEFAULT_COMPONENTS: Dict[str, Component] = {
    "a": external_link,
    "img": content_image,
    "pre": code_block,
    "h2": heading_anchor,
    "h3": heading_anchor,
}
