"""Presentational building blocks shared by every page of the site.

Each function renders one Jinja2 template from ``app/templates/components``
and returns :class:`markupsafe.Markup`, so blocks can be nested inside each
other without being escaped twice.  None of them hold state.
"""

from pathlib import Path
from typing import Iterable, Optional, Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from app.models.page import BreadcrumbEntry
from app.models.theme import Theme

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

THEME_TOGGLE_PATH = "/theme/toggle"

# Layout presets → CSS classes
FRAME_SIZES = {"sm": "frame-sm", "md": "frame-md", "lg": "frame-lg", "xl": "frame-xl"}
PADDING_X = {"none": "px-0", "sm": "px-sm", "md": "px-md", "lg": "px-lg"}
PADDING_Y = {"none": "py-0", "sm": "py-sm", "md": "py-md", "lg": "py-lg"}
STACK_GAPS = {"none": "gap-0", "sm": "gap-sm", "md": "gap-md", "lg": "gap-lg"}
TEXT_VARIANTS = ("default", "muted")
TEXT_SIZES = ("xs", "sm", "base", "lg")

_THEME_SWITCH_ICONS = {"light": "🌙", "dark": "☀️"}

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=False,
)


def _render(template_name: str, **context) -> Markup:
    return Markup(_env.get_template(template_name).render(**context))


def _preset(table: dict, key: str, kind: str) -> str:
    try:
        return table[key]
    except KeyError:
        raise ValueError(f"Unknown {kind} preset '{key}'. Use one of: {', '.join(table)}.") from None


def navigation_trail(entries: Sequence[BreadcrumbEntry]) -> Markup:
    """Render the breadcrumb; every entry but the last is a link."""
    return _render("components/breadcrumb.html", entries=list(entries))


def theme_switch(theme: Theme, next_path: str = "/") -> Markup:
    target = "dark" if theme == "light" else "light"
    return _render(
        "components/theme_switch.html",
        action=THEME_TOGGLE_PATH,
        next_path=next_path,
        theme=theme,
        target=target,
        icon=_THEME_SWITCH_ICONS[theme],
    )


def page_frame(body: Markup, size: str = "md", padding_x: str = "md", padding_y: str = "md") -> Markup:
    classes = " ".join(
        (
            _preset(FRAME_SIZES, size, "size"),
            _preset(PADDING_X, padding_x, "padding"),
            _preset(PADDING_Y, padding_y, "padding"),
        )
    )
    return _render("components/frame.html", body=body, classes=classes)


def stack(children: Iterable[Markup], gap: str = "md") -> Markup:
    return _render("components/stack.html", children=list(children), gap_class=_preset(STACK_GAPS, gap, "gap"))


def header_row(*children: Markup) -> Markup:
    """Lay children out on one line, pushed to opposite edges."""
    return _render("components/row.html", children=children)


def text_heading(text: str, level: int = 1) -> Markup:
    if not 1 <= level <= 6:
        raise ValueError(f"Heading level must be between 1 and 6, got {level}.")
    return _render("components/heading.html", text=text, level=level)


def text(value: str, variant: str = "default", size: str = "base", extra_class: Optional[str] = None) -> Markup:
    if variant not in TEXT_VARIANTS:
        raise ValueError(f"Unknown text variant '{variant}'.")
    if size not in TEXT_SIZES:
        raise ValueError(f"Unknown text size '{size}'.")
    return _render("components/text.html", text=value, variant=variant, size=size, extra_class=extra_class)


def article(heading: Markup, byline: Markup, content: Markup) -> Markup:
    return _render("components/article.html", heading=heading, byline=byline, content=content)


def page_footer(parent_page_name: str, parent_href: Optional[str] = None) -> Markup:
    return _render("components/footer.html", parent_page_name=parent_page_name, parent_href=parent_href)


def document(title: str, body: Markup, theme: Theme) -> str:
    """Wrap *body* in the site's HTML document shell."""
    return _env.get_template("base.html").render(title=title, body=body, theme=theme)
