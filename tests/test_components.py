"""Tests for the presentational blocks in app.services.components."""

import pytest
from bs4 import BeautifulSoup
from markupsafe import Markup

from app.models.page import BreadcrumbEntry
from app.services import components as ui


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def _trail(length: int):
    ancestors = [BreadcrumbEntry(label=f"Level {i}", href=f"/level-{i}") for i in range(length - 1)]
    return ancestors + [BreadcrumbEntry(label="Current")]


class TestNavigationTrail:
    @pytest.mark.parametrize("length", [1, 2, 3, 6])
    def test_only_final_entry_is_unlinked(self, length):
        nav = _soup(ui.navigation_trail(_trail(length))).find("nav")
        items = nav.find_all("li")
        assert len(items) == length
        for item in items[:-1]:
            assert item.find("a", href=True) is not None
        assert items[-1].find("a") is None
        assert items[-1].find(attrs={"aria-current": "page"}).get_text(strip=True) == "Current"

    def test_entries_keep_their_order(self):
        nav = _soup(ui.navigation_trail(_trail(4))).find("nav")
        hrefs = [a["href"] for a in nav.find_all("a")]
        assert hrefs == ["/level-0", "/level-1", "/level-2"]

    def test_icon_rendered_before_label(self):
        trail = [BreadcrumbEntry(label="Home", href="/", icon="👾"), BreadcrumbEntry(label="Here")]
        link = _soup(ui.navigation_trail(trail)).find("a")
        assert link.find(class_="breadcrumb-icon").get_text() == "👾"
        assert link.get_text(" ", strip=True) == "👾 Home"

    def test_labels_are_escaped(self):
        html = ui.navigation_trail([BreadcrumbEntry(label="<script>x</script>")])
        assert "<script>" not in html
        assert "&lt;script&gt;" in html


class TestThemeSwitch:
    def test_posts_to_toggle_endpoint(self):
        form = _soup(ui.theme_switch("light", next_path="/blog/posts/a")).find("form")
        assert form["method"] == "post"
        assert form["action"] == ui.THEME_TOGGLE_PATH
        assert form.find("input", attrs={"name": "next"})["value"] == "/blog/posts/a"

    @pytest.mark.parametrize("theme, target", [("light", "dark"), ("dark", "light")])
    def test_button_offers_the_other_theme(self, theme, target):
        button = _soup(ui.theme_switch(theme)).find("button")
        assert button["data-theme"] == theme
        assert button["aria-label"] == f"Switch to {target} theme"


class TestLayout:
    def test_page_frame_classes(self):
        frame = _soup(ui.page_frame(Markup("<p>x</p>"), size="md", padding_x="md", padding_y="lg")).div
        assert frame["class"] == ["page-frame", "frame-md", "px-md", "py-lg"]
        assert frame.p.get_text() == "x"

    def test_unknown_frame_size(self):
        with pytest.raises(ValueError):
            ui.page_frame(Markup(""), size="huge")

    def test_unknown_padding(self):
        with pytest.raises(ValueError):
            ui.page_frame(Markup(""), padding_y="xl")

    def test_stack_keeps_children_in_order(self):
        html = ui.stack([Markup("<p>one</p>"), Markup("<p>two</p>")], gap="sm")
        div = _soup(html).div
        assert "gap-sm" in div["class"]
        assert [p.get_text() for p in div.find_all("p")] == ["one", "two"]

    def test_unknown_gap(self):
        with pytest.raises(ValueError):
            ui.stack([], gap="xl")


class TestTypography:
    def test_heading_level(self):
        h2 = _soup(ui.text_heading("Title", level=2)).find("h2")
        assert h2.get_text() == "Title"

    @pytest.mark.parametrize("level", [0, 7])
    def test_heading_level_out_of_range(self, level):
        with pytest.raises(ValueError):
            ui.text_heading("Title", level=level)

    def test_muted_text(self):
        p = _soup(ui.text("Byline", variant="muted", size="xs")).p
        assert p["class"] == ["text", "text-muted", "text-xs"]
        assert p.get_text() == "Byline"

    def test_unknown_variant(self):
        with pytest.raises(ValueError):
            ui.text("x", variant="loud")

    def test_unknown_size(self):
        with pytest.raises(ValueError):
            ui.text("x", size="xxl")


class TestPageFooter:
    def test_back_link_to_parent(self):
        link = _soup(ui.page_footer("Blog", parent_href="/blog")).find("a", class_="page-footer-back")
        assert link["href"] == "/blog"
        assert "Back to Blog" in link.get_text()

    def test_without_parent_href(self):
        footer = _soup(ui.page_footer("Blog")).find("footer")
        assert footer.find("a", class_="page-footer-back") is None
        assert "Blog" in footer.get_text()
