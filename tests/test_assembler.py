"""Tests for siteimport.services.assembler."""

from unittest.mock import patch

from siteimport.models.section import (
    ContentSection,
    HeroSection,
    NavigationSection,
    ProjectsSection,
)
from siteimport.services import classifier
from siteimport.services.assembler import (
    FALLBACK_HERO_IMAGE,
    MAX_SECTIONS,
    assemble_sections,
    build_sections,
)
from siteimport.services.extractor import extract_assets, extract_metadata, parse_html
from siteimport.services.grouper import ContentGroup
from siteimport.services.reducer import reduce_to_markdown

_LONG = "A sentence that is easily longer than thirty characters."


def _groups(n: int):
    return [ContentGroup("Welcome aboard", ["First line", "Second line", "Third line"])] + [
        ContentGroup(f"Topic {i}", [_LONG]) for i in range(1, n)
    ]


class TestNavigation:
    def test_navigation_comes_first_and_tracks_group_count(self):
        sections = assemble_sections(_groups(3), [], "Acme", "")
        nav = sections[0]
        assert isinstance(nav, NavigationSection)
        assert nav.logo == "Acme"
        assert [(i.label, i.href) for i in nav.items] == [
            ("Home", "#home"),
            ("About", "#about"),
            ("Services", "#services"),
        ]

    def test_navigation_has_at_most_five_items(self):
        nav = assemble_sections(_groups(9), [], "Acme", "")[0]
        assert [i.label for i in nav.items] == ["Home", "About", "Services", "Portfolio", "Contact"]

    def test_no_groups_gives_navigation_only(self):
        sections = assemble_sections([], [], "Acme", "")
        assert len(sections) == 1
        assert sections[0].items == []


class TestHero:
    def test_hero_from_first_group(self):
        sections = assemble_sections(_groups(1), ["https://x.test/hero.png"], "Acme", "desc")
        hero = sections[1]
        assert isinstance(hero, HeroSection)
        assert hero.heading == "Welcome aboard"
        assert hero.subheading == "First line"
        assert hero.content == "Second line Third line"
        assert hero.image == "https://x.test/hero.png"
        assert (hero.show_cta, hero.cta_text, hero.cta_url) == (True, "Get Started", "#contact")

    def test_hero_falls_back_to_description_and_stock_image(self):
        hero = assemble_sections([ContentGroup("Acme", [])], [], "Acme", "Meta description")[1]
        assert hero.subheading == "Meta description"
        assert hero.content == "Meta description"
        assert hero.image == FALLBACK_HERO_IMAGE

    def test_hero_content_is_truncated(self):
        group = ContentGroup("Hero", ["Sub", "x" * 300, "y" * 300])
        hero = assemble_sections([group], [], "T", "")[1]
        assert len(hero.content) == 500

    def test_first_group_is_never_classified(self):
        # A projects-looking heading in group 0 still becomes the hero
        groups = [ContentGroup("Our Projects", ["Widget: a great widget"])]
        with patch.object(classifier, "classify_group", wraps=classifier.classify_group) as spy:
            sections = assemble_sections(groups, [], "T", "")
        assert isinstance(sections[1], HeroSection)
        spy.assert_not_called()


class TestSectionCap:
    def test_navigation_and_hero_only(self):
        sections = assemble_sections(_groups(1), [], "T", "")
        assert [s.type for s in sections] == ["navigation", "hero"]

    def test_at_most_five_sections(self):
        sections = assemble_sections(_groups(8), [], "T", "")
        assert len(sections) == MAX_SECTIONS
        assert [s.type for s in sections[:2]] == ["navigation", "hero"]

    def test_groups_past_the_cap_are_never_classified(self):
        with patch.object(classifier, "classify_group", wraps=classifier.classify_group) as spy:
            assemble_sections(_groups(8), [], "T", "")
        assert spy.call_count == MAX_SECTIONS - 2
        assert [c.args[1] for c in spy.call_args_list] == [1, 2, 3]

    def test_classifier_receives_filtered_index_and_images(self):
        images = ["https://x.test/0.png", "https://x.test/1.png"]
        sections = assemble_sections(_groups(3), images, "T", "")
        assert isinstance(sections[2], ContentSection)
        assert sections[2].image == images[1]
        assert sections[2].background_color == "bg-secondary/10"
        assert sections[3].image == images[1]
        assert sections[3].background_color == "bg-background"


class TestBuildSections:
    def test_filtered_out_groups_leave_navigation_and_hero(self):
        markdown = (
            "Welcome to our company website and services overview.\n\n"
            "## Menu\n\nHome page link goes here and here\n\n"
            "## Footer\n\nCopyright notice that is long enough\n\n"
        )
        sections = build_sections(markdown, [], "Acme", "")
        assert [s.type for s in sections] == ["navigation", "hero"]
        assert [i.label for i in sections[0].items] == ["Home"]

    def test_end_to_end_projects_page(self):
        markdown = (
            "# Acme Corp\n\n"
            "We build things for homeowners and small businesses across the region.\n\n"
            "## Our Projects\n\n"
            "Widget: a great widget used by thousands of customers\n\n"
            "Gadget: a cool gadget that saves time every single day\n\n"
        )
        images = ["https://acme.test/a.png"]
        sections = build_sections(markdown, images, "Acme", "Meta")

        assert [s.type for s in sections] == ["navigation", "hero", "content", "projects"]
        hero, content, projects = sections[1], sections[2], sections[3]
        # The page title group opens the page and becomes the hero
        assert hero.heading == "Acme"
        assert hero.subheading == "Meta"
        assert hero.image == "https://acme.test/a.png"
        assert content.heading == "Acme Corp"
        assert isinstance(projects, ProjectsSection)
        assert [(p.title, p.description) for p in projects.items] == [
            ("Widget", "a great widget used by thousands of customers"),
            ("Gadget", "a cool gadget that saves time every single day"),
        ]
        assert [p.image for p in projects.items] == [images[0], images[0]]

    def test_short_acme_page_keeps_only_navigation_and_hero(self):
        # Both headed groups are too short or link-like and are filtered out
        soup = parse_html(
            "<title>Acme</title>"
            "<h1>Acme Corp</h1><p>We build things.</p>"
            "<h2>Our Projects</h2>"
            "<li>Widget: a great widget</li><li>Gadget: a cool gadget</li>"
            '<img src="a.png">'
        )
        metadata = extract_metadata(soup, "https://acme.test/")
        assets = extract_assets(soup, "https://acme.test/")

        sections = build_sections(
            reduce_to_markdown(soup), assets.images, metadata.title, metadata.description
        )

        assert [s.type for s in sections] == ["navigation", "hero"]
        nav, hero = sections
        assert nav.logo == "Acme"
        assert [(i.label, i.href) for i in nav.items] == [("Home", "#home")]
        assert hero.heading == "Acme"
        assert (hero.subheading, hero.content) == ("", "")
        assert hero.image == "https://acme.test/a.png"
