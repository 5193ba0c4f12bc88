"""Assemble the ordered section list for an imported homepage.

The output is always: one navigation section, then a hero built from group
0, then classified sections for the following groups until
:data:`MAX_SECTIONS` sections exist in total.
"""

import logging
from typing import List

from siteimport.models.section import HeroSection, NavigationSection, NavItem, Section
from siteimport.services import classifier
from siteimport.services.grouper import ContentGroup, filter_groups, group_content

logger = logging.getLogger(__name__)

MAX_SECTIONS = 5  # navigation + hero + 3 more
NAV_LABELS = ("Home", "About", "Services", "Portfolio", "Contact")
MAX_HERO_CONTENT = 500
FALLBACK_HERO_IMAGE = "https://images.unsplash.com/photo-1557804506-669a67965ba0"


def build_navigation(group_count: int, title: str) -> NavigationSection:
    labels = NAV_LABELS[: min(group_count, len(NAV_LABELS))]
    return NavigationSection(
        logo=title,
        items=[NavItem(label=label, href=f"#{label.lower()}") for label in labels],
    )


def build_hero(group: ContentGroup, images: List[str], description: str) -> HeroSection:
    content = " ".join(group.content[1:])[:MAX_HERO_CONTENT]
    return HeroSection(
        heading=group.heading,
        subheading=group.content[0] if group.content else description,
        content=content or description,
        image=images[0] if images else FALLBACK_HERO_IMAGE,
    )


def assemble_sections(
    groups: List[ContentGroup],
    images: List[str],
    title: str,
    description: str,
) -> List[Section]:
    """Build sections from already-filtered *groups*.

    The classifier is only consulted while there is room left under the cap.
    """
    sections: List[Section] = [build_navigation(len(groups), title)]
    if not groups:
        return sections

    sections.append(build_hero(groups[0], images, description))

    for index, group in enumerate(groups[1:], start=1):
        if len(sections) >= MAX_SECTIONS:
            logger.info(
                "Reached maximum of %d sections, skipping %d remaining group(s)",
                MAX_SECTIONS,
                len(groups) - index,
            )
            break
        sections.append(classifier.classify_group(group, index, images))

    return sections


def build_sections(
    markdown: str,
    images: List[str],
    title: str,
    description: str,
) -> List[Section]:
    """Group, filter and assemble *markdown* into homepage sections."""
    groups = group_content(markdown, title)
    filtered = filter_groups(groups)
    logger.info(
        "Content groups found: %d, kept after filtering: %d", len(groups), len(filtered)
    )

    sections = assemble_sections(filtered, images, title, description)
    logger.info("Generated %d section(s)", len(sections))
    return sections
