"""Keyword-driven section classification.

A content group is typed from its heading alone, using an ordered rule table
where the first matching rule wins. The group's lines are then reshaped into
the field layout the website builder expects for that section type.

Images are assigned by position in the page's image list, not by proximity
in the DOM, so a section may show a picture from an unrelated part of the
page.
"""

import logging
import re
from typing import List, Literal, Optional, Tuple

from siteimport.models.section import (
    ContentSection,
    ProjectItem,
    ProjectsSection,
    Section,
    SkillItem,
    SkillsSection,
    TimelineItem,
    TimelineSection,
)
from siteimport.services.grouper import ContentGroup

logger = logging.getLogger(__name__)

SectionType = Literal["projects", "skills", "timeline", "content"]

SECTION_RULES: Tuple[Tuple[Tuple[str, ...], SectionType], ...] = (
    (("project", "portfolio", "work"), "projects"),
    (("skill", "technolog", "expertise"), "skills"),
    (("experience", "education", "timeline", "history"), "timeline"),
)

# Matched case-sensitively against the raw heading
SKILL_CATEGORY_RULES: Tuple[Tuple[str, str], ...] = (
    ("Language", "Programming Languages"),
    ("Framework", "Frameworks"),
    ("Tool", "Tools"),
)
DEFAULT_SKILL_CATEGORY = "Skills"

MAX_PROJECTS = 6
MAX_PROJECT_TITLE = 100
MAX_PROJECT_DESCRIPTION = 300

MAX_SKILLS = 12
MAX_SKILL_NAME = 80

MAX_TIMELINE_ITEMS = 6
MAX_TIMELINE_TITLE = 120
MAX_TIMELINE_DESCRIPTION = 400
MAX_TIMELINE_BULLETS = 7
MAX_TIMELINE_BULLET = 250
# Timeline fragments this short are dashes inside dates or names, not bullets
MIN_TIMELINE_SEGMENT = 10

MAX_CONTENT_LENGTH = 1200

_PROJECT_SPLIT_RE = re.compile(r"[:-]")
_SKILL_NAME_SPLIT_RE = re.compile(r"[:.%]")
_SKILL_LEVEL_RE = re.compile(r"(\d+)%")
_TIMELINE_SPLIT_RE = re.compile(r"[-–—•]")


def detect_section_type(heading: str) -> SectionType:
    heading_lower = heading.lower()
    for keywords, section_type in SECTION_RULES:
        if any(keyword in heading_lower for keyword in keywords):
            return section_type
    return "content"


def _image_at(images: List[str], index: int) -> Optional[str]:
    """Return the image at *index*, clamped to the last one; None if there are none."""
    if not images:
        return None
    return images[min(index, len(images) - 1)]


def _build_projects(group: ContentGroup, images: List[str]) -> ProjectsSection:
    items = []
    for j, text in enumerate(group.content[:MAX_PROJECTS]):
        parts = _PROJECT_SPLIT_RE.split(text)
        description = ":".join(parts[1:]).strip()[:MAX_PROJECT_DESCRIPTION]
        items.append(
            ProjectItem(
                title=parts[0].strip()[:MAX_PROJECT_TITLE],
                description=description or text[:MAX_PROJECT_DESCRIPTION],
                image=_image_at(images, j + 1),
            )
        )
    return ProjectsSection(heading=group.heading, items=items)


def _skill_category(heading: str) -> str:
    for needle, category in SKILL_CATEGORY_RULES:
        if needle in heading:
            return category
    return DEFAULT_SKILL_CATEGORY


def _build_skills(group: ContentGroup) -> SkillsSection:
    category = _skill_category(group.heading)
    items = []
    for j, text in enumerate(group.content[:MAX_SKILLS]):
        match = _SKILL_LEVEL_RE.search(text)
        level = int(match.group(1)) if match else 80 + (j % 20)
        items.append(
            SkillItem(
                name=_SKILL_NAME_SPLIT_RE.split(text)[0].strip()[:MAX_SKILL_NAME],
                level=level,
                category=category,
            )
        )
    return SkillsSection(heading=group.heading, items=items)


def _build_timeline(group: ContentGroup) -> TimelineSection:
    items = []
    for text in group.content[:MAX_TIMELINE_ITEMS]:
        parts = _TIMELINE_SPLIT_RE.split(text)
        segments = [p.strip() for p in parts[1:] if len(p.strip()) > MIN_TIMELINE_SEGMENT]
        items.append(
            TimelineItem(
                title=parts[0].strip()[:MAX_TIMELINE_TITLE],
                description=segments[0][:MAX_TIMELINE_DESCRIPTION] if segments else "",
                bullets=[s[:MAX_TIMELINE_BULLET] for s in segments[1 : 1 + MAX_TIMELINE_BULLETS]],
            )
        )
    return TimelineSection(heading=group.heading, items=items)


def _build_content(group: ContentGroup, index: int, images: List[str]) -> ContentSection:
    return ContentSection(
        heading=group.heading,
        content="\n\n".join(group.content)[:MAX_CONTENT_LENGTH],
        image=_image_at(images, index),
        background_color="bg-background" if index % 2 == 0 else "bg-secondary/10",
    )


def classify_group(group: ContentGroup, index: int, images: List[str]) -> Section:
    """Turn the non-hero group at *index* into a typed section."""
    section_type = detect_section_type(group.heading)
    logger.debug("Classified group %d (%r) as %s", index, group.heading, section_type)

    if section_type == "projects":
        return _build_projects(group, images)
    if section_type == "skills":
        return _build_skills(group)
    if section_type == "timeline":
        return _build_timeline(group)
    return _build_content(group, index, images)
