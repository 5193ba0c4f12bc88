"""Split the reduced text stream into heading-keyed groups and drop the noisy ones."""

import re
from typing import List, NamedTuple

_HEADING_RE = re.compile(r"^#+ ")
_HEADING_PREFIX_RE = re.compile(r"^#+\s*")

# Headings that mark navigation chrome rather than page content
_NOISE_HEADING_KEYWORDS = ("nav", "menu", "footer")

MIN_GROUP_LENGTH = 50
# A group whose lines are all shorter than this is assumed to be a link list
MIN_LINE_LENGTH = 30

DEFAULT_HEADING = "Welcome"


class ContentGroup(NamedTuple):
    heading: str
    content: List[str]


def group_content(markdown: str, title: str = "") -> List[ContentGroup]:
    """Group the lines of *markdown* under their nearest preceding heading.

    Text that appears before the first heading is collected under *title*.
    That leading group is kept even when empty as long as a heading follows
    it; every other group is kept only if it has content.
    """
    groups: List[ContentGroup] = []
    current = ContentGroup(heading=title or DEFAULT_HEADING, content=[])

    for line in markdown.split("\n"):
        if _HEADING_RE.match(line):
            if current.content or not groups:
                groups.append(current)
            current = ContentGroup(heading=_HEADING_PREFIX_RE.sub("", line).strip(), content=[])
        elif line.strip():
            current.content.append(line.strip())

    if current.content:
        groups.append(current)

    return groups


def _is_noise(group: ContentGroup) -> bool:
    heading = group.heading.lower()
    if any(keyword in heading for keyword in _NOISE_HEADING_KEYWORDS):
        return True

    if len(group.heading) + len("".join(group.content)) < MIN_GROUP_LENGTH:
        return True

    if group.content and all(len(line) < MIN_LINE_LENGTH for line in group.content):
        return True

    return False


def filter_groups(groups: List[ContentGroup]) -> List[ContentGroup]:
    """Drop navigation-like, too-short and link-only groups.

    The first group always survives: it becomes the hero section.
    """
    return [group for index, group in enumerate(groups) if index == 0 or not _is_noise(group)]
