"""Typed section descriptors rendered by the website builder.

Each section is persisted as JSON in the page's ``content`` column, so field
names are serialised in camelCase (``model_dump(by_alias=True)``).
"""

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _SectionModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NavItem(_SectionModel):
    label: str
    href: str


class NavigationSection(_SectionModel):
    type: Literal["navigation"] = "navigation"
    logo: str
    items: List[NavItem]
    background_color: str = "bg-background/95"
    text_color: str = "text-foreground"
    position: str = "sticky"


class HeroSection(_SectionModel):
    type: Literal["hero"] = "hero"
    heading: str
    subheading: str
    content: str
    image: str
    background_color: str = "bg-slate-950"
    text_color: str = "text-white"
    show_cta: bool = Field(default=True, alias="showCTA")
    cta_text: str = "Get Started"
    cta_url: str = "#contact"


class ProjectItem(_SectionModel):
    title: str
    description: str
    image: Optional[str] = None
    tags: List[str] = []
    live_url: str = ""
    github_url: str = ""


class ProjectsSection(_SectionModel):
    type: Literal["projects"] = "projects"
    heading: str
    subheading: str = ""
    items: List[ProjectItem]
    background_color: str = "bg-background"
    text_color: str = "text-foreground"


class SkillItem(_SectionModel):
    name: str
    level: int
    icon: str = "⚡"
    category: str


class SkillsSection(_SectionModel):
    type: Literal["skills"] = "skills"
    heading: str
    subheading: str = ""
    items: List[SkillItem]
    background_color: str = "bg-secondary/10"
    text_color: str = "text-foreground"
    show_percentages: bool = False


class TimelineItem(_SectionModel):
    title: str
    # Not parsed from the source page; the editor fills these in.
    organization: str = "Company"
    period: str = "2020 - Present"
    description: str = ""
    bullets: List[str] = []


class TimelineSection(_SectionModel):
    type: Literal["timeline"] = "timeline"
    heading: str
    subheading: str = ""
    items: List[TimelineItem]
    background_color: str = "bg-background"
    text_color: str = "text-foreground"


class ContentSection(_SectionModel):
    type: Literal["content"] = "content"
    heading: str
    subheading: str = ""
    content: str
    image: Optional[str] = None
    background_color: str = "bg-background"
    text_color: str = "text-foreground"


Section = Annotated[
    Union[
        NavigationSection,
        HeroSection,
        ProjectsSection,
        SkillsSection,
        TimelineSection,
        ContentSection,
    ],
    Field(discriminator="type"),
]
