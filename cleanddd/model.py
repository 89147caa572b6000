"""
Central data model definitions used across the project.

This module defines the canonical structure of Article, Event and Framework
objects so that:
- all modules share the same field names
- the static content stays immutable after it is defined
- the catalog, registration and UI layers read the same records
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple


# Sentinel used by events that have no external website
NO_LINK = "#"

# Catalog tab that disables category filtering
ALL_CATEGORY = "all"


@dataclass(frozen=True)
class Category:
    """
    One tab of the knowledge catalog.
    """

    id: str
    name: str


CATEGORIES: Tuple[Category, ...] = (
    Category(ALL_CATEGORY, "All Articles"),
    Category("guides", "Guides"),
    Category("patterns", "Patterns"),
    Category("architecture", "Architecture"),
    Category("practices", "Practices"),
)

CATEGORY_IDS: Tuple[str, ...] = tuple(c.id for c in CATEGORIES)


@dataclass(frozen=True)
class Article:
    """
    Represents one knowledge-base article.

    `content` is the HTML body. `related_articles` holds identifiers of other
    articles; they are hand-authored and may point at articles that do not exist.
    """

    id: str
    title: str
    description: str
    category: str
    tag: str
    created_at: str
    read_time: str
    author: str
    content: str
    related_articles: Tuple[str, ...] = ()


@dataclass(frozen=True)
class RegistrationOption:
    type: str
    price: str
    available: bool


@dataclass(frozen=True)
class Registration:
    """
    Registration block of an event. `open` is fixed in the data.
    """

    open: bool
    deadline: str
    price: str
    options: Tuple[RegistrationOption, ...]


@dataclass(frozen=True)
class Session:
    time: str
    title: str
    speaker: Optional[str] = None


@dataclass(frozen=True)
class ScheduleDay:
    day: str
    date: str
    sessions: Tuple[Session, ...]


@dataclass(frozen=True)
class PastEvent:
    year: str
    location: str
    attendees: int
    resources: str = NO_LINK
    topic: Optional[str] = None


@dataclass(frozen=True)
class Event:
    """
    Represents one community event (conference, workshop or meetup).

    `date` and `time` are display labels, not parsed values.
    """

    id: str
    title: str
    date: str
    time: str
    location: str
    description: str
    long_description: str
    speakers: Tuple[str, ...]
    venue: str
    venue_address: str
    attendees: int
    link: str
    registration: Registration
    schedule: Tuple[ScheduleDay, ...]
    past_events: Tuple[PastEvent, ...] = ()

    @property
    def has_link(self) -> bool:
        return bool(self.link) and self.link != NO_LINK

    @property
    def is_online(self) -> bool:
        return self.location.startswith("Online")


@dataclass(frozen=True)
class Framework:
    """
    One entry of the frameworks showcase.

    `fallback_introduction` is shown whenever the repository description
    cannot be fetched.
    """

    name: str
    description: str
    language: str
    repo_url: str
    fallback_introduction: str = field(default="")

    @property
    def repo_path(self) -> str:
        """
        Return 'owner/name' extracted from the GitHub repository URL.
        """
        parts = [p for p in self.repo_url.rstrip("/").split("/") if p]
        return "/".join(parts[-2:])
