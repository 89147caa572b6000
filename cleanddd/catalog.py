"""
Catalog filter, entity lookup and related-article resolution.

Everything here is a pure function over the in-memory collections from
cleanddd.content. Nothing mutates its inputs.

Rules:
- filtering keeps the original collection order
- a lookup miss returns None, it never raises
- dangling related-article ids are dropped silently
"""

from __future__ import annotations

import textwrap
from typing import Any, Dict, List, Optional, Sequence, Tuple, TypeVar

from bs4 import BeautifulSoup

from cleanddd.model import ALL_CATEGORY, CATEGORY_IDS, Article, Event

T = TypeVar("T")

HEADING_TAGS = ("h2", "h3", "h4")


# ---------------------------------------------------------------------------
# Catalog filter
# ---------------------------------------------------------------------------


def _matches_query(article: Article, query: str) -> bool:
    if query == "":
        return True
    q = query.lower()
    return q in article.title.lower() or q in article.description.lower()


def filter_articles(articles: Sequence[Article], category: str, query: str) -> List[Article]:
    """
    Return the articles in `category` whose title or description contains `query`.

    `category` is either "all" or one of the catalog category ids. Matching is a
    case-insensitive substring test; an empty query matches every article.
    """
    query = query or ""
    out: List[Article] = []
    for article in articles:
        if category != ALL_CATEGORY and article.category != category:
            continue
        if _matches_query(article, query):
            out.append(article)
    return out


def category_counts(articles: Sequence[Article], query: str = "") -> Dict[str, int]:
    """
    Number of matching articles per catalog tab (including "all").
    """
    return {cid: len(filter_articles(articles, cid, query)) for cid in CATEGORY_IDS}


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------


def find_by_id(collection: Sequence[T], record_id: str) -> Optional[T]:
    """
    Return the first record whose `id` equals `record_id` (exact match), else None.
    """
    for record in collection:
        if getattr(record, "id", None) == record_id:
            return record
    return None


def resolve_related(article: Article, articles: Sequence[Article]) -> List[Article]:
    """
    Resolve `article.related_articles` to full records, in declared order.

    Ids that do not resolve are skipped.
    """
    out: List[Article] = []
    for rid in article.related_articles:
        related = find_by_id(articles, rid)
        if related is not None:
            out.append(related)
    return out


# ---------------------------------------------------------------------------
# Page helpers
# ---------------------------------------------------------------------------


def featured_articles(articles: Sequence[Article], limit: int = 4) -> List[Article]:
    return list(articles[:limit])


def upcoming_events(events: Sequence[Event], limit: int = 0) -> List[Event]:
    """
    Events in listing order. `limit <= 0` returns all of them.
    """
    return list(events[:limit]) if limit > 0 else list(events)


def other_events(events: Sequence[Event], current_id: str, limit: int = 2) -> List[Event]:
    """
    Suggestions shown below an event detail page: every other event, capped.
    """
    return [e for e in events if e.id != current_id][:limit]


# ---------------------------------------------------------------------------
# Article body (HTML)
# ---------------------------------------------------------------------------


def _clean_text(el: Any) -> str:
    return " ".join(el.get_text().split())


def table_of_contents(article: Article) -> List[Tuple[int, str]]:
    """
    Extract (level, heading) pairs from the article body.

    Level 0 is an <h2>, 1 an <h3>, 2 an <h4>.
    """
    soup = BeautifulSoup(article.content, "html.parser")
    toc: List[Tuple[int, str]] = []
    for el in soup.find_all(list(HEADING_TAGS)):
        text = _clean_text(el)
        if text:
            toc.append((int(el.name[1]) - 2, text))
    return toc


def article_markdown(article: Article) -> str:
    """
    Convert the HTML body into Markdown-like text for terminal output.
    """
    soup = BeautifulSoup(article.content, "html.parser")

    blocks: List[str] = []
    for el in soup.find_all(list(HEADING_TAGS) + ["p", "li", "pre"]):
        if el.name in HEADING_TAGS:
            blocks.append("#" * int(el.name[1]) + " " + _clean_text(el))
        elif el.name == "pre":
            code = textwrap.dedent(el.get_text()).strip("\n")
            blocks.append(f"```\n{code}\n```")
        elif el.name == "li":
            if el.parent is not None and el.parent.name == "ol":
                n = len(el.find_previous_siblings("li")) + 1
                blocks.append(f"{n}. {_clean_text(el)}")
            else:
                blocks.append(f"- {_clean_text(el)}")
        else:
            text = _clean_text(el)
            if text:
                blocks.append(text)

    return "\n\n".join(blocks)
