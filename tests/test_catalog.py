"""
Unit tests for the catalog filter, lookup and related-article resolution.

Definitions used here:
- filtering is a stable, case-insensitive substring match on title/description
- a lookup miss returns None
- dangling related ids are dropped
"""

import unittest

from cleanddd.catalog import (
    article_markdown,
    category_counts,
    featured_articles,
    filter_articles,
    find_by_id,
    other_events,
    resolve_related,
    table_of_contents,
    upcoming_events,
)
from cleanddd.content import ARTICLES, EVENTS
from cleanddd.model import CATEGORY_IDS, Article

QUERIES = ["", "event", "EVENT", "ddd", "domain", "bounded contexts", "zzz-no-match", " "]


def _article(article_id: str, title: str = "T", description: str = "D", category: str = "guides", **kw) -> Article:
    return Article(
        id=article_id,
        title=title,
        description=description,
        category=category,
        tag="Guide",
        created_at="2025-01-01",
        read_time="1 min read",
        author="A",
        content=kw.pop("content", "<p>x</p>"),
        **kw,
    )


class TestFilterArticles(unittest.TestCase):
    def test_all_and_empty_query_returns_full_collection(self) -> None:
        self.assertEqual(filter_articles(ARTICLES, "all", ""), list(ARTICLES))

    def test_patterns_category(self) -> None:
        ids = [a.id for a in filter_articles(ARTICLES, "patterns", "")]
        self.assertEqual(ids, ["tactical-patterns", "domain-events"])

    def test_event_query_matches_title_or_description(self) -> None:
        ids = [a.id for a in filter_articles(ARTICLES, "all", "event")]
        self.assertEqual(ids, ["tactical-patterns", "event-storming", "domain-events"])

    def test_query_is_case_insensitive(self) -> None:
        self.assertEqual(filter_articles(ARTICLES, "all", "EvEnT"), filter_articles(ARTICLES, "all", "event"))

    def test_category_and_query_combined(self) -> None:
        ids = [a.id for a in filter_articles(ARTICLES, "practices", "event")]
        self.assertEqual(ids, ["event-storming"])

    def test_no_match_returns_empty_list(self) -> None:
        self.assertEqual(filter_articles(ARTICLES, "architecture", "event"), [])
        self.assertEqual(filter_articles(ARTICLES, "all", "zzz-no-match"), [])

    def test_result_is_ordered_subsequence(self) -> None:
        position = {a.id: i for i, a in enumerate(ARTICLES)}
        for cat in CATEGORY_IDS:
            for q in QUERIES:
                result = filter_articles(ARTICLES, cat, q)
                idx = [position[a.id] for a in result]
                self.assertEqual(idx, sorted(set(idx)), msg=(cat, q))

    def test_filter_is_idempotent(self) -> None:
        for cat in CATEGORY_IDS:
            for q in QUERIES:
                once = filter_articles(ARTICLES, cat, q)
                self.assertEqual(filter_articles(once, cat, q), once, msg=(cat, q))

    def test_input_is_not_mutated(self) -> None:
        articles = list(ARTICLES)
        filter_articles(articles, "guides", "ddd")
        self.assertEqual(articles, list(ARTICLES))

    def test_whitespace_query_is_substring_not_token(self) -> None:
        # a single space matches every title containing a space
        result = filter_articles(ARTICLES, "all", " ")
        self.assertEqual(len(result), len(ARTICLES))

    def test_category_counts(self) -> None:
        counts = category_counts(ARTICLES)
        self.assertEqual(
            counts, {"all": 8, "guides": 2, "patterns": 2, "architecture": 2, "practices": 2}
        )
        counts = category_counts(ARTICLES, "event")
        self.assertEqual(counts["all"], 3)
        self.assertEqual(counts["architecture"], 0)


class TestLookup(unittest.TestCase):
    def test_find_article(self) -> None:
        a = find_by_id(ARTICLES, "strategic-ddd")
        self.assertIsNotNone(a)
        assert a is not None
        self.assertEqual(a.title, "Strategic Domain-Driven Design")

    def test_find_missing_returns_none(self) -> None:
        self.assertIsNone(find_by_id(ARTICLES, "nonexistent-id"))

    def test_lookup_is_case_sensitive(self) -> None:
        self.assertIsNone(find_by_id(ARTICLES, "Strategic-DDD"))

    def test_find_event(self) -> None:
        e = find_by_id(EVENTS, "ddd-europe-2025")
        self.assertIsNotNone(e)
        assert e is not None
        self.assertEqual(e.venue, "RAI Amsterdam Convention Center")

    def test_duplicate_ids_first_match_wins(self) -> None:
        first = _article("dup", title="First")
        second = _article("dup", title="Second")
        found = find_by_id([first, second], "dup")
        self.assertIs(found, first)


class TestResolveRelated(unittest.TestCase):
    def test_preserves_declared_order(self) -> None:
        a = find_by_id(ARTICLES, "strategic-ddd")
        assert a is not None
        ids = [r.id for r in resolve_related(a, ARTICLES)]
        self.assertEqual(ids, ["tactical-patterns", "clean-architecture", "event-storming"])

    def test_dangling_ids_are_dropped(self) -> None:
        a = find_by_id(ARTICLES, "bounded-contexts")
        assert a is not None
        ids = [r.id for r in resolve_related(a, ARTICLES)]
        self.assertEqual(ids, ["strategic-ddd", "microservices-ddd"])

    def test_all_dangling(self) -> None:
        a = _article("x", related_articles=("nope", "gone"))
        self.assertEqual(resolve_related(a, ARTICLES), [])

    def test_result_is_bounded_by_declared_ids(self) -> None:
        for a in ARTICLES:
            related = resolve_related(a, ARTICLES)
            self.assertLessEqual(len(related), len(a.related_articles))
            for r in related:
                self.assertIn(r.id, a.related_articles)


class TestPageHelpers(unittest.TestCase):
    def test_featured_articles(self) -> None:
        ids = [a.id for a in featured_articles(ARTICLES)]
        self.assertEqual(ids, ["strategic-ddd", "tactical-patterns", "clean-architecture", "event-storming"])

    def test_upcoming_events_limit(self) -> None:
        self.assertEqual(len(upcoming_events(EVENTS)), 3)
        self.assertEqual(len(upcoming_events(EVENTS, limit=0)), 3)
        self.assertEqual([e.id for e in upcoming_events(EVENTS, limit=1)], ["ddd-europe-2025"])

    def test_other_events_excludes_current(self) -> None:
        ids = [e.id for e in other_events(EVENTS, "clean-architecture-workshop")]
        self.assertEqual(ids, ["ddd-europe-2025", "domain-modeling-meetup"])

    def test_other_events_unknown_current_is_capped(self) -> None:
        self.assertEqual(len(other_events(EVENTS, "nonexistent-id")), 2)


class TestArticleBody(unittest.TestCase):
    def test_table_of_contents_levels(self) -> None:
        a = find_by_id(ARTICLES, "strategic-ddd")
        assert a is not None
        toc = table_of_contents(a)
        self.assertEqual(toc[0], (0, "Introduction to Strategic Domain-Driven Design"))
        self.assertIn((1, "Key Concepts in Strategic DDD"), toc)
        self.assertIn((2, "Bounded Context"), toc)
        self.assertEqual(toc[-1], (1, "Conclusion"))

    def test_markdown_lists_and_headings(self) -> None:
        a = _article(
            "x",
            content=(
                "<h2>Title</h2><p>Some   <em>text</em></p>"
                "<ol><li><strong>One</strong>: first</li><li>Two</li></ol>"
                "<ul><li>Bullet</li></ul>"
            ),
        )
        md = article_markdown(a)
        self.assertEqual(md, "## Title\n\nSome text\n\n1. One: first\n\n2. Two\n\n- Bullet")

    def test_markdown_preformatted_block(self) -> None:
        a = find_by_id(ARTICLES, "clean-architecture")
        assert a is not None
        md = article_markdown(a)
        self.assertIn("```\nsrc/\n  domain/", md)


if __name__ == "__main__":
    unittest.main()
