"""
CLI (Command Line Interface).

This module provides one command per site page, e.g.:

    cleanddd home
    cleanddd catalog [query] --category patterns
    cleanddd article <article_id>
    cleanddd events
    cleanddd event <event_id>
    cleanddd register <event_id> --option Regular
    cleanddd frameworks [--offline]
    cleanddd interactive

Note:
- The interactive UI lives in cleanddd/interactive.py
- This CLI is intentionally simple and prints plain text (no rich formatting)
"""

from __future__ import annotations

import argparse
import logging

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
from cleanddd.content import ARTICLES, EVENTS, FRAMEWORKS
from cleanddd.frameworks import REQUEST_TIMEOUT, load_frameworks
from cleanddd.model import ALL_CATEGORY, CATEGORIES, CATEGORY_IDS, Article, Event
from cleanddd.registration import RegistrationError, RegistrationForm

NO_RESULTS = "No articles found for your search criteria."


def _article_line(a: Article) -> str:
    return f"{a.id} | {a.title} | {a.tag} | {a.read_time}"


def _event_line(e: Event) -> str:
    return f"{e.id} | {e.title} | {e.date} | {e.location}"


def _cmd_home(args: argparse.Namespace) -> int:
    """
    Print the home page sections: featured knowledge and upcoming events.
    """
    print("Clean DDD Community")
    print("\nKnowledge Base:")
    for a in featured_articles(ARTICLES):
        print(f"- {_article_line(a)}")
    print("\nUpcoming Events:")
    for e in upcoming_events(EVENTS, limit=3):
        print(f"- {_event_line(e)}")
    return 0


def _cmd_catalog(args: argparse.Namespace) -> int:
    """
    Filter the knowledge catalog by category and substring query.
    """
    query = (args.query or "").strip()
    category = args.category

    counts = category_counts(ARTICLES, query)
    tabs = []
    for c in CATEGORIES:
        marker = "*" if c.id == category else " "
        tabs.append(f"{marker}{c.name} ({counts[c.id]})")
    print(" | ".join(tabs))

    matches = filter_articles(ARTICLES, category, query)
    if not matches:
        print(NO_RESULTS)
        if query:
            print("Run again without a query to clear the search.")
        return 0

    for a in matches:
        print(_article_line(a))
        print(f"    {a.description}")
    return 0


def _cmd_article(args: argparse.Namespace) -> int:
    """
    Print one article with its table of contents and related articles.
    """
    article = find_by_id(ARTICLES, args.article_id)
    if article is None:
        print("Article Not Found")
        print("The article you're looking for could not be found.")
        return 1

    print(article.title)
    print(f"{article.author} | {article.created_at} | {article.read_time}")

    toc = table_of_contents(article)
    if toc:
        print("\nTable of Contents:")
        for level, heading in toc:
            print(f"{'  ' * level}- {heading}")

    print()
    print(article_markdown(article))

    print(f"\nTags: DDD, Domain-Driven Design, {article.tag}, Software Design")

    related = resolve_related(article, ARTICLES)
    if related:
        print("\nRelated Articles:")
        for r in related:
            print(f"- {r.id} | {r.title} | {r.read_time}")
    return 0


def _cmd_events(args: argparse.Namespace) -> int:
    for e in upcoming_events(EVENTS):
        print(_event_line(e))
        print(f"    {e.description}")
        print(f"    {e.attendees} attendees")
    return 0


def _print_registration(event: Event) -> None:
    reg = event.registration
    print("\nRegistration:")
    if not reg.open:
        print("Registration is currently closed")
        return
    print(f"Registration is open until {reg.deadline}")
    for o in reg.options:
        status = "" if o.available else " (Sold Out)"
        print(f"- {o.type} | {o.price}{status}")


def _cmd_event(args: argparse.Namespace) -> int:
    """
    Print one event: schedule, past editions, speakers, registration, venue.
    """
    event = find_by_id(EVENTS, args.event_id)
    if event is None:
        print("Event Not Found")
        print("The event you're looking for could not be found.")
        return 1

    print(event.title)
    print(f"{event.date} | {event.time} | {event.location} | {event.attendees} expected attendees")
    print()
    print(event.long_description)

    print("\nEvent Schedule:")
    for day in event.schedule:
        print(f"{day.day} - {day.date}")
        for s in day.sessions:
            speaker = f" (Speaker: {s.speaker})" if s.speaker else ""
            print(f"  {s.time}  {s.title}{speaker}")

    if event.past_events:
        print("\nPast Events:")
        for p in event.past_events:
            topic = f" | {p.topic}" if p.topic else ""
            print(f"- {p.year} | {p.location} | {p.attendees}{topic}")

    print("\nSpeakers: " + ", ".join(event.speakers))

    _print_registration(event)

    print("\nVenue Information:")
    print(f"{event.venue}, {event.venue_address}")
    if event.is_online:
        print("Connection details will be sent after registration.")
    if event.has_link:
        print(f"Website: {event.link}")

    others = other_events(EVENTS, event.id)
    if others:
        print("\nOther Events You Might Like:")
        for e in others:
            print(f"- {_event_line(e)}")
    return 0


def _cmd_register(args: argparse.Namespace) -> int:
    """
    Register for an event in one shot. Nothing is stored.
    """
    event = find_by_id(EVENTS, args.event_id)
    if event is None:
        print("Event Not Found")
        return 1

    form = RegistrationForm(event)
    option = (args.option or "").strip()
    try:
        if option:
            form.select(option)
        receipt = form.submit()
    except RegistrationError as e:
        print(str(e))
        return 1

    print("Registration successful!")
    print(receipt.message)
    return 0


def _cmd_frameworks(args: argparse.Namespace) -> int:
    for fw, intro in load_frameworks(FRAMEWORKS, offline=args.offline, timeout=args.timeout):
        print(f"{fw.name} ({fw.description})")
        print(f"    {intro}")
        print(f"    {fw.repo_url}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="cleanddd", description="Clean DDD community site")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("home", help="Show featured articles and upcoming events")

    p_catalog = sub.add_parser("catalog", help="Browse the knowledge catalog")
    p_catalog.add_argument("query", type=str, nargs="?", default="", help="Search text (title or description)")
    p_catalog.add_argument(
        "--category", "-c", choices=CATEGORY_IDS, default=ALL_CATEGORY, help="Catalog category"
    )

    p_article = sub.add_parser("article", help="Read an article")
    p_article.add_argument("article_id", type=str, help="Article ID (e.g. strategic-ddd)")

    sub.add_parser("events", help="List community events")

    p_event = sub.add_parser("event", help="Show event details")
    p_event.add_argument("event_id", type=str, help="Event ID (e.g. ddd-europe-2025)")

    p_register = sub.add_parser("register", help="Register for an event")
    p_register.add_argument("event_id", type=str, help="Event ID (e.g. ddd-europe-2025)")
    p_register.add_argument("--option", "-o", type=str, default="", help="Registration type (e.g. Regular)")

    p_fw = sub.add_parser("frameworks", help="Show Clean DDD frameworks")
    p_fw.add_argument("--offline", action="store_true", help="Do not query the GitHub API")
    p_fw.add_argument("--timeout", type=float, default=REQUEST_TIMEOUT, help="Request timeout in seconds")

    sub.add_parser("interactive", help="Interactive menu mode")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "home":
        raise SystemExit(_cmd_home(args))
    if args.command == "catalog":
        raise SystemExit(_cmd_catalog(args))
    if args.command == "article":
        raise SystemExit(_cmd_article(args))
    if args.command == "events":
        raise SystemExit(_cmd_events(args))
    if args.command == "event":
        raise SystemExit(_cmd_event(args))
    if args.command == "register":
        raise SystemExit(_cmd_register(args))
    if args.command == "frameworks":
        raise SystemExit(_cmd_frameworks(args))

    if args.command == "interactive":
        from cleanddd.interactive import run_interactive

        run_interactive()
        raise SystemExit(0)

    raise SystemExit(2)
