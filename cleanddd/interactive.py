from __future__ import annotations

from typing import Optional

from rich import box
from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.table import Table

from cleanddd.catalog import (
    article_markdown,
    category_counts,
    filter_articles,
    find_by_id,
    other_events,
    resolve_related,
    table_of_contents,
    upcoming_events,
)
from cleanddd.content import ARTICLES, EVENTS, FRAMEWORKS
from cleanddd.frameworks import load_frameworks
from cleanddd.model import ALL_CATEGORY, CATEGORIES, Article, Event
from cleanddd.registration import RegistrationError, RegistrationForm

console = Console()


def _println(msg: str = "") -> None:
    console.print(msg)


def _prompt(msg: str) -> str:
    # menu hints such as [r] are literal text, not markup
    return console.input(escape(msg))


def _pick_number(raw: str, upper: int) -> Optional[int]:
    """
    Parse a 1-based menu choice. Prints a hint and returns None when invalid.
    """
    if not raw.isdigit():
        _println("Not a number.")
        return None
    i = int(raw)
    if not (1 <= i <= upper):
        _println("Out of range.")
        return None
    return i


def run_interactive() -> None:
    """
    Interactive menu loop over the site's pages.
    """
    while True:
        _println("\n=== Clean DDD Community (interactive) ===")
        _println(f"Articles: {len(ARTICLES)} | Events: {len(EVENTS)} | Frameworks: {len(FRAMEWORKS)}")

        choice = _prompt(
            "\n[1] Knowledge catalog\n"
            "[2] Read article by id\n"
            "[3] Events\n"
            "[4] Frameworks\n"
            "[0] Exit\n"
            "Select: "
        ).strip()

        if choice == "0":
            _println("Bye.")
            return

        if choice == "1":
            _flow_catalog()
        elif choice == "2":
            article_id = _prompt("Article id [blank = back]: ").strip()
            if article_id:
                _flow_article(article_id)
        elif choice == "3":
            _flow_events()
        elif choice == "4":
            _flow_frameworks()
        else:
            _println("Invalid choice.")


# ---------------------------------------------------------------------------
# Knowledge
# ---------------------------------------------------------------------------


def _print_tabs(category: str, query: str) -> None:
    counts = category_counts(ARTICLES, query)
    bits = []
    for c in CATEGORIES:
        label = f"{c.name} ({counts[c.id]})"
        bits.append(f"[bold cyan]{label}[/]" if c.id == category else label)
    _println(" | ".join(bits))


def _flow_catalog() -> None:
    """
    Catalog page: category tabs, search box, article cards.
    """
    category = ALL_CATEGORY
    query = ""

    while True:
        _println("")
        _print_tabs(category, query)
        if query:
            _println(f"Search: [yellow]{escape(query)}[/]")

        matches = filter_articles(ARTICLES, category, query)

        if not matches:
            _println("No articles found for your search criteria.")
            clear = _prompt("Clear search? [Y/n]: ").strip().lower()
            if clear == "n":
                return
            query = ""
            continue

        table = Table(title="Knowledge Catalog", box=box.SIMPLE)
        table.add_column("#", justify="right")
        table.add_column("Article")
        table.add_column("Tag")
        table.add_column("Read time")
        for i, a in enumerate(matches, start=1):
            table.add_row(str(i), f"[bold]{escape(a.title)}[/]\n{escape(a.description)}", a.tag, a.read_time)
        console.print(table)

        pick = _prompt("Number = read, [c] category, [s] search, [x] clear search, blank = back: ").strip().lower()
        if not pick:
            return
        if pick == "c":
            category = _choose_category(category)
            continue
        if pick == "s":
            query = _prompt("Search resources: ").strip()
            continue
        if pick == "x":
            query = ""
            continue

        i = _pick_number(pick, len(matches))
        if i is not None:
            _flow_article(matches[i - 1].id)


def _choose_category(current: str) -> str:
    for i, c in enumerate(CATEGORIES, start=1):
        _println(f"{i}) {c.name}")
    pick = _prompt("Category number [blank = keep]: ").strip()
    if not pick:
        return current
    i = _pick_number(pick, len(CATEGORIES))
    return CATEGORIES[i - 1].id if i is not None else current


def _print_article(article: Article) -> None:
    _println(f"\n[bold]{escape(article.title)}[/]")
    _println(f"[magenta]{escape(article.author)}[/] | {article.created_at} | {article.read_time}")

    toc = table_of_contents(article)
    if toc:
        _println("\n[bold]Table of Contents[/]")
        for level, heading in toc:
            _println(f"{'  ' * level}- {escape(heading)}")

    console.print(Markdown(article_markdown(article)))
    _println(f"\nTags: DDD, Domain-Driven Design, [green]{escape(article.tag)}[/], Software Design")


def _flow_article(article_id: str) -> None:
    """
    Article page. Related articles can be followed without going back to the menu.
    """
    while True:
        article = find_by_id(ARTICLES, article_id)
        if article is None:
            _println("[bold red]Article Not Found[/]")
            _println("The article you're looking for could not be found.")
            return

        _print_article(article)

        related = resolve_related(article, ARTICLES)
        if not related:
            _prompt("\nPress Enter to go back...")
            return

        _println("\n[bold]Related Articles[/]")
        for i, r in enumerate(related, start=1):
            _println(f"{i}) {escape(r.title)} ({r.read_time})")

        pick = _prompt("Open related article number [blank = back]: ").strip()
        if not pick:
            return
        i = _pick_number(pick, len(related))
        if i is None:
            return
        article_id = related[i - 1].id


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


def _flow_events() -> None:
    while True:
        events = upcoming_events(EVENTS)

        table = Table(title="Upcoming Events", box=box.SIMPLE)
        table.add_column("#", justify="right")
        table.add_column("Event")
        table.add_column("Date")
        table.add_column("Location")
        table.add_column("Attendees", justify="right")
        for i, e in enumerate(events, start=1):
            table.add_row(str(i), escape(e.title), e.date, escape(e.location), f"[yellow]{e.attendees}[/]")
        console.print(table)

        pick = _prompt("Select number for details, or blank to go back: ").strip()
        if not pick:
            return
        i = _pick_number(pick, len(events))
        if i is not None:
            _flow_event_detail(events[i - 1].id)


def _print_event(event: Event) -> None:
    _println(f"\n[bold]{escape(event.title)}[/]")
    _println(f"{event.date} | {event.time} | {escape(event.location)} | {event.attendees} expected attendees")
    _println(f"\n{escape(event.long_description)}")

    for day in event.schedule:
        table = Table(title=f"{day.day} - {day.date}", box=box.SIMPLE)
        table.add_column("Time")
        table.add_column("Session")
        table.add_column("Speaker")
        for s in day.sessions:
            table.add_row(s.time, escape(s.title), f"[magenta]{escape(s.speaker)}[/]" if s.speaker else "")
        console.print(table)

    if event.past_events:
        table = Table(title="Past Events", box=box.SIMPLE)
        table.add_column("Year/Date")
        table.add_column("Location")
        table.add_column("Attendees", justify="right")
        for p in event.past_events:
            table.add_row(p.year, p.location, str(p.attendees))
        console.print(table)

    _println("Speakers: " + ", ".join(escape(s) for s in event.speakers))
    _println(f"Venue: {escape(event.venue)}, {escape(event.venue_address)}")
    if event.is_online:
        _println("Connection details will be sent after registration.")
    if event.has_link:
        _println(f"Website: {event.link}")

    others = other_events(EVENTS, event.id)
    if others:
        _println("\nOther events you might like: " + ", ".join(escape(e.title) for e in others))


def _flow_event_detail(event_id: str) -> None:
    """
    Event page with registration. The selected option only lives inside this flow.
    """
    event = find_by_id(EVENTS, event_id)
    if event is None:
        _println("[bold red]Event Not Found[/]")
        return

    _print_event(event)
    form = RegistrationForm(event)

    if not form.is_open:
        _println("\nRegistration is currently closed")
        _prompt("Press Enter to go back...")
        return

    while True:
        options = event.registration.options
        _println(f"\n[bold]Registration[/] (open until {event.registration.deadline})")
        for i, o in enumerate(options, start=1):
            mark = "(x)" if form.selected == o else "( )"
            if o.available:
                _println(f"{i}) {mark} {escape(o.type)} - {escape(o.price)}")
            else:
                _println(f"{i})     {escape(o.type)} - {escape(o.price)} [italic]Sold Out[/]")

        pick = _prompt("Number = choose option, [r] register now, blank = back: ").strip().lower()
        if not pick:
            return
        if pick == "r":
            try:
                receipt = form.submit()
            except RegistrationError as e:
                _println(f"[bold red]{escape(str(e))}[/]")
                continue
            _println("[bold green]Registration successful![/]")
            _println(escape(receipt.message))
            continue

        i = _pick_number(pick, len(options))
        if i is None:
            continue
        try:
            form.select(options[i - 1].type)
        except RegistrationError as e:
            _println(f"[bold red]{escape(str(e))}[/]")


# ---------------------------------------------------------------------------
# Frameworks
# ---------------------------------------------------------------------------


def _flow_frameworks() -> None:
    with console.status("Loading framework information..."):
        entries = load_frameworks(FRAMEWORKS)

    table = Table(title="Clean DDD Frameworks", box=box.SIMPLE)
    table.add_column("Framework")
    table.add_column("Introduction")
    table.add_column("Repository")
    for fw, intro in entries:
        table.add_row(f"[bold]{escape(fw.name)}[/]\n{escape(fw.description)}", escape(intro), fw.repo_url)
    console.print(table)
