"""
Tests for CLI entry points.

These tests focus on:
- exit codes (0 for normal pages and empty search results, 1 for not-found and
  rejected registrations)
- the key lines each page prints
"""

import io
import unittest
from contextlib import redirect_stdout
from typing import List, Tuple
from unittest import mock

from cleanddd.cli import main


def run_cli(argv: List[str]) -> Tuple[int, str]:
    buf = io.StringIO()
    with redirect_stdout(buf):
        try:
            main(argv)
        except SystemExit as e:
            code = e.code
        else:
            code = 0
    return int(code or 0), buf.getvalue()


class TestCLI(unittest.TestCase):
    def test_command_is_required(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            with redirect_stdout(io.StringIO()), mock.patch("sys.stderr", new=io.StringIO()):
                main([])
        self.assertNotEqual(ctx.exception.code, 0)

    def test_home(self) -> None:
        code, out = run_cli(["home"])
        self.assertEqual(code, 0)
        self.assertIn("Strategic Domain-Driven Design", out)
        self.assertIn("Domain Modeling Meetup", out)

    def test_catalog_category(self) -> None:
        code, out = run_cli(["catalog", "--category", "patterns"])
        self.assertEqual(code, 0)
        self.assertIn("tactical-patterns | Tactical Patterns in DDD", out)
        self.assertIn("domain-events | Working with Domain Events", out)
        self.assertNotIn("strategic-ddd |", out)
        self.assertIn("*Patterns (2)", out)

    def test_catalog_query_order(self) -> None:
        code, out = run_cli(["catalog", "EVENT"])
        self.assertEqual(code, 0)
        positions = [out.index(i + " |") for i in ("tactical-patterns", "event-storming", "domain-events")]
        self.assertEqual(positions, sorted(positions))

    def test_catalog_no_results_is_not_an_error(self) -> None:
        code, out = run_cli(["catalog", "zzz-no-match"])
        self.assertEqual(code, 0)
        self.assertIn("No articles found for your search criteria.", out)

    def test_catalog_rejects_unknown_category(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            with mock.patch("sys.stderr", new=io.StringIO()):
                main(["catalog", "--category", "recipes"])
        self.assertNotEqual(ctx.exception.code, 0)

    def test_article(self) -> None:
        code, out = run_cli(["article", "strategic-ddd"])
        self.assertEqual(code, 0)
        self.assertIn("Eric Evans | 2025-01-15 | 12 min read", out)
        self.assertIn("Table of Contents:", out)
        self.assertIn("Tags: DDD, Domain-Driven Design, Guide, Software Design", out)
        self.assertIn("- tactical-patterns | Tactical Patterns in DDD", out)

    def test_article_not_found(self) -> None:
        code, out = run_cli(["article", "nonexistent-id"])
        self.assertEqual(code, 1)
        self.assertIn("Article Not Found", out)

    def test_events(self) -> None:
        code, out = run_cli(["events"])
        self.assertEqual(code, 0)
        self.assertIn("ddd-europe-2025 | DDD Europe Conference", out)

    def test_event_detail(self) -> None:
        code, out = run_cli(["event", "clean-architecture-workshop"])
        self.assertEqual(code, 0)
        self.assertIn("Registration is open until July 20, 2025", out)
        self.assertIn("- Early Bird | $249 (Sold Out)", out)
        self.assertIn("Connection details will be sent after registration.", out)
        self.assertNotIn("Website:", out)
        self.assertIn("Other Events You Might Like:", out)

    def test_event_not_found(self) -> None:
        code, out = run_cli(["event", "nonexistent-id"])
        self.assertEqual(code, 1)
        self.assertIn("Event Not Found", out)

    def test_register_requires_option(self) -> None:
        code, out = run_cli(["register", "ddd-europe-2025"])
        self.assertEqual(code, 1)
        self.assertIn("Please select a registration type", out)
        self.assertNotIn("Registration successful!", out)

    def test_register_blank_option_counts_as_no_selection(self) -> None:
        code, out = run_cli(["register", "ddd-europe-2025", "--option", "  "])
        self.assertEqual(code, 1)
        self.assertIn("Please select a registration type", out)
        self.assertNotIn("Unknown registration type", out)

    def test_register_success(self) -> None:
        code, out = run_cli(["register", "ddd-europe-2025", "--option", "Regular"])
        self.assertEqual(code, 0)
        self.assertIn("You have registered for DDD Europe Conference (Regular)", out)

    def test_register_sold_out(self) -> None:
        code, out = run_cli(["register", "ddd-europe-2025", "--option", "Early Bird"])
        self.assertEqual(code, 1)
        self.assertIn("sold out", out)

    def test_frameworks_offline(self) -> None:
        code, out = run_cli(["frameworks", "--offline"])
        self.assertEqual(code, 0)
        self.assertIn("NetCorePal Cloud Framework", out)
        self.assertIn("A Java implementation of the CAP protocol", out)

    def test_interactive_dispatch(self) -> None:
        with mock.patch("cleanddd.interactive.run_interactive") as run:
            code, _ = run_cli(["interactive"])
        self.assertEqual(code, 0)
        run.assert_called_once_with()


if __name__ == "__main__":
    unittest.main()
