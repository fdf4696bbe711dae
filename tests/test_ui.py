#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
test_ui.py - Unit tests for notices and the mention pickers

This module contains unit tests for mention filtering and the choosers.
"""

import sys
import os
import unittest

# Add the parent directory to the Python path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from auto_linker.core.note import Mention
from auto_linker.core.ui import ConsoleChooser, ConsoleNotifier, FixedChooser, filter_mentions

MENTIONS = [
    Mention("Rustlang", "Rust", 3),
    Mention("Python", "Python", 10),
    Mention("rust-analyzer", "Tooling", 20),
]


def scripted(*answers):
    """Reader returning the given answers in turn, then EOF."""
    remaining = list(answers)

    def reader(prompt):
        if not remaining:
            raise EOFError
        return remaining.pop(0)
    return reader


class TestFilterMentions(unittest.TestCase):
    """Test cases for filter_mentions."""

    def test_substring_ignoring_case(self):
        """Test that the query matches anywhere in the alias."""
        self.assertEqual([m.alias for m in filter_mentions(MENTIONS, "RUST")], ["Rustlang", "rust-analyzer"])

    def test_empty_query(self):
        """Test that an empty query keeps everything."""
        self.assertEqual(filter_mentions(MENTIONS, ""), MENTIONS)


class TestFixedChooser(unittest.TestCase):
    """Test cases for FixedChooser."""

    def test_offered_alias(self):
        """Test that an offered alias is returned with its catalog spelling."""
        self.assertEqual(FixedChooser("python").present_choices(MENTIONS), "Python")

    def test_alias_not_offered(self):
        """Test that an alias that was not proposed counts as dismissed."""
        self.assertIsNone(FixedChooser("Go").present_choices(MENTIONS))
        self.assertIsNone(FixedChooser(None).present_choices(MENTIONS))


class TestConsoleChooser(unittest.TestCase):
    """Test cases for ConsoleChooser."""

    def setUp(self):
        self.output = []

    def chooser(self, *answers, query=""):
        return ConsoleChooser(query=query, reader=scripted(*answers), printer=self.output.append)

    def test_pick_by_number(self):
        """Test picking an entry by its number."""
        self.assertEqual(self.chooser("2").present_choices(MENTIONS), "Python")
        self.assertEqual(len(self.output), 3)

    def test_filter_then_pick(self):
        """Test narrowing the list before picking."""
        self.assertEqual(self.chooser("analyzer", "1").present_choices(MENTIONS), "rust-analyzer")

    def test_initial_query(self):
        """Test that the initial query narrows the first listing."""
        self.assertEqual(self.chooser("1", query="py").present_choices(MENTIONS), "Python")
        self.assertEqual(len(self.output), 1)

    def test_out_of_range_then_dismiss(self):
        """Test that a bad number asks again and an empty line dismisses."""
        self.assertIsNone(self.chooser("9", "").present_choices(MENTIONS))
        self.assertIn("No entry 9.", self.output)

    def test_superscript_digit_is_filter_text(self):
        """Test that digit-like characters int() cannot parse narrow the list instead."""
        self.assertIsNone(self.chooser("²", "").present_choices(MENTIONS))
        self.assertIn('No mentions match "²".', self.output)

    def test_end_of_input(self):
        """Test that end of input dismisses the picker."""
        self.assertIsNone(self.chooser().present_choices(MENTIONS))


class TestConsoleNotifier(unittest.TestCase):
    """Test cases for ConsoleNotifier."""

    def test_prints_message(self):
        """Test that notices go to the printer."""
        output = []
        ConsoleNotifier(printer=output.append).notify("Links updated in: A.md")
        self.assertEqual(output, ["Links updated in: A.md"])


if __name__ == '__main__':
    unittest.main()
