#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
test_duplicates.py - Unit tests for duplicate link removal

This module contains unit tests for demoting repeated links to plain text
and for the combined update-and-clean command.
"""

import sys
import os
import unittest

# Add the parent directory to the Python path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from auto_linker.core.ui import Notifier
from auto_linker.core.vault import InMemoryVault
from auto_linker.linkers.duplicates import DuplicateLinker, UpdateAndCleanLinker, collapse_duplicate_links


class RecordingNotifier(Notifier):
    """Keeps every notice for inspection."""

    def __init__(self):
        self.messages = []

    def notify(self, message):
        self.messages.append(message)


class TestCollapseDuplicateLinks(unittest.TestCase):
    """Test cases for collapse_duplicate_links."""

    def test_later_occurrences_demoted_with_their_own_text(self):
        """Test that any later link to a seen target becomes plain text."""
        content = "links: [[Alpha]], [[Alpha|A]], [[Beta]]\n\n[[Alpha]] ... [[Alpha|A]] ... [[Alpha]]"
        self.assertEqual(
            collapse_duplicate_links(content),
            "links: [[Alpha]], [[Alpha|A]], [[Beta]]\n\n[[Alpha]] ... A ... Alpha")

    def test_sections_are_distinct_targets(self):
        """Test that a section anchor makes a separate key."""
        content = "links:\n[[Note]] [[Note#Part]] [[Note#Part|p]] [[Note#Other]]"
        self.assertEqual(
            collapse_duplicate_links(content),
            "links:\n[[Note]] [[Note#Part]] p [[Note#Other]]")

    def test_embeds_untouched(self):
        """Test that embeds are neither demoted nor counted."""
        content = "links:\n![[Image]] [[Image]] ![[Image]] [[Image]]"
        self.assertEqual(collapse_duplicate_links(content), "links:\n![[Image]] [[Image]] ![[Image]] Image")

    def test_content_above_links_line_untouched(self):
        """Test that only lines after the links line are rewritten."""
        content = "[[A]] [[A]]\nlinks: [[A]]\n[[A]] [[A]]"
        self.assertEqual(collapse_duplicate_links(content), "[[A]] [[A]]\nlinks: [[A]]\n[[A]] A")

    def test_without_links_line_nothing_changes(self):
        """Test that a note without a links line is left alone."""
        content = "[[A]] and [[A]] again"
        self.assertEqual(collapse_duplicate_links(content), content)

    def test_frontmatter_untouched(self):
        """Test that the frontmatter is never rewritten."""
        frontmatter = "---\nlinks: [[A]]\nrelated: \"[[A]] [[A]]\"\n---"
        content = frontmatter + "\nlinks: [[A]]\n\n[[A]] then [[A]]\n"
        updated = collapse_duplicate_links(content)
        self.assertTrue(updated.startswith(frontmatter))
        self.assertEqual(updated, frontmatter + "\nlinks: [[A]]\n\n[[A]] then A\n")

    def test_idempotent(self):
        """Test that running twice gives the same result as once."""
        content = "links:\n[[A]] [[B|b]] [[A|x]]\n[[B]] [[C#s]] [[C#s|y]]\n"
        once = collapse_duplicate_links(content)
        self.assertNotEqual(once, content)
        self.assertEqual(collapse_duplicate_links(once), once)


class TestDuplicateLinker(unittest.TestCase):
    """Test cases for the remove-duplicate-links command."""

    def test_writes_and_notifies(self):
        """Test that a note with duplicates is written back."""
        vault = InMemoryVault({"Note.md": "links:\n[[A]] [[A]]"})
        notifier = RecordingNotifier()

        self.assertTrue(DuplicateLinker(vault, notifier).run("Note.md"))
        self.assertEqual(vault.documents["Note.md"], "links:\n[[A]] A")
        self.assertEqual(notifier.messages, ["Duplicate links removed in: Note.md"])

    def test_second_run_finds_nothing(self):
        """Test that the second run reports no duplicates and writes nothing."""
        vault = InMemoryVault({"Note.md": "links:\n[[A]] [[A]]"})
        notifier = RecordingNotifier()
        linker = DuplicateLinker(vault, notifier)

        linker.run("Note.md")
        self.assertFalse(linker.run("Note.md"))
        self.assertEqual(vault.writes, ["Note.md"])
        self.assertEqual(notifier.messages[-1], "No duplicate links found.")


class TestUpdateAndCleanLinker(unittest.TestCase):
    """Test cases for the update-and-clean-links command."""

    def test_update_then_clean(self):
        """Test that both steps run in order and a summary is shown."""
        vault = InMemoryVault({"Note.md": "See [[A]] and [[A|a]] and [[B]]."})
        notifier = RecordingNotifier()

        self.assertTrue(UpdateAndCleanLinker(vault, notifier).run("Note.md"))
        self.assertEqual(
            vault.documents["Note.md"],
            "links: [[A]], [[A|a]], [[B]]\n\nSee [[A]] and a and [[B]].")
        self.assertEqual(notifier.messages, [
            "Links updated in: Note.md",
            "Duplicate links removed in: Note.md",
            "Links updated and cleaned in: Note.md",
        ])


if __name__ == '__main__':
    unittest.main()
