#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
test_processor.py - Unit tests for the LinkProcessor entry point

This module contains unit tests for command dispatch and the checks every
command shares.
"""

import sys
import os
import unittest

# Add the parent directory to the Python path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from auto_linker import LinkProcessor, linker_registry
from auto_linker.core.config import COMMANDS
from auto_linker.core.ui import FixedChooser, Notifier
from auto_linker.core.vault import InMemoryVault


class RecordingNotifier(Notifier):
    """Keeps every notice for inspection."""

    def __init__(self):
        self.messages = []

    def notify(self, message):
        self.messages.append(message)


class TestLinkProcessor(unittest.TestCase):
    """Test cases for LinkProcessor."""

    def setUp(self):
        self.vault = InMemoryVault({
            "Rust.md": "---\naliases: [Rustlang]\n---\nA language.\n",
            "Journal.md": "Rustlang [[Python]] and [[Python]].",
            "Python.md": "Snakes.",
            "notes.txt": "[[Python]] [[Python]]",
        })
        self.notifier = RecordingNotifier()
        self.processor = LinkProcessor(self.vault, self.notifier, FixedChooser("Rustlang"))

    def test_every_command_registered(self):
        """Test that every command offered on the command line exists."""
        self.assertEqual(sorted(linker_registry), sorted(COMMANDS))

    def test_no_active_file(self):
        """Test that every command reports a missing note and does no I/O."""
        for command in COMMANDS:
            self.assertFalse(self.processor.run_command(command, None))

        self.assertEqual(self.notifier.messages, ["No active file open."] * len(COMMANDS))
        self.assertEqual(self.vault.reads, [])
        self.assertEqual(self.vault.writes, [])

    def test_non_markdown_ignored(self):
        """Test that non-markdown documents are skipped silently."""
        self.assertFalse(self.processor.remove_duplicate_links("notes.txt"))
        self.assertEqual(self.notifier.messages, [])
        self.assertEqual(self.vault.reads, [])

    def test_unknown_command(self):
        """Test that an unknown command id raises."""
        with self.assertRaises(ValueError):
            self.processor.run_command("rename-everything", "Journal.md")

    def test_update_links(self):
        """Test the update-links command through the processor."""
        self.assertTrue(self.processor.update_links("Journal.md"))
        self.assertEqual(
            self.vault.documents["Journal.md"],
            "links: [[Python]]\n\nRustlang [[Python]] and [[Python]].")

    def test_update_and_clean_links(self):
        """Test the combined command through the processor."""
        self.assertTrue(self.processor.update_and_clean_links("Journal.md"))
        self.assertEqual(
            self.vault.documents["Journal.md"],
            "links: [[Python]]\n\nRustlang [[Python]] and Python.")

    def test_remove_duplicate_links_without_links_line(self):
        """Test that duplicates are only removed below a links line."""
        self.assertFalse(self.processor.remove_duplicate_links("Journal.md"))
        self.assertEqual(self.notifier.messages, ["No duplicate links found."])

    def test_find_unlinked_mentions(self):
        """Test the mention command through the processor."""
        self.assertTrue(self.processor.find_unlinked_mentions("Journal.md"))
        self.assertEqual(
            self.vault.documents["Journal.md"],
            "[[Rust|Rustlang]] [[Python]] and [[Python]].")
        self.assertEqual(self.notifier.messages, ["Linked mention: [[Rust|Rustlang]]"])


if __name__ == '__main__':
    unittest.main()
