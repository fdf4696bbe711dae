#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ui.py - User-facing surfaces used by the commands

Notifiers show short status notices. Choosers let the user pick one of the
proposed mentions; returning None means the picker was dismissed.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Sequence

from .note import Mention

logger = logging.getLogger(__name__)


def filter_mentions(mentions: Sequence[Mention], query: str) -> List[Mention]:
    """
    Narrow mentions to those whose alias contains the query, ignoring case.

    Args:
        mentions: Mentions in the order they should be offered
        query: Text typed by the user

    Returns:
        Matching mentions, order preserved
    """
    lowered = query.lower()
    return [mention for mention in mentions if lowered in mention.alias.lower()]


class Notifier(ABC):
    """Fire-and-forget status surface."""

    @abstractmethod
    def notify(self, message: str) -> None:
        """Show a notice to the user."""


class ConsoleNotifier(Notifier):
    """Prints notices to the terminal."""

    def __init__(self, printer: Callable[[str], None] = print):
        self.printer = printer

    def notify(self, message: str) -> None:
        self.printer(message)


class Chooser(ABC):
    """Single-choice picker over proposed mentions."""

    @abstractmethod
    def present_choices(self, mentions: Sequence[Mention]) -> Optional[str]:
        """
        Let the user pick a mention.

        Args:
            mentions: Mentions sorted by position in the note

        Returns:
            The chosen alias, or None if the picker was dismissed
        """


class FixedChooser(Chooser):
    """
    Picks an alias decided in advance.

    The alias is returned only if it is among the offered mentions
    (case-insensitively); otherwise the picker counts as dismissed.
    """

    def __init__(self, alias: Optional[str]):
        self.alias = alias

    def present_choices(self, mentions: Sequence[Mention]) -> Optional[str]:
        if not self.alias:
            return None
        for mention in mentions:
            if mention.alias.lower() == self.alias.lower():
                return mention.alias
        logger.info('"%s" is not among the proposed mentions', self.alias)
        return None


class ConsoleChooser(Chooser):
    """
    Numbered list on the terminal.

    Typing a number picks that entry, typing anything else narrows the list
    to aliases containing the text, and an empty line dismisses the picker.
    """

    def __init__(self, query: str = "", reader: Callable[[str], str] = input,
                 printer: Callable[[str], None] = print):
        self.query = query
        self.reader = reader
        self.printer = printer

    def present_choices(self, mentions: Sequence[Mention]) -> Optional[str]:
        query = self.query
        while True:
            shown = filter_mentions(mentions, query)
            if not shown:
                self.printer(f'No mentions match "{query}".')
            for number, mention in enumerate(shown, start=1):
                self.printer(f"{number:3d}. {mention.alias}  ->  [[{mention.note}]]")

            try:
                answer = self.reader("Link which mention? (number, filter text, or empty to cancel) ").strip()
            except EOFError:
                return None

            if not answer:
                return None
            # isdigit() also accepts characters such as "²" that int() rejects
            if answer.isdecimal():
                index = int(answer) - 1
                if 0 <= index < len(shown):
                    return shown[index].alias
                self.printer(f"No entry {answer}.")
                continue
            query = answer
