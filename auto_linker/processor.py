#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
processor.py - Single entry point for the note commands

LinkProcessor binds a vault, a notifier and a chooser together and runs the
registered commands against whichever note is active.
"""

import logging
from typing import Optional

from .core.vault import Vault
from .core.ui import Chooser, Notifier
from .linkers.base_linker import linker_registry

logger = logging.getLogger(__name__)


class LinkProcessor:
    """
    Runs link commands on the active note.

    Attributes:
        vault: Where notes are read from and written to
        notifier: Where status notices go
        chooser: Picker for the mention command
    """

    def __init__(self, vault: Vault, notifier: Optional[Notifier] = None, chooser: Optional[Chooser] = None):
        self.vault = vault
        self.notifier = notifier
        self.chooser = chooser

    def run_command(self, command: str, document_id: Optional[str]) -> bool:
        """
        Run a command by id.

        Args:
            command: One of the registered command ids
            document_id: The active note, or None when no note is open

        Returns:
            True if the note was written, False otherwise
        """
        if command not in linker_registry:
            raise ValueError(f"Unknown command: {command}")

        logger.debug("Running %s on %s", command, document_id)
        linker = linker_registry[command](self.vault, self.notifier, self.chooser)
        return linker.run(document_id)

    def update_links(self, document_id: Optional[str]) -> bool:
        """Refresh the "links:" line of the note."""
        return self.run_command("update-links", document_id)

    def remove_duplicate_links(self, document_id: Optional[str]) -> bool:
        """Demote repeated links below the "links:" line."""
        return self.run_command("remove-duplicate-links", document_id)

    def update_and_clean_links(self, document_id: Optional[str]) -> bool:
        """Refresh the "links:" line, then demote repeated links."""
        return self.run_command("update-and-clean-links", document_id)

    def find_unlinked_mentions(self, document_id: Optional[str]) -> bool:
        """Offer unlinked mentions and link the chosen one."""
        return self.run_command("find-unlinked-mentions", document_id)
