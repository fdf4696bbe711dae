#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
base_linker.py - Abstract base class for all linker commands

This module defines the BaseLinker class, which provides the common
interface and shared functionality for the commands run on the active note.
"""

import time
import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional, Type

from ..core.vault import Vault
from ..core.ui import Chooser, ConsoleChooser, ConsoleNotifier, Notifier

logger = logging.getLogger(__name__)

NO_ACTIVE_FILE = "No active file open."


class BaseLinker(ABC):
    """
    Abstract base class for all linker commands.

    Every command works on one note at a time: it reads the full text,
    transforms it in memory and writes it back in a single call.
    """

    # Command id - subclasses should override
    TYPE = "base"

    def __init__(self, vault: Vault, notifier: Optional[Notifier] = None,
                 chooser: Optional[Chooser] = None):
        """
        Initialize the linker.

        Args:
            vault: Where notes are read from and written to
            notifier: Where status notices go (defaults to the console)
            chooser: Picker used by commands that ask the user to choose
        """
        self.vault = vault
        self.notifier = notifier or ConsoleNotifier()
        self.chooser = chooser or ConsoleChooser()

    def run(self, document_id: Optional[str]) -> bool:
        """
        Run the command on the active note.

        Args:
            document_id: The active note, or None when no note is open

        Returns:
            True if the note was written, False otherwise
        """
        if not document_id:
            self.notify(NO_ACTIVE_FILE)
            return False

        if not self.vault.is_markdown(document_id):
            logger.debug("Skipping %s: not a markdown note", document_id)
            return False

        start_time = time.time()
        written = self.process(document_id)
        logger.debug("%s on %s completed in %.2fs", self.TYPE, document_id, time.time() - start_time)
        return written

    @abstractmethod
    def process(self, document_id: str) -> bool:
        """
        Transform one note.

        Args:
            document_id: The note to process

        Returns:
            True if the note was written, False otherwise
        """

    def notify(self, message: str) -> None:
        """Show a status notice."""
        logger.debug("Notice: %s", message)
        self.notifier.notify(message)

    def save(self, document_id: str, text: str) -> None:
        """Write the note back in one piece."""
        self.vault.write_document(document_id, text)


# Registry of linker implementations, keyed by command id
linker_registry: Dict[str, Type[BaseLinker]] = {}
