#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
vault.py - Access to the notes the commands operate on

The commands only need three things from wherever the notes live: read a
note's text, write it back in one piece, and list every note with its
aliases. Vault is that interface; FileVault serves a vault directory on
disk and InMemoryVault serves a plain dict of texts.
"""

import os
import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from tqdm import tqdm

from .config import config
from .note import CatalogNote, Note

logger = logging.getLogger(__name__)


class Vault(ABC):
    """
    Abstract store of notes, addressed by document id.
    """

    def __init__(self, markdown_extension: Optional[str] = None):
        self.markdown_extension = markdown_extension or config["markdown_extension"]

    @abstractmethod
    def read_document(self, document_id: str) -> str:
        """Return the full text of a note."""

    @abstractmethod
    def write_document(self, document_id: str, text: str) -> None:
        """Replace the full text of a note."""

    @abstractmethod
    def list_catalog_notes(self) -> List[CatalogNote]:
        """Return every note that mentions can be linked to."""

    def is_markdown(self, document_id: str) -> bool:
        """Check whether a document is a Markdown note."""
        return document_id.endswith(self.markdown_extension)

    def display_name(self, document_id: str) -> str:
        """File name used in notices."""
        return os.path.basename(document_id)


class FileVault(Vault):
    """
    A vault directory on disk.

    Document ids are paths relative to the vault root; absolute paths are
    used as given.
    """

    def __init__(self, vault_path: Optional[str] = None, markdown_extension: Optional[str] = None,
                 show_progress: Optional[bool] = None):
        """
        Initialize the vault.

        Args:
            vault_path: Path to the Obsidian vault (defaults to config value)
            markdown_extension: Extension of note files (defaults to config value)
            show_progress: Show a progress bar while listing notes
        """
        super().__init__(markdown_extension)
        self.vault_path = vault_path or config["vault_path"]
        if not self.vault_path:
            raise ValueError("No vault path provided")
        self.show_progress = config["show_progress"] if show_progress is None else show_progress

    def resolve(self, document_id: str) -> str:
        """Absolute path of a document."""
        if os.path.isabs(document_id):
            return document_id
        return os.path.join(self.vault_path, document_id)

    def read_document(self, document_id: str) -> str:
        # newline="" keeps line endings exactly as stored
        with open(self.resolve(document_id), 'r', encoding='utf-8', newline='') as f:
            return f.read()

    def write_document(self, document_id: str, text: str) -> None:
        with open(self.resolve(document_id), 'w', encoding='utf-8', newline='') as f:
            f.write(text)
        logger.debug("Wrote %d characters to %s", len(text), document_id)

    def find_note_files(self) -> List[str]:
        """
        Collect all markdown files in the vault.

        Returns:
            Sorted list of absolute paths
        """
        md_files = []
        for root, dirs, files in os.walk(self.vault_path):
            # Skip hidden directories
            dirs[:] = [d for d in dirs if not d.startswith('.')]
            for file in files:
                if file.endswith(self.markdown_extension):
                    md_files.append(os.path.join(root, file))
        return sorted(md_files)

    def list_catalog_notes(self) -> List[CatalogNote]:
        md_files = self.find_note_files()
        logger.debug("Found %d markdown files in %s", len(md_files), self.vault_path)

        catalog = []
        skipped = 0
        for path in tqdm(md_files, desc="Loading notes", unit="note", disable=not self.show_progress):
            try:
                with open(path, 'r', encoding='utf-8') as f:
                    content = f.read()
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("Error reading file %s: %s", path, e)
                skipped += 1
                continue
            catalog.append(Note(path, content).to_catalog_note())

        logger.debug("Loaded %d notes, skipped %d due to errors", len(catalog), skipped)
        return catalog


class InMemoryVault(Vault):
    """
    Notes held in a dict of document id to text.

    Reads and writes are recorded so callers can check what was touched.
    """

    def __init__(self, documents: Optional[Dict[str, str]] = None, markdown_extension: Optional[str] = None):
        super().__init__(markdown_extension)
        self.documents: Dict[str, str] = dict(documents or {})
        self.reads: List[str] = []
        self.writes: List[str] = []

    def read_document(self, document_id: str) -> str:
        self.reads.append(document_id)
        return self.documents[document_id]

    def write_document(self, document_id: str, text: str) -> None:
        self.writes.append(document_id)
        self.documents[document_id] = text

    def list_catalog_notes(self) -> List[CatalogNote]:
        return [
            Note(document_id, text).to_catalog_note()
            for document_id, text in self.documents.items()
            if self.is_markdown(document_id)
        ]
