#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
mentions.py - Linking of unlinked mentions

This module finds plain-text occurrences of other notes' names and aliases
in a note and turns a chosen one into a wiki link:

    "I mostly write Rustlang"  ->  "I mostly write [[Rust|Rustlang]]"

Frontmatter is never scanned nor modified.
"""

import logging
from typing import Dict, List, Sequence, Set, Tuple

from ..core.note import CatalogNote, Mention
from ..utils.markdown import Link, get_note_name, mention_pattern, parse_links, split_frontmatter
from .base_linker import BaseLinker, linker_registry

logger = logging.getLogger(__name__)


class NoMatchingNoteError(LookupError):
    """Raised when no note in the catalog answers to an alias."""

    def __init__(self, alias: str):
        super().__init__(alias)
        self.alias = alias

    def __str__(self) -> str:
        return f'No matching note found for "{self.alias}"'


def linked_names(body: str) -> Set[str]:
    """
    Collect the lower-cased targets and display texts of existing links.

    Args:
        body: Note content without frontmatter

    Returns:
        Set of names that are already linked
    """
    names = set()
    for link, _ in parse_links(body):
        target = link.target.strip()
        names.add(target.lower())
        names.add((link.alias.strip() if link.alias else target).lower())
    return names


def find_unlinked_mentions(content: str, catalog: Sequence[CatalogNote], current_note: str) -> List[Mention]:
    """
    Find the first unlinked occurrence of every alias in the catalog.

    A note is not offered at all once it is linked anywhere in the body,
    under any of its names, and the current note is never offered.

    Args:
        content: Full note content
        catalog: Notes that can be linked to
        current_note: Name of the note being scanned

    Returns:
        Mentions sorted by their position in the body
    """
    _, body = split_frontmatter(content)
    existing_links = linked_names(body)

    mentions: Dict[str, Mention] = {}
    for note in catalog:
        if note.name == current_note:
            continue
        if note.name.lower() in existing_links:
            continue

        for alias in note.all_aliases():
            if not alias or alias in mentions or alias.lower() in existing_links:
                continue

            match = mention_pattern(alias).search(body)
            if match:
                mentions[alias] = Mention(alias=alias, note=note.name, offset=match.start())

    return sorted(mentions.values(), key=lambda mention: mention.offset)


def resolve_mention(alias: str, catalog: Sequence[CatalogNote]) -> str:
    """
    Find the note an alias refers to.

    Known limitation: the catalog is walked in order and the current note is
    not skipped. If the current note shares an alias with another note and
    comes first, the link points back at the current note even though the
    picker showed the other one.

    Args:
        alias: Note name or declared alias, any case
        catalog: Notes that can be linked to

    Returns:
        Name of the first note answering to the alias

    Raises:
        NoMatchingNoteError: If no note answers to the alias
    """
    for note in catalog:
        if note.matches(alias):
            return note.name
    raise NoMatchingNoteError(alias)


def link_mention(content: str, alias: str, catalog: Sequence[CatalogNote]) -> Tuple[str, str]:
    """
    Turn the first unlinked occurrence of an alias into a wiki link.

    Args:
        content: Full note content
        alias: The mention to link
        catalog: Notes that can be linked to

    Returns:
        tuple: (updated_content, inserted_link)

    Raises:
        NoMatchingNoteError: If no note answers to the alias
    """
    target = resolve_mention(alias, catalog)
    link = Link(target=target, alias=alias if target != alias else None).serialize()

    frontmatter, body = split_frontmatter(content)
    body = mention_pattern(alias).sub(lambda _: link, body, count=1)
    return frontmatter + body, link


class MentionLinker(BaseLinker):
    """
    Offers the unlinked mentions of the active note and links the chosen one.
    """

    TYPE = "find-unlinked-mentions"

    def process(self, document_id: str) -> bool:
        content = self.vault.read_document(document_id)
        catalog = self.vault.list_catalog_notes()

        mentions = find_unlinked_mentions(content, catalog, get_note_name(document_id))
        if not mentions:
            self.notify("No unlinked mentions found.")
            return False

        logger.debug("Found %d unlinked mentions in %s", len(mentions), document_id)
        chosen = self.chooser.present_choices(mentions)
        if chosen is None:
            logger.debug("Mention picker dismissed")
            return False

        return self.convert_mention(document_id, content, chosen, catalog)

    def convert_mention(self, document_id: str, content: str, alias: str,
                        catalog: Sequence[CatalogNote]) -> bool:
        """
        Link one mention and write the note back.

        Args:
            document_id: The note to update
            content: Note content as read when mentions were found
            alias: The chosen mention
            catalog: Notes that can be linked to

        Returns:
            True if the note was written, False otherwise
        """
        try:
            updated, link = link_mention(content, alias, catalog)
        except NoMatchingNoteError as e:
            self.notify(str(e))
            return False

        if updated == content:
            self.notify(f'No unlinked mention of "{alias}" found.')
            return False

        self.save(document_id, updated)
        self.notify(f"Linked mention: {link}")
        return True


# Register the linker
linker_registry[MentionLinker.TYPE] = MentionLinker
