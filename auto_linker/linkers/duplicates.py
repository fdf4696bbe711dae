#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
duplicates.py - Demotion of repeated links to plain text

Below the "links:" line only the first link to each target (or target and
section) stays a link; later ones are replaced by their display text.
"""

import re
from typing import Set

from ..utils.markdown import EMBED_AWARE_LINK_PATTERN, LINKS_LABEL, link_from_match, split_frontmatter
from .base_linker import BaseLinker, linker_registry
from .links_line import LinksLineLinker


def collapse_duplicate_links(content: str) -> str:
    """
    Demote every repeated link below the "links:" line.

    The frontmatter, everything above the "links:" line and the line itself
    are left alone. Embeds are never touched.

    Args:
        content: Full note content

    Returns:
        The updated content (equal to the input when nothing repeats)
    """
    frontmatter, body = split_frontmatter(content)
    lines = body.split("\n")

    past_links_line = False
    seen_links: Set[str] = set()

    def replace(match: re.Match) -> str:
        link = link_from_match(match)
        if link.embed:
            return match.group(0)
        if link.key in seen_links:
            return link.display
        seen_links.add(link.key)
        return match.group(0)

    for i, line in enumerate(lines):
        if past_links_line:
            lines[i] = EMBED_AWARE_LINK_PATTERN.sub(replace, line)

        if line.startswith(LINKS_LABEL):
            past_links_line = True

    return frontmatter + "\n".join(lines)


class DuplicateLinker(BaseLinker):
    """
    Removes duplicate links from the active note.
    """

    TYPE = "remove-duplicate-links"

    def process(self, document_id: str) -> bool:
        content = self.vault.read_document(document_id)

        updated = collapse_duplicate_links(content)
        if updated == content:
            self.notify("No duplicate links found.")
            return False

        self.save(document_id, updated)
        self.notify(f"Duplicate links removed in: {self.vault.display_name(document_id)}")
        return True


class UpdateAndCleanLinker(BaseLinker):
    """
    Refreshes the "links:" line, then removes duplicate links.
    """

    TYPE = "update-and-clean-links"

    def process(self, document_id: str) -> bool:
        updated = LinksLineLinker(self.vault, self.notifier).process(document_id)
        cleaned = DuplicateLinker(self.vault, self.notifier).process(document_id)
        self.notify(f"Links updated and cleaned in: {self.vault.display_name(document_id)}")
        return updated or cleaned


# Register the linkers
linker_registry[DuplicateLinker.TYPE] = DuplicateLinker
linker_registry[UpdateAndCleanLinker.TYPE] = UpdateAndCleanLinker
