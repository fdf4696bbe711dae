#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
links_line.py - Maintenance of the "links:" summary line

The summary line lists every distinct wiki link of the note, in the order
the links first appear:

    links: [[Alpha]], [[Alpha|A]], [[Beta]]
"""

from typing import Optional

from ..utils.markdown import LINKS_LABEL, LINKS_LINE_PATTERN, extract_links
from .base_linker import BaseLinker, linker_registry


def update_links_line(content: str) -> Optional[str]:
    """
    Rebuild the "links:" line of a note.

    An existing line is emptied before links are collected so its old
    entries do not count; a missing line is added at the top of the note.

    Args:
        content: Full note content

    Returns:
        The updated content, or None if the note has no links
    """
    if LINKS_LINE_PATTERN.search(content):
        content = LINKS_LINE_PATTERN.sub(LINKS_LABEL, content, count=1)
    else:
        content = f"{LINKS_LABEL}\n\n{content.strip()}"

    links = extract_links(content)
    if not links:
        return None

    links_line = f"{LINKS_LABEL} {', '.join(links)}"
    return LINKS_LINE_PATTERN.sub(lambda _: links_line, content, count=1)


class LinksLineLinker(BaseLinker):
    """
    Refreshes the "links:" line of the active note.
    """

    TYPE = "update-links"

    def process(self, document_id: str) -> bool:
        content = self.vault.read_document(document_id)

        updated = update_links_line(content)
        if updated is None:
            self.notify("No links found in the note.")
            return False

        self.save(document_id, updated)
        self.notify(f"Links updated in: {self.vault.display_name(document_id)}")
        return True


# Register the linker
linker_registry[LinksLineLinker.TYPE] = LinksLineLinker
