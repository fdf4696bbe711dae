#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
note.py - Note data model for Auto Linker

This module defines the Note class, which wraps the text of an Obsidian
note and its parsed frontmatter, CatalogNote, the name-plus-aliases entry
every mention lookup is made against, and Mention, a proposed link.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

import yaml

from ..utils.markdown import frontmatter_yaml, get_note_name, split_frontmatter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogNote:
    """
    A note that mentions can be linked to.

    Attributes:
        name: Base name of the note file
        aliases: Aliases declared in the note's frontmatter
    """
    name: str
    aliases: Tuple[str, ...] = field(default_factory=tuple)

    def all_aliases(self) -> List[str]:
        """
        Get every string the note can be referred to by.

        Returns:
            The note name followed by its declared aliases, without repeats
        """
        names = [self.name]
        for alias in self.aliases:
            if alias not in names:
                names.append(alias)
        return names

    def matches(self, text: str) -> bool:
        """Check whether text names this note, ignoring case."""
        lowered = text.lower()
        if self.name.lower() == lowered:
            return True
        return any(alias.lower() == lowered for alias in self.aliases)


@dataclass(frozen=True)
class Mention:
    """An unlinked occurrence of a note alias in a note body."""
    alias: str
    note: str
    offset: int


class Note:
    """
    An Obsidian markdown note.

    Attributes:
        path: Path of the note, as understood by the vault
        name: Note name (file name without extension)
        content: Full note content including frontmatter
        frontmatter: Dict containing parsed YAML frontmatter
        body: Note content without frontmatter
    """

    def __init__(self, path: str, content: str):
        self.path = path
        self.name = get_note_name(path)
        self.content = content
        self.frontmatter, self.body = self._parse_frontmatter()

    def _parse_frontmatter(self) -> Tuple[Dict[str, Any], str]:
        """
        Parse YAML frontmatter from note content.

        Returns:
            tuple: (frontmatter_dict, content_without_frontmatter)
        """
        frontmatter_text, body = split_frontmatter(self.content)
        if not frontmatter_text:
            return {}, body

        try:
            frontmatter = yaml.safe_load(frontmatter_yaml(frontmatter_text))
        except yaml.YAMLError as e:
            logger.warning("Error parsing frontmatter for %s: %s", self.path, e)
            return {}, body

        if not isinstance(frontmatter, dict):
            frontmatter = {}
        return frontmatter, body

    @property
    def aliases(self) -> List[str]:
        """
        Aliases declared in the frontmatter.

        Only a YAML list is honoured and non-string entries are skipped.
        """
        declared = self.frontmatter.get("aliases")
        if not isinstance(declared, list):
            return []
        return [alias for alias in declared if isinstance(alias, str) and alias]

    def to_catalog_note(self) -> CatalogNote:
        """Build the catalog entry for this note."""
        return CatalogNote(name=self.name, aliases=tuple(self.aliases))
