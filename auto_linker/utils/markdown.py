#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
markdown.py - Utilities for working with Obsidian-flavored Markdown

This module provides the text primitives shared by every command: splitting
off the frontmatter block, parsing wiki links and building the whole-word
pattern used to find plain-text mentions of a note.
"""

import re
from dataclasses import dataclass
from typing import Iterator, List, Optional, Pattern, Tuple


# [[target#section|alias]] with section and alias optional
LINK_PATTERN = re.compile(r'\[\[([^\]|#]+)(?:#([^\]|]+))?(?:\|([^\]]+))?\]\]')

# Same as LINK_PATTERN but also captures a leading "!" so embeds can be told apart
EMBED_AWARE_LINK_PATTERN = re.compile(r'(!?)\[\[([^\]|#]+)(?:#([^\]|]+))?(?:\|([^\]]+))?\]\]')

# Only the first dashed block at the very top of the note
FRONTMATTER_PATTERN = re.compile(r'---\s*[\s\S]*?---')

LINKS_LINE_PATTERN = re.compile(r'^links:[^\r\n]*', re.MULTILINE)

LINKS_LABEL = "links:"


@dataclass(frozen=True)
class Link:
    """A parsed wiki link."""
    target: str
    section: Optional[str] = None
    alias: Optional[str] = None
    embed: bool = False

    @property
    def key(self) -> str:
        """Identity used for duplicate detection: target, plus the section if any."""
        return f"{self.target}#{self.section}" if self.section else self.target

    @property
    def display(self) -> str:
        """Text shown for the link once demoted to plain text."""
        return self.alias if self.alias else self.target

    def serialize(self) -> str:
        """
        Render the link back to its wiki form.

        Returns:
            "[[target#section|alias]]" with the optional parts omitted
        """
        section = f"#{self.section}" if self.section else ""
        alias = f"|{self.alias}" if self.alias else ""
        prefix = "!" if self.embed else ""
        return f"{prefix}[[{self.target}{section}{alias}]]"


def link_from_match(match: re.Match) -> Link:
    """Build a Link from a match of EMBED_AWARE_LINK_PATTERN."""
    embed, target, section, alias = match.groups()
    return Link(target=target, section=section, alias=alias, embed=bool(embed))


def parse_links(content: str) -> Iterator[Tuple[Link, Tuple[int, int]]]:
    """
    Iterate over every wiki link in the content.

    Args:
        content: Markdown content to scan

    Yields:
        (link, span) tuples in document order
    """
    for match in LINK_PATTERN.finditer(content):
        target, section, alias = match.groups()
        yield Link(target=target, section=section, alias=alias), match.span()


def extract_links(content: str) -> List[str]:
    """
    Extract the distinct serialized wiki links from Markdown content.

    Links are compared by their full serialized form, so [[A]] and [[A|x]]
    are both kept. Order of first appearance is preserved.

    Args:
        content: Markdown content to extract links from

    Returns:
        List of serialized links
    """
    seen = set()
    links = []
    for link, _ in parse_links(content):
        serialized = link.serialize()
        if serialized not in seen:
            seen.add(serialized)
            links.append(serialized)
    return links


def split_frontmatter(content: str) -> Tuple[str, str]:
    """
    Separate the leading frontmatter block from the rest of the note.

    Only a block starting at the very first character is recognised, and it
    ends at the next "---" wherever that is.

    Args:
        content: Full note content

    Returns:
        tuple: (frontmatter_text, body); frontmatter_text is "" when absent
    """
    match = FRONTMATTER_PATTERN.match(content)
    if not match:
        return "", content
    return match.group(0), content[match.end():]


def frontmatter_yaml(frontmatter: str) -> str:
    """Strip the dashed delimiters from a frontmatter block."""
    if not frontmatter:
        return ""
    return frontmatter[3:-3]


def mention_pattern(alias: str) -> Pattern[str]:
    """
    Build the case-insensitive whole-word pattern for an alias.

    The lookarounds only check the characters right next to the word, so an
    alias embedded deeper inside a longer link target is not recognised as
    linked. That is a known limitation of the heuristic.

    Args:
        alias: Note name or alias to look for

    Returns:
        Compiled pattern
    """
    return re.compile(rf'(?<!\[\[)\b{re.escape(alias)}\b(?!\]\])', re.IGNORECASE)


def get_note_name(path: str) -> str:
    """
    Extract the note name from a file path.

    Args:
        path: Path to the note file

    Returns:
        Note name without extension
    """
    filename = path.replace("\\", "/").split("/")[-1]
    return filename.rsplit(".", 1)[0] if "." in filename else filename
