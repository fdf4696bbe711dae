#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Utils package - Utility functions for Auto Linker

This package contains the Markdown helpers shared by the commands:
- Wiki link parsing and serialization
- Frontmatter splitting
- Whole-word mention patterns
"""

from .markdown import (
    Link,
    LINKS_LABEL,
    extract_links,
    parse_links,
    split_frontmatter,
    mention_pattern,
    get_note_name
)
