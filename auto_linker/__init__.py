#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Auto Linker - Keeps the links of an Obsidian note tidy

This package provides functionality for:
- Finding plain-text mentions of other notes and linking them
- Maintaining a de-duplicated "links:" summary line per note
- Demoting repeated links to plain text
"""

__version__ = "0.1.0"

# Import core modules
from .core.config import config
from .core.note import Note, CatalogNote, Mention
from .core.vault import FileVault, InMemoryVault

# Import linkers
from .linkers.base_linker import linker_registry
from . import linkers
from .processor import LinkProcessor
