#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Core package - Core functionality for Auto Linker

This package contains the core functionality:
- Note: Data model for Obsidian notes and catalog entries
- Config: Configuration management
- Vault: Reading, writing and listing notes
- UI: Notices and the mention picker
"""

from .note import Note, CatalogNote, Mention
from .config import config, Config
from .vault import Vault, FileVault, InMemoryVault
from .ui import Notifier, ConsoleNotifier, Chooser, ConsoleChooser, FixedChooser, filter_mentions
from .log import setup_logging
