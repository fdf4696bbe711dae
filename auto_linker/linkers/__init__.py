#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Linkers package - Commands run on the active note

This package contains the commands offered to the user:
- update-links: refresh the "links:" summary line
- remove-duplicate-links: demote repeated links to plain text
- update-and-clean-links: both of the above, in order
- find-unlinked-mentions: link a plain-text mention of another note
"""

# Import linkers to register them
from . import links_line
from . import duplicates
from . import mentions

# Import the registry for easy access
from .base_linker import linker_registry, BaseLinker, NO_ACTIVE_FILE
