#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
main.py - Entry point for Auto Linker

This script is the command line front end: it reads the configuration,
opens the vault and runs the requested command on the given note.
"""

import os
import sys
import time
import signal
import logging
from typing import List, Optional

from .core.config import config
from .core.log import setup_logging
from .core.ui import ConsoleChooser, ConsoleNotifier, FixedChooser
from .core.vault import FileVault
from .processor import LinkProcessor

logger = logging.getLogger(__name__)


def signal_handler(sig, frame):
    """Handle interrupt signals."""
    print("\nInterrupted by user.")
    sys.exit(130)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the Auto Linker tool.

    The arguments are applied to the global configuration. When main() is
    called more than once in a process, command settings start fresh each
    time, but vault_path, verbose, log_file and show_progress keep the value
    from the last call that set them.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Process exit status
    """
    # Register signal handler for clean exit on Ctrl+C
    signal.signal(signal.SIGINT, signal_handler)

    config.load_from_args(argv)
    setup_logging(config["verbose"], config["log_file"] or None)
    logger.debug("Configuration: %s", config.to_dict())

    # Check for valid vault path
    vault_path = config["vault_path"]
    if not vault_path:
        logger.error("No vault path provided. Set OBSIDIAN_VAULT_PATH environment variable or use --vault-path")
        return 1
    if not os.path.isdir(vault_path):
        logger.error("Vault path %s is not a directory", vault_path)
        return 1

    vault = FileVault(vault_path)
    if config["choose"]:
        chooser = FixedChooser(config["choose"])
    else:
        chooser = ConsoleChooser(query=config["query"] or "")
    processor = LinkProcessor(vault, ConsoleNotifier(), chooser)

    start_time = time.time()
    command = config["command"]
    try:
        processor.run_command(command, config["note"])
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error running %s: %s", command, e)
        return 1

    logger.debug("%s completed in %.2f seconds", command, time.time() - start_time)
    return 0


if __name__ == "__main__":
    sys.exit(main())
