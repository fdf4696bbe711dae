#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
config.py - Configuration management for Auto Linker

This module centralizes configuration settings loaded from multiple sources:
1. Default values
2. Configuration file
3. Environment variables (a .env file in the working directory is honoured)
4. Command line arguments (overrides all others)
"""

import os
import argparse
import logging
from typing import Dict, Any, Optional, List

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Command ids, in the order they are offered on the command line
COMMANDS = [
    "update-links",
    "remove-duplicate-links",
    "update-and-clean-links",
    "find-unlinked-mentions",
]


class Config:
    """
    Configuration manager for Auto Linker.

    This class provides a unified interface for all application settings,
    with prioritized loading from multiple sources.
    """

    # Default configuration values
    DEFAULTS = {
        # General settings
        "vault_path": "",  # Must be provided via ENV var, config file, or CLI
        "verbose": False,
        "log_file": "",

        # Note settings
        "markdown_extension": ".md",
        "show_progress": True,

        # Command settings (only ever set from the command line)
        "command": None,
        "note": None,
        "choose": None,
        "query": "",
    }

    # Keys describing a single run rather than the installation
    COMMAND_KEYS = ("command", "note", "choose", "query")

    # Map config keys to environment variable names
    ENV_MAPPING = {
        "vault_path": "OBSIDIAN_VAULT_PATH",
        "verbose": "AUTO_LINKER_VERBOSE",
        "log_file": "AUTO_LINKER_LOG_FILE",
        "show_progress": "AUTO_LINKER_SHOW_PROGRESS",
    }

    def __init__(self, config_file: Optional[str] = None, load_env: bool = True):
        """
        Initialize the configuration manager.

        Args:
            config_file: Path to a configuration file to load from
            load_env: Whether to read environment variables (and .env)
        """
        # Start with default configuration
        self._config = self.DEFAULTS.copy()
        self.load_env = load_env

        if config_file:
            self.load_from_file(config_file)
        else:
            # Try to load from default locations
            for path in self.default_locations():
                if os.path.exists(path):
                    self.load_from_file(path)
                    break

        if load_env:
            load_dotenv()
            self.load_from_env()

    @staticmethod
    def default_locations() -> List[str]:
        """Configuration files looked for when none is given explicitly."""
        return [
            os.path.join(os.getcwd(), "config.yaml"),
            os.path.expanduser("~/.config/auto_linker/config.yaml"),
        ]

    def load_from_file(self, config_file: str) -> bool:
        """
        Load configuration from a YAML file.

        Unknown keys are ignored.

        Args:
            config_file: Path to the configuration file

        Returns:
            True if the file was read, False otherwise
        """
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                config_data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.error("Error loading configuration from %s: %s", config_file, e)
            return False

        if isinstance(config_data, dict):
            for key, value in config_data.items():
                if key in self.DEFAULTS:
                    self._config[key] = value
            logger.debug("Loaded configuration from %s", config_file)
        return True

    def load_from_env(self) -> None:
        """Load configuration from environment variables."""
        for config_key, env_var in self.ENV_MAPPING.items():
            if env_var in os.environ:
                value = os.environ[env_var]

                # Convert to appropriate type
                if isinstance(self.DEFAULTS[config_key], bool):
                    value = value.lower() in ('true', 'yes', '1')

                self._config[config_key] = value

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        """Create the command line parser."""
        parser = argparse.ArgumentParser(
            prog="auto-linker",
            description="Link unlinked mentions and maintain the links: line of Obsidian notes")

        # General options
        parser.add_argument("--vault-path", type=str, help="Path to Obsidian vault")
        parser.add_argument("--config", type=str, help="Path to a YAML configuration file")
        parser.add_argument("-v", "--verbose", action="store_true", default=None,
                            help="Enable verbose output")
        parser.add_argument("--log-file", type=str, help="Also write logs to this file")
        parser.add_argument("--no-progress", dest="show_progress", action="store_false", default=None,
                            help="Do not show a progress bar while loading notes")

        # Command selection
        parser.add_argument("command", choices=COMMANDS, help="Command to run on the note")
        parser.add_argument("note", nargs="?", help="Active note, relative to the vault or absolute")

        # Mention options
        parser.add_argument("--choose", type=str, help="Alias to link without asking")
        parser.add_argument("--query", type=str, help="Only offer mentions containing this text")
        return parser

    def load_from_args(self, argv: Optional[List[str]] = None) -> None:
        """
        Load configuration from command line arguments.

        Args:
            argv: Arguments to parse (defaults to sys.argv[1:])
        """
        args = self.build_parser().parse_args(argv)

        # An explicit configuration file sits below the environment and the
        # other arguments
        if args.config:
            self.load_from_file(args.config)
            if self.load_env:
                self.load_from_env()

        # Command settings always come from this command line; other settings
        # only when given
        for key, value in vars(args).items():
            if key not in self._config:
                continue
            if value is not None:
                self._config[key] = value
            elif key in self.COMMAND_KEYS:
                self._config[key] = self.DEFAULTS[key]

    def __getitem__(self, key: str) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key

        Returns:
            The configured value for the key
        """
        return self._config.get(key)

    def __setitem__(self, key: str, value: Any) -> None:
        """
        Set a configuration value.

        Args:
            key: Configuration key
            value: New value
        """
        self._config[key] = value

    def __contains__(self, key: str) -> bool:
        """
        Check if a configuration key exists.

        Args:
            key: Configuration key to check

        Returns:
            True if the key exists, False otherwise
        """
        return key in self._config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value with a default fallback.

        Args:
            key: Configuration key
            default: Default value if key is not found

        Returns:
            The configured value or default
        """
        return self._config.get(key, default)

    def to_dict(self) -> Dict[str, Any]:
        """
        Get a dictionary representation of the configuration.

        Returns:
            Dictionary containing all configuration values
        """
        return self._config.copy()


# Global configuration instance; the command line is applied by main()
config = Config()
