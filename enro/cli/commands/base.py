#!/usr/bin/env python3
"""
enro CLI Commands - Base Abstractions

Command Pattern implementation for enro CLI commands.

Copyright (C) 2025 The enro authors

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program. If not, see <https://www.gnu.org/licenses/>.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from rich.console import Console

from ...config import Config
from ...utils.logger import setup_logger


def configure_logging_levels(verbose: bool, quiet: bool) -> None:
    """Configure logging levels based on verbosity settings."""
    if quiet:
        logging.getLogger("enro").setLevel(logging.ERROR)
        return

    level = logging.INFO if verbose else logging.WARNING
    logging.getLogger("enro").setLevel(level)


@dataclass
class CommandContext:
    """
    Shared context for all commands.

    Attributes:
        console: Rich console for formatted output
        logger: Logger instance for command execution logging
        config: Application configuration object
        verbose: Flag for verbose output mode
        quiet: Flag for suppressing non-critical output
    """

    console: Console
    logger: Any
    config: Config | None = None
    verbose: bool = False
    quiet: bool = False

    @classmethod
    def create(
        cls,
        config: Config | None = None,
        verbose: bool = False,
        quiet: bool = False,
        thread_safe: bool = False,
    ) -> "CommandContext":
        """
        Factory method to create a CommandContext with proper initialization.

        Args:
            config: Optional configuration object, loaded lazily by commands when omitted
            verbose: Enable verbose output
            quiet: Suppress non-critical output
            thread_safe: Include thread names in log records

        Returns:
            Configured CommandContext instance
        """
        from ..display import console

        logger = setup_logger(thread_safe=thread_safe)
        configure_logging_levels(verbose, quiet)

        return cls(
            console=console,
            logger=logger,
            config=config,
            verbose=verbose,
            quiet=quiet,
        )


class Command(ABC):
    """
    Abstract base class for all CLI commands.

    Each command encapsulates one CLI operation with its own validation and
    execution logic and returns a process exit code.
    """

    def __init__(self, context: CommandContext | None = None):
        self._context = context

    @abstractmethod
    def execute(self, args: dict[str, Any]) -> int:
        """
        Execute the command with provided arguments.

        Args:
            args: Dictionary of command arguments (from Click)

        Returns:
            Exit code (0 for success, non-zero for failure)
        """

    @property
    def context(self) -> CommandContext:
        """Command context, created with defaults on first use"""
        if self._context is None:
            self._context = CommandContext.create()
        return self._context

    @context.setter
    def context(self, value: CommandContext) -> None:
        self._context = value

    def _get_config(self, config_path: str | None = None) -> Config:
        """
        Load configuration from path or use context config.

        Args:
            config_path: Optional path to custom config file

        Returns:
            Config object instance
        """
        if config_path:
            return Config(config_path)
        if self.context.config is None:
            self.context.config = Config()
        return self.context.config
