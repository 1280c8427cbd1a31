#!/usr/bin/env python3
"""
enro CLI Commands - Version Command

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

from typing import Any

from ...__version__ import __author__, __license__, __version__
from .base import Command


class VersionCommand(Command):
    """Display version, author and license information."""

    def execute(self, _args: dict[str, Any]) -> int:
        self._display_version_info()
        return 0

    def _display_version_info(self) -> None:
        self.context.console.print(
            f"[bold cyan]enro[/bold cyan] version [bold green]{__version__}[/bold green]"
        )
        self.context.console.print(f"Author: {__author__}")
        self.context.console.print(f"License: {__license__}")
