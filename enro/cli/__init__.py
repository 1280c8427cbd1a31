#!/usr/bin/env python3
"""
enro CLI Package

Command-line interface for the enro file content classifier.

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


def main() -> None:  # Entry point shim for console_scripts
    """Delegate to the Click-based CLI defined in enro.cli_main."""
    from ..cli_main import cli as _cli

    _cli()
