#!/usr/bin/env python3
"""
enro CLI - Command Line Interface

Click-based entry point for enro. Command execution lives in the command
classes under ``enro.cli.commands``.

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

import sys
from dataclasses import dataclass
from typing import Any

import click

from .cli.analysis_runner import handle_main_error
from .cli.commands import CommandContext, ScanCommand, VersionCommand
from .cli.display import console, print_banner
from .cli.validators import display_validation_errors, validate_inputs


@dataclass
class CLIArgs:
    path: str | None
    recursive: bool
    min_size: int | None
    max_bytes: int | None
    simple: bool
    summary_only: bool
    output_json: bool
    threads: int | None
    threshold: str | None
    verbose: bool
    quiet: bool
    config: str | None
    version: bool


def main(**kwargs: Any):
    """
    enro - File Encryption & Randomness Observer.

    Classifies files as archives, documents, images, compressed, encrypted,
    random, plain text or binary data.
    """
    args = CLIArgs(**kwargs)
    try:
        run_cli(args)
    except KeyboardInterrupt:
        console.print("\n[yellow]Analysis interrupted by user[/yellow]")
        sys.exit(1)

    except Exception as e:
        handle_main_error(e, args.verbose)


@click.command()
@click.argument("path", type=click.Path(), required=False)
@click.option("-r", "--recursive", is_flag=True, help="Recursively scan directories")
@click.option(
    "-m",
    "--min-size",
    type=int,
    default=None,
    help="Minimum file size in bytes; smaller files are skipped",
)
@click.option(
    "-b",
    "--max-bytes",
    type=int,
    default=None,
    help="Maximum bytes to read per file, 0 reads whole files (default: 1048576)",
)
@click.option("-s", "--simple", is_flag=True, help="Simple CSV output (Path,Type,Entropy,Size)")
@click.option("--summary-only", is_flag=True, help="Show only the summary statistics")
@click.option("--json", "output_json", is_flag=True, help="Output the scan report as JSON")
@click.option(
    "-j",
    "--threads",
    type=int,
    default=None,
    help="Number of worker threads (default: CPU count)",
)
@click.option(
    "-t",
    "--threshold",
    help="Only show files whose entropy is within MIN-MAX (e.g., 7.5-8.0)",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
@click.option("--quiet", is_flag=True, help="Suppress banner, progress and non-critical output")
@click.option("--config", help="Custom config file path")
@click.option("--version", is_flag=True, help="Show version information and exit")
def cli(**kwargs: Any):
    """Click-based CLI entry point."""
    main(**kwargs)


def run_cli(args: CLIArgs) -> None:
    """Primary CLI workflow separated for clarity and testability."""
    if args.version:
        _execute_version()

    validation_errors = validate_inputs(
        args.path,
        args.min_size,
        args.max_bytes,
        args.threads,
        args.config,
    )
    if validation_errors:
        display_validation_errors(validation_errors)
        sys.exit(1)

    if not args.output_json and not args.simple and not args.quiet:
        print_banner()

    context = _build_context(args.verbose, args.quiet)
    _dispatch_command(context, args)


def _execute_version() -> None:
    """Run the VersionCommand and exit."""
    version_cmd = VersionCommand(CommandContext.create())
    sys.exit(version_cmd.execute({}))


def _build_context(verbose: bool, quiet: bool) -> CommandContext:
    """Construct a CommandContext with logging configured for the scan."""
    return CommandContext.create(
        config=None,
        verbose=verbose,
        quiet=quiet,
        thread_safe=True,
    )


def _dispatch_command(context: CommandContext, args: CLIArgs) -> None:
    """Run the scan command and exit with its code."""
    command = ScanCommand(context)
    exit_code = command.execute(
        {
            "path": args.path,
            "config": args.config,
            "recursive": args.recursive,
            "min_size": args.min_size,
            "max_bytes": args.max_bytes,
            "threads": args.threads,
            "threshold": args.threshold,
            "simple": args.simple,
            "summary_only": args.summary_only,
            "output_json": args.output_json,
            "verbose": args.verbose,
            "quiet": args.quiet,
        }
    )
    sys.exit(exit_code)


if __name__ == "__main__":
    cli()
