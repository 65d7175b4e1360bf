#!/usr/bin/env python3
"""
begone - Build Artifact Cleanup Tool - Main Entry Point

Recursively finds build-artifact and dependency-cache directories
(target/, node_modules/, .venv/, bin/, obj/, ...) for one ecosystem or all
of them and removes them. Matched directories are never descended into.

Supports a dry run that only reports what would be removed, and export
of the results to JSON and CSV.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from config import ECOSYSTEM_LABELS, EXIT_CONFIG_ERROR
from display import print_event, print_summary
from enums import EcosystemKind
from exceptions import ConfigError
from export import export_to_csv, export_to_json, save_csv, save_json
from logging_config import get_logger, setup_logging
from models import WalkConfig
from orchestrator import run_cleanup

logger = get_logger(__name__)

SUBCOMMAND_HELP = {
    EcosystemKind.RUST: "Clean Rust project directories (target/)",
    EcosystemKind.PYTHON: "Clean Python project directories (.venv/, __pycache__/, ...)",
    EcosystemKind.JAVASCRIPT: "Clean JavaScript/TypeScript project directories (node_modules/, ...)",
    EcosystemKind.JAVA: "Clean Java project directories (target/, build/, ...)",
    EcosystemKind.GO: "Clean Go project directories (bin/, pkg/)",
    EcosystemKind.DOTNET: "Clean .NET project directories (bin/, obj/)",
    EcosystemKind.ALL: "Clean all supported project directories",
}


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Args:
        argv: Argument list (default: sys.argv[1:])

    Returns:
        Parsed arguments namespace; args.command is the ecosystem name
    """
    parser = argparse.ArgumentParser(
        prog='begone',
        description='Remove build artifacts and dependency caches from project trees',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  %(prog)s rust                     # Remove every target/ below the current directory
  %(prog)s -d js ~/code             # Show which node_modules/ would be removed
  %(prog)s -v all                   # Verbose: also list visited directories
  %(prog)s --require-marker go      # Only clean bin/ and pkg/ next to go.mod/go.sum
  %(prog)s -d --export json all     # Export a dry run as JSON (stdout)
  %(prog)s --export csv --output removed.csv python
        '''
    )

    parser.add_argument(
        '-d', '--dry-run',
        action='store_true',
        help="Run in dry-run mode (don't delete anything)"
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose output (visited directories and debug logging)'
    )

    parser.add_argument(
        '--require-marker',
        action='store_true',
        help='Only remove directories whose parent contains a project file (Cargo.toml, package.json, ...)'
    )

    parser.add_argument(
        '--log-file',
        type=Path,
        help='Write logs to specified file'
    )

    parser.add_argument(
        '--no-color',
        action='store_true',
        help='Disable colored output'
    )

    parser.add_argument(
        '--export',
        choices=['json', 'csv'],
        help='Export results in specified format (json or csv)'
    )

    parser.add_argument(
        '--output',
        type=Path,
        help='Output file for export (default: stdout)'
    )

    subparsers = parser.add_subparsers(dest='command', metavar='COMMAND', required=True)

    for kind, help_text in SUBCOMMAND_HELP.items():
        subparser = subparsers.add_parser(kind.value, help=help_text, description=help_text)
        subparser.add_argument(
            'path',
            nargs='?',
            type=Path,
            default=None,
            help='Directory to clean (default: current directory)'
        )

    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for begone."""
    args = parse_arguments(argv)

    if args.output and not args.export:
        print("Error: --output requires --export", file=sys.stderr)
        sys.exit(EXIT_CONFIG_ERROR)

    use_colors = not args.no_color

    try:
        setup_logging(
            verbose=args.verbose,
            log_file=args.log_file,
            use_colors=use_colors
        )
    except OSError as e:
        print(f"Error: Cannot open log file {args.log_file}: {e.strerror or e}", file=sys.stderr)
        sys.exit(EXIT_CONFIG_ERROR)

    kind = EcosystemKind.parse(args.command)
    logger.debug("Selected ecosystem: %s", ECOSYSTEM_LABELS[kind.value])

    config = WalkConfig.create(
        kind,
        root=args.path,
        dry_run=args.dry_run,
        verbose=args.verbose,
        require_marker=args.require_marker
    )

    def on_event(event):
        print_event(event, use_colors)

    try:
        summary = run_cleanup(config, on_event=None if args.export else on_event)
    except ConfigError as e:
        logger.debug("Configuration error: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_CONFIG_ERROR)

    if args.export and args.output:
        save = save_json if args.export == 'json' else save_csv
        try:
            save(summary, str(args.output))
        except OSError as e:
            print(f"Error: Cannot write {args.output}: {e.strerror or e}", file=sys.stderr)
            sys.exit(EXIT_CONFIG_ERROR)
        logger.info("%s exported to %s", args.export.upper(), args.output)

    elif args.export == 'json':
        print(export_to_json(summary))

    elif args.export == 'csv':
        print(export_to_csv(summary), end="")

    else:
        print_summary(summary, use_colors)


if __name__ == "__main__":
    main()
