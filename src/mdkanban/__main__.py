"""CLI entry point for mdkanban."""

import argparse
from pathlib import Path

from .config import Settings
from .logging import setup_logging
from .models import TaskHeaderStyle


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="mdkanban",
        description="Kanban boards stored as a single human-editable markdown file",
    )
    parser.add_argument(
        "document",
        nargs="?",
        type=Path,
        default=None,
        help="Board document (default: 'document' from mdkanban.yml, else kanban.md)",
    )
    parser.add_argument(
        "--project-root",
        type=Path,
        default=None,
        help="Path to project root containing mdkanban.yml (default: current directory)",
    )
    parser.add_argument(
        "--header-style",
        choices=[style.value for style in TaskHeaderStyle],
        default=None,
        help="Task header style used when writing (default: from mdkanban.yml)",
    )
    action = parser.add_mutually_exclusive_group()
    action.add_argument(
        "--format",
        action="store_true",
        help="Rewrite the document in canonical form",
    )
    action.add_argument(
        "--check",
        action="store_true",
        help="Exit non-zero if the document is not in canonical form",
    )
    action.add_argument(
        "--generate",
        action="store_true",
        help="Generate default mdkanban.yml and a starter board, then exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0",
    )
    return parser.parse_args()


def main() -> None:
    """Main entry point."""
    args = parse_args()

    # Build settings from CLI args
    settings_kwargs: dict = {}
    if args.project_root:
        settings_kwargs["project_root"] = args.project_root
    if args.document:
        settings_kwargs["document"] = args.document
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file

    settings = Settings(**settings_kwargs)

    setup_logging(settings.verbose, settings.log_file)

    if args.generate:
        from .cli.generate import run_generate

        raise SystemExit(run_generate(settings.project_root))

    from .repositories import MarkdownFileRepository
    from .services import ConfigService, DocumentService

    config_service = ConfigService(settings.project_root)
    config = config_service.get_config()
    if config_service.has_config_error:
        from .cli.output import error

        error(config_service.config_error or "")

    repository = MarkdownFileRepository(settings.resolve_document(config.document))
    header_style = TaskHeaderStyle(args.header_style) if args.header_style else config.task_header

    if args.format or args.check:
        from .cli.format import run_format

        raise SystemExit(run_format(repository, header_style, check=args.check))

    from .cli.summary import run_summary

    raise SystemExit(run_summary(DocumentService(repository, config_service)))


if __name__ == "__main__":
    main()
