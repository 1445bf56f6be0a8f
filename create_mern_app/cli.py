"""Command-line entry point.

Usage::

    create-mern-app my-app
    create-mern-app my-app --typescript --redux --docker
    python -m create_mern_app my-app --socketio
"""

from __future__ import annotations

import argparse
import sys
import time
from typing import NoReturn

from jinja2 import TemplateError
from rich.markup import escape

from .config import Config
from .scaffolder import (
    FilesystemError,
    GenerateOptions,
    ProjectConfig,
    ProjectGenerator,
    UnknownTemplateError,
)
from .utils import (
    console,
    err_console,
    format_duration,
    print_error,
    print_next_steps,
    print_success,
    print_summary_table,
    print_warning,
)

OPTION_FLAGS: dict[str, str] = {
    "typescript": "Use TypeScript",
    "redux": "Include Redux Toolkit",
    "socketio": "Include Socket.IO",
    "docker": "Include Docker configuration",
}


class UsageError(Exception):
    """Raised when the command line is missing a required argument or is malformed."""


class _ArgumentParser(argparse.ArgumentParser):
    """Parser that reports errors as ``UsageError`` instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="create-mern-app",
        allow_abbrev=False,
        description="Generate a MERN stack project skeleton",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-mern-app blog\n"
            "  create-mern-app blog --typescript --redux\n"
            "  create-mern-app blog --docker --socketio\n"
        ),
    )
    parser.add_argument(
        "project_name",
        nargs="?",
        help="Name of the project directory to create in the current directory",
    )
    for flag, help_text in OPTION_FLAGS.items():
        parser.add_argument(f"--{flag}", action="store_true", help=help_text)
    return parser


def parse_args(
    parser: argparse.ArgumentParser, argv: list[str] | None
) -> tuple[str, GenerateOptions, list[str]]:
    """Return the project name, the option record and any ignored arguments.

    Raises:
        UsageError: If no project name was given or the command line is
            malformed.
    """
    args, unknown = parser.parse_known_args(argv)
    if not args.project_name:
        raise UsageError("Please provide a project name")

    options = GenerateOptions(**{flag: getattr(args, flag) for flag in OPTION_FLAGS})
    return args.project_name, options, unknown


def next_steps(project: ProjectConfig) -> list[str]:
    steps = [
        f"cd {project.name}",
        "npm run install:all",
        "Start MongoDB",
        "cp server/.env.example server/.env",
        "npm run dev",
    ]
    if project.options.docker:
        steps.append("or run everything with: docker compose up --build")
    return steps


def run(argv: list[str] | None = None, config: Config | None = None) -> int:
    """Run the generator and return the process exit code."""
    parser = build_parser()

    try:
        name, options, unknown = parse_args(parser, argv)
    except UsageError as exc:
        print_error(str(exc))
        err_console.print(parser.format_help(), markup=False, highlight=False)
        return 1

    for arg in unknown:
        print_warning(f"Ignoring unrecognised argument: {arg}")

    try:
        settings = config or Config.from_env()
        project = ProjectConfig(name=name, options=options, settings=settings)
    except ValueError as exc:
        print_error(f"Invalid configuration: {exc}")
        return 1

    console.print(f"Creating MERN project: [bold]{escape(project.name)}[/bold]")
    if project.root.exists():
        print_warning(f"Directory already exists, existing files will be overwritten: {project.root}")

    summary = {
        "Location": str(project.root),
        "Options": ", ".join(options.enabled()) or "none",
    }
    print_summary_table(summary, title="Project")

    started = time.monotonic()
    generator = ProjectGenerator(project, verbose=True)
    try:
        report = generator.generate()
    except (FilesystemError, UnknownTemplateError, TemplateError) as exc:
        print_error(f"Error generating project: {exc}")
        return 1

    print_success(
        f"Project structure generated successfully! "
        f"({len(report.files)} files in {format_duration(time.monotonic() - started)})"
    )
    print_next_steps(next_steps(project))
    return 0


def main() -> None:
    """CLI entry point for ``create-mern-app``."""
    sys.exit(run())


if __name__ == "__main__":
    main()
