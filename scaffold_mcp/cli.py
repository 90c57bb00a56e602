"""CLI entrypoints for scaffold commands."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from .config import ScaffoldConfig
from .core.scaffolder import BatchResult, ItemStatus, Scaffolder
from .handlers.core.check_missing_tests import format_missing
from .handlers.core.generate_all_tests import format_batch_result
from .handlers.git.git_stage_tests import CLEAN_MESSAGE, format_staged
from .services import GitChangesService, ModuleWatcher, ScaffoldService, ServiceResult


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS if suppress_default else False,
        help="Increase log verbosity for troubleshooting.",
    )


def _add_compare_option(parser: argparse.ArgumentParser, default: str) -> None:
    parser.add_argument(
        "-c",
        "--compare",
        default=default,
        help=f"Git reference to compare with (default: {default}).",
    )


def _build_parser(config: ScaffoldConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scaffold-tests",
        description="Generate stub vitest files for React/TypeScript modules.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--source-root",
        default=config.source_root,
        help=f"Directory scanned by generate-all and check (default: {config.source_root}).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate a test file for a specific source file.",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    generate_parser.add_argument("file", help="Source file path.")

    generate_all_parser = subparsers.add_parser(
        "generate-all",
        help="Generate test files for all source files that don't have tests.",
    )
    _add_verbose_option(generate_all_parser, suppress_default=True)

    watch_parser = subparsers.add_parser(
        "watch",
        help="Watch for file changes and auto-generate tests.",
    )
    _add_verbose_option(watch_parser, suppress_default=True)
    watch_parser.add_argument(
        "-p",
        "--path",
        default=None,
        help="Path to watch (defaults to the source root).",
    )

    git_changed_parser = subparsers.add_parser(
        "git-changed",
        help="Generate tests for files changed in git.",
    )
    _add_verbose_option(git_changed_parser, suppress_default=True)
    _add_compare_option(git_changed_parser, config.compare_ref)

    git_new_parser = subparsers.add_parser(
        "git-new",
        help="Generate tests for new files in git.",
    )
    _add_verbose_option(git_new_parser, suppress_default=True)
    _add_compare_option(git_new_parser, config.compare_ref)

    git_stage_parser = subparsers.add_parser(
        "git-stage",
        help="Stage generated test files in git.",
    )
    _add_verbose_option(git_stage_parser, suppress_default=True)

    check_parser = subparsers.add_parser(
        "check",
        help="Check which files need tests.",
    )
    _add_verbose_option(check_parser, suppress_default=True)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for scaffold commands."""
    config = ScaffoldConfig.from_env()
    parser = _build_parser(config)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[scaffold] %(levelname)s %(message)s",
    )

    scaffolder = Scaffolder(source_root=args.source_root, test_root=config.test_root)

    if args.command == "generate":
        result = ScaffoldService(scaffolder).generate(args.file)
        _exit_on_failure(parser, result)
        item = result.data
        if item.status is ItemStatus.SKIPPED:
            print(f"No test generated for: {args.file}")
        else:
            print(f"Test file: {item.test_path} ({item.status.value})")
    elif args.command == "generate-all":
        result = ScaffoldService(scaffolder).generate_all()
        _exit_on_failure(parser, result)
        _print_batch(result.data)
        print("Finished generating missing tests")
    elif args.command == "watch":
        watcher = ModuleWatcher(
            args.path or args.source_root,
            scaffolder=scaffolder,
            poll_interval=config.poll_interval,
        )
        try:
            asyncio.run(watcher.run())
        except KeyboardInterrupt:
            watcher.stop()
            print("\nShutting down file watcher...")
    elif args.command in ("git-changed", "git-new"):
        service = GitChangesService(".", scaffolder=scaffolder)
        if args.command == "git-changed":
            result = service.generate_for_changed_files(args.compare)
        else:
            result = service.generate_for_new_files(args.compare)
        _exit_on_failure(parser, result)
        if not result.data.items:
            print("No relevant file changes detected")
        else:
            _print_batch(result.data)
    elif args.command == "git-stage":
        service = GitChangesService(".", scaffolder=scaffolder)
        if service.is_working_directory_clean():
            print(CLEAN_MESSAGE)
            return
        result = service.stage_test_files()
        _exit_on_failure(parser, result)
        print(format_staged(result.data))
    elif args.command == "check":
        result = ScaffoldService(scaffolder).find_missing()
        _exit_on_failure(parser, result)
        print(format_missing(result.data))
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _exit_on_failure(parser: argparse.ArgumentParser, result: ServiceResult) -> None:
    if not result.success:
        parser.exit(1, f"Error: {result.error.message}\nRun with --verbose for more details.\n")


def _print_batch(batch: BatchResult) -> None:
    print(format_batch_result(batch))


if __name__ == "__main__":
    main(sys.argv[1:])
