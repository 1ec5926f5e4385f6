#!/usr/bin/env python3
"""
Skill toolkit CLI.

Usage:
  skillkit validate [path/to/skill.json]
  skillkit generate [path/to/skill.json] --json-logs
  skillkit install /path/to/my-app [skills/testing] --target claude --link
"""

import sys
import argparse
import json

from dotenv import load_dotenv


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="skillkit", description="Skill descriptor toolkit")
    parser.add_argument("--root", default=None,
                        help="Skills root directory (default: $SKILLKIT_ROOT or ./skills)")
    parser.add_argument("--config", default=None, help="Optional YAML config file")
    parser.add_argument("--json-logs", action="store_true", help="JSON log output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug lines")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # ── validate ──
    validate_parser = subparsers.add_parser("validate", help="Validate skill.json descriptors")
    validate_parser.add_argument("path", nargs="?", default=None,
                                 help="Single skill.json (default: all under the root)")

    # ── generate ──
    generate_parser = subparsers.add_parser("generate",
                                            help="Render SKILL.md and cursor.rule.md")
    generate_parser.add_argument("path", nargs="?", default=None,
                                 help="Single skill.json (default: all under the root)")

    # ── install ──
    install_parser = subparsers.add_parser("install", help="Install skills into a project")
    install_parser.add_argument("destination", nargs="?", default=None,
                                help="Project root, tool directory or exact target directory")
    install_parser.add_argument("source", nargs="?", default=None,
                                help="Skill subtree to install (default: the whole root)")
    install_parser.add_argument("--target", default="cursor", help="cursor (default) or claude")
    install_parser.add_argument("-l", "--link", action="store_true",
                                help="Symlink instead of copy")
    install_parser.add_argument("--include-reference", "--include-claude",
                                dest="include_reference", action="store_true",
                                help="Also install the group's CLAUDE.md as a reference")

    return parser


def main(argv: list[str] | None = None):
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == "validate":
        sys.exit(cmd_validate(args))
    elif args.command == "generate":
        sys.exit(cmd_generate(args))
    elif args.command == "install":
        sys.exit(cmd_install(args))


def _load(args):
    from skillkit.core.config import load_config
    return load_config(args.config, root=args.root,
                       json_logs=args.json_logs, verbose=args.verbose)


def cmd_validate(args) -> int:
    """Validate one descriptor or all of them."""
    from skillkit.core.errors import SkillkitError
    from skillkit.orchestrator.runner import BatchRunner

    try:
        runner = BatchRunner(_load(args))
        return runner.run_validate(args.path)
    except SkillkitError as e:
        _error(f"Validate error: {e}", args.json_logs)
        return 1


def cmd_generate(args) -> int:
    """Render documents for one descriptor or all of them."""
    from skillkit.core.errors import SkillkitError
    from skillkit.orchestrator.runner import BatchRunner

    try:
        runner = BatchRunner(_load(args))
        return runner.run_generate(args.path)
    except SkillkitError as e:
        _error(f"Generate error: {e}", args.json_logs)
        return 1


def cmd_install(args) -> int:
    """Copy or link generated skills into a project."""
    from skillkit.commands.install import run_install
    from skillkit.core.errors import SkillkitError

    try:
        return run_install(
            _load(args),
            destination=args.destination,
            source=args.source,
            convention=args.target,
            link=args.link,
            include_reference=args.include_reference,
        )
    except SkillkitError as e:
        _error(f"Install error: {e}", args.json_logs)
        return 1
    except OSError as e:
        _error(f"Install error: {e}", args.json_logs)
        return 2


def _error(message: str, json_logs: bool = False) -> None:
    """Print an error as a JSON log line on stdout, or plain on stderr."""
    if json_logs:
        print(json.dumps({
            "event": "log", "level": "error", "phase": None,
            "message": message,
        }, ensure_ascii=False), flush=True)
    else:
        print(message, file=sys.stderr, flush=True)


if __name__ == "__main__":
    main()
