#!/usr/bin/env python3
"""reqrank CLI entrypoint."""

import sys
import argparse
import logging
from pathlib import Path

from reqrank.lib.config import load_project_config
from reqrank.lib.constants import EXIT_CONFIG_ERROR
from reqrank.lib.validate import ValidationError
from reqrank.commands import priority as cmd_priority_module
from reqrank.commands.priority import TIER_NAMES


def get_project_config(args):
    """Load reqrank.yaml from --root (default: current directory)."""
    root = Path(args.root).resolve() if args.root else Path.cwd()
    config_path = Path(args.config) if args.config else None
    try:
        return load_project_config(root, config_path)
    except ValidationError as e:
        print(f"ERROR: Invalid configuration: {e}")
        sys.exit(EXIT_CONFIG_ERROR)


def cmd_update(args):
    config = get_project_config(args)
    return cmd_priority_module.cmd_update(args, config)


def cmd_show(args):
    config = get_project_config(args)
    return cmd_priority_module.cmd_show(args, config)


def cmd_validate(args):
    config = get_project_config(args)
    return cmd_priority_module.cmd_validate(args, config)


def cmd_score(args):
    config = get_project_config(args)
    return cmd_priority_module.cmd_score(args, config)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='rr', description='Dependency-aware requirement prioritization')
    parser.add_argument('--root', '-r', help='Project root (default: current directory)')
    parser.add_argument('--config', '-c', help='Config file (default: <root>/reqrank.yaml)')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')
    subparsers = parser.add_subparsers(dest='command', required=True)

    # rr update
    p_update = subparsers.add_parser('update', help='Recalculate all priorities and rewrite changed files')
    p_update.add_argument('--commit', action='store_true', help='Commit changed files')
    p_update.set_defaults(func=cmd_update)

    # rr show / rr list
    for name in ('show', 'list'):
        p_show = subparsers.add_parser(name, help='Show persisted priorities (default: top 5)')
        p_show.add_argument('tier', nargs='?', choices=TIER_NAMES, help='Only show this tier')
        p_show.add_argument('--limit', '-n', type=int, help='Show at most N items')
        p_show.add_argument('--all', '-a', action='store_true', help='Show every tier')
        p_show.set_defaults(func=cmd_show)

    # rr validate
    p_validate = subparsers.add_parser('validate', help='Check for priority drift and dependency issues')
    p_validate.set_defaults(func=cmd_validate)

    # rr score
    p_score = subparsers.add_parser('score', help='Compute priorities without writing anything')
    p_score.add_argument('--json', action='store_true', help='Output JSON')
    p_score.set_defaults(func=cmd_score)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )
    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
