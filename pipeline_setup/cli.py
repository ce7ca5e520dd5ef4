"""Command-line entry point: ``pipeline-setup <command>``."""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import active_config
from .env_scaffold import scaffold_environment
from .errors import SetupError
from .multisite import run_multisite_menu
from .sites import configure_site, list_sites
from .wordpress import setup_wordpress_connection

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s - %(pathname)s:%(lineno)d'
LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def configure_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """Diagnostics go to stderr (and a file when configured); stdout stays for the user."""
    handlers = [logging.StreamHandler(sys.stderr)]
    log_file = log_file or active_config.LOG_FILE
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=(level or active_config.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True
    )


def cmd_wordpress(args: argparse.Namespace) -> int:
    return 0 if setup_wordpress_connection() else 1


def cmd_env(args: argparse.Namespace) -> int:
    scaffold_environment(args.directory)
    return 0


def cmd_multisite(args: argparse.Namespace) -> int:
    # An unrecognized choice is not an error
    run_multisite_menu()
    return 0


def cmd_site(args: argparse.Namespace) -> int:
    if args.list:
        list_sites(args.config_dir)
        return 0
    return 0 if configure_site(args.config_dir) else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pipeline-setup',
        description='Interactive setup tools for the content publishing pipeline.'
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--log-level', type=str.upper, choices=LOG_LEVELS,
                        help='Logging level (default from LOG_LEVEL)')
    parser.add_argument('--log-file', help='Also write logs to this file')

    sub = parser.add_subparsers(dest='command', metavar='COMMAND')
    sub.required = True

    p = sub.add_parser('wordpress', help='Verify an Application Password and store it as secrets')
    p.set_defaults(func=cmd_wordpress)

    p = sub.add_parser('env', help='Create .env.local, .env.example and .gitignore')
    p.add_argument('--directory', default=None, help='Target directory (default: current directory)')
    p.set_defaults(func=cmd_env)

    p = sub.add_parser('multisite', help='Show multi-site setup options and next steps')
    p.set_defaults(func=cmd_multisite)

    p = sub.add_parser('site', help='Configure one site from a predefined site type')
    p.add_argument('--config-dir', default=None,
                   help=f'Where site configs are saved (default: {active_config.SITES_CONFIG_DIR})')
    p.add_argument('--list', action='store_true', help='List saved site configurations and exit')
    p.set_defaults(func=cmd_site)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(args.log_level, args.log_file)
    except ValueError as e:
        parser.error(f"invalid log level: {e}")
    logger.debug(f"Running command {args.command}")

    try:
        return args.func(args)
    except SetupError as e:
        logger.error(f"{args.command} failed: {e}")
        print(f"\nError: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        logger.error(f"{args.command} failed writing files: {e}")
        print(f"\nError: {e}", file=sys.stderr)
        return 1
    except EOFError:
        print("\nInput closed before setup finished.", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        return 130
