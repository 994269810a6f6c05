#!/usr/bin/env python3
"""
Hospital billing console application.

Reads a patient's ID, name and type from standard input, prints the bill
and notifies the admin, billing and medical teams.
"""

import argparse
import sys
from typing import List, Optional

from hospitalbilling import BillingSession, __version__
from hospitalbilling.utils import load_config, setup_logger

DEFAULT_CONFIG = {
    'log_level': 'WARNING',
    'log_to_file': False,
    'separate_error_log': False,
}

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='hospitalbilling',
        description='Bill a patient and notify hospital departments.',
    )
    parser.add_argument('--config', help='Path to a JSON configuration file')
    parser.add_argument('--log-level', choices=LOG_LEVELS, help='Logging level (logs go to stderr)')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def cli(argv: Optional[List[str]] = None) -> int:
    """
    Run one billing session on the console.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)

    config = dict(DEFAULT_CONFIG)
    if args.config:
        config.update(load_config(args.config))
    if args.log_level:
        config['log_level'] = args.log_level

    setup_logger(
        level=config['log_level'],
        log_file=config.get('log_file'),
        log_dir=config.get('log_dir'),
        config=config,
    )

    # Consoles without UTF-8 show '?' for the rupee sign
    reconfigure = getattr(sys.stdout, 'reconfigure', None)
    if reconfigure is not None:
        reconfigure(errors='replace')

    BillingSession().run()
    return 0


def main() -> None:
    sys.exit(cli())


if __name__ == "__main__":
    main()
