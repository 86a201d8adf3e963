#!/usr/bin/env python
"""
Today I Ran - Command Line Interface

This script provides basic information derived from the distance you ran and
the time you needed: your average velocity and pace, estimated times for
other distances and comparisons with other performances.
"""

import sys
import argparse
import logging

from rich.console import Console

from runcalc.config import get_config
from runcalc.constants import LOG_FORMAT, LOG_LEVELS, VERSION
from runcalc.parsing import ParseError
from runcalc.reference import ReferenceDataError, load_reference
from runcalc.report import (
    COMPARISON_TITLE,
    PROJECTION_TITLE,
    comparison_table,
    projection_table,
    render_table,
    summary_lines,
)
from runcalc.run import parse_run


def parse_args(argv):
    """
    Parse command line arguments.

    Args:
        argv: Command line arguments

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog='today-i-ran',
        description='This tool provides you with basic information derived from the distance '
                    'you ran and the time you needed. This currently contains your average '
                    'velocity, estimated times for other distances and comparisons with other '
                    'performances.')

    parser.add_argument('distance', help='the distance you ran today, e.g. "10km" or "5.2 mi"')
    parser.add_argument('time', help='the time you needed, e.g. "50min" or "1h 5min 30s"')
    parser.add_argument('-v', '--verbose', action='store_true', default=None,
                        help='show additional information')
    parser.add_argument('-m', '--miles', dest='use_miles', action='store_true', default=None,
                        help='use miles as unit of length')
    parser.add_argument('--precision', type=int, default=None,
                        help='number of decimals shown for seconds')
    parser.add_argument('--no-color', dest='color', action='store_false', default=None,
                        help='print plain text without bold highlighting')
    parser.add_argument('--log-level', required=False, choices=LOG_LEVELS, default=None,
                        help='Set log level')
    parser.add_argument('--version', action='version', version=f'%(prog)s {VERSION}')

    return parser.parse_args(argv)


def apply_config_defaults(args, config):
    """
    Fill in every option not given on the command line from the configuration.

    Args:
        args: Parsed arguments
        config: Config instance

    Returns:
        The updated arguments
    """
    for key in ('verbose', 'use_miles', 'color', 'log_level'):
        if getattr(args, key) is None:
            setattr(args, key, config.get(key))
    if args.precision is None:
        args.precision = config.get_precision()
    args.length_precision = config.get_length_precision()
    args.default_unit = config.get_default_distance_unit()
    args.reference_file = config.get_reference_file()
    return args


def validate_args(args):
    """
    Validate the command line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid, False otherwise
    """
    if args.precision < 0:
        logging.error(f"Precision must not be negative: {args.precision}")
        return False

    return True


def setup_logging(log_level):
    """
    Set up logging with the specified level.

    Args:
        log_level: Logging level (e.g., 'INFO', 'DEBUG')
    """
    numeric_level = getattr(logging, str(log_level).upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    # replaces any handler installed by messages logged before set-up
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, force=True)


def cmd_report(args, console):
    """
    Print what can be derived from the run given on the command line.

    Args:
        args: Parsed arguments with distance, time, verbose, use_miles and
            precision settings
        console: rich Console to print to
    """
    run = parse_run(args.distance, args.time, default_unit=args.default_unit)
    logging.info(f"Parsed {run!r}")

    for line in summary_lines(run, args.use_miles, args.precision, args.length_precision):
        console.print(line)

    if not args.verbose:
        return

    reference = load_reference(args.reference_file)

    console.print(f"\n[bold]{PROJECTION_TITLE}[/bold]")
    console.print(render_table(projection_table(run, reference.distances(args.use_miles),
                                                args.precision)))

    console.print(f"\n[bold]{COMPARISON_TITLE}[/bold]")
    console.print(render_table(comparison_table(run, reference.speeds)))


def main(argv=None):
    """Main entry point for the script."""
    args = parse_args(sys.argv[1:] if argv is None else argv)
    config = get_config()

    # Set up logging before the configuration getters can warn
    setup_logging(args.log_level or config.get('log_level'))
    args = apply_config_defaults(args, config)

    # Validate arguments
    if not validate_args(args):
        return 1

    console = Console(color_system='auto' if args.color else None, highlight=False)

    try:
        cmd_report(args, console)
        return 0

    except (ParseError, ZeroDivisionError) as e:
        logging.error(f"Could not understand the passed arguments: {e}")
        return 1
    except (ReferenceDataError, OSError) as e:
        logging.error(f"Could not load reference data: {e}")
        return 1
    except KeyboardInterrupt:
        logging.info("Operation canceled by user.")
        return 130  # Standard exit code for Ctrl+C
    except Exception as e:
        logging.error(f"Error executing command: {str(e)}")
        import traceback
        logging.debug(traceback.format_exc())
        return 1


if __name__ == '__main__':
    sys.exit(main())
