"""Argument parsing functionality for npm-package."""

import argparse
from constants import Constants


def _add_cwd(parser):
    parser.add_argument("--cwd",
                        dest="CWD",
                        help="Directory containing node_modules (default: current directory)",
                        action="store",
                        type=str)


def parse_args(argv=None):
    """Parses the arguments passed to the program.

    Args:
        argv (list, optional): Argument list; defaults to sys.argv[1:].
    """
    parser = argparse.ArgumentParser(
        prog="npm-package",
        description="Inspect packages installed in a node_modules directory",
        add_help=True,
    )

    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=Constants.LOG_LEVELS)
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML, YML, or JSON)",
                        action="store",
                        type=str)

    sub = parser.add_subparsers(dest="action", required=True)

    info = sub.add_parser("info", help="Show metadata and entry file of an installed package")
    info.add_argument("name", help="Package name, e.g. lodash or @types/node")
    _add_cwd(info)
    info.add_argument("-o", "--output",
                      dest="OUTPUT",
                      help="Write the JSON result to this file instead of stdout",
                      action="store",
                      type=str)

    exists = sub.add_parser("exists", help="Check whether a package is installed")
    exists.add_argument("name", help="Package name")
    _add_cwd(exists)

    check = sub.add_parser("validate", help="Validate a package name")
    check.add_argument("name", help="Package name")

    return parser.parse_args(argv)
