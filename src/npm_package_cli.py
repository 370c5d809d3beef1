"""npm-package - inspect packages installed in a node_modules directory.

    Returns:
        int: Exit code (see constants.ExitCodes)
"""
import sys
import logging
import json

from constants import ExitCodes
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from args import parse_args
from cli_config import load_config, apply_config
from npm_package import (
    InvalidPackageNameError,
    Options,
    PackageResolutionError,
    is_package_exists,
    resolve_package_info,
    validate,
)

logger = logging.getLogger(__name__)


def emit_json(data, path=None):
    """Print JSON to stdout or write it to ``path``.

    Args:
        data: JSON-serializable value.
        path (str, optional): Output file path.
    """
    text = json.dumps(data, ensure_ascii=False, indent=4)
    if not path:
        print(text)
        return
    try:
        with open(path, 'w', encoding='utf-8') as file:
            file.write(text + "\n")
        logging.info("JSON file has been successfully exported at: %s", path)
    except OSError as e:
        logging.error("JSON file couldn't be written to disk: %s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)


def run_info(args):
    """Resolve one package and print its PackageInfo."""
    options = Options(cwd=args.CWD)
    try:
        info = resolve_package_info(args.name, options)
    except InvalidPackageNameError as e:
        logging.error("%s", e)
        return ExitCodes.INVALID_NAME.value
    except PackageResolutionError as e:
        logging.error("%s", e)
        return ExitCodes.NOT_RESOLVED.value
    emit_json(info.to_dict(), args.OUTPUT)
    return ExitCodes.SUCCESS.value


def run_exists(args):
    """Print whether a package manifest is installed."""
    found = is_package_exists(args.name, Options(cwd=args.CWD))
    print("true" if found else "false")
    return ExitCodes.SUCCESS.value if found else ExitCodes.NOT_RESOLVED.value


def run_validate(args):
    """Print the name validation result."""
    result = validate(args.name)
    emit_json({
        "name": args.name,
        "validForNewPackages": result.valid_for_new_packages,
        "validForOldPackages": result.valid_for_old_packages,
        "warnings": result.warnings,
        "errors": result.errors,
    })
    return ExitCodes.SUCCESS.value if result.valid_for_old_packages else ExitCodes.INVALID_NAME.value


ACTIONS = {
    "info": run_info,
    "exists": run_exists,
    "validate": run_validate,
}


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    apply_config(args, load_config(args.CONFIG))
    configure_logging(args.LOG_LEVEL, args.LOG_FILE)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action=args.action)
        )

    code = ACTIONS[args.action](args)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI finished",
            extra=extra_context(
                event="function_exit", component="cli", action=args.action, outcome=str(code)
            )
        )
    sys.exit(code)


if __name__ == "__main__":
    main()
