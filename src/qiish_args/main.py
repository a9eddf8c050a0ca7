import logging
import sys
from typing import List, Optional

# Package imports
from qiish_args.cli import (
    MODE_COMMAND,
    MODE_FILE,
    MODE_INTERACTIVE,
    input_mode,
    parse_cmdline_args,
)
from qiish_args.exceptions import (
    ConfigurationError,
    FileSystemError,
    QiishArgsError,
    ValidationError,
)
from qiish_args.handlers import handle_command, handle_file, handle_interactive
from qiish_args.utilities.config_display import print_configuration


def setup_logging(log_level: str, log_file: Optional[str] = None) -> logging.Logger:
    """
    Set up logging with a console handler and an optional file handler.

    Console output goes to stderr because stdout carries tokenizer results.

    Args:
        log_level: The logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional path of a detailed log file

    Returns:
        Configured logger instance
    """
    numeric_level = getattr(logging, log_level.upper(), logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Clear any existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - "
            "%(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        file_handler.setFormatter(file_formatter)
        file_handler.setLevel(numeric_level)
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_formatter = logging.Formatter("%(levelname)s: %(message)s")
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(numeric_level)
    root_logger.addHandler(console_handler)

    app_logger = logging.getLogger("qiish-args")
    app_logger.setLevel(numeric_level)

    return app_logger


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for qiish-args.

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    # Not set until logging is configured; errors before that are only printed
    logger = None
    try:
        args = parse_cmdline_args(argv)

        logger = setup_logging(args.log, args.log_file)

        if args.show_config:
            print_configuration(args)

        logger.debug(f"Command line arguments: {vars(args)}")

        MODE_HANDLERS = {
            MODE_COMMAND: handle_command,
            MODE_FILE: handle_file,
            MODE_INTERACTIVE: handle_interactive,
        }

        mode = input_mode(args)
        logger.info(f"Running in {mode} mode{' (legacy rules)' if args.legacy else ''}")

        result = MODE_HANDLERS[mode](args)
        return 0 if result else 1

    except (ValidationError, ConfigurationError) as e:
        # Configuration/validation errors - user fixable
        if logger:
            logger.error(f"Configuration error: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 2

    except (FileSystemError, QiishArgsError) as e:
        if logger:
            logger.error(f"Runtime error: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        if logger:
            logger.warning("Interrupted by user")
        return 130

    except Exception as e:
        if logger:
            logger.error(f"Unexpected error: {e}", exc_info=True)
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
