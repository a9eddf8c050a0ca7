import argparse
import logging

from qiish_args.exceptions import FileSystemError
from qiish_args.tokenizer import tokenize
from qiish_args.utilities.error_handling import handler_error_wrapper
from qiish_args.utilities.result_display import print_parse_result

logger = logging.getLogger("qiish-args")


@handler_error_wrapper
def handle_file(params: argparse.Namespace) -> bool:
    """
    Tokenize every line of the file given with --file.

    Each line produces one result, blank lines included, so output lines stay
    aligned with input lines.
    """
    logger.info(f"Tokenizing lines from {params.file}")
    try:
        with open(params.file, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise FileSystemError(
            f"Failed to read {params.file}: {e}",
            details={"path": params.file, "error": str(e)},
        ) from e

    for line in lines:
        print_parse_result(tokenize(line, legacy=params.legacy), params.format)

    logger.info(f"Tokenized {len(lines)} line(s)")
    return True
