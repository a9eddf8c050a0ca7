import argparse
import logging

from qiish_args.tokenizer import tokenize
from qiish_args.utilities.error_handling import handler_error_wrapper
from qiish_args.utilities.result_display import print_parse_result

logger = logging.getLogger("qiish-args")


@handler_error_wrapper
def handle_command(params: argparse.Namespace) -> bool:
    """Tokenize the single line given with --command."""
    logger.info("Tokenizing line from --command")
    result = tokenize(params.command, legacy=params.legacy)
    print_parse_result(result, params.format)
    return True
