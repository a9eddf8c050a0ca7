import argparse
import logging
import sys

from qiish_args.tokenizer import tokenize
from qiish_args.utilities.error_handling import handler_error_wrapper
from qiish_args.utilities.result_display import print_parse_result

logger = logging.getLogger("qiish-args")

PROMPT = "qiish> "


def _read_lines(stream):
    """Yield lines from stream, printing the prompt first when it is a terminal."""
    interactive = stream.isatty()
    while True:
        if interactive:
            print(PROMPT, end="", flush=True)
        line = stream.readline()
        if not line:
            if interactive:
                print()
            return
        yield line.rstrip("\r\n")


@handler_error_wrapper
def handle_interactive(params: argparse.Namespace, stream=None) -> bool:
    """Tokenize lines read from stdin until end of input."""
    stream = stream if stream is not None else sys.stdin
    count = 0
    for line in _read_lines(stream):
        print_parse_result(tokenize(line, legacy=params.legacy), params.format)
        count += 1
    logger.info(f"Interactive session ended after {count} line(s)")
    return True
