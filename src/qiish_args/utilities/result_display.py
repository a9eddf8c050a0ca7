"""
Rendering of tokenizer results for the qiish-args CLI.
"""

import json
import sys

from qiish_args.tokenizer import ParsedLine


def format_parse_result(result: ParsedLine, output_format: str = "text") -> str:
    """
    Render a parsed line.

    Args:
        result: The tokenizer output
        output_format: "text" for a two-line summary, "json" for one JSON object

    Returns:
        str: The rendered result, without a trailing newline
    """
    if output_format == "json":
        return json.dumps(result.to_dict(), ensure_ascii=False)

    return "\n".join(
        [
            f"Args : {json.dumps(result.args, ensure_ascii=False)}",
            f"Flags: {json.dumps(result.flags, ensure_ascii=False)}",
        ]
    )


def print_parse_result(result: ParsedLine, output_format: str = "text", stream=None) -> None:
    out = stream if stream is not None else sys.stdout
    print(format_parse_result(result, output_format), file=out)
