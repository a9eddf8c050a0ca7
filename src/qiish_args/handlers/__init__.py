import logging
from .command import handle_command
from .file import handle_file
from .interactive import handle_interactive

# Common logger for all handlers
logger = logging.getLogger("qiish-args")

__all__ = [
    "handle_command",
    "handle_file",
    "handle_interactive",
]
