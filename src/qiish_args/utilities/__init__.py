"""
Utility modules for qiish-args.
"""

from qiish_args.exceptions import QiishArgsError, ValidationError
from qiish_args.utilities.error_handling import handler_error_wrapper
