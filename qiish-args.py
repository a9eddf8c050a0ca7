#!/usr/bin/env python3

import sys

from qiish_args.main import main

if __name__ == "__main__":
    sys.exit(main())
