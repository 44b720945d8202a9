#!/usr/bin/env python
"""
Entry point script for seatrows
"""
import sys
from seatrows.cli import main

if __name__ == "__main__":
    sys.exit(main())
