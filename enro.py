#!/usr/bin/env python3
"""
enro - File Encryption & Randomness Observer

Usage:
    python enro.py <path>
    python enro.py -r -s <directory>
    python enro.py --summary-only -t 7.5-8.0 <directory>
"""

from enro.cli import main

if __name__ == "__main__":
    main()
