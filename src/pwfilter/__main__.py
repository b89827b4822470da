#!/usr/bin/env python3
"""
Allow running pwfilter as a module: python -m pwfilter
"""

from pwfilter.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
