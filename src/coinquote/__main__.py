# src/coinquote/__main__.py
"""Module entry point: python -m coinquote BASE QUOTE"""
import sys

from coinquote.app import main

if __name__ == "__main__":
    sys.exit(main())
