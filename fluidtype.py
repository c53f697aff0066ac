#!/usr/bin/env python3
"""
Fluid Type CLI - Entry point

Usage:
    python fluidtype.py css --max-font-size 18 --ratio major-third

Or install as command:
    pip install -e .
    fluidtype css --max-font-size 18 --ratio major-third
"""

from cli.main import main

if __name__ == "__main__":
    main()
