"""
Main entry point for running the package as a module.

Usage:
    python -m flair_images check
    python -m flair_images add logo.png
    python -m flair_images list --type orphaned
"""

import sys
from .cli import main

if __name__ == '__main__':
    sys.exit(main())
