#!/usr/bin/env python3
"""
Artwork Upload Script for Canvia

Usage:
    python upload_artwork.py "/path/one.jpg,/path/two.jpg" [--dry-run] [--verbose] [--workers N]

Or use the package directly:
    python -m artwork_uploader.main "/path/one.jpg,/path/two.jpg"
"""

import sys
from pathlib import Path

# Add parent directory to path for package imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from artwork_uploader.main import main

if __name__ == "__main__":
    main()
