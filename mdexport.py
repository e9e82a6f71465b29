#!/usr/bin/env python3
"""
md-export - Markdown to TXT, PDF and DOCX exporter

Simple usage:
    python mdexport.py notes.md               # Outputs document.txt
    python mdexport.py notes.md -f pdf        # Outputs document.pdf
    python mdexport.py notes.md -f docx -o out/
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from md_export.cli import app

if __name__ == "__main__":
    app()
