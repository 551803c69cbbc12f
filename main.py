#!/usr/bin/env python3
"""FocusTimer entry point.

Run with:
    python main.py
    python -m focustimer
"""

from focustimer.__main__ import main


if __name__ == "__main__":
    main()
