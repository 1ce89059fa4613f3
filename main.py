#!/usr/bin/env python3
"""
Musicbox CLI - Browse a plain-text music catalog.

Reads a catalog of album headers and track listings, then lists albums,
shows their songs, and converts between H:M:S timestamps and seconds.
"""

from musicbox.interface.cli import app

if __name__ == "__main__":
    app()
