"""
__main__.py - Entry point for `python -m intl_extract`.

Delegates to the Typer CLI defined in cli.py.
"""

from intl_extract.cli import app

if __name__ == "__main__":
    app()
