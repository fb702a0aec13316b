"""
Entry point for running PhraseTrans as a module.

Usage:
    python -m phrasetrans --help
    python -m phrasetrans translate "Hello there" --dictionary words.txt
    python -m phrasetrans interactive
"""
from .cli import app


if __name__ == "__main__":
    app()
