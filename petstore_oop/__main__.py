"""Main entry point for ``python -m petstore_oop``."""

from petstore_oop.cli import app

if __name__ == "__main__":
    app()
