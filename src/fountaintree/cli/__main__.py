"""Main entry point for fountaintree CLI when run as a module."""

from fountaintree.cli.main import main

if __name__ == "__main__":  # pragma: no cover
    main()
