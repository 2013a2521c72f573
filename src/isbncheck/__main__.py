"""Allow running the CLI with ``python -m isbncheck``."""

from isbncheck.cli import main

if __name__ == "__main__":
    main()
