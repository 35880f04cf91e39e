"""Package entry point for ``python -m card_layout``."""

from .cli import main

if __name__ == "__main__":
    main()
