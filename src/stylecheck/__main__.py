"""Entry point for ``python -m stylecheck``."""

from stylecheck.presentation.cli import main

if __name__ == "__main__":
    main()
