"""Entry point for running mixtape as a module: python -m mixtape."""

from mixtape.cli import main

if __name__ == "__main__":
    main()
