"""Allow ``python -m cargocmd``."""

from cargocmd.cli import main

if __name__ == "__main__":
    main()
