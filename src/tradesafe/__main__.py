"""Module entrypoint for ``python -m tradesafe``."""

from tradesafe.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
