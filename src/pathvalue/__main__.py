"""Allow ``python -m pathvalue`` to run the CLI."""

from pathvalue.ui.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
