"""Allow ``python -m nsorder``."""

from nsorder.ui.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
