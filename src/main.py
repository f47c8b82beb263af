"""Run script.

Lets the CLI run as `python -m main` from `src/` during development, in
addition to the installed `rn-scaffold` console script.
"""

from __future__ import annotations

import sys

# Rich output on Windows consoles defaults to cp1252.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
