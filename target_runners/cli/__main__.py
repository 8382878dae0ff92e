"""Module execution entrypoint for `python -m target_runners.cli`."""

from __future__ import annotations

import sys

from target_runners.cli import main

if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
