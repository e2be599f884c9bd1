"""Development entrypoint for the Warband battle walkthrough."""

from __future__ import annotations

from warband.simulate import main

if __name__ == "__main__":
    raise SystemExit(main())
