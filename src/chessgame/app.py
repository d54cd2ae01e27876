"""Application entry point."""

from __future__ import annotations

import os
import sys

from chessgame.ui.bootstrap import run_application
from chessgame.ui.settings import AppSettings


def main() -> None:
    """Launch the chess board window."""
    settings = AppSettings(log_level=os.environ.get("CHESSGAME_LOG_LEVEL", "WARNING"))
    sys.exit(run_application(settings=settings))


if __name__ == "__main__":
    main()
