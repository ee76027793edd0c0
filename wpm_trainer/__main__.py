from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path


def _add_project_root() -> None:
    # Running the file directly puts wpm_trainer/ itself on sys.path, not its parent.
    root = str(Path(__file__).resolve().parents[1])
    if root not in sys.path:
        sys.path.insert(0, root)


try:
    # python -m wpm_trainer, or the wpm-trainer console script
    from .app import run  # type: ignore[attr-defined]
    from .settings import log_dir, log_level_from_env  # type: ignore[attr-defined]
except ImportError:
    # python wpm_trainer/__main__.py
    _add_project_root()
    from wpm_trainer.app import run  # type: ignore[attr-defined]
    from wpm_trainer.settings import log_dir, log_level_from_env  # type: ignore[attr-defined]


def configure_logging() -> None:
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    directory = log_dir()
    try:
        directory.mkdir(parents=True, exist_ok=True)
        # 1MB max, keep 3 backups
        handlers.append(RotatingFileHandler(directory / "wpm_trainer.log", maxBytes=1024 * 1024, backupCount=3))
    except OSError as e:
        print(f"File logging disabled: {e}", file=sys.stderr)

    logging.basicConfig(
        level=log_level_from_env(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def main() -> int:
    """Entry point for running the trainer from the command line."""
    configure_logging()
    return run()


if __name__ == "__main__":
    raise SystemExit(main())
