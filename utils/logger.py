# utils/logger.py
import logging
import sys
from pathlib import Path
from config.paths import LOG_PATH


def configure_logging(log_path: Path = LOG_PATH, level: int = logging.INFO) -> logging.Logger:
    """
    Attach a UTF-8 file handler and a stdout handler to the root logger.

    Module loggers propagate to the root, so one call from an entry point
    (API or CLI) covers the scheduler and routing pipelines.
    """
    log_path = Path(log_path)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(level)

    # Prevent duplicate handlers if called multiple times
    if any(getattr(h, "_model_run", False) for h in root.handlers):
        return root

    # File handler
    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    # Stream handler (stdout -> docker logs)
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))

    for handler in (file_handler, stream_handler):
        handler._model_run = True
        root.addHandler(handler)
    return root
