"""
Logging configuration for comm-finder.

Provides a centralized logger named 'commfinder'. Messages go to the console
and, when a log directory is given, to a timestamped file in that directory.
Log filename format: commfinder_{timestamp}.log

Only the 5 most recent 'commfinder_' log files are kept. Until setup_logger()
is called every logging call is a no-op, so library use stays silent.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Union


class CommFinderLogger:
    """Centralized logger for comm-finder operations."""

    _logger: Optional[logging.Logger] = None
    _current_log_file: Optional[Path] = None

    @classmethod
    def _cleanup_old_logs(cls, logs_dir: Path, keep_count: int = 5) -> None:
        """
        Remove old log files, keeping only the most recent ones.

        Args:
            logs_dir: Directory containing log files
            keep_count: Number of most recent log files to keep (default: 5)
        """
        log_files = sorted(
            logs_dir.glob("commfinder_*.log"),
            key=lambda p: p.stat().st_mtime,
            reverse=True
        )

        for old_log in log_files[keep_count:]:
            try:
                old_log.unlink()
            except OSError:
                # Another process may hold or have removed it
                pass

    @classmethod
    def setup_logger(
        cls, log_level: int = logging.INFO, log_dir: Optional[Union[str, Path]] = None
    ) -> logging.Logger:
        """
        Setup logger for a session.

        Args:
            log_level: Logging level (default: INFO)
            log_dir: Directory for log files (console only if None)

        Returns:
            Configured logger instance
        """
        if cls._logger:
            for handler in cls._logger.handlers[:]:
                cls._logger.removeHandler(handler)
                handler.close()

        cls._logger = logging.getLogger('commfinder')
        cls._logger.setLevel(log_level)
        cls._logger.propagate = False

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        cls._logger.addHandler(console_handler)

        cls._current_log_file = None
        if log_dir is not None:
            logs_dir = Path(log_dir)
            logs_dir.mkdir(parents=True, exist_ok=True)

            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")[:17]
            log_path = logs_dir / f"commfinder_{timestamp}.log"

            file_handler = logging.FileHandler(log_path, mode='w', encoding='utf-8')
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            cls._logger.addHandler(file_handler)
            cls._current_log_file = log_path

            cls._logger.debug(f"Log file: {log_path}")
            # After creating the new file so it counts towards the kept ones
            cls._cleanup_old_logs(logs_dir, keep_count=5)

        return cls._logger

    @classmethod
    def get_logger(cls) -> Optional[logging.Logger]:
        """Get the current logger instance."""
        return cls._logger

    @classmethod
    def get_log_file_path(cls) -> Optional[Path]:
        """Get the current log file path."""
        return cls._current_log_file

    @classmethod
    def info(cls, message: str) -> None:
        if cls._logger:
            cls._logger.info(message)

    @classmethod
    def warning(cls, message: str) -> None:
        if cls._logger:
            cls._logger.warning(message)

    @classmethod
    def error(cls, message: str) -> None:
        if cls._logger:
            cls._logger.error(message)

    @classmethod
    def debug(cls, message: str) -> None:
        if cls._logger:
            cls._logger.debug(message)

    @classmethod
    def cleanup(cls) -> None:
        """Clean up logger resources."""
        if cls._logger:
            for handler in cls._logger.handlers[:]:
                cls._logger.removeHandler(handler)
                handler.close()
            cls._logger = None
            cls._current_log_file = None
