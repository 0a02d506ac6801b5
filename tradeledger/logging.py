# tradeledger/logging.py
import logging
from pathlib import Path
from logging.handlers import RotatingFileHandler
from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class Logger:
    """
    Configures a logger that writes ledger and portfolio trace records
    to the console through Rich and, optionally, to a rotating log file.

    Library modules only ever call ``logging.getLogger(__name__)``; handlers
    are attached here by the application that owns the output.
    """

    def __init__(
        self,
        name: str = "tradeledger",
        level: int = logging.INFO,
        log_file: Path = None,
        rotate: bool = True,
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5,
    ):
        """
        :param name: Logger name. The default covers every tradeledger module.
        :param level: Logging level; DEBUG shows the [EXEC]/[UNDO] trace.
        :param log_file: Optional path for a file copy of the trace.
        :param rotate: Use a rotating file handler instead of a plain one.
        :param max_bytes: Size at which the log file is rotated.
        :param backup_count: Number of rotated files to keep.
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)
        self.logger.propagate = False

        # Repeated configuration must not stack handlers
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        console_handler = RichHandler(
            level=level,
            show_time=True,
            markup=False,
            rich_tracebacks=True,
            log_time_format=DATE_FORMAT,
        )
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        self.logger.addHandler(console_handler)

        if log_file:
            if rotate:
                file_handler = RotatingFileHandler(
                    log_file, maxBytes=max_bytes, backupCount=backup_count
                )
            else:
                file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
            self.logger.addHandler(file_handler)

    def get(self) -> logging.Logger:
        return self.logger

    @classmethod
    def create(
        cls,
        name: str = "tradeledger",
        level: int = logging.INFO,
        log_file: Path = None,
        rotate: bool = True,
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5,
    ) -> logging.Logger:
        """
        Configure and return the logger in one step.
        """
        return cls(name, level, log_file, rotate, max_bytes, backup_count).get()

    @classmethod
    def from_config(cls, config, name: str = "tradeledger") -> logging.Logger:
        """
        Configure the logger from a ``LedgerConfig``'s log level and log file.
        """
        log_file = Path(config.log_file) if config.log_file else None
        return cls.create(name, level=config.level, log_file=log_file)
