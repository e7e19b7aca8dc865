import logging


class LoggerMixin:
    """Provides a logger and verbosity-aware info logging."""

    def __init__(self, verbose: bool = False) -> None:
        self.logger = logging.getLogger(self.__class__.__module__)
        self.verbose = verbose

    def _log_verbose_info(self, message: str, *args: object) -> None:
        if self.verbose:
            self.logger.info(message, *args)
        else:
            self.logger.debug(message, *args)
