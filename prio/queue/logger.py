import logging


class Logger(object):
    """
    Mixin which binds a named logger to the instance, so that subclasses
    can write self.debug(...).
    """
    LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

    def __init__(self, logger_name=None):
        super(Logger, self).__init__()
        self._logger = logging.getLogger(
            logger_name if logger_name else type(self).__name__)

    @property
    def logger(self):
        return self._logger

    def debug(self, msg, *args, **kwargs):
        self._logger.debug(msg, *args, **kwargs)

    @staticmethod
    def setup_logging(level=logging.INFO):
        logging.basicConfig(level=level, format=Logger.LOG_FORMAT)
        logging.getLogger().setLevel(level)
