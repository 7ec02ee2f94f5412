import logging

log = logging.getLogger(__name__)


def log_exception(exception: BaseException):
    """The default fault sink: logs the exception along with its traceback."""
    log.error(exception, exc_info=exception if exception.__traceback__ else True)
