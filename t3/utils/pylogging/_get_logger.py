import logging


def get_logger(name: str) -> logging.Logger:
    """Returns the logger of the given name.

    Handlers and levels are left to the host application. The package logger only gets a
    `logging.NullHandler`, so nothing is printed unless the host configures logging.

    Args:
        name (str): Logger name, usually the `__name__` of the calling module.

    Returns:
        logging.Logger: Logger.
    """
    package_logger = logging.getLogger(__name__.split(".")[0])
    if not any(isinstance(h, logging.NullHandler) for h in package_logger.handlers):
        package_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
