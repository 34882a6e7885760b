"""
Logging client configuration, optionally forwarding to a centralized log service.

Module loggers are created with ``logging.getLogger(__name__)``; because the
package is named ``tuiter`` they propagate into the handlers installed on the
``tuiter`` logger by ``setup_logger('tuiter')``.
"""
import logging
import logging.handlers
import os


class ServiceNameFilter(logging.Filter):
    """Stamp the service name on every record passing through a handler."""

    def __init__(self, service_name: str):
        super().__init__()
        self.service_name = service_name

    def filter(self, record: logging.LogRecord) -> bool:
        record.service = self.service_name
        return True


def setup_logger(service_name: str) -> logging.Logger:
    """
    Setup logger with console output and, when LOGGING_HOST is set, a socket
    handler that ships records to the logging service.

    Args:
        service_name: Logger name, also stamped on records as ``service``

    Returns:
        Configured logger
    """
    log_host = os.getenv('LOGGING_HOST', '')
    log_port = int(os.getenv('LOGGING_PORT', 9999))
    log_level = os.getenv('LOG_LEVEL', 'INFO').upper()

    # Create logger
    logger = logging.getLogger(service_name)
    logger.setLevel(getattr(logging, log_level, logging.INFO))

    # Remove existing handlers
    logger.handlers = []

    service_filter = ServiceNameFilter(service_name)

    if log_host:
        socket_handler = logging.handlers.SocketHandler(log_host, log_port)
        socket_handler.addFilter(service_filter)
        logger.addHandler(socket_handler)

    # Also add console handler for local debugging
    console_handler = logging.StreamHandler()
    console_handler.addFilter(service_filter)
    console_formatter = logging.Formatter(
        '%(asctime)s - [%(service)s] - %(levelname)s - %(message)s'
    )
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    return logger
