"""Delivery metrics using Prometheus."""
import logging
from typing import Optional
from prometheus_client import Counter, start_http_server

from rocketchat_notifications.config.settings import Config

logger = logging.getLogger(__name__)

# Prometheus metrics
messages_sent_total = Counter(
    'rocketchat_messages_sent_total',
    'Total number of RocketChat messages handed to the client',
    ['status']
)


def start_metrics_server(port: Optional[int] = None) -> bool:
    """
    Expose the Prometheus registry over HTTP when metrics are enabled.

    Args:
        port: Port to listen on (defaults to Config.METRICS_PORT)

    Returns:
        True if the server was started
    """
    if not Config.ENABLE_METRICS:
        return False

    port = port or Config.METRICS_PORT
    start_http_server(port)
    logger.info(f"Prometheus metrics exposed on port {port}")
    return True
