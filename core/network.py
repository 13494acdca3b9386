"""
Network Connectivity Checker

Simple utility to check if a prediction endpoint is reachable.
Uses a socket connection to the endpoint's host and port.
"""

import logging
import socket
from typing import Optional, Tuple
from urllib.parse import urlsplit

from config.settings import NETWORK_CHECK_TIMEOUT

DEFAULT_PORTS = {"http": 80, "https": 443}


def endpoint_address(url: str) -> Optional[Tuple[str, int]]:
    """
    Extract (host, port) from an endpoint URL.

    Returns:
        (host, port), or None if the URL has no host

    Example:
        endpoint_address("http://127.0.0.1:5000/predict")  # ("127.0.0.1", 5000)
    """
    parts = urlsplit(url)
    if not parts.hostname:
        return None
    try:
        port = parts.port
    except ValueError:
        return None
    return parts.hostname, port or DEFAULT_PORTS.get(parts.scheme, 80)


def check_endpoint_connectivity(
    url: str,
    timeout: float = NETWORK_CHECK_TIMEOUT,
) -> bool:
    """
    Check if the prediction endpoint accepts TCP connections.

    This does not send a request; it only tells whether an upload could
    reach the service.

    Returns:
        True if reachable, False otherwise
    """
    logger = logging.getLogger(__name__)

    address = endpoint_address(url)
    if address is None:
        logger.warning(f"Cannot check connectivity, invalid URL: {url}")
        return False

    try:
        with socket.create_connection(address, timeout=timeout):
            return True
    except (socket.timeout, OSError):
        # Service down, timeout, or DNS lookup failed
        return False


def get_network_status(url: str) -> Tuple[bool, str]:
    """
    Get human-readable endpoint status.

    Returns:
        Tuple of (is_connected, status_string)

    Example:
        is_connected, status = get_network_status("http://127.0.0.1:5000/predict")
        print(status)  # "Prediction service reachable"
    """
    is_connected = check_endpoint_connectivity(url)
    status = (
        "Prediction service reachable"
        if is_connected
        else "Prediction service unreachable"
    )
    return is_connected, status
