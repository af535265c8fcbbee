"""Logging around unary calls and streams handled by the server."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


def log_unary_call(full_method: str, handler: Callable[[Any], _T], request: Any) -> _T:
    """Call ``handler(request)``, logging the call, its outcome and duration."""
    logger.info("-> Unary call: %s", full_method)
    start = time.perf_counter()
    try:
        response = handler(request)
    except Exception as error:
        duration = time.perf_counter() - start
        logger.info(
            "<- Completed with error: %s (method %s, %.6fs)", error, full_method, duration
        )
        raise
    duration = time.perf_counter() - start
    logger.info("<- Completed: method %s, duration=%.6fs", full_method, duration)
    return response


def audit_stream(
    full_method: str,
    is_client_stream: bool,
    is_server_stream: bool,
    handler: Callable[[Any], _T],
    stream: Any,
) -> _T:
    """Call ``handler(stream)``, logging when the stream starts and ends."""
    logger.info(
        "<-> Stream started: %s (IsClientStream:%s, IsServerStream:%s)",
        full_method,
        str(bool(is_client_stream)).lower(),
        str(bool(is_server_stream)).lower(),
    )
    try:
        result = handler(stream)
    except Exception as error:
        logger.info("<-> Stream %s finished with error: %s", full_method, error)
        raise
    logger.info("<-> Stream %s finished successfully", full_method)
    return result