"""
ghtrending logging utilities.

Provides configurable logging for page retrieval and extraction.
Ensures credentials sent to GitHub Enterprise hosts (tokens, cookies)
are never logged.
"""

import logging
from typing import Any

# Create package-specific loggers
_pkg_logger = logging.getLogger("ghtrending")
_http_logger = logging.getLogger("ghtrending.http")
_extract_logger = logging.getLogger("ghtrending.extract")

_DEFAULT_SENSITIVE_KEYS = {
    "authorization",
    "cookie",
    "set-cookie",
    "token",
    "password",
    "secret",
}


def configure_logging(
    level: int = logging.INFO,
    http_level: int | None = None,
    extract_level: int | None = None,
    handler: logging.Handler | None = None,
    format_string: str | None = None,
) -> None:
    """
    Configure ghtrending logging.

    Args:
        level: Default log level for all package loggers (default: INFO)
        http_level: Log level for page retrieval logging (default: same as level)
        extract_level: Log level for extraction logging (default: same as level)
        handler: Custom handler to use (default: StreamHandler to stderr)
        format_string: Custom format string (default: includes timestamp, level, logger name)

    Example:
        ```python
        import logging
        from ghtrending.logging import configure_logging

        # See every request and every skipped list item
        configure_logging(http_level=logging.DEBUG, extract_level=logging.DEBUG)
        ```
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    formatter = logging.Formatter(format_string)

    if handler is None:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)

    _pkg_logger.setLevel(level)
    _pkg_logger.addHandler(handler)

    _http_logger.setLevel(http_level if http_level is not None else level)
    _extract_logger.setLevel(extract_level if extract_level is not None else level)


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a ghtrending logger.

    Args:
        name: Logger name suffix (e.g., "http", "extract"). If None, returns main logger.

    Returns:
        Logger instance
    """
    if name is None:
        return _pkg_logger
    return logging.getLogger(f"ghtrending.{name}")


def safe_log_dict(data: dict[str, Any], sensitive_keys: set[str] | None = None) -> dict[str, Any]:
    """
    Create a copy of a dictionary with sensitive values masked.

    Args:
        data: Dictionary that may contain sensitive values (e.g. headers)
        sensitive_keys: Keys to mask (default: authorization, cookie, token, ...)

    Returns:
        Dictionary with sensitive values replaced with "[REDACTED]"
    """
    if sensitive_keys is None:
        sensitive_keys = _DEFAULT_SENSITIVE_KEYS

    result: dict[str, Any] = {}
    for key, value in data.items():
        key_lower = key.lower()
        if key_lower in sensitive_keys or any(sk in key_lower for sk in sensitive_keys):
            result[key] = "[REDACTED]"
        elif isinstance(value, dict):
            result[key] = safe_log_dict(value, sensitive_keys)
        else:
            result[key] = value

    return result


def log_http_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
    attempt: int = 0,
) -> None:
    """
    Log an outgoing page request at DEBUG level with credentials masked.

    Args:
        method: HTTP method
        url: Request URL
        headers: Request headers (optional)
        attempt: Retry attempt number (0 for the first try)
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"{method} {url}"]

    if attempt:
        log_parts.append(f"attempt={attempt}")

    if headers:
        log_parts.append(f"headers={safe_log_dict(dict(headers))}")

    _http_logger.debug(" | ".join(log_parts))


def log_http_response(
    status_code: int,
    url: str,
    size: int | None = None,
    elapsed_ms: float | None = None,
) -> None:
    """
    Log a page response at DEBUG level.

    Args:
        status_code: HTTP status code
        url: Request URL
        size: Body size in bytes (optional)
        elapsed_ms: Request duration in milliseconds (optional)
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"Response {status_code} from {url}"]

    if elapsed_ms is not None:
        log_parts.append(f"elapsed={elapsed_ms:.2f}ms")

    if size is not None:
        log_parts.append(f"bytes={size}")

    _http_logger.debug(" | ".join(log_parts))


def log_skipped_item(kind: str, index: int, reason: str) -> None:
    """
    Log a list item that was dropped during extraction.

    Args:
        kind: Item kind ("project", "developer", ...)
        index: Position of the item in the page
        reason: Why the item was skipped
    """
    _extract_logger.debug("Skipping %s #%d: %s", kind, index, reason)


# Export public API
__all__ = [
    "configure_logging",
    "get_logger",
    "safe_log_dict",
    "log_http_request",
    "log_http_response",
    "log_skipped_item",
]
