"""Observability: structured logging.

Registry records carry personal data, so every log event passes through a
redaction processor before rendering.
"""

from rdapview.observability.logging import PIIRedactor, get_logger, setup_logging

__all__ = ["PIIRedactor", "get_logger", "setup_logging"]
