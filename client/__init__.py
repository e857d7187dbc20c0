"""
Terminal client for the code review gateway.

Collects code, submits it to the gateway, renders the markdown review and
copies the full review or just its code blocks to the clipboard.
"""

from .errors import (
    ClipboardUnavailable,
    ExtractionEmpty,
    GatewayFailure,
    InvalidInput,
    NetworkFailure,
    NothingToCopy,
    ReviewClientError,
)
from .fences import FenceLexer, extract_code_blocks
from .gateway import GatewayClient, ReviewResult
from .session import ReviewSession, ReviewState

__all__ = [
    "ClipboardUnavailable",
    "ExtractionEmpty",
    "GatewayFailure",
    "InvalidInput",
    "NetworkFailure",
    "NothingToCopy",
    "ReviewClientError",
    "FenceLexer",
    "extract_code_blocks",
    "GatewayClient",
    "ReviewResult",
    "ReviewSession",
    "ReviewState",
]
