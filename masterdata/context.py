"""
===============================================================================
CRC CARD — masterdata/context.py (request-scoped context)
===============================================================================

Responsibilities:
  - Keep request-scoped data in ContextVars (async-safe).
  - Let logs correlate by request without threading parameters everywhere.
  - Provide the minimal helpers: set_request_context(), get_context_dict(),
    clear_context().

Collaborators:
  - crosscutting.middleware: sets request_id/method/path per request.
  - crosscutting.logger: enriches every log line via get_context_dict().

Constraints:
  - Only str values, empty string meaning "not available".
===============================================================================
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Final

request_id_var: ContextVar[str] = ContextVar("request_id", default="")
http_method_var: ContextVar[str] = ContextVar("http_method", default="")
http_path_var: ContextVar[str] = ContextVar("http_path", default="")

_CTX_KEYS: Final[tuple[tuple[str, ContextVar[str]], ...]] = (
    ("request_id", request_id_var),
    ("method", http_method_var),
    ("path", http_path_var),
)


def set_request_context(
    *, request_id: str = "", method: str = "", path: str = ""
) -> None:
    """Set the minimal request context (empty strings mean "not available")."""
    request_id_var.set(request_id or "")
    http_method_var.set(method or "")
    http_path_var.set(path or "")


def get_context_dict() -> dict[str, str]:
    """Current context as a dict, empty keys omitted."""
    return {key: value for key, var in _CTX_KEYS if (value := var.get())}


def clear_context() -> None:
    """Reset the context at the end of a request."""
    for _, var in _CTX_KEYS:
        var.set("")
