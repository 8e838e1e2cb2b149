from __future__ import annotations

from .context import bind_request_id, current_request_context, request_id_var
from .handles import render_handle

__all__ = [
    "bind_request_id",
    "current_request_context",
    "render_handle",
    "request_id_var",
]
