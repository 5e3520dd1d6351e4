from .logging import build_log_context, log_event, redact

__all__ = ["build_log_context", "log_event", "redact"]
