"""Per-request context handed to services."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from .logging import get_logger


class RequestLoggerAdapter(logging.LoggerAdapter):
    """Stamps ``request_id`` on every record, merging caller extras."""

    def process(self, msg, kwargs):
        extra = dict(self.extra)
        extra.update(kwargs.get("extra") or {})
        kwargs["extra"] = extra
        return msg, kwargs


@dataclass
class RequestContext:
    """Request id plus a logger bound to it."""

    request_id: Optional[str] = None
    logger: logging.LoggerAdapter = field(default=None)  # type: ignore[assignment]

    def __post_init__(self):
        if self.logger is None:
            self.logger = RequestLoggerAdapter(get_logger("request"), {"request_id": self.request_id})

    @classmethod
    def for_logger(cls, name: str, request_id: Optional[str] = None) -> "RequestContext":
        return cls(
            request_id=request_id,
            logger=RequestLoggerAdapter(get_logger(name), {"request_id": request_id}),
        )


def resolve_logger(ctx: Optional[RequestContext], name: str) -> logging.LoggerAdapter:
    """Logger from the context, or an unbound one for calls made outside a request."""
    if ctx is not None:
        return ctx.logger
    return RequestLoggerAdapter(get_logger(name), {"request_id": None})
