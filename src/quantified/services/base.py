"""BaseService — shared foundation for quantified services.

Every service receives the resolved settings at construction time and
derives the payload type that all decoding validates against.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from quantified.domain.codec import to_dict
from quantified.domain.errors import QuantifiedParseError
from quantified.domain.payloads import resolve_payload_type
from quantified.domain.quantified import Quantified
from quantified.domain.text import parse, render
from quantified.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from quantified.config.settings import QuantifiedSettings

logger = logging.getLogger(__name__)

INVALID_QUANTIFIED = "INVALID_QUANTIFIED"


class BaseService:
    """Base for service-layer classes.

    Usage::

        class QuantifyService(BaseService):
            def parse(self, text: str) -> ServiceResult:
                value = self._parse(text)
                ...
    """

    def __init__(self, settings: QuantifiedSettings) -> None:
        self._settings = settings
        self._payload_kind = settings.payload.type
        self._payload_type: Any = resolve_payload_type(self._payload_kind)

    def _parse(self, text: str) -> Quantified[Any]:
        value = parse(text, self._payload_type)
        logger.debug("Parsed %r as %r", text, value)
        return value

    def _describe(self, value: Quantified[Any]) -> dict[str, Any]:
        """Dict form plus canonical text and debug rendering."""
        return {**to_dict(value), "text": render(value), "repr": repr(value)}

    def _meta(self, **extra: Any) -> dict[str, Any]:
        return {"payload_type": self._payload_kind, **extra}

    @staticmethod
    def _parse_error(op: str, exc: QuantifiedParseError) -> ServiceResult:
        logger.debug("Rejected input for %s: %s", op, exc)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code=INVALID_QUANTIFIED,
                message=str(exc),
                detail={"input": str(exc.source)},
            ),
        )
