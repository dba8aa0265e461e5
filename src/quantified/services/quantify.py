"""QuantifyService — parse, compare, sort, and match Quantified values."""

from __future__ import annotations

import logging
from typing import Any

from quantified.domain.errors import QuantifiedParseError
from quantified.domain.payloads import validate_payload
from quantified.domain.quantified import Quantified
from quantified.domain.text import decode_payload, render
from quantified.services.base import BaseService
from quantified.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

_ORDERING_NAMES: dict[int | None, str] = {
    -1: "less",
    0: "equal",
    1: "greater",
    None: "incomparable",
}


class QuantifyService(BaseService):
    """Operations behind the ``parse``, ``compare``, ``sort`` and ``match`` commands."""

    def parse(self, text: str) -> ServiceResult:
        """Parse *text* and report its variant, payload, and renderings."""
        op = "parse"
        try:
            value = self._parse(text)
        except QuantifiedParseError as exc:
            return self._parse_error(op, exc)
        return ServiceResult(ok=True, op=op, data=self._describe(value), meta=self._meta())

    def compare(self, left: str, right: str) -> ServiceResult:
        """Compare two values structurally.

        ``ordering`` is ``less``, ``equal``, ``greater``, or ``incomparable``
        when the payloads have no order (NaN).
        """
        op = "compare"
        try:
            lhs = self._parse(left)
            rhs = self._parse(right)
        except QuantifiedParseError as exc:
            return self._parse_error(op, exc)

        try:
            ordering = lhs.partial_compare(rhs)
        except TypeError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="UNORDERABLE",
                    message=f"Payloads cannot be ordered: {exc}",
                    detail={"left": left, "right": right},
                ),
            )

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "left": render(lhs),
                "right": render(rhs),
                "equal": lhs == rhs,
                "ordering": _ORDERING_NAMES[ordering],
            },
            meta=self._meta(),
        )

    def sort(self, texts: list[str], *, reverse: bool | None = None) -> ServiceResult:
        """Sort values by structural order.

        Incomparable neighbours produce warnings; their relative order is
        whatever the sort left them in.
        """
        op = "sort"
        if reverse is None:
            reverse = self._settings.sort.reverse
        try:
            values = [self._parse(text) for text in texts]
        except QuantifiedParseError as exc:
            return self._parse_error(op, exc)

        try:
            ordered = sorted(values, reverse=reverse)
            warnings = _incomparable_warnings(ordered)
        except TypeError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="UNORDERABLE",
                    message=f"Payloads cannot be ordered: {exc}",
                    detail={"inputs": texts},
                ),
            )

        logger.debug("Sorted %d values (reverse=%s)", len(ordered), reverse)

        return ServiceResult(
            ok=True,
            op=op,
            data={"count": len(ordered), "sorted": [render(value) for value in ordered]},
            warnings=warnings,
            meta=self._meta(reverse=reverse),
        )

    def match(self, pattern: str, candidates: list[str]) -> ServiceResult:
        """Split *candidates* into those *pattern* includes and those it rejects.

        Candidates are plain payloads (``5``, ``"x"``, ``abc``), decoded and
        validated like a payload inside the text form.
        """
        op = "match"
        try:
            value = self._parse(pattern)
            decoded: list[Any] = [
                validate_payload(
                    decode_payload(text, self._payload_type), self._payload_type, source=text
                )
                for text in candidates
            ]
        except QuantifiedParseError as exc:
            return self._parse_error(op, exc)

        matched = [item for item in decoded if value.matches(item)]
        rejected = [item for item in decoded if not value.matches(item)]
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "pattern": render(value),
                "count": len(matched),
                "matched": matched,
                "rejected": rejected,
            },
            meta=self._meta(),
        )


def _incomparable_warnings(ordered: list[Quantified[Any]]) -> list[str]:
    """Warn about adjacent values whose payloads have no order."""
    warnings: list[str] = []
    for first, second in zip(ordered, ordered[1:], strict=False):
        if first.partial_compare(second) is None:
            warnings.append(f"Incomparable values: {render(first)} and {render(second)}")
    return warnings
