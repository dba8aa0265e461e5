"""The Quantified value type.

A Quantified value is one of four variants over a single generic slot:

- ``None``: matches nothing.
- ``Some(x)``: matches exactly ``x``.
- ``Excluding(x)``: matches everything except ``x``.
- ``All``: matches everything.

INVARIANT: Values are immutable. Exactly one variant is active, and a
payload is present iff the variant is ``Some`` or ``Excluding``.

Ordering is structural, not set inclusion: the variant rank is the
primary key and the payload's own ordering is the secondary key.
Payload comparisons delegate to the payload's operators, so a partial
order on the payload (e.g. NaN) stays partial here.
"""

from __future__ import annotations

import copy
import operator
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from quantified.domain.errors import MissingPayloadError
from quantified.domain.variants import VARIANT_NAMES, VARIANT_RANK, Variant, carries_payload

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler
    from pydantic_core import CoreSchema

T = TypeVar("T")
U = TypeVar("U")

# Marks the absence of a payload; Python ``None`` is a valid payload.
_NO_PAYLOAD: Any = object()


@dataclass(frozen=True, slots=True, eq=False, repr=False, match_args=False)
class Quantified(Generic[T]):
    """An immutable four-valued quantification over a payload type ``T``.

    Build values through the named constructors::

        Quantified.none()
        Quantified.some(5)
        Quantified.excluding("x")
        Quantified.all()

    The general constructor ``Quantified(variant, payload)`` is meant for
    decoders and raises ``TypeError`` when the payload does not fit the
    variant.
    """

    __match_args__ = ("variant",)

    variant: Variant
    _payload: Any = _NO_PAYLOAD

    def __post_init__(self) -> None:
        variant = Variant(self.variant)
        payload = self._payload
        if carries_payload(variant) and payload is _NO_PAYLOAD:
            msg = f"{VARIANT_NAMES[variant]} requires a payload"
            raise TypeError(msg)
        if not carries_payload(variant) and payload is not _NO_PAYLOAD:
            msg = f"{VARIANT_NAMES[variant]} does not take a payload"
            raise TypeError(msg)
        object.__setattr__(self, "variant", variant)

    # --- Named constructors ---

    @classmethod
    def none(cls) -> Quantified[Any]:
        """A value matching nothing."""
        return cls(Variant.NONE)

    @classmethod
    def some(cls, value: T) -> Quantified[T]:
        """A value matching exactly *value*."""
        return cls(Variant.SOME, value)

    @classmethod
    def excluding(cls, value: T) -> Quantified[T]:
        """A value matching everything except *value*."""
        return cls(Variant.EXCLUDING, value)

    @classmethod
    def all(cls) -> Quantified[Any]:
        """A value matching everything."""
        return cls(Variant.ALL)

    def clone(self) -> Quantified[T]:
        """Return an independent deep copy of this value."""
        return copy.deepcopy(self)

    # --- Accessors ---

    @property
    def has_payload(self) -> bool:
        return carries_payload(self.variant)

    @property
    def payload(self) -> T:
        """The carried value of a ``Some`` or ``Excluding``.

        Raises:
            MissingPayloadError: If the variant is ``None`` or ``All``.
        """
        if not self.has_payload:
            msg = f"{VARIANT_NAMES[self.variant]} carries no payload"
            raise MissingPayloadError(msg)
        return self._payload

    def payload_or(self, default: U) -> T | U:
        """Return the payload, or *default* for ``None`` and ``All``."""
        return self._payload if self.has_payload else default

    def is_none(self) -> bool:
        return self.variant is Variant.NONE

    def is_some(self) -> bool:
        return self.variant is Variant.SOME

    def is_excluding(self) -> bool:
        return self.variant is Variant.EXCLUDING

    def is_all(self) -> bool:
        return self.variant is Variant.ALL

    # --- Transforms ---

    def map(self, fn: Callable[[T], U]) -> Quantified[U]:
        """Apply *fn* to the payload, keeping the variant.

        ``None`` and ``All`` are returned as equal values untouched by *fn*.

        Examples:
            >>> Quantified.some("Hello, World!").map(len)
            Quantified.Some(13)
            >>> Quantified.all().map(len)
            Quantified.All
        """
        if self.has_payload:
            return Quantified(self.variant, fn(self._payload))
        return Quantified(self.variant)

    def matches(self, candidate: Any) -> bool:
        """Test whether *candidate* is included by this value."""
        if self.variant is Variant.NONE:
            return False
        if self.variant is Variant.ALL:
            return True
        if self.variant is Variant.SOME:
            return bool(candidate == self._payload)
        return bool(candidate != self._payload)

    # --- Equality and ordering ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantified):
            return NotImplemented
        if self.variant is not other.variant:
            return False
        if not self.has_payload:
            return True
        return bool(self._payload == other._payload)

    def __hash__(self) -> int:
        if self.has_payload:
            return hash((self.variant, self._payload))
        return hash(self.variant)

    def _order(self, other: object, op: Callable[[Any, Any], Any], same_empty: bool) -> bool:
        if not isinstance(other, Quantified):
            return NotImplemented
        if self.variant is not other.variant:
            return bool(op(VARIANT_RANK[self.variant], VARIANT_RANK[other.variant]))
        if not self.has_payload:
            return same_empty
        return bool(op(self._payload, other._payload))

    def __lt__(self, other: object) -> bool:
        return self._order(other, operator.lt, False)

    def __le__(self, other: object) -> bool:
        return self._order(other, operator.le, True)

    def __gt__(self, other: object) -> bool:
        return self._order(other, operator.gt, False)

    def __ge__(self, other: object) -> bool:
        return self._order(other, operator.ge, True)

    def partial_compare(self, other: Quantified[T]) -> int | None:
        """Three-way comparison: ``-1``, ``0``, ``1``, or ``None`` if incomparable.

        Payloads that are neither equal, less, nor greater (NaN) yield
        ``None`` instead of defaulting to any order.
        """
        if not isinstance(other, Quantified):
            msg = f"Cannot compare Quantified with {type(other).__name__}"
            raise TypeError(msg)
        if self.variant is not other.variant:
            return -1 if VARIANT_RANK[self.variant] < VARIANT_RANK[other.variant] else 1
        if not self.has_payload:
            return 0
        left, right = self._payload, other._payload
        if left == right:
            return 0
        if left < right:
            return -1
        if left > right:
            return 1
        return None

    # --- Rendering ---

    def __repr__(self) -> str:
        return f"Quantified.{self}"

    def __str__(self) -> str:
        name = VARIANT_NAMES[self.variant]
        if self.has_payload:
            return f"{name}({self._payload!r})"
        return name

    # --- pydantic integration ---

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        from quantified.domain.codec import quantified_core_schema

        return quantified_core_schema(source_type, handler)
