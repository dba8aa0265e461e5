"""Variant tags for Quantified values.

Declaration order is the structural ordering rank:
``NONE < SOME < EXCLUDING < ALL``.
"""

from __future__ import annotations

from enum import StrEnum


class Variant(StrEnum):
    """The four mutually exclusive shapes of a Quantified value."""

    NONE = "none"
    SOME = "some"
    EXCLUDING = "excluding"
    ALL = "all"


VARIANT_RANK: dict[Variant, int] = {variant: rank for rank, variant in enumerate(Variant)}

PAYLOAD_VARIANTS: frozenset[Variant] = frozenset({Variant.SOME, Variant.EXCLUDING})

# Display names used by repr() and the text form.
VARIANT_NAMES: dict[Variant, str] = {
    Variant.NONE: "None",
    Variant.SOME: "Some",
    Variant.EXCLUDING: "Excluding",
    Variant.ALL: "All",
}


def carries_payload(variant: Variant) -> bool:
    """Whether *variant* holds a payload value."""
    return variant in PAYLOAD_VARIANTS


def variant_from_name(name: str) -> Variant:
    """Resolve a variant from its display or wire name, case-insensitively.

    Raises:
        ValueError: If *name* is not one of the four variant names.
    """
    try:
        return Variant(name.strip().lower())
    except ValueError:
        valid = ", ".join(VARIANT_NAMES.values())
        msg = f"Unknown variant {name!r} (expected one of: {valid})"
        raise ValueError(msg) from None
