"""Deterministic MAC key selection policy.

The MAC engine itself takes whatever key it is given; choosing that key
is the caller's job and happens only here.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum

from filecrypt._crypto.keys import KeyMaterial


class MacKeySource(StrEnum):
    EXPLICIT = "explicit"
    SYMMETRIC = "symmetric"
    GENERATED = "generated"


def select_mac_key(
    explicit: KeyMaterial | None,
    symmetric: KeyMaterial | None,
    generate: Callable[[], KeyMaterial],
) -> tuple[KeyMaterial, MacKeySource]:
    """Pick the HMAC key.

    Policy, first match wins:
    - an explicitly supplied MAC key,
    - the symmetric key,
    - a fresh key from *generate* (only called in this case).

    Empty keys count as absent.
    """
    if explicit is not None and len(explicit) > 0:
        return explicit, MacKeySource.EXPLICIT
    if symmetric is not None and len(symmetric) > 0:
        return symmetric, MacKeySource.SYMMETRIC
    return generate(), MacKeySource.GENERATED
