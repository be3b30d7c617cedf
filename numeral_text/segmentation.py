"""
Scale segmentation: split a magnitude into three-digit groups.

    1_234_567 → [(1, 2), (234, 1), (567, 0)]

Zero groups are dropped, except that a magnitude of 0 yields a single
(0, 0) group so the caller can render "zero".
"""

from __future__ import annotations

from .exceptions import InvalidInput, ValueTooLarge
from .models import ScaleGroup

# Half of the largest signed 64-bit integer. Negating the minimum 64-bit
# value overflows, so the supported range is symmetric and well inside it.
MAX_MAGNITUDE = (2**63 - 1) // 2


def segment(magnitude: int) -> list[ScaleGroup]:
    """Split a nonnegative magnitude into nonzero groups, most significant first.

    Raises:
        InvalidInput: If the magnitude is negative.
        ValueTooLarge: If the magnitude exceeds MAX_MAGNITUDE.
    """
    if magnitude < 0:
        raise InvalidInput("Magnitude must be nonnegative", magnitude)
    if magnitude > MAX_MAGNITUDE:
        raise ValueTooLarge(magnitude)
    if magnitude == 0:
        return [ScaleGroup(0, 0)]

    groups: list[ScaleGroup] = []
    scale = 0
    while magnitude:
        magnitude, value = divmod(magnitude, 1000)
        if value:
            groups.append(ScaleGroup(value, scale))
        scale += 1

    groups.reverse()
    return groups
