from __future__ import annotations

import math

from .errors import require


SI_BASE = 1000
BINARY_BASE = 1024

_SI_PREFIXES = "kMGT"
_BINARY_PREFIXES = "KMGT"


def format_file_size(byte_count: int, si: bool = False) -> str:
    """
    Format a byte count for humans: "0 B", "512 B", "1.5 kB" (si) or "1.5 KiB".

    Zero and negative counts are clamped to "0 B". Counts past the terabyte
    range keep the "T" prefix with a larger magnitude.
    """
    require(byte_count, "byte_count")
    if byte_count <= 0:
        return "0 B"

    base = SI_BASE if si else BINARY_BASE
    if byte_count < base:
        return f"{byte_count} B"

    prefixes = _SI_PREFIXES if si else _BINARY_PREFIXES

    exponent = int(math.log(byte_count) / math.log(base))
    # log() can land just off an exact power (1000**3 -> 2.999...)
    while exponent > 1 and base**exponent > byte_count:
        exponent -= 1
    while base ** (exponent + 1) <= byte_count:
        exponent += 1
    exponent = min(exponent, len(prefixes))

    magnitude = byte_count / base**exponent
    prefix = prefixes[exponent - 1] + ("" if si else "i")
    return f"{magnitude:.1f} {prefix}B"
