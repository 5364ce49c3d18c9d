"""
Dependency checks and feature availability.

Pillow (PIL) backs image and font decoding. Everything else in the package
works without it, so a missing Pillow only disables `images` and `fonts`:
those raise ImportError with an install hint when called.
"""

from __future__ import annotations

try:
    from PIL import Image, ImageFont, UnidentifiedImageError  # type: ignore
except ImportError:
    print("Warning: Pillow not found. Image and font loading will be disabled.")
    print("Install with: pip install Pillow")
    Image = None  # type: ignore[assignment]
    ImageFont = None  # type: ignore[assignment]
    UnidentifiedImageError = None  # type: ignore[assignment]

pillow_available = Image is not None


def require_pillow(feature: str) -> None:
    if not pillow_available:
        raise ImportError(f"Pillow is required for {feature}")
