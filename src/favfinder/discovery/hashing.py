# ABOUTME: SHA-256 identity hashing of icons for deduplication.
# ABOUTME: Two icons with the same URL and dimensions always get the same hash.

import hashlib

from favfinder.discovery.types import Icon


def compute_identity_hash(url: str, width: int, height: int) -> str:
    """Compute the SHA-256 digest of "<url>-<width>x<height>".

    Returns:
        Lowercase hex digest string (64 characters).
    """
    key = f"{url}-{width}x{height}"
    return hashlib.sha256(key.encode("utf-8")).hexdigest()


def icon_hash(icon: Icon) -> str:
    """Identity hash of an icon's URL and dimensions."""
    return compute_identity_hash(icon.url, icon.width, icon.height)
