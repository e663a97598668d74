"""Utilities for webhook signatures and GitHub App key material"""

import hashlib
import hmac
from typing import Optional

from cryptography.hazmat.primitives import serialization

# Header name -> (prefix, digest), in order of preference
SIGNATURE_HEADERS = (
    ("X-Hub-Signature-256", "sha256=", hashlib.sha256),
    ("X-Hub-Signature", "sha1=", hashlib.sha1),
)


def compute_signature(secret: str, body: bytes, digest=hashlib.sha256) -> str:
    """Hex HMAC of the raw request body"""
    return hmac.new(secret.encode(), body, digest).hexdigest()


def verify_signature(secret: str, body: bytes, header_value: Optional[str],
                     prefix: str = "sha256=", digest=hashlib.sha256) -> bool:
    """Check a ``<algo>=<hex>`` header value against the body"""
    if not header_value or not header_value.startswith(prefix):
        return False
    expected = prefix + compute_signature(secret, body, digest)
    # Bytes, so a non-ASCII header is a mismatch rather than a TypeError
    return hmac.compare_digest(header_value.encode(), expected.encode())


def load_private_key(pem: str):
    """Parse PEM key material, raising ValueError if it is not a private key"""
    return serialization.load_pem_private_key(pem.encode(), password=None)
