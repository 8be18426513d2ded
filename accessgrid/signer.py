"""
Payload signing for AccessGrid requests.

Signatures are HMAC-SHA256 over the base64 form of the signable payload,
keyed with the account secret and rendered as lowercase hex.
"""

import base64
import hashlib
import hmac

from .exceptions import SigningError


def encode_payload(payload: str) -> bytes:
    """Return the base64 representation of ``payload`` that gets MAC'ed."""
    return base64.b64encode(payload.encode('utf-8'))


def sign(secret_key: str, payload: str) -> str:
    """
    Generate the HMAC-SHA256 signature for a signable payload.

    Args:
        secret_key: Account secret key used as the raw HMAC key
        payload: Signable payload string

    Returns:
        Hex-encoded signature (64 lowercase characters)

    Raises:
        SigningError: If the signature cannot be computed
    """
    try:
        mac = hmac.new(
            secret_key.encode('utf-8'),
            encode_payload(payload),
            hashlib.sha256
        )
        return mac.hexdigest()
    except Exception as e:
        raise SigningError(f"Failed to generate signature: {e}") from e
