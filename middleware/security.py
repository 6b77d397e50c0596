"""Security middleware for interaction signature verification."""
from typing import Optional
import logging
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey
from core.errors import InvalidSignatureError

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "X-Signature-Ed25519"
TIMESTAMP_HEADER = "X-Signature-Timestamp"


def verify_key(
    body: bytes,
    signature: Optional[str],
    timestamp: Optional[str],
    public_key: str
) -> bool:
    """
    Verify a detached Ed25519 signature over timestamp + body.

    Args:
        body: Raw request body, unparsed
        signature: Hex signature header value
        timestamp: Timestamp header value
        public_key: Hex-encoded application public key

    Returns:
        True only if every input is present and the signature verifies
    """
    if not signature or not timestamp or not public_key:
        return False

    try:
        key = Ed25519PublicKey.from_public_bytes(bytes.fromhex(public_key))
        key.verify(bytes.fromhex(signature), timestamp.encode() + body)
        return True
    except InvalidSignature:
        return False
    except ValueError as e:
        logger.warning(f"Malformed signature material: {e}")
        return False


def verify_request_signature(headers, body: bytes, public_key: str) -> bool:
    """
    Verify an inbound request.

    Args:
        headers: Request headers mapping (case-insensitive lookup)
        body: Raw request body
        public_key: Hex-encoded application public key

    Returns:
        True if verified, raises InvalidSignatureError if not
    """
    signature = headers.get(SIGNATURE_HEADER)
    timestamp = headers.get(TIMESTAMP_HEADER)

    if not verify_key(body, signature, timestamp, public_key):
        raise InvalidSignatureError()

    return True
