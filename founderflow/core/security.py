"""
Session token handling for Founder Flow.
Tokens are issued by the auth provider; this service only verifies them.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional
import uuid

import jwt


def decode_token(token: str, secret: str, algorithm: str = "HS256") -> Optional[dict]:
    """
    Decode and validate a JWT session token.

    Returns:
        Decoded payload dict or None if invalid or expired
    """
    try:
        return jwt.decode(token, secret, algorithms=[algorithm])
    except jwt.ExpiredSignatureError:
        return None
    except jwt.InvalidTokenError:
        return None


def create_access_token(
    data: dict,
    secret: str,
    algorithm: str = "HS256",
    expires_delta: Optional[timedelta] = None
) -> str:
    """
    Create a session token the way the auth provider does.
    Used by local tooling and tests.

    Args:
        data: Claims (sub, email, email_verified)
        secret: Signing secret
        algorithm: JWT algorithm
        expires_delta: Custom expiration time (default 30 minutes)
    """
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=30))
    to_encode.update({
        "exp": expire,
        "iat": datetime.now(timezone.utc),
        "jti": str(uuid.uuid4())
    })
    return jwt.encode(to_encode, secret, algorithm=algorithm)
