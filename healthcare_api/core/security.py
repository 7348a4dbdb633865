from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
import jwt
from healthcare_api.core.config import settings

# Stand-in identity used whenever USE_AUTH is off
MOCK_USER: Dict[str, Any] = {
    "id": "demo-user",
    "name": "Dr. Sarah Wilson",
    "email": "sarah.wilson@healthcare.com",
    "role": "Administrator",
    "department": "Cardiology",
}


def create_access_token(subject: str, data: Optional[Dict[str, Any]] = None) -> str:
    """Create JWT access token"""
    to_encode = dict(data or {})
    now = datetime.now(timezone.utc)
    expire = now + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({
        "exp": expire,
        "iat": now,
        "sub": subject,
        "token_type": "access"
    })
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_token(token: str) -> Optional[Dict[str, Any]]:
    """Decode and validate JWT token"""
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except jwt.PyJWTError:
        return None


def verify_token(token: str, token_type: str = "access") -> Optional[Dict[str, Any]]:
    """Verify token and check token type"""
    payload = decode_token(token)
    if not payload:
        return None

    if payload.get("token_type") != token_type:
        return None

    return payload


def user_from_payload(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Build the user profile carried in a token payload"""
    username = payload["sub"]
    return {
        "id": payload.get("user_id", username),
        "name": payload.get("name", username),
        "email": payload.get("email", f"{username}@healthcare.com"),
        "role": payload.get("role", "Doctor"),
        "department": payload.get("department", "General Medicine"),
    }
