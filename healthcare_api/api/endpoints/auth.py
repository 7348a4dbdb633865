from typing import Any, Dict
from fastapi import APIRouter, Depends

from healthcare_api.api import deps
from healthcare_api.core import security
from healthcare_api.schemas.auth import LoginRequest, Token, User

router = APIRouter()


@router.post("/login", response_model=Token)
async def login(login_in: LoginRequest) -> Any:
    """
    Issue a demo access token. This is a mock: no password is checked.
    """
    claims = {"name": login_in.username}
    if login_in.role:
        claims["role"] = login_in.role
    token = security.create_access_token(login_in.username, claims)
    user = security.user_from_payload({"sub": login_in.username, **claims})
    return {"access_token": token, "token_type": "bearer", "user": user}


@router.get("/me", response_model=User)
async def read_current_user(
    current_user: Dict[str, Any] = Depends(deps.get_current_user),
) -> Any:
    return current_user
