"""Request-scoped authentication dependencies"""

from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from services.auth_service import CredentialService
from utils.security import TokenGate

# HTTP Bearer token scheme; a missing header is reported by the token gate
security = HTTPBearer(auto_error=False)

def get_token_gate(request: Request) -> TokenGate:
    return request.app.state.token_gate

def get_credential_service(request: Request) -> CredentialService:
    return request.app.state.credential_service

async def get_current_username(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    token_gate: TokenGate = Depends(get_token_gate)
) -> str:
    """
    Dependency returning the username of the bearer token's owner.

    Usage in routes:
        @router.get("/protected")
        async def protected(username: str = Depends(get_current_username)):
            ...

    Raises:
        NotAuthenticatedError: No bearer token in the Authorization header
        InvalidTokenError: Token failed signature or expiry checks
    """
    token = credentials.credentials if credentials else None
    return token_gate.validate(token)
