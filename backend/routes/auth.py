from fastapi import APIRouter, Depends, status
from models.user import CredentialsRequest, MessageResponse, TokenResponse
from services.auth_service import CredentialService
from utils.auth import get_credential_service

router = APIRouter(prefix="/auth", tags=["authentication"])

# ============ Register Endpoint ============

@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: CredentialsRequest,
    service: CredentialService = Depends(get_credential_service)
):
    """
    User registration endpoint.

    Stores the username with a bcrypt hash of the password.
    Duplicate usernames are accepted.

    Returns:
        MessageResponse confirming registration

    Raises:
        InvalidPasswordError (400): bcrypt cannot hash the password
    """
    await service.register(request.username, request.password)
    return MessageResponse(message="User registered successfully!")

# ============ Login Endpoint ============

@router.post("/login", response_model=TokenResponse)
async def login(
    request: CredentialsRequest,
    service: CredentialService = Depends(get_credential_service)
):
    """
    User login endpoint.

    Authenticates user with username and password.
    Returns JWT access token if credentials are valid.

    Raises:
        UserNotFoundError (404): Unknown username
        InvalidCredentialsError (403): Wrong password
    """
    token = await service.login(request.username, request.password)
    return TokenResponse(token=token)
