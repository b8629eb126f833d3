from fastapi import APIRouter, Depends
from models.user import MessageResponse
from utils.auth import get_current_username

router = APIRouter(tags=["protected"])

@router.get("/protected", response_model=MessageResponse)
async def protected(username: str = Depends(get_current_username)):
    """
    Token-gated resource.
    Requires a valid bearer token in the Authorization header.
    """
    return MessageResponse(message=f"Hello {username}, you have access!")
