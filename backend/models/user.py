from pydantic import BaseModel


class UserRecord(BaseModel):
    """
    Registered user as held by the credential store.
    Only the bcrypt hash of the password is kept.
    """
    username: str
    password_hash: str

    def __repr__(self):
        return f"<UserRecord(username={self.username})>"

# ============ Request/Response Models ============

class CredentialsRequest(BaseModel):
    """Register and login request model"""
    username: str
    password: str

    class Config:
        json_schema_extra = {
            "example": {
                "username": "alice",
                "password": "hunter2"
            }
        }

class MessageResponse(BaseModel):
    message: str

class TokenResponse(BaseModel):
    """Token response model"""
    token: str

    class Config:
        json_schema_extra = {
            "example": {
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9..."
            }
        }
