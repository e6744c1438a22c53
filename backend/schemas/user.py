from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import Literal

Role = Literal["freelancer", "employer"]

# Schema for user authentication credentials. The email is not validated
# here so a malformed address is answered like any unknown one.
class UserLogin(BaseModel):
    email: str
    password: str

# Schema for user registration requests
class UserCreate(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    password: str
    role: Role = "freelancer"  # default role

# Public profile, never carries the password hash
class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: EmailStr
    role: str

# Both register and login answer with a bare token
class TokenResponse(BaseModel):
    token: str
