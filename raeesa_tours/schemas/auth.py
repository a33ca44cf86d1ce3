from pydantic import BaseModel


class LoginRequest(BaseModel):
    email: str
    password: str


class UserOut(BaseModel):
    id: str
    email: str
    username: str = ""
    role: str


class LoginResponse(BaseModel):
    success: bool = True
    token: str
    user: UserOut
