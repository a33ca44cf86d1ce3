from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from raeesa_tours.db.session import get_db
from raeesa_tours.schemas.auth import LoginRequest, LoginResponse, UserOut
from raeesa_tours.models.user import User
from raeesa_tours.core.security import verify_password, create_access_token
from raeesa_tours.api.deps import get_current_user

router = APIRouter(tags=["auth"])


def _user_out(user: User) -> UserOut:
    return UserOut(id=user.id, email=user.email, username=user.username or "", role=user.role)


@router.post("/auth/login", response_model=LoginResponse)
def login(body: LoginRequest, db: Session = Depends(get_db)):
    user = db.query(User).filter(User.email == body.email.strip().lower()).first()
    if not user or not user.is_active:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    if not verify_password(body.password, user.password_hash):
        raise HTTPException(status_code=401, detail="Invalid credentials")
    return LoginResponse(token=create_access_token(user.id, role=user.role), user=_user_out(user))


@router.get("/auth/me")
def me(me: User = Depends(get_current_user)):
    """Return current user info including role."""
    return {"success": True, "user": _user_out(me).model_dump()}
