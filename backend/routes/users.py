# backend/routes/users.py
import logging

from fastapi import APIRouter, Depends, HTTPException, status, Request
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from database import get_db
from models.users import User
from schemas import user as schemas
from utils.audit import write_log, client_ip
from utils.hashing import get_password_hash, verify_password
from utils.tokenJWT import create_access_token, get_current_user

router = APIRouter(prefix="/api/users", tags=["Users"])
logger = logging.getLogger(__name__)


def _audit(db: Session, request: Request, **kwargs):
    # An audit failure must not turn a finished request into an error
    try:
        write_log(db, resource="users", ip=client_ip(request), **kwargs)
    except Exception as e:
        db.rollback()
        logger.exception("Failed to write audit log: %s", e)


# Register a new user and sign them in
@router.post("/register", response_model=schemas.TokenResponse)
def register(payload: schemas.UserCreate, request: Request, db: Session = Depends(get_db)):
    normalized_email = payload.email.strip().lower()

    try:
        existing = db.query(User).filter(func.lower(User.email) == normalized_email).first()
        if existing:
            _audit(db, request, user_id=None, action="REGISTER", status="FAIL",
                   meta={"email": normalized_email, "reason": "Email exists"})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User already exists")

        new_user = User(
            name=payload.name,
            email=normalized_email,
            password_hash=get_password_hash(payload.password),
            role=payload.role,
        )
        db.add(new_user)
        db.commit()
        db.refresh(new_user)
        token = create_access_token(new_user)
    except HTTPException:
        raise
    except IntegrityError:
        # Lost a race against a concurrent registration for the same email
        db.rollback()
        _audit(db, request, user_id=None, action="REGISTER", status="FAIL",
               meta={"email": normalized_email, "reason": "Email exists"})
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User already exists")
    except Exception as e:
        db.rollback()
        logger.exception("Registration failed for %s: %s", normalized_email, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error")

    _audit(db, request, user_id=new_user.id, action="REGISTER", status="SUCCESS",
           meta={"email": new_user.email, "role": new_user.role})
    return {"token": token}


# Authenticate with email and password and issue a token
@router.post("/login", response_model=schemas.TokenResponse)
def login(payload: schemas.UserLogin, request: Request, db: Session = Depends(get_db)):
    normalized_email = payload.email.strip().lower()

    try:
        db_user = db.query(User).filter(User.email == normalized_email).first()
        if not db_user:
            _audit(db, request, user_id=None, action="LOGIN", status="FAIL",
                   meta={"email": normalized_email, "reason": "User not found"})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User not found")

        if not verify_password(payload.password, db_user.password_hash):
            _audit(db, request, user_id=db_user.id, action="LOGIN", status="FAIL",
                   meta={"email": normalized_email, "reason": "Invalid credentials"})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid credentials")

        token = create_access_token(db_user)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.exception("Login failed for %s: %s", normalized_email, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error")

    _audit(db, request, user_id=db_user.id, action="LOGIN", status="SUCCESS",
           meta={"email": db_user.email})
    return {"token": token}


# Retrieve current authenticated user details
@router.get("/me", response_model=schemas.UserResponse)
def me(current_user: User = Depends(get_current_user)):
    return current_user
