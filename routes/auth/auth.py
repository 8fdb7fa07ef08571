import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from config import get_db, settings
from models.authModel.authModel import AdminUser
from schemas.authSchema.authSchema import AdminCreate, AdminSession, SignInAdmin
from utils.utils import (
    create_admin_session_token,
    get_admin_session,
    hash_password,
    verify_password,
)

router = APIRouter()
logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


@router.post("/signin")
async def signin(user: SignInAdmin, response: Response, db: Session = Depends(get_db)):
    email = user.email.strip().lower()
    db_user = db.query(AdminUser).filter(AdminUser.email == email).first()

    # one message for both failures so the response does not reveal which part was wrong
    if not db_user or not verify_password(user.password, db_user.password):
        logger.warning(f"Failed admin sign in for {email}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials. Please check your email and password.",
        )

    access_token = create_admin_session_token(db_user.email)
    response.set_cookie(
        key="access_token",
        value=access_token,
        httponly=True,
        secure=False,
        samesite="Lax",
        max_age=settings.SESSION_TTL_MINUTES * 60,
    )
    logger.info(f"Admin {email} signed in")
    return {"access_token": access_token, "token_type": "bearer", "email": db_user.email}


@router.post("/logout", status_code=status.HTTP_200_OK)
async def logout(response: Response):
    response.delete_cookie(key="access_token")
    return {"message": "Logged out successfully"}


@router.get("/session")
async def get_session(session: AdminSession = Depends(get_admin_session)):
    return {"message": "Session active", "data": session}


@router.post("/admins", status_code=status.HTTP_201_CREATED)
async def create_admin(
    payload: AdminCreate,
    db: Session = Depends(get_db),
    session: AdminSession = Depends(get_admin_session),
):
    if payload.password != payload.confirm_password:
        raise HTTPException(status_code=400, detail="Passwords don't match")
    if len(payload.password) < MIN_PASSWORD_LENGTH:
        raise HTTPException(
            status_code=400,
            detail=f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
        )

    email = payload.email.strip().lower()
    if db.query(AdminUser).filter(AdminUser.email == email).first():
        raise HTTPException(status_code=400, detail="Admin account already exists")

    try:
        admin = AdminUser(email=email, password=hash_password(payload.password))
        db.add(admin)
        db.commit()
        db.refresh(admin)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating admin {email}: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Database error: {str(e)}")

    logger.info(f"{session.email} created admin account {email}")
    return {"message": "Admin account created successfully", "data": {"id": admin.id, "email": admin.email}}
