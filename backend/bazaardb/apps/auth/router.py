from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from bazaardb import security

from . import schemas

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])

basic_scheme = HTTPBasic(auto_error=False)


def _issue_token(username: str) -> schemas.Token:
    token = security.create_access_token(data={"sub": username, "role": "admin"})
    return schemas.Token(token=token, expires_in=security.ACCESS_TOKEN_EXPIRE_MINUTES * 60)


@router.post("/login", response_model=schemas.Token)
def login(payload: schemas.LoginRequest):
    """Exchange the operator username/password (JSON body) for a bearer token."""
    if not security.authenticate_admin(payload.username, payload.password):
        logger.warning("Rejected login", extra={"username": payload.username})
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )
    return _issue_token(payload.username)


@router.post("/basic-login", response_model=schemas.Token)
def basic_login(credentials: HTTPBasicCredentials = Depends(basic_scheme)):
    """Same as /auth/login, with the credentials in an HTTP Basic header."""
    if credentials is None or not security.authenticate_admin(credentials.username, credentials.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Basic"},
        )
    return _issue_token(credentials.username)
