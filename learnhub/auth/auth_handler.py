import logging
from datetime import datetime, timedelta, UTC
from typing import Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlmodel import Session, select

from learnhub.configs import settings
from learnhub.configs.database import get_db
from learnhub.models import User, UserRole
from learnhub.utils.errors import UnauthorizedError

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/token")


def verify_password(plain_password, hashed_password):
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password):
    return pwd_context.hash(password)


def authenticate_user(db_session: Session, email: str, password: str) -> Optional[User]:
    statement = select(User).where(User.email == email)
    result = db_session.exec(statement).first()
    if not result or not verify_password(password, result.password):
        return None
    return result


def create_access_token(user: User, expires_delta: timedelta | None = None) -> str:
    to_encode = {
        "sub": user.email,
        "id": user.id,
        "role": UserRole(user.role).value,
    }
    expire = datetime.now(UTC) + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.JWT_ACCESS_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict:
    try:
        payload = jwt.decode(token, settings.JWT_ACCESS_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        raise credentials_exception
    if payload.get("id") is None:
        raise credentials_exception
    return payload


def get_current_user(token: str = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> User:
    """Resolve the bearer token to a stored user.

    A token that decodes cleanly but points at a deleted account is rejected
    the same way as a forged one.
    """
    payload = decode_access_token(token)
    user = db.get(User, payload["id"])
    if user is None:
        logger.warning(f"Token presented for unknown user id {payload['id']}")
        raise credentials_exception
    return user


credentials_exception = UnauthorizedError("Could not validate credentials")
