from fastapi import Depends, APIRouter, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlmodel import Session

from learnhub.auth.auth_handler import authenticate_user, create_access_token, get_current_user
from learnhub.configs.database import get_db
from learnhub.models import User
from learnhub.schemas.token import Token
from learnhub.schemas.user_schema import LoginRequest, RegisterResponse, UserCreateRequest, UserResponse
from learnhub.services import user_service
from learnhub.utils.errors import UnauthorizedError

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(user_req: UserCreateRequest, db: Session = Depends(get_db)):
    user = user_service.create_user(user_req, db)
    return RegisterResponse(message="User created", user=UserResponse.from_user(user))


def _issue_token(db: Session, email: str, password: str) -> Token:
    user = authenticate_user(db, email, password)
    if not user:
        raise UnauthorizedError("Invalid credentials")
    return Token(access_token=create_access_token(user))


@router.post("/login", response_model=Token)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    return _issue_token(db, credentials.email, credentials.password)


@router.post("/token", response_model=Token)
def login_for_access_token(form_data: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)):
    """OAuth2 password flow for the interactive docs; ``username`` carries the email."""
    return _issue_token(db, form_data.username, form_data.password)


@router.get("/me", response_model=UserResponse)
def read_users_me(current_user: User = Depends(get_current_user)):
    return UserResponse.from_user(current_user)
