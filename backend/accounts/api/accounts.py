from fastapi import APIRouter, Depends
from pydantic import BaseModel

from accounts.api.deps import get_credential_service
from accounts.models.user import PublicUser, Role, UserProfile
from accounts.services.credentials import CredentialService

router = APIRouter(tags=["accounts"])


class RegisterRequest(BaseModel):
    # Presence is checked by the service so a missing field is a 400, not a 422.
    # Any "role" in the payload is ignored.
    username: str | None = None
    password: str | None = None
    roll_number: str | None = None
    gender: str | None = None
    email: str | None = None
    phone_number: str | None = None


class RegisterResponse(BaseModel):
    success: bool = True
    message: str
    userId: int


class LoginRequest(BaseModel):
    username: str | None = None
    password: str | None = None


class LoginResponse(BaseModel):
    success: bool = True
    message: str
    user: PublicUser
    dashboardUrl: str


class UserResponse(BaseModel):
    success: bool = True
    user: UserProfile


class StudentsResponse(BaseModel):
    success: bool = True
    students: list[UserProfile]


# Handlers are plain functions: FastAPI runs them in its thread pool, so the
# bcrypt work never stalls the event loop.


@router.post("/register", response_model=RegisterResponse, status_code=201)
def register(
    body: RegisterRequest,
    service: CredentialService = Depends(get_credential_service),
):
    user_id = service.register(
        body.username,
        body.password,
        roll_number=body.roll_number,
        gender=body.gender,
        email=body.email,
        phone_number=body.phone_number,
    )
    return RegisterResponse(
        message="Registration successful. User created.",
        userId=user_id,
    )


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    service: CredentialService = Depends(get_credential_service),
):
    user = service.authenticate(body.username, body.password)
    return LoginResponse(
        message="Login successful",
        user=user,
        dashboardUrl=service.dashboard_url(user.role),
    )


@router.get("/user/{user_id}", response_model=UserResponse)
def get_user(
    user_id: str,
    service: CredentialService = Depends(get_credential_service),
):
    return UserResponse(user=service.get_user(user_id))


@router.get("/students", response_model=StudentsResponse)
def list_students(service: CredentialService = Depends(get_credential_service)):
    return StudentsResponse(students=service.list_users(Role.STUDENT.value))
