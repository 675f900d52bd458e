from fastapi import APIRouter, Depends
import logging
from app.core.exceptions import AuthenticationError
from app.services.auth import CredentialVerifier, get_verifier
from app.schemas.auth import LoginRequest, LoginResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/auth",
    tags=["auth"]
)

@router.post("/login", response_model=LoginResponse)
def login(login_data: LoginRequest, verifier: CredentialVerifier = Depends(get_verifier)):
    if not verifier.verify(login_data.email, login_data.password):
        logger.warning("Failed login attempt", extra={"email": login_data.email})
        raise AuthenticationError("Invalid credentials")

    logger.info("Login successful", extra={"email": login_data.email})
    return LoginResponse(
        token=verifier.issue_token(login_data.email),
        message="Login successful"
    )
