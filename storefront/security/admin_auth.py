import secrets
from dataclasses import dataclass

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from storefront.config import get_settings

security = HTTPBasic(realm="Admin")


@dataclass(frozen=True)
class AdminIdentity:
    username: str


def require_admin(
    credentials: HTTPBasicCredentials = Depends(security),
) -> AdminIdentity:
    s = get_settings()
    if not s.admin_username or not s.admin_password:
        raise RuntimeError("ADMIN_USERNAME/ADMIN_PASSWORD not configured")

    ok_user = secrets.compare_digest(credentials.username, s.admin_username)
    ok_pass = secrets.compare_digest(credentials.password, s.admin_password)

    if not (ok_user and ok_pass):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid admin credentials",
            headers={"WWW-Authenticate": "Basic"},
        )

    return AdminIdentity(username=credentials.username)
