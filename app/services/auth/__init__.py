"""
Session authentication package.

Sessions are opaque cookie tokens stored on the user row
(``users.session_id``). The provider abstraction keeps route code unaware of
where the token lives.

Usage:
    from app.services.auth import get_session_provider
    from app.services.auth.dependencies import check_session_id_exists, get_current_user

    router = APIRouter(dependencies=[Depends(check_session_id_exists)])

    @router.get("/protected")
    async def protected_route(user: User = Depends(get_current_user)):
        ...
"""
from app.services.auth.base import SessionProvider
from app.services.auth.cookie_provider import cookie_session_provider


def get_session_provider() -> SessionProvider:
    """Factory function to get the configured session provider."""
    return cookie_session_provider


__all__ = [
    "SessionProvider",
    "get_session_provider",
    "cookie_session_provider",
]
