"""Dependencies FastAPI pour l'authentification."""

import logging
from typing import Annotated, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from dependency_injector.wiring import inject, Provide

from backend.domain.exceptions import AuthError
from backend.domain.models.auth import TokenClaims
from backend.infrastructure.container import Container
from backend.infrastructure.security import TokenAuthority

logger = logging.getLogger(__name__)

# auto_error=False: l'absence de token est signalee par notre propre 401
bearer_scheme = HTTPBearer(auto_error=False)


@inject
async def get_token_claims(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
    authority: TokenAuthority = Depends(Provide[Container.token_authority]),
) -> TokenClaims:
    """Dependency FastAPI: valide le token bearer avant toute logique metier."""
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="request does not contain an access token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return authority.validate(credentials.credentials)
    except AuthError as e:
        logger.debug(f"Token rejected ({type(e).__name__}): {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )

