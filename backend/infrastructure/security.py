"""
Module de securite pour l'authentification JWT.

Emission et validation des tokens bearer qui protegent les routes
d'ecriture, selon les recommandations FastAPI:
https://fastapi.tiangolo.com/tutorial/security/oauth2-jwt/
"""

import logging
from datetime import datetime, timedelta, timezone

import jwt
from jwt.exceptions import (
    DecodeError,
    InvalidAlgorithmError,
    InvalidSignatureError,
    InvalidTokenError,
)
from pydantic import ValidationError

from backend.domain.exceptions import (
    ClaimsMismatchError,
    MalformedTokenError,
    SignatureMismatchError,
    TokenExpiredError,
)
from backend.domain.models.auth import TokenClaims

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_TTL = timedelta(hours=1)


class TokenAuthority:
    """
    Emet et valide les tokens JWT signes avec la cle du processus.

    La cle est initialisee au demarrage puis peut etre remplacee a chaud
    par set_signing_key(): tous les tokens emis avec l'ancienne cle
    deviennent invalides. Il n'existe pas de revocation individuelle,
    seule l'expiration invalide un token donne.

    Usage:
        authority = TokenAuthority(settings.JWT_SECRET_KEY)
        token = authority.issue("a@b.com", "user")
        claims = authority.validate(token)
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        ttl: timedelta = DEFAULT_TOKEN_TTL,
    ):
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._ttl = ttl

    @property
    def signing_key(self) -> str:
        return self._secret_key

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def set_signing_key(self, key: str) -> None:
        """Remplace la cle de signature (simple reaffectation de reference)."""
        self._secret_key = key
        logger.info("JWT signing key replaced")

    def issue(self, email: str, username: str) -> str:
        """
        Cree un token JWT valable pendant la duree de vie configuree.

        Args:
            email: Email du porteur (peut etre vide)
            username: Nom du porteur (peut etre vide)

        Returns:
            Token JWT encode
        """
        expire = datetime.now(timezone.utc) + self._ttl
        claims = {
            "email": email,
            "username": username,
            "exp": int(expire.timestamp()),
        }
        return jwt.encode(claims, self._secret_key, algorithm=self._algorithm)

    def validate(self, token: str) -> TokenClaims:
        """
        Decode et valide un token JWT.

        Raises:
            MalformedTokenError: chaine illisible
            SignatureMismatchError: signe avec une autre cle
            ClaimsMismatchError: claims de structure inattendue
            TokenExpiredError: date d'expiration depassee
        """
        key = self._secret_key
        try:
            payload = jwt.decode(
                token,
                key,
                algorithms=[self._algorithm],
                options={"verify_exp": False},
            )
        except (InvalidSignatureError, InvalidAlgorithmError):
            raise SignatureMismatchError()
        except DecodeError as e:
            raise MalformedTokenError(f"token is malformed: {e}")
        except InvalidTokenError as e:
            raise ClaimsMismatchError(f"couldn't parse claims: {e}")

        try:
            claims = TokenClaims.model_validate(payload)
        except ValidationError as e:
            raise ClaimsMismatchError(
                f"couldn't parse claims: {e.error_count()} invalid field(s)"
            )

        if datetime.now(timezone.utc).timestamp() > claims.exp:
            raise TokenExpiredError()

        return claims

