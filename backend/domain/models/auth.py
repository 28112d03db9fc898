"""Claims pour l'authentification JWT."""

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr


class TokenClaims(BaseModel):
    """
    Claims attendus dans un token.

    email et username peuvent etre vides: seule la structure est verifiee.
    """

    model_config = ConfigDict(extra="ignore")

    email: StrictStr
    username: StrictStr
    exp: StrictInt

