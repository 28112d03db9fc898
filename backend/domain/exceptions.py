"""Exceptions domain du service Companies."""


class CompanyNotFoundError(Exception):
    """Aucune entreprise ne correspond a l'identifiant (0 ligne affectee)."""

    def __init__(self, company_id: str):
        self.company_id = company_id
        super().__init__(f"Company not found: {company_id}")


class StorageError(Exception):
    """Echec du stockage. Propage tel quel a l'appelant, jamais rejoue."""


class PublisherClosedError(Exception):
    """Publication tentee apres la fermeture du publisher."""


# --- Authentification ---


class AuthError(Exception):
    """Token refuse. Toutes les sous-classes donnent un 401 cote HTTP."""


class MalformedTokenError(AuthError):
    """La chaine n'est pas un token signe bien forme."""

    def __init__(self, detail: str = "token is malformed"):
        super().__init__(detail)


class SignatureMismatchError(AuthError):
    """Token signe avec une autre cle que la cle courante."""

    def __init__(self, detail: str = "token signature is invalid"):
        super().__init__(detail)


class TokenExpiredError(AuthError):
    """La date d'expiration du token est depassee."""

    def __init__(self, detail: str = "token is expired"):
        super().__init__(detail)


class ClaimsMismatchError(AuthError):
    """Les claims du token ne correspondent pas a la structure attendue."""

    def __init__(self, detail: str = "couldn't parse claims"):
        super().__init__(detail)
