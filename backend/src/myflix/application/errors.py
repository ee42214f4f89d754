"""Application error taxonomy shared by commands, strategies and routers."""


class MyflixError(Exception):
    pass


# ── Authentication ────────────────────────────────────────────────────────────

class AuthError(MyflixError):
    pass


class InvalidCredentialsError(AuthError):
    """Unknown username and wrong password both end up here."""


class TokenError(AuthError):
    pass


class InvalidSignatureError(TokenError):
    pass


class ExpiredTokenError(TokenError):
    pass


class UnknownIdentityError(TokenError):
    pass


# ── Resources ─────────────────────────────────────────────────────────────────

class NotFoundError(MyflixError):
    pass


class AlreadyFavoriteError(MyflixError):
    pass


class UserAlreadyExistsError(MyflixError):
    pass


# ── Collaborators ─────────────────────────────────────────────────────────────

class UpstreamUnavailableError(MyflixError):
    """A persistence or collaborator call failed; the cause is logged, not returned."""
