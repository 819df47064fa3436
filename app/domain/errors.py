class DomainError(Exception):
    """Base class for all domain-level errors."""

    pass


class ValidationError(DomainError):
    """Required input is missing or malformed."""

    pass


class NotFound(DomainError):
    """The looked-up record does not exist."""

    pass


class UserNotFound(NotFound):
    """No user matches the lookup criteria (username)."""

    pass


class PostNotFound(NotFound):
    """No post has the given id."""

    pass


class Unauthorized(DomainError):
    """A secret did not match. Never says which part was wrong."""

    pass


class InvalidAccessCode(Unauthorized):
    """Access code never issued, already used, or expired."""

    pass


class InvalidCredentials(Unauthorized):
    """Password and/or device id do not match the stored user."""

    pass


class SlugAlreadyExists(DomainError):
    """Another post already uses the slug derived from this title."""

    pass


class StoreUnavailable(DomainError):
    """Redis or Postgres could not be reached, timed out, or failed."""

    pass
