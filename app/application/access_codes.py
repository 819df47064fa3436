import logging

from app.domain.errors import InvalidAccessCode
from app.domain.ports.access_code_store import AccessCodeStorePort
from app.domain.services import require

logger = logging.getLogger(__name__)

DEFAULT_ACCESS_CODE_TTL_SECONDS = 300


async def issue_access_code(
    access_code_store: AccessCodeStorePort,
    username: str | None,
    access_code: str | None,
    ttl_seconds: int = DEFAULT_ACCESS_CODE_TTL_SECONDS,
) -> None:
    """
    Make (username, access_code) valid for ttl_seconds. Reissuing the same
    pair overwrites the record and restarts its TTL. Other pending codes for
    the same user are left alone.
    """
    require(username=username, accessCode=access_code)

    await access_code_store.issue(username, access_code, ttl_seconds)
    logger.info(
        "access code issued",
        extra={"username": username, "ttl_seconds": ttl_seconds},
    )


async def verify_access_code(
    access_code_store: AccessCodeStorePort,
    username: str | None,
    access_code: str | None,
) -> None:
    """
    Consume (username, access_code). Raises InvalidAccessCode when the code
    was never issued, already used, or expired; these cases are not told apart.
    """
    require(username=username, accessCode=access_code)

    if not await access_code_store.consume(username, access_code):
        logger.info("access code rejected", extra={"username": username})
        raise InvalidAccessCode()
    logger.info("access code consumed", extra={"username": username})
