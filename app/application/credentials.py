import logging

from app.domain.errors import InvalidCredentials, UserNotFound
from app.domain.ports.unit_of_work import UnitOfWorkPort
from app.domain.services import require

logger = logging.getLogger(__name__)


async def verify_credentials(
    uow: UnitOfWorkPort,
    username: str | None,
    password: str | None,
    device_id: str | None,
) -> None:
    require(username=username, password=password, deviceId=device_id)

    async with uow as transaction:
        user = await transaction.db_users.get_by_username(username)

    if user is None:
        raise UserNotFound()
    # same error whichever of password / device id is wrong
    if not user.matches(password, device_id):
        logger.info("credential check failed", extra={"username": username})
        raise InvalidCredentials()
    logger.info("credential check passed", extra={"username": username})


async def check_username(uow: UnitOfWorkPort, username: str | None) -> bool:
    require(username=username)

    async with uow as transaction:
        return await transaction.db_users.exists(username)
