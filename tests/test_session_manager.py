import pytest
from fastapi.exceptions import RequestValidationError
from sqlalchemy import func, select
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.modules.plant_management.domain.models.plant import LightNeeds, Plant
from app.modules.user_management.domain.models.user import User
from app.modules.user_management.infrastructure.database.models import UserModel
from app.modules.user_management.infrastructure.database.user_repository_impl import UserRepositoryImpl
from app.shared.core.exceptions import ValidationError
from app.shared.infrastructure.database.session import DatabaseSessionManager


@pytest.fixture()
def manager(engine):
    manager = DatabaseSessionManager()
    manager.initialize(engine)
    return manager


async def _user_count(manager) -> int:
    async with manager.get_session() as session:
        return await session.scalar(select(func.count()).select_from(UserModel))


async def test_request_validation_error_propagates_and_rolls_back(manager):
    error = RequestValidationError([{"loc": ("body", "name"), "msg": "Field required", "type": "missing"}])

    with pytest.raises(RequestValidationError) as raised:
        async with manager.get_session() as session:
            await UserRepositoryImpl(session).create(User(supabase_auth_id="auth-1", username="ada"))
            raise error

    assert raised.value is error
    assert await _user_count(manager) == 0


async def test_http_exception_propagates_unchanged(manager):
    with pytest.raises(StarletteHTTPException) as raised:
        async with manager.get_session():
            raise StarletteHTTPException(status_code=429, detail="Too many requests")

    assert raised.value.status_code == 429


async def test_domain_model_error_becomes_validation_error(manager):
    with pytest.raises(ValidationError) as raised:
        async with manager.get_session():
            Plant(user_id=1, name="   ", water_frequency=7, light_needs=LightNeeds.LOW)

    assert raised.value.status_code == 422
    assert raised.value.details["validation_errors"][0]["field"] == "name"


async def test_successful_work_is_committed(manager):
    async with manager.get_session() as session:
        await UserRepositoryImpl(session).create(User(supabase_auth_id="auth-1", username="ada"))

    assert await _user_count(manager) == 1
