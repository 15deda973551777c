from app.modules.user_management.domain.models.user import AuthIdentity, User
from app.modules.user_management.domain.services.user_service import UserService
from app.modules.user_management.infrastructure.database.user_repository_impl import UserRepositoryImpl


async def test_first_sign_in_provisions_user_from_email(session):
    service = UserService(UserRepositoryImpl(session))

    user = await service.resolve_user(AuthIdentity(auth_id="auth-1", email="ada@example.com"))

    assert user.id is not None
    assert user.username == "ada"
    assert user.supabase_auth_id == "auth-1"


async def test_same_identity_resolves_to_same_user(session):
    service = UserService(UserRepositoryImpl(session))
    identity = AuthIdentity(auth_id="auth-1", email="ada@example.com")

    first = await service.resolve_user(identity)
    second = await service.resolve_user(identity)

    assert first.id == second.id


async def test_existing_email_is_relinked_to_new_identity(session):
    repository = UserRepositoryImpl(session)
    existing = await repository.create(User(supabase_auth_id="old-auth", username="ada", email="ada@example.com"))
    service = UserService(repository)

    user = await service.resolve_user(AuthIdentity(auth_id="new-auth", email="ada@example.com"))

    assert user.id == existing.id
    assert user.supabase_auth_id == "new-auth"
    assert (await repository.get_by_auth_id("new-auth")).id == existing.id


async def test_taken_username_gets_random_suffix(session):
    repository = UserRepositoryImpl(session)
    await repository.create(User(supabase_auth_id="auth-1", username="ada", email="ada@example.com"))
    service = UserService(repository)

    user = await service.resolve_user(AuthIdentity(auth_id="auth-2", email="ada@example.org"))

    prefix, suffix = user.username.split("_")
    assert prefix == "ada"
    assert len(suffix) == 5
    assert suffix.isalnum() and suffix == suffix.lower()


async def test_identity_without_email_uses_auth_id_prefix(session):
    service = UserService(UserRepositoryImpl(session))

    user = await service.resolve_user(AuthIdentity(auth_id="0123456789abcdef"))

    assert user.username == "user_01234567"
    assert user.email is None
