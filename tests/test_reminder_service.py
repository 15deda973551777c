from datetime import date, datetime, timedelta, timezone

import pytest

from app.modules.care_management.domain.models.reminder import ReminderType
from app.modules.care_management.domain.services.reminder_service import ReminderService
from app.modules.care_management.infrastructure.database.reminder_repository_impl import ReminderRepositoryImpl
from app.modules.plant_management.domain.models.plant import LightNeeds, Plant
from app.modules.plant_management.domain.services.plant_service import PlantService
from app.modules.plant_management.infrastructure.database.plant_repository_impl import PlantRepositoryImpl
from app.modules.user_management.domain.models.user import User
from app.modules.user_management.infrastructure.database.user_repository_impl import UserRepositoryImpl
from app.shared.core.exceptions import AuthorizationError, ReminderNotFoundError, ValidationError

NOW = datetime(2030, 6, 10, 9, 0, tzinfo=timezone.utc)


@pytest.fixture()
async def owner(session):
    return await UserRepositoryImpl(session).create(
        User(supabase_auth_id="auth-owner", username="owner", email="owner@example.com")
    )


@pytest.fixture()
async def plant(session, owner):
    return await PlantRepositoryImpl(session).create(
        Plant(user_id=owner.id, name="Monstera", water_frequency=7, light_needs=LightNeeds.MEDIUM)
    )


@pytest.fixture()
def service(session):
    return ReminderService(ReminderRepositoryImpl(session), PlantService(PlantRepositoryImpl(session)))


async def test_schedule_watering_uses_plant_frequency(service, plant):
    reminder = await service.schedule_watering(plant, now=NOW)

    assert reminder.reminder_type == ReminderType.WATERING
    assert reminder.due_date == NOW + timedelta(days=7)
    assert reminder.completed is False


async def test_upcoming_and_overdue_split_on_now(service, plant, owner):
    late = await service.create_reminder(owner.id, plant.id, ReminderType.PRUNING, NOW - timedelta(days=1))
    soon = await service.create_reminder(owner.id, plant.id, ReminderType.FERTILIZING, NOW + timedelta(days=2))
    later = await service.create_reminder(owner.id, plant.id, ReminderType.REPOTTING, NOW + timedelta(days=20))

    upcoming = await service.list_upcoming(owner.id, now=NOW)
    overdue = await service.list_overdue(owner.id, now=NOW)
    within_week = await service.list_upcoming(owner.id, days=7, now=NOW)

    assert [r.id for r in upcoming] == [soon.id, later.id]
    assert [r.id for r in overdue] == [late.id]
    assert [r.id for r in within_week] == [soon.id]


async def test_completed_reminders_leave_overdue_list(service, plant, owner):
    late = await service.create_reminder(owner.id, plant.id, ReminderType.OTHER, NOW - timedelta(days=3))

    completed = await service.complete_reminder(late.id, owner.id, now=NOW)

    assert completed.completed is True
    assert completed.completed_at == NOW
    assert await service.list_overdue(owner.id, now=NOW) == []


async def test_complete_reminder_is_idempotent(service, plant, owner):
    reminder = await service.create_reminder(owner.id, plant.id, ReminderType.OTHER, NOW)

    first = await service.complete_reminder(reminder.id, owner.id, now=NOW)
    second = await service.complete_reminder(reminder.id, owner.id, now=NOW + timedelta(hours=5))

    assert second.completed_at == first.completed_at == NOW


async def test_complete_reminder_checks_owner(service, plant, owner, session):
    stranger = await UserRepositoryImpl(session).create(User(supabase_auth_id="auth-x", username="stranger"))
    reminder = await service.create_reminder(owner.id, plant.id, ReminderType.OTHER, NOW)

    with pytest.raises(AuthorizationError):
        await service.complete_reminder(reminder.id, stranger.id)

    with pytest.raises(ReminderNotFoundError):
        await service.complete_reminder(9999, owner.id)


async def test_create_reminder_for_foreign_plant_is_rejected(service, plant, session):
    stranger = await UserRepositoryImpl(session).create(User(supabase_auth_id="auth-x", username="stranger"))

    with pytest.raises(AuthorizationError):
        await service.create_reminder(stranger.id, plant.id, ReminderType.OTHER, NOW)


async def test_calendar_grid_is_sunday_first_and_padded(service, plant, owner):
    in_month = await service.create_reminder(
        owner.id, plant.id, ReminderType.WATERING, datetime(2030, 6, 15, 10, 0, tzinfo=timezone.utc)
    )
    padding_day = await service.create_reminder(
        owner.id, plant.id, ReminderType.PRUNING, datetime(2030, 5, 27, 8, 0, tzinfo=timezone.utc)
    )
    await service.create_reminder(
        owner.id, plant.id, ReminderType.OTHER, datetime(2030, 8, 1, 8, 0, tzinfo=timezone.utc)
    )
    await service.complete_reminder(in_month.id, owner.id, now=NOW)

    month = await service.build_calendar(owner.id, 2030, 6, today=date(2030, 6, 10))

    assert len(month.weeks) == 6
    assert all(len(week) == 7 for week in month.weeks)
    assert month.weeks[0][0].day == date(2030, 5, 26)
    assert month.weeks[0][0].in_month is False
    assert month.weeks[-1][-1].day == date(2030, 7, 6)

    june_15 = month.weeks[2][6]
    assert june_15.day == date(2030, 6, 15)
    assert [r.id for r in june_15.reminders] == [in_month.id]
    assert june_15.reminders[0].completed is True

    assert [r.id for r in month.weeks[0][1].reminders] == [padding_day.id]
    assert month.weeks[2][1].is_today is True

    placed = sum(len(day.reminders) for week in month.weeks for day in week)
    assert placed == 2


async def test_calendar_rejects_invalid_month(service, owner):
    with pytest.raises(ValidationError):
        await service.build_calendar(owner.id, 2030, 13)
