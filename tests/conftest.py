"""
Общие фикстуры: пользователи, фабрика заправок, авторизованный клиент.
"""
from decimal import Decimal

import pytest

from core.models import Refueling, User


PASSWORD = "s3cret-Passw0rd"


@pytest.fixture
def user(db):
    return User.objects.create_user(username="driver", email="driver@example.com", password=PASSWORD)


@pytest.fixture
def other_user(db):
    return User.objects.create_user(username="neighbour", email="neighbour@example.com", password=PASSWORD)


@pytest.fixture
def make_refueling(db):
    """Фабрика заправок; created_at можно задать явно."""
    def _make(user, liters="40.00", kilometers="550.00", cost="210.00", created_at=None):
        refueling = Refueling.objects.create(
            user=user,
            liters=Decimal(liters),
            kilometers=Decimal(kilometers),
            cost=Decimal(cost),
        )
        if created_at is not None:
            Refueling.objects.filter(pk=refueling.pk).update(created_at=created_at)
        refueling.refresh_from_db()
        return refueling
    return _make


@pytest.fixture
def auth_client(client, user):
    client.force_login(user)
    return client
