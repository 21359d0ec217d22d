"""
HTML-интерфейс журнала заправок: список, создание, изменение, удаление.
"""
from datetime import timedelta
from decimal import Decimal
from urllib.parse import urlencode

import pytest
from django.test.client import BOUNDARY, MULTIPART_CONTENT, encode_multipart
from django.urls import reverse
from django.utils import timezone
from django.utils.html import escape

from core.auth import SIGN_IN_REQUIRED_MESSAGE
from core.models import Refueling, SystemLog


VALID_DATA = {"liters": 30, "kilometers": 600, "cost": 150}
INVALID_DATA = {"liters": "", "kilometers": 600, "cost": 150}
BLANK_LITERS_MESSAGE = "Liters is not a number and can't be blank"


def form_body(data):
    return urlencode(data)


def put(client, url, data, **kwargs):
    return client.put(url, form_body(data), content_type="application/x-www-form-urlencoded", **kwargs)


def patch(client, url, data, **kwargs):
    return client.patch(url, form_body(data), content_type="application/x-www-form-urlencoded", **kwargs)


# =============================================================================
# INDEX
# =============================================================================

@pytest.mark.django_db
class TestIndex:

    def test_anonymous_is_redirected_to_login(self, client):
        response = client.get(reverse("index"))

        assert response.status_code == 302
        assert response.url.startswith(reverse("login"))

    def test_anonymous_sees_login_form_with_message(self, client, user, make_refueling):
        make_refueling(user, liters="41.17")

        response = client.get(reverse("index"), follow=True)

        content = response.content.decode()
        assert response.redirect_chain[0][1] == 302
        assert SIGN_IN_REQUIRED_MESSAGE in content
        assert "Log in" in content
        assert "Log out" not in content
        assert "41.17" not in content

    def test_logged_in_user_sees_index(self, auth_client):
        response = auth_client.get(reverse("index"))

        assert response.status_code == 200
        assert "Log out" in response.content.decode()

    def test_displays_only_own_refuelings(self, auth_client, user, other_user, make_refueling):
        now = timezone.now()
        make_refueling(user, liters="12.34", created_at=now - timedelta(days=1))
        make_refueling(user, liters="20.00", created_at=now)
        make_refueling(other_user, liters="437.25", created_at=now)

        content = auth_client.get(reverse("index")).content.decode()

        assert "12.34" in content
        assert "20.00" in content
        assert "437.25" not in content

    def test_newest_first(self, auth_client, user, make_refueling):
        now = timezone.now()
        old = make_refueling(user, created_at=now - timedelta(days=2))
        same_time_first = make_refueling(user, created_at=now)
        same_time_second = make_refueling(user, created_at=now)

        response = auth_client.get(reverse("index"))

        assert list(response.context["refuelings"]) == [same_time_second, same_time_first, old]

    def test_collection_get_redirects_to_index(self, auth_client):
        response = auth_client.get(reverse("refuelings"))

        assert response.status_code == 302
        assert response.url == reverse("index")


# =============================================================================
# NEW / CREATE
# =============================================================================

@pytest.mark.django_db
class TestNew:

    def test_displays_form(self, auth_client):
        response = auth_client.get(reverse("new_refueling"))

        assert response.status_code == 200
        assert "New refueling" in response.content.decode()


@pytest.mark.django_db
class TestCreate:

    def test_valid_params_create_refueling_for_current_user(self, auth_client, user):
        count = Refueling.objects.count()

        response = auth_client.post(reverse("refuelings"), VALID_DATA)

        assert response.status_code == 302
        assert Refueling.objects.count() == count + 1

        refueling = Refueling.objects.get()
        assert refueling.user == user
        assert refueling.liters == Decimal("30")

        content = auth_client.get(response.url).content.decode()
        assert "Refueling was created" in content
        assert "30" in content
        assert "600" in content
        assert "150" in content

    def test_valid_params_are_audited(self, auth_client, user):
        auth_client.post(reverse("refuelings"), VALID_DATA)

        assert SystemLog.objects.filter(user=user, action="add_refueling").exists()

    def test_owner_cannot_be_injected(self, auth_client, user, other_user):
        auth_client.post(reverse("refuelings"), {**VALID_DATA, "user": other_user.pk})

        assert Refueling.objects.get().user == user

    def test_blank_liters_renders_errors(self, auth_client):
        response = auth_client.post(reverse("refuelings"), INVALID_DATA)

        assert response.status_code == 200
        assert Refueling.objects.count() == 0
        content = response.content.decode()
        assert escape(BLANK_LITERS_MESSAGE) in content
        # Введённые значения сохраняются в форме
        assert 'value="600"' in content
        assert 'value="150"' in content

    def test_non_numeric_liters_keeps_input(self, auth_client):
        response = auth_client.post(reverse("refuelings"), {**VALID_DATA, "liters": "a lot"})

        assert response.status_code == 200
        assert Refueling.objects.count() == 0
        assert response.context["errors"] == ["Liters is not a number"]
        assert 'value="a lot"' in response.content.decode()

    def test_zero_liters_is_rejected(self, auth_client):
        response = auth_client.post(reverse("refuelings"), {**VALID_DATA, "liters": "0"})

        assert response.status_code == 200
        assert response.context["errors"] == ["Liters must be greater than 0"]

    def test_anonymous_cannot_create(self, client):
        response = client.post(reverse("refuelings"), VALID_DATA)

        assert response.status_code == 302
        assert response.url.startswith(reverse("login"))
        assert Refueling.objects.count() == 0


# =============================================================================
# EDIT / UPDATE
# =============================================================================

@pytest.mark.django_db
class TestEdit:

    def test_displays_form_with_values(self, auth_client, user, make_refueling):
        refueling = make_refueling(user, liters="33.30")

        response = auth_client.get(reverse("edit_refueling", args=[refueling.pk]))

        assert response.status_code == 200
        content = response.content.decode()
        assert "Edit refueling" in content
        assert "33.30" in content

    def test_someone_elses_refueling(self, auth_client, other_user, make_refueling):
        refueling = make_refueling(other_user, liters="33.30")

        response = auth_client.get(reverse("edit_refueling", args=[refueling.pk]), follow=True)

        content = response.content.decode()
        assert response.redirect_chain[0][1] == 302
        assert "Resource not found!" in content
        assert "33.30" not in content


@pytest.mark.django_db
class TestUpdate:

    def test_valid_params_update_refueling(self, auth_client, user, make_refueling):
        refueling = make_refueling(user)

        response = put(auth_client, reverse("refueling", args=[refueling.pk]), VALID_DATA)

        assert response.status_code == 302
        assert "Refueling was updated" in auth_client.get(response.url).content.decode()

        refueling.refresh_from_db()
        assert refueling.liters == Decimal("30")
        assert refueling.kilometers == Decimal("600")
        assert refueling.cost == Decimal("150")
        assert refueling.user == user

    def test_html_form_uses_method_override(self, auth_client, user, make_refueling):
        refueling = make_refueling(user)

        response = auth_client.post(
            reverse("refueling", args=[refueling.pk]), {**VALID_DATA, "_method": "put"}
        )

        assert response.status_code == 302
        refueling.refresh_from_db()
        assert refueling.liters == Decimal("30")

    def test_patch_is_accepted(self, auth_client, user, make_refueling):
        refueling = make_refueling(user)

        response = patch(auth_client, reverse("refueling", args=[refueling.pk]), VALID_DATA)

        assert response.status_code == 302
        refueling.refresh_from_db()
        assert refueling.cost == Decimal("150")

    def test_multipart_body_is_accepted(self, auth_client, user, make_refueling):
        refueling = make_refueling(user)
        body = encode_multipart(BOUNDARY, {"liters": "30", "kilometers": "600", "cost": "150"})

        response = auth_client.put(
            reverse("refueling", args=[refueling.pk]), body, content_type=MULTIPART_CONTENT
        )

        assert response.status_code == 302
        refueling.refresh_from_db()
        assert refueling.liters == Decimal("30")
        assert refueling.kilometers == Decimal("600")
        assert refueling.cost == Decimal("150")

    def test_unsupported_body_is_rejected(self, auth_client, user, make_refueling):
        refueling = make_refueling(user, liters="40.00")

        response = auth_client.put(
            reverse("refueling", args=[refueling.pk]), VALID_DATA, content_type="application/json"
        )

        assert response.status_code == 415
        refueling.refresh_from_db()
        assert refueling.liters == Decimal("40.00")

    def test_invalid_params_render_errors_and_keep_record(self, auth_client, user, make_refueling):
        refueling = make_refueling(user, liters="40.00")

        response = put(auth_client, reverse("refueling", args=[refueling.pk]), INVALID_DATA)

        assert response.status_code == 200
        assert escape(BLANK_LITERS_MESSAGE) in response.content.decode()

        refueling.refresh_from_db()
        assert refueling.liters == Decimal("40.00")
        assert refueling.kilometers == Decimal("550.00")

    def test_someone_elses_refueling(self, auth_client, other_user, make_refueling):
        refueling = make_refueling(other_user, liters="40.00")

        response = put(auth_client, reverse("refueling", args=[refueling.pk]), INVALID_DATA)

        assert response.status_code == 302
        assert "Resource not found!" in auth_client.get(response.url).content.decode()

        refueling.refresh_from_db()
        assert refueling.liters == Decimal("40.00")
        assert refueling.user == other_user

    def test_someone_elses_refueling_with_valid_params(self, auth_client, user, other_user, make_refueling):
        refueling = make_refueling(other_user, liters="40.00")

        put(auth_client, reverse("refueling", args=[refueling.pk]), VALID_DATA)

        refueling.refresh_from_db()
        assert refueling.liters == Decimal("40.00")
        assert SystemLog.objects.filter(user=user, action="access_denied").exists()

    def test_missing_refueling(self, auth_client):
        response = put(auth_client, reverse("refueling", args=[999999]), VALID_DATA, follow=True)

        assert "Resource not found!" in response.content.decode()

    def test_get_is_not_allowed(self, auth_client, user, make_refueling):
        refueling = make_refueling(user)

        response = auth_client.get(reverse("refueling", args=[refueling.pk]))

        assert response.status_code == 405


# =============================================================================
# DESTROY
# =============================================================================

@pytest.mark.django_db
class TestDestroy:

    def test_removes_refueling(self, auth_client, user, make_refueling):
        refueling = make_refueling(user)
        count = Refueling.objects.count()

        response = auth_client.delete(reverse("refueling", args=[refueling.pk]))

        assert response.status_code == 302
        assert Refueling.objects.count() == count - 1
        assert "Refueling was deleted" in auth_client.get(response.url).content.decode()

    def test_html_form_uses_method_override(self, auth_client, user, make_refueling):
        refueling = make_refueling(user)

        response = auth_client.post(reverse("refueling", args=[refueling.pk]), {"_method": "delete"})

        assert response.status_code == 302
        assert not Refueling.objects.filter(pk=refueling.pk).exists()

    def test_someone_elses_refueling(self, auth_client, other_user, make_refueling):
        refueling = make_refueling(other_user)

        response = auth_client.delete(reverse("refueling", args=[refueling.pk]))

        assert response.status_code == 302
        assert "Resource not found!" in auth_client.get(response.url).content.decode()
        assert Refueling.objects.filter(pk=refueling.pk).exists()

    def test_anonymous_cannot_delete(self, client, user, make_refueling):
        refueling = make_refueling(user)

        response = client.delete(reverse("refueling", args=[refueling.pk]))

        assert response.status_code == 302
        assert Refueling.objects.filter(pk=refueling.pk).exists()


@pytest.mark.django_db
def test_only_journal_routes_are_served(auth_client):
    assert auth_client.get("/health/").status_code == 404
