from decimal import Decimal

import pytest

from core.forms import RefuelingForm, parse_decimal, to_sentence
from core.models import Refueling


@pytest.mark.parametrize("value, expected", [
    ("30", Decimal("30")),
    (" 12.5 ", Decimal("12.5")),
    ("12,5", Decimal("12.5")),
    (30, Decimal("30")),
    ("", None),
    (None, None),
    ("abc", None),
    ("NaN", None),
    ("Infinity", None),
])
def test_parse_decimal(value, expected):
    assert parse_decimal(value) == expected


@pytest.mark.parametrize("words, expected", [
    ([], ""),
    (["is not a number"], "is not a number"),
    (["is not a number", "can't be blank"], "is not a number and can't be blank"),
    (["a", "b", "c"], "a, b, and c"),
])
def test_to_sentence(words, expected):
    assert to_sentence(words) == expected


@pytest.mark.django_db
class TestRefuelingForm:

    def build(self, user, **data):
        fields = {"liters": "30", "kilometers": "600", "cost": "150"}
        fields.update(data)
        return RefuelingForm(data=fields, instance=Refueling(user=user))

    def test_valid(self, user):
        form = self.build(user)

        assert form.is_valid()
        refueling = form.save()
        assert refueling.user == user
        assert refueling.cost == Decimal("150")

    @pytest.mark.parametrize("data, expected", [
        ({"liters": ""}, ["Liters is not a number and can't be blank"]),
        ({"liters": "   "}, ["Liters is not a number and can't be blank"]),
        ({"liters": "full tank"}, ["Liters is not a number"]),
        ({"liters": "-5"}, ["Liters must be greater than 0"]),
        ({"kilometers": ""}, ["Kilometers is not a number and can't be blank"]),
        ({"cost": "free"}, ["Cost is not a number"]),
        (
            {"liters": "", "cost": ""},
            ["Liters is not a number and can't be blank", "Cost is not a number and can't be blank"],
        ),
    ])
    def test_full_messages(self, user, data, expected):
        form = self.build(user, **data)

        assert not form.is_valid()
        assert form.full_messages == expected

    @pytest.mark.parametrize("data, expected", [
        ({"liters": "30.123"}, ["Liters must have at most 2 decimal places"]),
        ({"liters": "123456789"}, ["Liters is too long (maximum is 8 digits)"]),
        ({"liters": "1234567"}, ["Liters is too long (maximum is 6 digits before the decimal point)"]),
        ({"kilometers": "12345678901"}, ["Kilometers is too long (maximum is 10 digits)"]),
    ])
    def test_precision_messages(self, user, data, expected):
        form = self.build(user, **data)

        assert not form.is_valid()
        assert form.full_messages == expected

    def test_missing_keys_are_blank(self, user):
        form = RefuelingForm(data={}, instance=Refueling(user=user))

        assert not form.is_valid()
        assert len(form.full_messages) == 3

    def test_owner_is_not_a_form_field(self):
        assert "user" not in RefuelingForm().fields
