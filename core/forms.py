from decimal import Decimal, InvalidOperation

from django import forms
from django.contrib.auth.forms import UserCreationForm
from django.core.exceptions import NON_FIELD_ERRORS, ValidationError
from django.core.validators import DecimalValidator

from core.models import Refueling, User

# Коды DecimalValidator -> сообщения в стиле "Liters is too long"
PRECISION_MESSAGES = {
    "max_digits": "is too long (maximum is %(max)s digits)",
    "max_decimal_places": "must have at most %(max)s decimal places",
    "max_whole_digits": "is too long (maximum is %(max)s digits before the decimal point)",
}


def parse_decimal(value):
    """Число из пользовательского ввода; None, если это не число."""
    if value is None:
        return None
    text = str(value).strip().replace(",", ".")
    if not text:
        return None
    try:
        number = Decimal(text)
    except (InvalidOperation, ValueError):
        return None
    if not number.is_finite():
        return None
    return number


def to_sentence(words):
    """['a', 'b', 'c'] -> 'a, b, and c'"""
    words = [str(word) for word in words]
    if len(words) < 2:
        return "".join(words)
    if len(words) == 2:
        return f"{words[0]} and {words[1]}"
    return f"{', '.join(words[:-1])}, and {words[-1]}"


def full_messages(form):
    """
    Ошибки формы одной строкой на поле:
    "Liters is not a number and can't be blank".
    """
    result = []
    for name, errors in form.errors.items():
        if name == NON_FIELD_ERRORS:
            result.extend(str(error) for error in errors)
            continue
        field = form.fields.get(name)
        label = field.label if field and field.label else name.replace("_", " ").capitalize()
        result.append(f"{label} {to_sentence(errors)}")
    return result


class RefuelingForm(forms.ModelForm):
    """
    Форма заправки. Поля принимают сырые строки, чтобы нечисловой ввод
    сохранялся при повторном показе формы и давал понятное сообщение.
    Владелец в форме не участвует.
    """

    liters = forms.CharField(label="Liters", required=False)
    kilometers = forms.CharField(label="Kilometers", required=False)
    cost = forms.CharField(label="Cost", required=False)

    class Meta:
        model = Refueling
        fields = ["liters", "kilometers", "cost"]

    def _clean_number(self, name, greater_than=None):
        raw = self.cleaned_data.get(name)
        value = parse_decimal(raw)

        errors = []
        if value is None:
            errors.append(ValidationError("is not a number", code="not_a_number"))
        if raw in (None, ""):
            errors.append(ValidationError("can't be blank", code="blank"))
        if errors:
            raise ValidationError(errors)

        if greater_than is not None and value <= greater_than:
            raise ValidationError(
                "must be greater than %(limit)s", code="greater_than", params={"limit": greater_than}
            )

        model_field = Refueling._meta.get_field(name)
        try:
            DecimalValidator(model_field.max_digits, model_field.decimal_places)(value)
        except ValidationError as exc:
            error = exc.error_list[0]
            raise ValidationError(
                PRECISION_MESSAGES.get(error.code, "is invalid"), code=error.code, params=error.params
            ) from exc
        return value

    def clean_liters(self):
        return self._clean_number("liters", greater_than=0)

    def clean_kilometers(self):
        return self._clean_number("kilometers")

    def clean_cost(self):
        return self._clean_number("cost")

    @property
    def full_messages(self):
        return full_messages(self)


class SignUpForm(UserCreationForm):
    class Meta(UserCreationForm.Meta):
        model = User
        fields = ("username", "email")
