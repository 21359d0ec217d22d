import logging
from io import BytesIO

from django.contrib import messages
from django.contrib.auth import login
from django.http import HttpResponse, QueryDict
from django.shortcuts import render, redirect
from django.urls import reverse
from django.views.decorators.http import require_GET, require_http_methods

from core.auth import current_user, sign_in_required
from core.exceptions import RefuelingNotFound, UnsupportedMediaType
from core.forms import SignUpForm
from core.services import ExportService, RefuelingService
from core.utils.logging import log_action
from core.utils.network import get_client_ip


logger = logging.getLogger(__name__)

SIGNED_UP_MESSAGE = "Welcome! You have signed up successfully."
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
MULTIPART_CONTENT_TYPE = "multipart/form-data"


def _submitted_data(request):
    """
    Данные формы для POST, PUT и PATCH (в т.ч. через _method).
    Django разбирает тело только у POST, поэтому PUT и PATCH разбираются здесь
    по Content-Type: urlencoded или multipart. Иное тело - UnsupportedMediaType.
    """
    if request.POST:
        return request.POST

    if request.content_type == MULTIPART_CONTENT_TYPE:
        data, _files = request.parse_file_upload(request.META, BytesIO(request.body))
        return data
    if request.content_type == FORM_CONTENT_TYPE or not request.body:
        return QueryDict(request.body, encoding=request.encoding)
    raise UnsupportedMediaType(request.content_type)


def _render_form(request, form, refueling=None, errors=None):
    if refueling is None:
        context = {
            "title": "New refueling",
            "action": reverse("refuelings"),
            "method": "post",
        }
    else:
        context = {
            "title": "Edit refueling",
            "action": reverse("refueling", args=[refueling.pk]),
            "method": "put",
        }
    context.update({"form": form, "errors": errors or []})
    return render(request, "web/refueling_form.html", context)


def _not_found(request, exc, refueling_id):
    """Чужая или несуществующая запись: flash и возврат к списку."""
    user = current_user(request)
    log_action(
        user,
        "access_denied",
        f"Refueling #{refueling_id}: {exc}",
        get_client_ip(request),
        level=logging.WARNING,
    )
    messages.error(request, str(exc))
    return redirect("index")


@sign_in_required
@require_GET
def index(request):
    user = current_user(request)
    context = {
        "user": user,
        "refuelings": RefuelingService.list(user),
        "stats": RefuelingService.statistics(user),
    }
    return render(request, "web/index.html", context)


@sign_in_required
@require_http_methods(["GET", "POST"])
def refuelings(request):
    if request.method == "GET":
        return redirect("index")

    user = current_user(request)
    result = RefuelingService.create(user, request.POST)
    if not result.ok:
        return _render_form(request, result.form, errors=result.errors)

    refueling = result.refueling
    log_action(
        user,
        "add_refueling",
        f"Refueling #{refueling.pk}: {refueling.liters} l, {refueling.kilometers} km, {refueling.cost}",
        get_client_ip(request),
    )
    messages.success(request, result.message)
    return redirect("index")


@sign_in_required
@require_GET
def new_refueling(request):
    form = RefuelingService.build_form(current_user(request))
    return _render_form(request, form)


@sign_in_required
@require_GET
def edit_refueling(request, pk):
    user = current_user(request)
    try:
        refueling = RefuelingService.get(user, pk)
    except RefuelingNotFound as exc:
        return _not_found(request, exc, pk)

    form = RefuelingService.build_form(user, refueling=refueling)
    return _render_form(request, form, refueling)


@sign_in_required
@require_http_methods(["PUT", "PATCH", "DELETE"])
def refueling(request, pk):
    user = current_user(request)
    ip = get_client_ip(request)

    try:
        if request.method == "DELETE":
            result = RefuelingService.destroy(user, pk)
            log_action(user, "delete_refueling", f"Refueling #{pk} deleted", ip)
        else:
            result = RefuelingService.update(user, pk, _submitted_data(request))
            if not result.ok:
                return _render_form(request, result.form, result.form.instance, result.errors)
            log_action(user, "update_refueling", f"Refueling #{pk} updated", ip)
    except RefuelingNotFound as exc:
        return _not_found(request, exc, pk)
    except UnsupportedMediaType as exc:
        logger.warning("Refueling #%s: %s", pk, exc)
        return HttpResponse(str(exc), status=415, content_type="text/plain")

    messages.success(request, result.message)
    return redirect("index")


@sign_in_required
@require_GET
def export_refuelings(request):
    user = current_user(request)
    queryset = RefuelingService.list(user)
    log_action(user, "export", f"CSV export, {queryset.count()} refuelings", get_client_ip(request))

    csv_data = ExportService.refuelings_to_csv(queryset)
    filename = ExportService.build_filename(f"refuelings_{user.username}")
    return ExportService.export_to_csv(csv_data, filename)


@require_http_methods(["GET", "POST"])
def signup(request):
    if current_user(request) is not None:
        return redirect("index")

    form = SignUpForm(request.POST or None)
    if request.method == "POST" and form.is_valid():
        user = form.save()
        login(request, user)
        messages.success(request, SIGNED_UP_MESSAGE)
        return redirect("index")

    return render(request, "web/signup.html", {"form": form})
