"""JSON API v1 поверх RefuelingService; аутентификация - сессия Django."""
import logging
from typing import List

from ninja import NinjaAPI, Router, Status
from ninja.security import django_auth

from core.exceptions import ResourceNotFound
from core.schemas import ErrorsOut, MessageOut, RefuelingIn, RefuelingOut
from core.services import RefuelingService
from core.utils.logging import log_action
from core.utils.network import get_client_ip


api = NinjaAPI(
    title="Fuel Log API",
    version="1.0.0",
    auth=django_auth,
    urls_namespace="api-v1",
)

router = Router(tags=["refuelings"])


@api.exception_handler(ResourceNotFound)
def resource_not_found(request, exc):
    log_action(
        request.auth,
        "access_denied",
        f"API {request.method} {request.path}: {exc}",
        get_client_ip(request),
        level=logging.WARNING,
    )
    return api.create_response(request, {"detail": str(exc)}, status=404)


@router.get("/refuelings", response=List[RefuelingOut])
def list_refuelings(request):
    return RefuelingService.list(request.auth)


@router.post("/refuelings", response={201: RefuelingOut, 422: ErrorsOut})
def create_refueling(request, payload: RefuelingIn):
    result = RefuelingService.create(request.auth, payload.model_dump())
    if not result.ok:
        return Status(422, {"errors": result.errors})

    log_action(request.auth, "add_refueling", f"API: refueling #{result.refueling.pk}", get_client_ip(request))
    return Status(201, result.refueling)


@router.get("/refuelings/{refueling_id}", response=RefuelingOut)
def get_refueling(request, refueling_id: int):
    return RefuelingService.get(request.auth, refueling_id)


@router.put("/refuelings/{refueling_id}", response={200: RefuelingOut, 422: ErrorsOut})
def update_refueling(request, refueling_id: int, payload: RefuelingIn):
    result = RefuelingService.update(request.auth, refueling_id, payload.model_dump())
    if not result.ok:
        return Status(422, {"errors": result.errors})

    log_action(request.auth, "update_refueling", f"API: refueling #{refueling_id}", get_client_ip(request))
    return Status(200, result.refueling)


@router.delete("/refuelings/{refueling_id}", response=MessageOut)
def delete_refueling(request, refueling_id: int):
    result = RefuelingService.destroy(request.auth, refueling_id)
    log_action(request.auth, "delete_refueling", f"API: refueling #{refueling_id}", get_client_ip(request))
    return {"detail": result.message}


api.add_router("", router)
