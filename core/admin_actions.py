import logging

from django.contrib import messages
from django.shortcuts import redirect

from core.services.export_service import ExportService
from core.utils.logging import log_action
from core.utils.network import get_client_ip


logger = logging.getLogger(__name__)


def export_model_data(modeladmin, request, queryset, export_method: str = None):
    """
    Универсальное действие для экспорта данных моделей

    Args:
        modeladmin: Экземпляр ModelAdmin
        request: HTTP запрос
        queryset: Выбранные объекты
        export_method: Название метода в ExportService
    """
    model = modeladmin.model
    model_name = model._meta.verbose_name_plural

    # Если не указан метод экспорта, используем стандартный
    if not export_method:
        export_method = f"export_{model._meta.model_name}s_data"

    export_func = getattr(ExportService, export_method, None)
    if not export_func:
        raise AttributeError(f"Export method {export_method} not found in ExportService")

    try:
        response = export_func(queryset)
    except (OSError, ValueError) as e:
        logger.exception("Export of %s failed", model_name)
        messages.error(request, f"Export of {model_name} failed: {e}")
        return redirect("..")

    log_action(request.user, "export", f"Admin export: {queryset.count()} {model_name}", get_client_ip(request))
    return response


def export_action(export_method=None, description=None):
    """Декоратор для создания действий экспорта"""
    def decorator(func):
        def wrapper(modeladmin, request, queryset):
            return export_model_data(modeladmin, request, queryset, export_method=export_method)
        wrapper.short_description = description
        wrapper.__name__ = func.__name__
        return wrapper
    return decorator
