import logging

from core.models import SystemLog


logger = logging.getLogger("fuellog.audit")


def log_action(user=None, action="info", details="", ip_address=None, level=logging.INFO):
    """Создание записи в БД + стандартный лог."""
    is_authenticated = bool(user and user.is_authenticated)
    log_record = SystemLog.objects.create(
        user=user if is_authenticated else None,
        action=action,
        details=details,
        ip_address=ip_address,
    )

    # Пишем также в общий лог
    username = user.username if is_authenticated else "SYSTEM"
    ip_info = f" [{ip_address}]" if ip_address else ""
    logger.log(level, "%s%s - %s: %s", username, ip_info, action, details)

    return log_record
