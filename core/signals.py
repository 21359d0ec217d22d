# core/signals.py
from django.contrib.auth.signals import user_logged_in, user_logged_out, user_login_failed
from django.dispatch import receiver

from core.utils.logging import log_action
from core.utils.network import get_client_ip


@receiver(user_logged_in)
def log_user_login(sender, request, user, **kwargs):
    log_action(user, "login", "User logged in", get_client_ip(request))


@receiver(user_logged_out)
def log_user_logout(sender, request, user, **kwargs):
    # При выходе без сессии user равен None
    if user is None:
        return
    log_action(user, "logout", "User logged out", get_client_ip(request))


@receiver(user_login_failed)
def log_user_login_failed(sender, credentials, request=None, **kwargs):
    username = credentials.get("username", "")
    ip = get_client_ip(request) if request is not None else None
    log_action(None, "access_denied", f"Failed login for '{username}'", ip)
