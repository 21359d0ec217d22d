import logging
from functools import wraps
from typing import Optional

from django.contrib import messages
from django.contrib.auth.base_user import AbstractBaseUser
from django.contrib.auth.views import redirect_to_login


logger = logging.getLogger(__name__)

SIGN_IN_REQUIRED_MESSAGE = "You need to sign in or sign up before continuing."


def current_user(request) -> Optional[AbstractBaseUser]:
    """Текущий пользователь из сессии или None для анонима."""
    user = getattr(request, "user", None)
    if user is None or not user.is_authenticated:
        return None
    return user


def sign_in_required(view_func):
    """
    Аналог login_required: кроме редиректа на форму входа
    оставляет flash-сообщение с причиной.
    """
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        if current_user(request) is None:
            logger.debug("Anonymous access to %s, redirecting to login", request.path)
            messages.warning(request, SIGN_IN_REQUIRED_MESSAGE)
            return redirect_to_login(request.get_full_path())
        return view_func(request, *args, **kwargs)
    return wrapper
