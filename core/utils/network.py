from django.conf import settings


def get_client_ip(request):
    """
    IP клиента. X-Forwarded-For учитывается только за прокси
    (в prod задан SECURE_PROXY_SSL_HEADER), иначе его легко подделать.
    """
    if settings.SECURE_PROXY_SSL_HEADER:
        x_forwarded_for = request.META.get("HTTP_X_FORWARDED_FOR")
        if x_forwarded_for:
            # Первый адрес в цепочке - исходный клиент
            return x_forwarded_for.split(",")[0].strip()
    return request.META.get("REMOTE_ADDR")
