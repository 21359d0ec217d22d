class MethodOverrideMiddleware:
    """
    HTML-формы умеют только GET/POST. Поле `_method` в POST-запросе
    подменяет метод на PUT, PATCH или DELETE.

    Подмена делается в process_view и должна стоять после
    CsrfViewMiddleware: CSRF-токен читается из тела только для POST.
    """

    ALLOWED_METHODS = {"PUT", "PATCH", "DELETE"}
    FIELD_NAME = "_method"

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_view(self, request, view_func, view_args, view_kwargs):
        if request.method == "POST":
            override = request.POST.get(self.FIELD_NAME, "").upper()
            if override in self.ALLOWED_METHODS:
                request.method = override
        return None
