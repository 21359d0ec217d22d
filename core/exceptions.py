class ResourceNotFound(Exception):
    """Запись не найдена или принадлежит другому пользователю.

    Оба случая намеренно неразличимы для клиента.
    """

    message = "Resource not found!"

    def __init__(self, message=None):
        super().__init__(message or self.message)


class RefuelingNotFound(ResourceNotFound):
    pass


class UnsupportedMediaType(Exception):
    """Тело PUT/PATCH не является HTML-формой."""

    def __init__(self, content_type):
        self.content_type = content_type
        super().__init__(f"Unsupported media type: {content_type or 'none'}")
