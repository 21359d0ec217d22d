from django.db import models
from django.db.models import Count
from django.contrib.auth.models import AbstractUser, UserManager as DjangoUserManager

# -----------------------
# Кастомный QuerySet
# -----------------------
class UserQuerySet(models.QuerySet):
    def with_refuelings_count(self):
        """Аннотирует количество заправок пользователя"""
        return self.annotate(refuelings_count=Count("refuelings"))


# -----------------------
# Кастомный менеджер
# -----------------------
class CustomUserManager(DjangoUserManager.from_queryset(UserQuerySet)):
    """Менеджер пользователей с методами UserQuerySet."""


# -----------------------
# Модель User
# -----------------------
class User(AbstractUser):
    """Владелец записей о заправках. Для журнала важна только его идентичность."""

    objects = CustomUserManager()

    class Meta:
        db_table = "users"
        verbose_name = "User"
        verbose_name_plural = "Users"

    def __str__(self):
        return self.username

    def get_full_name(self) -> str:
        name = super().get_full_name()
        return name if name.strip() else self.username
