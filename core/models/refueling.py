from decimal import Decimal

from django.conf import settings
from django.db import models
from django.db.models import Count, Sum


class RefuelingQuerySet(models.QuerySet):
    """Кастомный QuerySet для модели Refueling"""

    def owned_by(self, user):
        """Записи конкретного владельца"""
        if isinstance(user, models.Model):
            return self.filter(user=user)
        return self.filter(user_id=user)

    def newest_first(self):
        """Сначала свежие; при равном created_at - позже добавленные"""
        return self.order_by("-created_at", "-id")

    def statistics(self):
        """Сводная статистика по выборке"""
        result = self.aggregate(
            total_records=Count("id"),
            total_liters=Sum("liters"),
            total_kilometers=Sum("kilometers"),
            total_cost=Sum("cost"),
        )
        for key in ("total_liters", "total_kilometers", "total_cost"):
            result[key] = result[key] or Decimal("0")

        if result["total_kilometers"]:
            result["avg_consumption"] = (
                result["total_liters"] / result["total_kilometers"] * 100
            ).quantize(Decimal("0.01"))
        else:
            result["avg_consumption"] = None
        return result

    def export_rows(self):
        """Строки для экспорта с читаемыми заголовками"""
        rows = []
        for refueling in self.select_related("user").newest_first():
            rows.append({
                "created at": refueling.created_at.strftime("%Y-%m-%d %H:%M"),
                "user": refueling.user.username,
                "liters": float(refueling.liters),
                "kilometers": float(refueling.kilometers),
                "cost": float(refueling.cost),
                "price per liter": float(refueling.price_per_liter),
            })
        return rows


class Refueling(models.Model):
    """
    Запись о заправке автомобиля.
    Создаётся владельцем через веб-интерфейс или API; владелец не меняется.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="refuelings",
        editable=False,
        verbose_name="Owner"
    )
    liters = models.DecimalField(
        max_digits=8,
        decimal_places=2,
        verbose_name="Liters"
    )
    kilometers = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        verbose_name="Kilometers"
    )
    cost = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        verbose_name="Cost"
    )
    created_at = models.DateTimeField(auto_now_add=True, verbose_name="Created at")
    updated_at = models.DateTimeField(auto_now=True, verbose_name="Updated at")

    objects = RefuelingQuerySet.as_manager()

    class Meta:
        db_table = "refuelings"
        verbose_name = "Refueling"
        verbose_name_plural = "Refuelings"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["user", "created_at"], name="refueling_user_created_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(liters__gt=0),
                name="refueling_positive_liters"
            )
        ]

    def __str__(self):
        return f"#{self.pk} - {self.liters} l / {self.kilometers} km ({self.cost})"

    @property
    def price_per_liter(self):
        """Цена за литр"""
        if not self.liters or self.cost is None:
            return None
        return (self.cost / self.liters).quantize(Decimal("0.01"))

    @property
    def consumption(self):
        """Расход, л/100 км (None, если пробег нулевой)"""
        if not self.kilometers or self.liters is None:
            return None
        return (self.liters / self.kilometers * 100).quantize(Decimal("0.01"))
