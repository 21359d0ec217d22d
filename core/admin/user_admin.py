from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as DjangoUserAdmin

from core.models import User


@admin.register(User)
class UserAdmin(DjangoUserAdmin):
    list_display = (
        "username",
        "get_full_name",
        "email",
        "refuelings_count",
        "is_active",
        "is_staff",
    )

    list_filter = ("is_active", "is_staff", "groups")
    search_fields = ("username", "email", "first_name", "last_name")
    list_per_page = 30
    ordering = ("username",)

    def get_queryset(self, request):
        return super().get_queryset(request).with_refuelings_count()

    @admin.display(description="Full name")
    def get_full_name(self, obj):
        if obj.first_name and obj.last_name:
            return f"{obj.first_name} {obj.last_name}"
        return obj.username

    @admin.display(description="Refuelings", ordering="refuelings_count")
    def refuelings_count(self, obj):
        return obj.refuelings_count
