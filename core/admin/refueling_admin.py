from django.contrib import admin
from django.utils.html import format_html

from core.admin_actions import export_action
from core.models import Refueling


@admin.register(Refueling)
class RefuelingAdmin(admin.ModelAdmin):
    list_display = (
        "id", "created_at_formatted", "owner_display",
        "liters", "kilometers", "cost", "price_per_liter", "consumption_display",
    )
    list_filter = ("created_at", "user")
    search_fields = ("user__username", "user__first_name", "user__last_name")
    date_hierarchy = "created_at"
    readonly_fields = ("owner_display", "price_per_liter", "created_at", "updated_at")
    list_display_links = ("id", "created_at_formatted")
    list_per_page = 30

    actions = ["export_to_csv"]

    fieldsets = (
        ("Refueling", {
            "fields": (
                "owner_display",
                ("liters", "kilometers", "cost"),
                "price_per_liter",
            )
        }),
        ("System information", {
            "fields": ("created_at", "updated_at"),
            "classes": ("collapse",)
        }),
    )

    # Оптимизация запросов
    def get_queryset(self, request):
        return super().get_queryset(request).select_related("user")

    def save_model(self, request, obj, form, change):
        # Владелец не редактируется; новая запись из админки принадлежит админу
        if not change and not obj.user_id:
            obj.user = request.user
        super().save_model(request, obj, form, change)

    @admin.display(description="Owner", ordering="user__username")
    def owner_display(self, obj):
        if obj.user_id:
            return format_html(
                '<a href="{}?id__exact={}">{}</a>',
                "/admin/core/user/",
                obj.user_id,
                obj.user.get_full_name()
            )
        return "-"

    @admin.display(description="Created at", ordering="created_at")
    def created_at_formatted(self, obj):
        return obj.created_at.strftime("%d.%m.%Y %H:%M")

    @admin.display(description="l/100 km")
    def consumption_display(self, obj):
        return obj.consumption if obj.consumption is not None else "-"

    @export_action(description="Export selected to CSV")
    def export_to_csv(self, request, queryset):
        pass
