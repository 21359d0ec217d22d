from django.contrib import admin
from django.utils.html import format_html

from core.models import SystemLog


ACTION_COLORS = {
    "access_denied": "red",
    "error": "red",
    "delete_refueling": "orange",
    "add_refueling": "green",
    "update_refueling": "green",
}


@admin.register(SystemLog)
class SystemLogAdmin(admin.ModelAdmin):
    list_display = ("created_at", "user", "action_display", "ip_address", "short_details")
    list_filter = ("action", "created_at", "user")
    search_fields = ("user__username", "details", "ip_address")
    readonly_fields = ("created_at", "user", "action", "details", "ip_address")
    list_per_page = 50
    date_hierarchy = "created_at"

    @admin.display(description="Action", ordering="action")
    def action_display(self, obj):
        return format_html(
            '<span style="color: {};">{}</span>',
            ACTION_COLORS.get(obj.action, "inherit"),
            obj.get_action_display()
        )

    @admin.display(description="Details")
    def short_details(self, obj):
        return (obj.details[:70] + "...") if len(obj.details) > 70 else obj.details

    # Журнал аудита только для чтения; чистить его может лишь суперпользователь
    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return request.user.is_superuser

    def get_queryset(self, request):
        return super().get_queryset(request).select_related("user")
