from django.db import models
from django.conf import settings


class SystemLog(models.Model):
    ACTION_CHOICES = [
        ("login", "Log in"),
        ("logout", "Log out"),
        ("add_refueling", "Refueling added"),
        ("update_refueling", "Refueling updated"),
        ("delete_refueling", "Refueling deleted"),
        ("access_denied", "Access denied"),
        ("export", "Export"),
        ("error", "Error"),
        ("info", "Info"),
    ]

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True, verbose_name="User"
    )
    action = models.CharField(max_length=50, choices=ACTION_CHOICES, verbose_name="Action")
    details = models.TextField(blank=True, verbose_name="Details")
    ip_address = models.GenericIPAddressField(null=True, blank=True, verbose_name="IP address")
    created_at = models.DateTimeField(auto_now_add=True, verbose_name="Date and time")

    class Meta:
        db_table = "system_logs"
        verbose_name = "System log"
        verbose_name_plural = "System logs"
        ordering = ["-created_at"]

    def __str__(self):
        if self.user:
            return f"[{self.created_at:%d.%m %H:%M}] {self.user.username} - {self.get_action_display()}"
        return f"[{self.created_at:%d.%m %H:%M}] {self.get_action_display()}"
