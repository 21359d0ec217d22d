from .user import User
from .refueling import Refueling
from .system_log import SystemLog


__all__ = ["User", "Refueling", "SystemLog"]
