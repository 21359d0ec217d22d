from .refueling_admin import RefuelingAdmin
from .user_admin import UserAdmin
from .systemlog_admin import SystemLogAdmin


__all__ = [
    'RefuelingAdmin',
    'UserAdmin',
    'SystemLogAdmin',
]
