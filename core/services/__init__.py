from .refueling_service import RefuelingService, RefuelingResult
from .export_service import ExportService

__all__ = [
    'RefuelingService',
    'RefuelingResult',
    'ExportService',
]
