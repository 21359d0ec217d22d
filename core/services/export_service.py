import logging
from datetime import datetime
from typing import List, Dict, Union

import polars as pl
from django.db.models import QuerySet
from django.http import HttpResponse

from core.models import Refueling


logger = logging.getLogger(__name__)

REFUELING_COLUMNS = ["created at", "user", "liters", "kilometers", "cost", "price per liter"]


class ExportService:
    """Сервис для экспорта заправок в CSV"""

    @staticmethod
    def _convert_to_dataframe(data: Union[QuerySet, List[Dict]], columns: List[str] = None) -> pl.DataFrame:
        """
        Конвертирует QuerySet заправок или список словарей в Polars DataFrame

        Args:
            data: QuerySet модели Refueling или список словарей
            columns: Колонки пустой таблицы

        Returns:
            Polars DataFrame
        """
        if isinstance(data, QuerySet):
            data = data.export_rows()

        if not data:
            return pl.DataFrame(schema={column: pl.Utf8 for column in columns or []})

        return pl.DataFrame(data)

    @staticmethod
    def build_filename(prefix: str, format_type: str = "csv") -> str:
        return f"{prefix}_export_{datetime.now().strftime('%Y%m%d_%H%M%S')}.{format_type}"

    @staticmethod
    def refuelings_to_csv(queryset: QuerySet) -> bytes:
        """CSV-байты для выборки заправок"""
        df = ExportService._convert_to_dataframe(queryset, REFUELING_COLUMNS)
        logger.debug("Exporting %s refuelings to CSV", df.height)
        return df.write_csv().encode("utf-8")

    @staticmethod
    def export_to_csv(csv_data: bytes, filename: str) -> HttpResponse:
        """
        Оборачивает CSV в ответ для скачивания

        Args:
            csv_data: Содержимое файла
            filename: Имя файла для скачивания

        Returns:
            HttpResponse с файлом CSV
        """
        response = HttpResponse(csv_data, content_type="text/csv; charset=utf-8")
        response["Content-Disposition"] = f'attachment; filename="{filename}"'
        response["Content-Length"] = len(csv_data)
        return response

    @staticmethod
    def export_refuelings_data(queryset: QuerySet = None) -> HttpResponse:
        """Экспорт заправок (по умолчанию - всех) в CSV-ответ"""
        if queryset is None:
            queryset = Refueling.objects.all()
        csv_data = ExportService.refuelings_to_csv(queryset)
        return ExportService.export_to_csv(csv_data, ExportService.build_filename("refuelings"))
