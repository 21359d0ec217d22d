from pathlib import Path

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

from core.models import Refueling
from core.services.export_service import ExportService
from core.utils.logging import log_action


class Command(BaseCommand):
    help = 'Экспорт заправок в CSV'

    def add_arguments(self, parser):
        parser.add_argument(
            '--user',
            type=str,
            help='Имя пользователя; без параметра выгружаются все заправки'
        )
        parser.add_argument(
            '--output-dir',
            type=str,
            help='Директория для сохранения файла (по умолчанию - settings.EXPORT_DIR)'
        )

    def handle(self, *args, **options):
        output_dir = Path(options['output_dir'] or settings.EXPORT_DIR)
        queryset = Refueling.objects.all()
        prefix = "refuelings"

        username = options['user']
        if username:
            User = get_user_model()
            try:
                user = User.objects.get(username=username)
            except User.DoesNotExist:
                raise CommandError(f"User '{username}' does not exist")
            queryset = queryset.owned_by(user)
            prefix = f"refuelings_{username}"

        self.stdout.write("Exporting refuelings...")
        self.stdout.write(f"   User: {username or 'all'}")
        self.stdout.write(f"   Directory: {output_dir}")

        output_dir.mkdir(parents=True, exist_ok=True)
        filepath = output_dir / ExportService.build_filename(prefix)
        filepath.write_bytes(ExportService.refuelings_to_csv(queryset))

        log_action(None, "export", f"Command export: {queryset.count()} refuelings to {filepath}")
        self.stdout.write(self.style.SUCCESS(f"Saved: {filepath}"))
