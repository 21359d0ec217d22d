import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from django.db import transaction

from core.exceptions import RefuelingNotFound
from core.forms import RefuelingForm
from core.models import Refueling


logger = logging.getLogger(__name__)

CREATED_MESSAGE = "Refueling was created"
UPDATED_MESSAGE = "Refueling was updated"
DELETED_MESSAGE = "Refueling was deleted"


@dataclass
class RefuelingResult:
    """Итог операции над заправкой: запись и сообщение либо форма с ошибками."""

    refueling: Optional[Refueling] = None
    form: Optional[RefuelingForm] = None
    message: str = ""
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class RefuelingService:
    """
    Бизнес-логика работы с заправками.

    Текущий пользователь всегда передаётся явно. Все операции видят
    только записи этого пользователя; чужая запись неотличима от
    несуществующей и даёт RefuelingNotFound.
    """

    @staticmethod
    def list(user):
        """Заправки пользователя, сначала свежие"""
        return Refueling.objects.owned_by(user).newest_first()

    @staticmethod
    def get(user, refueling_id) -> Refueling:
        """Заправка пользователя по id"""
        refueling = Refueling.objects.owned_by(user).filter(pk=refueling_id).first()
        if refueling is None:
            logger.warning(
                "Refueling %s not found for user %s", refueling_id, getattr(user, "pk", None)
            )
            raise RefuelingNotFound()
        return refueling

    @staticmethod
    def build_form(user, data: Optional[Dict[str, Any]] = None, refueling: Optional[Refueling] = None):
        """Форма для новой (владелец - user) или существующей записи"""
        instance = refueling if refueling is not None else Refueling(user=user)
        return RefuelingForm(data=data, instance=instance)

    @staticmethod
    @transaction.atomic
    def create(user, data: Dict[str, Any]) -> RefuelingResult:
        """Создание заправки от имени пользователя"""
        form = RefuelingService.build_form(user, data)
        if not form.is_valid():
            return RefuelingResult(form=form, errors=form.full_messages)

        refueling = form.save()
        logger.info("Refueling %s created by user %s", refueling.pk, user.pk)
        return RefuelingResult(refueling=refueling, form=form, message=CREATED_MESSAGE)

    @staticmethod
    @transaction.atomic
    def update(user, refueling_id, data: Dict[str, Any]) -> RefuelingResult:
        """Изменение своей заправки; при ошибках запись в БД не меняется"""
        refueling = RefuelingService.get(user, refueling_id)
        form = RefuelingService.build_form(user, data, refueling)
        if not form.is_valid():
            # ModelForm уже переписал атрибуты instance, показываем их в форме,
            # а в БД ничего не сохраняем
            return RefuelingResult(form=form, errors=form.full_messages)

        refueling = form.save()
        logger.info("Refueling %s updated by user %s", refueling.pk, user.pk)
        return RefuelingResult(refueling=refueling, form=form, message=UPDATED_MESSAGE)

    @staticmethod
    @transaction.atomic
    def destroy(user, refueling_id) -> RefuelingResult:
        """Удаление своей заправки"""
        refueling = RefuelingService.get(user, refueling_id)
        pk = refueling.pk
        refueling.delete()
        refueling.pk = pk
        logger.info("Refueling %s deleted by user %s", pk, user.pk)
        return RefuelingResult(refueling=refueling, message=DELETED_MESSAGE)

    @staticmethod
    def statistics(user) -> Dict[str, Any]:
        """Сводка по заправкам пользователя"""
        return Refueling.objects.owned_by(user).statistics()
