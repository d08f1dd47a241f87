"""
Repository base class.

A repository wraps one model's manager behind a small, explicit interface
(``insert``, ``find_by_id``, ``update``, ``delete``, ``find_all``) so services
compose persistence calls instead of reaching into ``Model.objects`` directly.
Relation loading is opt-in per call through ``with_related``.
"""

import logging
from typing import Any, Dict, Generic, List, Sequence, Type, TypeVar

from django.core.exceptions import ObjectDoesNotExist
from django.db import models

from marketplace.exceptions import NotFoundException


M = TypeVar("M", bound=models.Model)


class Repository(Generic[M]):
    model: Type[M]
    select_related: Sequence[str] = ()
    prefetch_related: Sequence[Any] = ()

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__module__ + "." + self.__class__.__name__)

    def get_queryset(self, with_related: bool = False) -> models.QuerySet:
        queryset = self.model.objects.all()
        if with_related:
            if self.select_related:
                queryset = queryset.select_related(*self.select_related)
            if self.prefetch_related:
                queryset = queryset.prefetch_related(*self.prefetch_related)
        return queryset

    def find_all(self, with_related: bool = False) -> List[M]:
        return list(self.get_queryset(with_related))

    def find_by_id(self, id: Any, with_related: bool = False) -> M:
        try:
            return self.get_queryset(with_related).get(pk=id)
        except self.model.DoesNotExist:
            raise NotFoundException(id)

    def insert(self, data: Dict[str, Any]) -> M:
        instance = self.model.objects.create(**data)
        self.logger.debug(f"Inserted {self.model.__name__} id={instance.pk}")
        return instance

    def update(self, id: Any, data: Dict[str, Any]) -> M:
        instance = self.find_by_id(id)
        for field, value in data.items():
            setattr(instance, field, value)
        instance.save()
        self.logger.debug(f"Updated {self.model.__name__} id={id} fields={sorted(data)}")
        return instance

    def delete(self, id: Any) -> None:
        instance = self.find_by_id(id)
        instance.delete()
        self.logger.debug(f"Deleted {self.model.__name__} id={id}")


def get_related_or_none(instance: models.Model, name: str):
    """Return a reverse one-to-one relation or ``None`` when no row exists."""
    try:
        return getattr(instance, name)
    except ObjectDoesNotExist:
        return None
