from typing import Generic, Iterable, Optional, Type, TypeVar

from django.db import models

T = TypeVar("T", bound=models.Model)


class GenericRepository(Generic[T]):
    """Thin ORM access layer shared by the app repositories."""

    def __init__(self, model: Type[T]):
        self.model = model

    def get(self, **filters) -> Optional[T]:
        return self.model.objects.filter(**filters).first()

    def list(self, **filters) -> Iterable[T]:
        return self.model.objects.filter(**filters)

    def create(self, **data) -> T:
        return self.model.objects.create(**data)

    def lock(self, **filters) -> Optional[T]:
        """Fetch one row with ``SELECT ... FOR UPDATE``. Call inside ``transaction.atomic``."""
        return self.model.objects.select_for_update().filter(**filters).first()

    def delete_where(self, **filters) -> int:
        deleted, _ = self.model.objects.filter(**filters).delete()
        return deleted
