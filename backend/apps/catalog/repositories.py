from apps.common.repository import GenericRepository
from .models import Product


class ProductRepository(GenericRepository[Product]):
    def __init__(self):
        super().__init__(Product)

    def list_by_status(self, status: str):
        return self.model.objects.filter(status=status).order_by("id")
