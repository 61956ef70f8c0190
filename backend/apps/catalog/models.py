from django.db import models

STATUS_AVAILABLE = "disponible"


class Product(models.Model):
    """Catalog entry stored in the shared ``objetos`` table."""

    id = models.AutoField(primary_key=True, db_column="id_objeto")
    title = models.CharField(max_length=255, blank=True, default="", db_column="titulo")
    description = models.TextField(blank=True, default="", db_column="descripcion")
    price = models.DecimalField(
        max_digits=10, decimal_places=2, default=0, db_column="precio"
    )
    stock = models.IntegerField(default=0, db_column="stock")
    image = models.TextField(null=True, blank=True, db_column="imagen")
    status = models.CharField(
        max_length=32, default=STATUS_AVAILABLE, db_column="estado"
    )

    class Meta:
        db_table = "objetos"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["status"], name="objetos_estado_idx"),
        ]

    def __str__(self):
        return self.title or f"Producto {self.id}"
