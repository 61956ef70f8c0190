import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("catalog", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="CartItem",
            fields=[
                (
                    "id",
                    models.AutoField(
                        db_column="id_item", primary_key=True, serialize=False
                    ),
                ),
                ("cart_id", models.IntegerField(db_column="id_car")),
                (
                    "quantity",
                    models.PositiveIntegerField(db_column="cantidad"),
                ),
                (
                    "product",
                    models.ForeignKey(
                        db_column="id_objeto",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="cart_items",
                        to="catalog.product",
                    ),
                ),
            ],
            options={
                "db_table": "carrito_items",
                "indexes": [
                    models.Index(
                        fields=["cart_id", "product"],
                        name="carrito_items_car_obj_idx",
                    )
                ],
            },
        ),
    ]
