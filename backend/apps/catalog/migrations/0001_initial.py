from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                (
                    "id",
                    models.AutoField(
                        db_column="id_objeto", primary_key=True, serialize=False
                    ),
                ),
                (
                    "title",
                    models.CharField(
                        blank=True, db_column="titulo", default="", max_length=255
                    ),
                ),
                (
                    "description",
                    models.TextField(blank=True, db_column="descripcion", default=""),
                ),
                (
                    "price",
                    models.DecimalField(
                        db_column="precio", decimal_places=2, default=0, max_digits=10
                    ),
                ),
                ("stock", models.IntegerField(db_column="stock", default=0)),
                (
                    "image",
                    models.TextField(blank=True, db_column="imagen", null=True),
                ),
                (
                    "status",
                    models.CharField(
                        db_column="estado", default="disponible", max_length=32
                    ),
                ),
            ],
            options={
                "db_table": "objetos",
                "ordering": ["id"],
                "indexes": [
                    models.Index(fields=["status"], name="objetos_estado_idx")
                ],
            },
        ),
    ]
