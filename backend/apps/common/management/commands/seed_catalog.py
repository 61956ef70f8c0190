from django.core.management.base import BaseCommand, CommandError
from django.db import transaction, connection
from django.core.management.color import no_style
from apps.catalog.models import Product, STATUS_AVAILABLE
from apps.carts.container import build_cart_service
from apps.carts.models import CartItem

PRODUCTS = [
    (
        1,
        "Mochila urbana 20L",
        "Mochila liviana con bolsillo acolchado para notebook de hasta 15 pulgadas.",
        45990,
        12,
        "https://picsum.photos/seed/mochila/400/300",
        STATUS_AVAILABLE,
    ),
    (
        2,
        "Polera algodón básica",
        "Polera de algodón peinado, corte recto.",
        9990,
        40,
        "https://picsum.photos/seed/polera/400/300",
        STATUS_AVAILABLE,
    ),
    (
        3,
        "Chaqueta cortaviento",
        "Chaqueta impermeable plegable para trekking.",
        39990,
        5,
        "https://picsum.photos/seed/chaqueta/400/300",
        STATUS_AVAILABLE,
    ),
    (
        4,
        "Audífonos inalámbricos",
        "Audífonos bluetooth con estuche de carga.",
        24990,
        0,
        None,
        "agotado",
    ),
    (
        5,
        "Termo acero 1L",
        "",
        15990,
        20,
        "https://picsum.photos/seed/termo/400/300",
        STATUS_AVAILABLE,
    ),
    (
        6,
        "Lámpara de escritorio",
        "Lámpara LED con brazo articulado.",
        18990,
        3,
        None,
        "reservado",
    ),
]

CART_DEMO_PRODUCTS = (1, 2)


class Command(BaseCommand):
    help = "Seed the demo catalog (objetos) and optionally a demo cart."

    def add_arguments(self, parser):
        parser.add_argument(
            "--flush",
            action="store_true",
            help="Delete cart rows and products before seeding",
        )
        parser.add_argument(
            "--cart-id",
            type=int,
            default=None,
            help="Also add one unit of the first demo products to this cart",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        cart_id = options.get("cart_id")
        if cart_id is not None and cart_id < 1:
            raise CommandError("--cart-id must be a positive integer")

        if options["flush"]:
            self.stdout.write("Flushing existing data...")
            CartItem.objects.all().delete()
            Product.objects.all().delete()

        self.stdout.write("Seeding products...")
        created = 0
        for pid, title, desc, price, stock, image, status in PRODUCTS:
            _, was_created = Product.objects.get_or_create(
                id=pid,
                defaults=dict(
                    title=title,
                    description=desc,
                    price=price,
                    stock=stock,
                    image=image,
                    status=status,
                ),
            )
            created += int(was_created)

        sql_list = connection.ops.sequence_reset_sql(no_style(), [Product, CartItem])
        if sql_list:
            with connection.cursor() as cursor:
                for sql in sql_list:
                    cursor.execute(sql)

        if cart_id is not None:
            self.stdout.write(f"Filling cart {cart_id}...")
            service = build_cart_service()
            for pid in CART_DEMO_PRODUCTS:
                service.add_item(cart_id, pid)

        self.stdout.write(
            self.style.SUCCESS(
                f"Catalog seeded: {created} new of {len(PRODUCTS)} products."
            )
        )
