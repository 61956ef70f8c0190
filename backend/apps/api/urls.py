from django.urls import path, include

urlpatterns = [
    path("", include("apps.catalog.urls")),
    path("", include("apps.carts.urls")),
    path("", include("apps.checkout.urls")),
]
