from django.urls import re_path
from .views import CartView, CartItemView

urlpatterns = [
    re_path(r"^cart/?$", CartView.as_view(), name="api-cart"),
    re_path(
        r"^cart/items/(?P<product_id>[^/]+)/?$",
        CartItemView.as_view(),
        name="api-cart-item",
    ),
]
