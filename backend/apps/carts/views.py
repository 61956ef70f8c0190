from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse

from apps.api.exceptions import InvalidArgument
from apps.api.schemas import ErrorResponseSerializer, OkResponseSerializer
from apps.api.utils import ok_response
from apps.api.validation import cart_id_for, parse_id
from apps.common import get_logger
from .container import build_cart_service
from .serializers import CartAddSerializer, CartLineSerializer, CartQuantitySerializer

logger = get_logger(__name__).bind(component="carts", layer="view")

CART_HEADER_PARAMETER = OpenApiParameter(
    name="X-Cart-Id",
    description="Cart to operate on; the configured default cart when omitted",
    required=False,
    type=int,
    location=OpenApiParameter.HEADER,
)


@extend_schema(tags=["Cart"], parameters=[CART_HEADER_PARAMETER])
class CartView(APIView):
    uses_cart = True
    service = build_cart_service()
    log = logger.bind(view="CartView")

    @extend_schema(
        summary="List cart items",
        responses={
            200: CartLineSerializer(many=True),
            500: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request):
        cart_id = cart_id_for(request)
        lines = self.service.list_items(cart_id)
        return Response(CartLineSerializer(lines, many=True).data)

    @extend_schema(
        summary="Add one unit of a product",
        request=CartAddSerializer,
        responses={
            201: OkResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            415: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
            500: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        cart_id = cart_id_for(request)
        serializer = CartAddSerializer(data=request.data)
        if not serializer.is_valid():
            self.log.info("Rejected add to cart", cart_id=cart_id, errors=serializer.errors)
            raise InvalidArgument("Invalid id_objeto", details=serializer.errors)
        product_id = serializer.validated_data["id_objeto"]
        self.service.add_item(cart_id, product_id)
        return ok_response(status.HTTP_201_CREATED)

    @extend_schema(
        summary="Empty the cart",
        responses={204: None, 500: OpenApiResponse(response=ErrorResponseSerializer)},
    )
    def delete(self, request):
        cart_id = cart_id_for(request)
        self.service.clear(cart_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(
    tags=["Cart"],
    parameters=[
        CART_HEADER_PARAMETER,
        OpenApiParameter("product_id", int, OpenApiParameter.PATH),
    ],
)
class CartItemView(APIView):
    uses_cart = True
    service = build_cart_service()
    log = logger.bind(view="CartItemView")

    @extend_schema(
        summary="Set the quantity of a product",
        description="qty 0 removes the product; otherwise the quantity is overwritten.",
        request=CartQuantitySerializer,
        responses={
            200: OkResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            415: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
            500: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def patch(self, request, product_id):
        cart_id = cart_id_for(request)
        product_id = parse_id(product_id, "id")
        serializer = CartQuantitySerializer(data=request.data)
        if not serializer.is_valid():
            self.log.info(
                "Rejected quantity update",
                cart_id=cart_id,
                product_id=product_id,
                errors=serializer.errors,
            )
            raise InvalidArgument("Invalid id or qty", details=serializer.errors)
        self.service.set_quantity(cart_id, product_id, serializer.validated_data["qty"])
        return ok_response()

    @extend_schema(
        summary="Remove a product from the cart",
        responses={
            204: None,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            500: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def delete(self, request, product_id):
        cart_id = cart_id_for(request)
        product_id = parse_id(product_id, "id")
        self.service.remove_item(cart_id, product_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
