from rest_framework.views import APIView
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiResponse

from apps.api.exceptions import InvalidArgument
from apps.api.schemas import ErrorResponseSerializer
from apps.api.validation import cart_id_for
from apps.common import get_logger
from .container import build_checkout_service
from .serializers import CheckoutRequestSerializer, CheckoutResultSerializer

logger = get_logger(__name__).bind(component="checkout", layer="view")


@extend_schema(tags=["Checkout"])
class CheckoutView(APIView):
    uses_cart = True
    service = build_checkout_service()
    log = logger.bind(view="CheckoutView")

    @extend_schema(
        summary="Check out a cart",
        description=(
            "Runs the checkout stored procedure for cartId (defaults to the request's cart). "
            "Stock validation, order creation and cart clearing happen inside the procedure."
        ),
        request=CheckoutRequestSerializer,
        responses={
            200: CheckoutResultSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            415: OpenApiResponse(response=ErrorResponseSerializer),
            500: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = CheckoutRequestSerializer(data=request.data or {})
        if not serializer.is_valid():
            raise InvalidArgument("Invalid cartId", details=serializer.errors)
        cart_id = serializer.validated_data.get("cartId") or cart_id_for(request)
        self.log.info("Checkout via API", cart_id=cart_id)
        result = self.service.checkout(cart_id)
        return Response(CheckoutResultSerializer(result).data)
