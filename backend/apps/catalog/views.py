from rest_framework.views import APIView
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse

from apps.api.schemas import ErrorResponseSerializer
from apps.api.validation import parse_id
from apps.common import get_logger
from .container import build_product_service
from .models import STATUS_AVAILABLE
from .serializers import ProductReadSerializer, ProductDetailSerializer

logger = get_logger(__name__).bind(component="catalog", layer="view")


@extend_schema(tags=["Catalog"])
class ProductListView(APIView):
    service = build_product_service()
    log = logger.bind(view="ProductListView")

    @extend_schema(
        operation_id="products_list",
        summary="List products",
        parameters=[
            OpenApiParameter(
                name="estado",
                description="Availability status filter",
                required=False,
                type=str,
                default=STATUS_AVAILABLE,
            )
        ],
        responses={
            200: ProductReadSerializer(many=True),
            500: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request):
        estado = request.query_params.get("estado") or STATUS_AVAILABLE
        self.log.debug("Handling product list request", estado=estado)
        products = self.service.list_products(estado)
        return Response(ProductReadSerializer(products, many=True).data)


@extend_schema(tags=["Catalog"])
class ProductDetailView(APIView):
    service = build_product_service()
    log = logger.bind(view="ProductDetailView")

    @extend_schema(
        operation_id="products_retrieve",
        summary="Get product",
        parameters=[OpenApiParameter("product_id", int, OpenApiParameter.PATH)],
        responses={
            200: ProductDetailSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, product_id):
        product_id = parse_id(product_id, "id")
        self.log.debug("Fetching product detail", product_id=product_id)
        dto = self.service.get_product(product_id)
        return Response(ProductDetailSerializer(dto).data)
