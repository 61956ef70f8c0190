from django.utils.deprecation import MiddlewareMixin
from rest_framework.renderers import JSONRenderer
from apps.api.validation import validate_request_context
from apps.common import get_logger

logger = get_logger(__name__).bind(component='api', layer='middleware')


class RequestValidationMiddleware(MiddlewareMixin):
    """
    Runs request-context checks (cart resolution) before the view layer.
    """

    def process_view(self, request, view_func, view_args, view_kwargs):
        view_class = getattr(view_func, 'view_class', None)
        if not view_class:
            return None
        view_name = getattr(view_class, '__name__', str(view_class))
        logger.debug('Validating request context', view=view_name, method=getattr(request, 'method', None))
        response = validate_request_context(request, view_class, view_kwargs)
        if response is None:
            return None
        logger.info(
            'Request blocked by validation',
            view=view_name,
            method=getattr(request, 'method', None),
            status=getattr(response, 'status_code', None),
        )
        # Outside the DRF view the Response has no negotiated renderer yet.
        response.accepted_renderer = JSONRenderer()
        response.accepted_media_type = 'application/json'
        response.renderer_context = {}
        return response.render()
