from django.http import JsonResponse
from django.db import connections
from django.db.utils import OperationalError
import time
from .logger import get_logger

logger = get_logger(__name__).bind(component='common', layer='health')

PUBLIC_ENDPOINTS = [
    "/api/cart",
    "/api/cart/items/:id",
    "/api/checkout",
    "/api/products",
    "/api/products/:id",
]


def _db_check(alias='default'):
    started = time.time()
    try:
        conn = connections[alias]
        with conn.cursor() as cursor:
            cursor.execute('SELECT 1')
        latency = round((time.time() - started) * 1000, 2)
        logger.debug('Database health check succeeded', alias=alias, latency_ms=latency)
        return {'status': 'ok', 'latency_ms': latency}
    except OperationalError as e:
        # Expected operational DB issues (connection refused, etc.)
        logger.warning('Database health check encountered operational error', alias=alias, error=str(e))
        return {'status': 'fail', 'error': str(e)}
    except Exception as e:  # driver bugs and mocked failures still yield a probe result
        logger.error('Database health check failed unexpectedly', alias=alias, error=str(e), exception=e.__class__.__name__)
        return {'status': 'fail', 'error': str(e), 'exception': e.__class__.__name__}


def service_index(request):
    """Landing payload listing the public API endpoints."""
    return JsonResponse(
        {
            'ok': True,
            'message': 'Backend carrito activo',
            'docs': PUBLIC_ENDPOINTS,
        }
    )


def live_health(request):
    """Liveness probe: process is up and can service requests."""
    logger.debug('Liveness probe served')
    return JsonResponse({'status': 'alive'})


def ready_health(request):
    """Readiness probe: verifies the database answers a round trip."""
    checks = {'database': _db_check()}
    failing = [name for name, r in checks.items() if r.get('status') == 'fail']
    overall_status = 'ok' if not failing else 'degraded'
    http_status = 200 if not failing else 503
    payload = {
        'status': overall_status,
        'checks': checks,
    }
    logger.info('Readiness probe evaluated', status=overall_status, failing_components=failing)
    return JsonResponse(payload, status=http_status)
