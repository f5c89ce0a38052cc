import logging
import time

from django.conf import settings

logger = logging.getLogger('django.request')

# admin assets and the favicon are never interesting
_QUIET_PREFIXES = ('/static/', '/favicon.ico')


class SlowRequestLoggingMiddleware:
    """Warn about API calls slower than SLOW_REQUEST_LOG_MS.

    Every response also carries its own duration in `X-Response-Time-Ms`
    so the dashboards can show it next to a stale list.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if not settings.SLOW_REQUEST_LOG_ENABLED or request.path.startswith(_QUIET_PREFIXES):
            return self.get_response(request)

        started = time.perf_counter()
        response = self.get_response(request)
        elapsed_ms = (time.perf_counter() - started) * 1000.0
        response['X-Response-Time-Ms'] = f'{elapsed_ms:.1f}'

        if elapsed_ms >= settings.SLOW_REQUEST_LOG_MS:
            user = getattr(request, 'user', None)
            authenticated = user is not None and user.is_authenticated
            logger.warning(
                'Slow request %s %s -> %s in %.0fms (user id=%s role=%s)',
                request.method,
                request.path,
                response.status_code,
                elapsed_ms,
                user.pk if authenticated else None,
                getattr(user, 'role', None) if authenticated else None,
            )
        return response
