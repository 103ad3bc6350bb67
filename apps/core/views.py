import structlog
from django.db import DatabaseError, connection
from django.http import JsonResponse
from django.shortcuts import render
from django.views.decorators.http import require_http_methods

logger = structlog.get_logger(__name__)


@require_http_methods(["GET"])
def landing(request):
    """Static entry page with a single link to the login route."""
    return render(request, "core/landing.html")


@require_http_methods(["GET"])
def healthz(request):
    """Liveness probe: answers 200 while the database accepts queries."""
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except DatabaseError as exc:
        logger.error("healthz.database_unavailable", error=str(exc))
        return JsonResponse({"status": "unhealthy", "database": "unavailable"}, status=503)
    return JsonResponse({"status": "healthy", "database": "connected"})
