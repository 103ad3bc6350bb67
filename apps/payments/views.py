import structlog
from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

logger = structlog.get_logger(__name__)

NOT_CONFIGURED_STATUS = 503


@csrf_exempt
@require_http_methods(["POST"])
def stripe_webhook(request):
    """
    Stripe webhook, disabled.

    No signature verification and no event parsing happen here: the endpoint
    answers 503 until a payment provider is configured. Failures on this
    path are reported as 400 with the exception message, which is only
    acceptable while the handler does nothing with the payload.
    """
    try:
        payload = request.body
        logger.warning("stripe_webhook.not_configured", payload_bytes=len(payload))
        return JsonResponse({"error": "Stripe not configured"}, status=NOT_CONFIGURED_STATUS)
    except Exception as exc:
        logger.error("stripe_webhook.error", error=str(exc))
        return JsonResponse({"error": f"Webhook Error: {exc}"}, status=400)
