"""Project-level views that do not belong to a single app."""

import json

from django.http import HttpResponse, HttpResponseBadRequest
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from formsite_core.utils.logging import ContextLogger

logger = ContextLogger(__name__)

MAX_REPORT_SIZE = 64 * 1024


@csrf_exempt
@require_POST
def csp_report(request):
    """Receive Content-Security-Policy violation reports from browsers."""
    if len(request.body) > MAX_REPORT_SIZE:
        return HttpResponseBadRequest("Report too large")
    try:
        payload = json.loads(request.body or b"{}")
    except (TypeError, ValueError):
        return HttpResponseBadRequest("Invalid report")

    report = payload.get("csp-report", payload) if isinstance(payload, dict) else {}
    if not isinstance(report, dict):
        return HttpResponseBadRequest("Invalid report")
    logger.warning(
        "CSP violation reported",
        extra_context={
            "blocked_uri": report.get("blocked-uri"),
            "document_uri": report.get("document-uri"),
            "violated_directive": report.get("violated-directive"),
        },
    )
    return HttpResponse(status=204)
