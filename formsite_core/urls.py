from django.contrib import admin
from django.urls import include, path

from . import health, views

urlpatterns = [
    path("admin/", admin.site.urls),
    path("health/", health.health_check, name="health"),
    path("ready/", health.readiness_check, name="ready"),
    path("_report/csp", views.csp_report, name="csp-report"),
    path("api/", include("form_responses.urls")),
]
