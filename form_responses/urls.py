from django.urls import path

from . import views

app_name = "form_responses"

urlpatterns = [
    path("forms/<str:form_id>/submit/", views.SubmitResponseView.as_view(), name="submit"),
    path(
        "forms/<str:form_id>/responses/",
        views.FormResponsesView.as_view(),
        name="form-responses",
    ),
    path(
        "forms/<str:form_id>/responses/counts/",
        views.FormResponseCountsView.as_view(),
        name="form-response-counts",
    ),
    path(
        "forms/<str:form_id>/responses/bulk/",
        views.BulkResponsesView.as_view(),
        name="form-responses-bulk",
    ),
    path(
        "responses/<str:response_id>/",
        views.ResponseDetailView.as_view(),
        name="response-detail",
    ),
    path(
        "accounts/<str:account_id>/responses/",
        views.AccountResponsesView.as_view(),
        name="account-responses",
    ),
    path(
        "identities/<str:identity_id>/responses/",
        views.IdentityResponsesView.as_view(),
        name="identity-responses",
    ),
]
