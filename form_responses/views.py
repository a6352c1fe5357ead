"""API views for form responses."""

from kombu.exceptions import OperationalError
from rest_framework import exceptions, status
from rest_framework.authentication import SessionAuthentication
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.services import accounts_service
from formbuilder.models import Form
from formsite_core.utils.logging import ContextLogger

from . import models
from .enums import BulkAction
from .exceptions import FormNotFoundError, ResponseNotFoundError, ValidationError
from .permissions import IsAccountMember
from .serializers import (
    AccountResponseListQuerySerializer,
    BulkActionSerializer,
    PaginationSerializer,
    ResponseListQuerySerializer,
    ResponseSerializer,
    ResponseUpdateSerializer,
    SubmitResponseSerializer,
)
from .services import ResponsesService
from .tasks import send_new_response_notification

logger = ContextLogger(__name__)


class ResponsesAPIView(APIView):
    """Base view translating service errors into HTTP errors."""

    authentication_classes = [SessionAuthentication]
    permission_classes = [IsAccountMember]

    def handle_exception(self, exc):
        if isinstance(exc, (ResponseNotFoundError, FormNotFoundError)):
            exc = exceptions.NotFound(str(exc))
        elif isinstance(exc, ValidationError):
            exc = exceptions.ValidationError({"detail": str(exc)})
        return super().handle_exception(exc)

    def get_service(self):
        return ResponsesService(self.request)

    def get_form(self, form_id, check_permissions=True):
        form = Form.objects.select_related("account").filter(id=form_id).first()
        if form is None:
            raise FormNotFoundError(f"Form with ID {form_id} not found")
        if check_permissions:
            self.check_object_permissions(self.request, form.account)
        return form

    def validate_query(self, serializer_class):
        serializer = serializer_class(data=self.request.query_params)
        serializer.is_valid(raise_exception=True)
        return serializer.validated_data


class SubmitResponseView(ResponsesAPIView):
    """Public endpoint receiving form submissions."""

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request, form_id):
        form = self.get_form(form_id, check_permissions=False)
        serializer = SubmitResponseSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        payload = serializer.validated_data

        service = self.get_service()
        response = service.create_response(
            {
                **payload,
                "account_id": form.account_id,
                "form_id": form.id,
                "spam": False,
            },
            retention=form.retention_days,
        )
        # Blob moves are not transactional, so files link after the row is stored
        service.link_files(form, response.id, response.data)

        if form.notification_emails:
            self.queue_notification(response)

        return Response({"id": response.id}, status=status.HTTP_201_CREATED)

    def queue_notification(self, response):
        try:
            send_new_response_notification.delay(response.id)
        except OperationalError as e:
            logger.error(
                "Cannot queue new response notification",
                extra_context={"response_id": response.id, "error": str(e)},
            )


class FormResponsesView(ResponsesAPIView):
    def get(self, request, form_id):
        form = self.get_form(form_id)
        query = self.validate_query(ResponseListQuerySerializer)
        responses = self.get_service().list_responses(
            form.id,
            response_filter=query["filter"],
            limit=query["limit"],
            offset=query["offset"],
        )
        return Response(
            {"responses": responses, "limit": query["limit"], "offset": query["offset"]},
        )


class FormResponseCountsView(ResponsesAPIView):
    def get(self, request, form_id):
        form = self.get_form(form_id)
        return Response(self.get_service().count_responses(form.id))


class BulkResponsesView(ResponsesAPIView):
    """Delete, restore or flag several responses of one form."""

    def post(self, request, form_id):
        form = self.get_form(form_id)
        serializer = BulkActionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        action = serializer.validated_data["action"]

        # Ids of other forms are ignored
        responses = list(
            models.Response.objects.select_related("form__account").filter(
                form=form, id__in=serializer.validated_data["ids"],
            ),
        )
        ids = [response.id for response in responses]
        service = self.get_service()

        if action == BulkAction.DELETE:
            updated = service.delete_responses(ids)
            for response in responses:
                service.track_delete_event(response)
        elif action == BulkAction.UNDELETE:
            updated = service.undelete_responses(ids)
            for response in responses:
                service.track_undelete_event(response)
        else:
            updated = service.flag_responses(
                ids,
                flag=serializer.validated_data.get("flag"),
                read=serializer.validated_data.get("read"),
                spam=serializer.validated_data.get("spam"),
            )

        return Response({"updated": updated})


class ResponseDetailView(ResponsesAPIView):
    def get_response(self, response_id):
        response = self.get_service().get_response(response_id)
        self.check_object_permissions(self.request, response.form.account)
        return response

    def get(self, request, response_id):
        service = self.get_service()
        response = self.get_response(response_id)
        service.track_access_event(response)
        return Response(ResponseSerializer(service.find_response_for_api(response.id)).data)

    def patch(self, request, response_id):
        service = self.get_service()
        response = self.get_response(response_id)
        serializer = ResponseUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        old_data = response.data
        updated = service.update_response(response.id, serializer.validated_data)
        service.track_update_event(response, old_data, updated.data)
        return Response(ResponseSerializer(service.find_response_for_api(response.id)).data)


class AccountResponsesView(ResponsesAPIView):
    def get(self, request, account_id):
        account = accounts_service.find_account(account_id)
        if account is None:
            raise exceptions.NotFound(f"Account with ID {account_id} not found")
        self.check_object_permissions(request, account)
        query = self.validate_query(AccountResponseListQuerySerializer)
        service = self.get_service()
        responses = service.list_responses_for_account(
            account.id,
            limit=query["limit"],
            offset=query["offset"],
            order_by=query["order_by"],
            order_dir=query["order_dir"],
        )
        return Response(
            {
                "responses": responses,
                "total": service.count_responses_for_account(account.id),
                "limit": query["limit"],
                "offset": query["offset"],
            },
        )


class IdentityResponsesView(ResponsesAPIView):
    """Responses of one identity across the accounts the user belongs to."""

    def get(self, request, identity_id):
        query = self.validate_query(PaginationSerializer)
        account_ids = None
        if not (request.user.is_staff or request.user.is_superuser):
            account_ids = request.user.formsite_accounts.values_list("id", flat=True)
        responses = self.get_service().list_responses_for_identity(
            identity_id,
            limit=query["limit"],
            offset=query["offset"],
            account_ids=account_ids,
        )
        return Response(
            {"responses": responses, "limit": query["limit"], "offset": query["offset"]},
        )
