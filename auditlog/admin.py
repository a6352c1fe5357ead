from django.contrib import admin

from .models import Event


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ("event", "account", "response_id", "user", "ip_address", "created_at")
    list_filter = ("event",)
    search_fields = ("response_id", "account__name")
    readonly_fields = [field.name for field in Event._meta.fields]
