from django.contrib import admin

from .models import Form


@admin.register(Form)
class FormAdmin(admin.ModelAdmin):
    list_display = ("name", "id", "account", "retention_days", "created_at")
    list_filter = ("locale",)
    search_fields = ("name", "id")
    filter_horizontal = ("users",)
    readonly_fields = ("id", "created_at", "updated_at")
