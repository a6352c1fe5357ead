from django.contrib import admin

from .models import Account


@admin.register(Account)
class AccountAdmin(admin.ModelAdmin):
    list_display = ("name", "id", "smtp_sender", "has_smtp", "created_at")
    search_fields = ("name", "id")
    filter_horizontal = ("users",)
    readonly_fields = ("id", "created_at", "updated_at")
