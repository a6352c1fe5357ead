from django.contrib import admin

from .models import File


@admin.register(File)
class FileAdmin(admin.ModelAdmin):
    list_display = ("name", "id", "account", "size", "persistent", "expires_at")
    list_filter = ("persistent", "public", "encrypted")
    search_fields = ("name", "id")
    readonly_fields = ("id", "created_at", "updated_at")
