from django.contrib import admin

from .models import Note, Response


class NoteInline(admin.TabularInline):
    model = Note
    extra = 0
    readonly_fields = ("id", "user", "created_at")


@admin.register(Response)
class ResponseAdmin(admin.ModelAdmin):
    list_display = ("id", "form", "read", "flag", "spam", "deleted", "expires_at")
    list_filter = ("read", "flag", "spam", "deleted", "encrypted")
    search_fields = ("id", "identity_id")
    readonly_fields = ("id", "created_at", "updated_at", "deleted_at")
    inlines = [NoteInline]
