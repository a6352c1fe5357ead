import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models

import formsite_core.ids


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("accounts", "0001_initial"),
        ("formbuilder", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Response",
            fields=[
                (
                    "id",
                    models.CharField(
                        default=formsite_core.ids.response_id,
                        editable=False,
                        max_length=40,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "identity_id",
                    models.CharField(blank=True, db_index=True, max_length=64, null=True),
                ),
                ("context", models.JSONField(blank=True, default=dict)),
                ("data", models.JSONField(blank=True, null=True)),
                ("data_encrypted", models.TextField(blank=True, null=True)),
                ("encrypted", models.BooleanField(default=False)),
                (
                    "encryption_key_hash",
                    models.CharField(blank=True, max_length=128, null=True),
                ),
                ("error", models.TextField(blank=True, null=True)),
                ("read", models.BooleanField(default=False)),
                ("flag", models.BooleanField(default=False, help_text="Starred by a user")),
                ("spam", models.BooleanField(default=False)),
                ("deleted", models.BooleanField(default=False)),
                ("labels", models.JSONField(blank=True, default=list)),
                ("logs", models.JSONField(blank=True, default=list)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(blank=True, null=True)),
                ("deleted_at", models.DateTimeField(blank=True, null=True)),
                (
                    "expires_at",
                    models.DateTimeField(blank=True, db_index=True, null=True),
                ),
                (
                    "account",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="responses",
                        to="accounts.account",
                    ),
                ),
                (
                    "form",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="responses",
                        to="formbuilder.form",
                    ),
                ),
            ],
            options={
                "db_table": "responses",
                "ordering": ["-id"],
                "indexes": [
                    models.Index(
                        fields=["form", "deleted", "spam"],
                        name="responses_form_del_spam_idx",
                    ),
                    models.Index(
                        fields=["account", "deleted"], name="responses_account_del_idx",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Note",
            fields=[
                (
                    "id",
                    models.CharField(
                        default=formsite_core.ids.note_id,
                        editable=False,
                        max_length=40,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("text", models.TextField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "response",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="notes",
                        to="form_responses.response",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "notes",
                "ordering": ["id"],
            },
        ),
    ]
