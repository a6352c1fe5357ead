import django.db.models.deletion
from django.db import migrations, models

import formsite_core.ids


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("accounts", "0001_initial"),
        ("formbuilder", "0001_initial"),
        ("form_responses", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="File",
            fields=[
                (
                    "id",
                    models.CharField(
                        default=formsite_core.ids.file_id,
                        editable=False,
                        max_length=40,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("name", models.CharField(max_length=255)),
                ("size", models.PositiveBigIntegerField(default=0)),
                (
                    "type",
                    models.CharField(default="application/octet-stream", max_length=255),
                ),
                ("encrypted", models.BooleanField(default=False)),
                ("encrypted_size", models.PositiveBigIntegerField(blank=True, null=True)),
                (
                    "encryption_key_hash",
                    models.CharField(blank=True, max_length=128, null=True),
                ),
                ("persistent", models.BooleanField(default=False)),
                ("public", models.BooleanField(default=False)),
                (
                    "expires_at",
                    models.DateTimeField(blank=True, db_index=True, null=True),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "account",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="files",
                        to="accounts.account",
                    ),
                ),
                (
                    "form",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="files",
                        to="formbuilder.form",
                    ),
                ),
                (
                    "response",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="files",
                        to="form_responses.response",
                    ),
                ),
            ],
            options={
                "db_table": "files",
                "ordering": ["-created_at"],
            },
        ),
    ]
