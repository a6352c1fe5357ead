import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models

import formsite_core.ids


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("accounts", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Form",
            fields=[
                (
                    "id",
                    models.CharField(
                        default=formsite_core.ids.form_id,
                        editable=False,
                        max_length=40,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("name", models.CharField(max_length=200)),
                (
                    "steps",
                    models.JSONField(
                        blank=True,
                        default=list,
                        help_text="List of steps, each with a list of blocks",
                    ),
                ),
                (
                    "retention_days",
                    models.PositiveIntegerField(
                        blank=True,
                        help_text="Days to keep responses; empty keeps them",
                        null=True,
                    ),
                ),
                ("notification_emails", models.JSONField(blank=True, default=list)),
                ("locale", models.CharField(default="en-GB", max_length=20)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "account",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="forms",
                        to="accounts.account",
                    ),
                ),
                (
                    "users",
                    models.ManyToManyField(
                        blank=True,
                        related_name="formsite_forms",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "forms",
                "ordering": ["-created_at"],
            },
        ),
    ]
