import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("accounts", "0001_initial"),
        ("server_groups", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="ActivationKey",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("key", models.CharField(max_length=64, unique=True)),
                ("description", models.CharField(blank=True, default="", max_length=255)),
                (
                    "usage_limit",
                    models.PositiveIntegerField(
                        blank=True, help_text="Maximum number of registrations", null=True
                    ),
                ),
                ("disabled", models.BooleanField(db_index=True, default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "organization",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="activation_keys",
                        to="accounts.organization",
                    ),
                ),
                (
                    "server_groups",
                    models.ManyToManyField(
                        blank=True,
                        related_name="activation_keys",
                        to="server_groups.servergroup",
                    ),
                ),
            ],
            options={
                "db_table": "activation_keys",
                "ordering": ["key"],
                "indexes": [
                    models.Index(fields=["organization", "disabled"], name="actkey_org_disabled_idx"),
                ],
            },
        ),
    ]
