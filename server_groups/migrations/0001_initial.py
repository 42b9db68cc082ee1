import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("accounts", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="ServerGroup",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=64)),
                ("description", models.TextField(blank=True, default="")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "admins",
                    models.ManyToManyField(
                        blank=True,
                        help_text="Users allowed to administer this group",
                        related_name="administered_server_groups",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "organization",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="server_groups",
                        to="accounts.organization",
                    ),
                ),
            ],
            options={
                "db_table": "server_groups",
                "ordering": ["name"],
            },
        ),
        migrations.AddConstraint(
            model_name="servergroup",
            constraint=models.UniqueConstraint(
                fields=("organization", "name"),
                name="unique_server_group_name_per_org",
            ),
        ),
    ]
