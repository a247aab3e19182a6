import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                (
                    "user_id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("auth_user_id", models.CharField(max_length=255, unique=True)),
                (
                    "first_name",
                    models.CharField(blank=True, default="", max_length=100),
                ),
                (
                    "last_name",
                    models.CharField(blank=True, default="", max_length=100),
                ),
                (
                    "email",
                    models.EmailField(blank=True, default="", max_length=255),
                ),
                ("avatar_url", models.TextField(blank=True, default="")),
                ("followers", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "users",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="UserFollow",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("followed_at", models.DateTimeField(auto_now_add=True)),
                (
                    "followee",
                    models.ForeignKey(
                        db_column="followee_id",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="follower_edges",
                        to="core.user",
                    ),
                ),
                (
                    "follower",
                    models.ForeignKey(
                        db_column="follower_id",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="following_edges",
                        to="core.user",
                    ),
                ),
            ],
            options={
                "db_table": "user_follows",
                "ordering": ["-followed_at"],
            },
        ),
        migrations.AddConstraint(
            model_name="userfollow",
            constraint=models.UniqueConstraint(
                fields=("follower", "followee"), name="unique_user_follow"
            ),
        ),
        migrations.CreateModel(
            name="Blog",
            fields=[
                (
                    "blog_id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("title", models.CharField(max_length=200)),
                ("description", models.CharField(max_length=500)),
                ("thumbnail", models.TextField(blank=True, default="")),
                ("content_html", models.TextField()),
                ("content_json", models.JSONField(blank=True, default=dict)),
                ("categories", models.JSONField(blank=True, default=list)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "author",
                    models.ForeignKey(
                        db_column="author_id",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="blogs",
                        to="core.user",
                    ),
                ),
            ],
            options={
                "db_table": "blogs",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(
                        fields=["-created_at"], name="blogs_created_at_idx"
                    )
                ],
            },
        ),
    ]
