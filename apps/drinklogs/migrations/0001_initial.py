import uuid

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('cocktails', '0001_initial'),
        ('events', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='DrinkLog',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('rating', models.PositiveSmallIntegerField(blank=True, null=True, validators=[django.core.validators.MinValueValidator(0), django.core.validators.MaxValueValidator(10)])),
                ('caption', models.TextField(blank=True)),
                ('image_url', models.URLField(blank=True, max_length=500)),
                ('visibility', models.CharField(choices=[('public', 'Public'), ('friends', 'Friends'), ('private', 'Private'), ('only_me', 'Only me')], default='public', max_length=10)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('cocktail', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='drink_logs', to='cocktails.cocktail')),
                ('location', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='drink_logs', to='events.location')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='drink_logs', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'drink_logs',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['user', 'created_at'], name='drinklog_user_created_idx'),
                    models.Index(fields=['visibility', 'created_at'], name='drinklog_vis_created_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='DrinkLogLike',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('drink_log', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='likes', to='drinklogs.drinklog')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='drink_log_likes', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'drink_log_likes',
                'unique_together': {('drink_log', 'user')},
            },
        ),
        migrations.CreateModel(
            name='DrinkLogComment',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('content', models.TextField()),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('drink_log', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='comments', to='drinklogs.drinklog')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='drink_log_comments', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'drink_log_comments',
                'ordering': ['created_at'],
                'indexes': [
                    models.Index(fields=['drink_log', 'created_at'], name='comment_log_created_idx'),
                ],
            },
        ),
    ]
