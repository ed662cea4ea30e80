import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('drinklogs', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='DrinkLogTag',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('drink_log', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='tags', to='drinklogs.drinklog')),
                ('tagged_user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='drink_log_tags', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'drink_log_tags',
                'ordering': ['created_at'],
                'unique_together': {('drink_log', 'tagged_user')},
            },
        ),
    ]
