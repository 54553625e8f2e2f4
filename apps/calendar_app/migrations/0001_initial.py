from django.conf import settings
import django.core.validators
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='UserTimeInterval',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('week_day', models.PositiveSmallIntegerField(choices=[(0, 'Sunday'), (1, 'Monday'), (2, 'Tuesday'), (3, 'Wednesday'), (4, 'Thursday'), (5, 'Friday'), (6, 'Saturday')], validators=[django.core.validators.MaxValueValidator(6)])),
                ('time_start_in_minutes', models.PositiveIntegerField(validators=[django.core.validators.MaxValueValidator(1439)])),
                ('time_end_in_minutes', models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(1439)])),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='time_intervals', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['week_day', 'time_start_in_minutes'],
            },
        ),
    ]
