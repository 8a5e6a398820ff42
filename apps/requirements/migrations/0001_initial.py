import django.db.models.deletion
from django.db import migrations, models


STATUS_CHOICES = [
    ('current', 'Ważny'),
    ('expiring', 'Wygasa'),
    ('expired', 'Wygasły'),
    ('in_renewal', 'W odnowieniu'),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Worker',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('national_id', models.CharField(max_length=20, unique=True)),
                ('full_name', models.CharField(max_length=200)),
                ('email', models.EmailField(blank=True, max_length=254)),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
        ),
        migrations.CreateModel(
            name='RequirementType',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200)),
                ('category', models.CharField(max_length=100)),
                ('notice_days', models.PositiveIntegerField(blank=True, help_text='Ile dni przed wygaśnięciem powiadomić? (puste = wartość domyślna)', null=True)),
            ],
        ),
        migrations.CreateModel(
            name='RequirementRecord',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('worker_name', models.CharField(blank=True, max_length=200)),
                ('national_id', models.CharField(blank=True, max_length=20)),
                ('requirement', models.CharField(blank=True, max_length=200)),
                ('category', models.CharField(blank=True, max_length=100)),
                ('valid_from', models.DateField(blank=True, null=True)),
                ('valid_to', models.DateField(blank=True, null=True)),
                ('manual_status', models.CharField(blank=True, choices=STATUS_CHOICES, max_length=20, null=True)),
                ('status', models.CharField(choices=STATUS_CHOICES, default='current', max_length=20)),
                ('lead_time_days', models.IntegerField(blank=True, null=True)),
                ('notice_days', models.PositiveIntegerField(blank=True, null=True)),
                ('link', models.URLField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('worker', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='requirement_records', to='requirements.worker')),
                ('requirement_type', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='records', to='requirements.requirementtype')),
            ],
            options={
                'ordering': ['-created_at', '-id'],
            },
        ),
    ]
