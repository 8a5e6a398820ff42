from django.db import migrations, models


ROLE_CHOICES = [
    ('JPRO', 'Kierownik projektu'),
    ('EPR', 'Specjalista BHP'),
    ('RRHH', 'Kadry'),
    ('LEGAL', 'Dział prawny'),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Project',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('code', models.CharField(max_length=50, unique=True)),
                ('name', models.CharField(max_length=200)),
                ('client', models.CharField(blank=True, max_length=200)),
                ('company', models.CharField(blank=True, max_length=200)),
                ('status', models.CharField(choices=[('pending', 'Oczekuje'), ('in_progress', 'W toku'), ('finalized', 'Zakończony'), ('cancelled', 'Anulowany')], default='pending', max_length=20)),
                ('responsibles', models.JSONField(blank=True, default=dict)),
                ('finalized_on', models.DateField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
        ),
        migrations.CreateModel(
            name='CompanyRequirement',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('company', models.CharField(db_index=True, max_length=200)),
                ('requirement', models.CharField(max_length=200)),
                ('category', models.CharField(max_length=100)),
                ('role', models.CharField(choices=ROLE_CHOICES, max_length=10)),
                ('notes', models.TextField(blank=True)),
                ('order', models.PositiveIntegerField(default=0)),
                ('mandatory', models.BooleanField(default=True)),
            ],
            options={
                'ordering': ['company', 'order', 'id'],
            },
        ),
    ]
