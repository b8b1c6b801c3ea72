import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='QualityGate',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Timestamp when record was created')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when record was last modified')),
                ('name', models.CharField(db_index=True, max_length=100, unique=True)),
                ('is_default', models.BooleanField(default=False, help_text='Gate applied to projects without an explicit gate')),
            ],
            options={
                'verbose_name': 'Quality Gate',
                'verbose_name_plural': 'Quality Gates',
                'db_table': 'quality_gates',
                'ordering': ['name'],
                'constraints': [models.UniqueConstraint(condition=models.Q(('is_default', True)), fields=('is_default',), name='uniq_default_quality_gate')],
            },
        ),
        migrations.CreateModel(
            name='QualityGateCondition',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Timestamp when record was created')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when record was last modified')),
                ('metric_key', models.CharField(help_text="Key of the measured metric (e.g., 'new_coverage')", max_length=64)),
                ('operator', models.CharField(choices=[('GT', 'is greater than'), ('LT', 'is less than')], max_length=2)),
                ('warning_threshold', models.CharField(blank=True, max_length=64, null=True)),
                ('error_threshold', models.CharField(blank=True, max_length=64, null=True)),
                ('period', models.PositiveSmallIntegerField(blank=True, help_text='Comparison period index. 1 = leak period (new code)', null=True)),
                ('gate', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='conditions', to='quality_gates.qualitygate')),
            ],
            options={
                'verbose_name': 'Quality Gate Condition',
                'verbose_name_plural': 'Quality Gate Conditions',
                'db_table': 'quality_gate_conditions',
                'ordering': ['gate__name', 'id'],
            },
        ),
    ]
