from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='LoadedTemplate',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('template_type', models.CharField(db_index=True, help_text="Kind of built-in object (e.g., 'QUALITY_GATE')", max_length=50)),
                ('key', models.CharField(help_text='Identifier of the built-in object within its type', max_length=200)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'verbose_name': 'Loaded Template',
                'verbose_name_plural': 'Loaded Templates',
                'db_table': 'loaded_templates',
                'ordering': ['template_type', 'key'],
                'constraints': [models.UniqueConstraint(fields=('template_type', 'key'), name='uniq_loaded_template_type_key')],
            },
        ),
    ]
