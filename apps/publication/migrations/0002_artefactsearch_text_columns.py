from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('publication', '0001_initial'),
    ]

    operations = [
        migrations.AlterField(
            model_name='artefactsearch',
            name='case_number',
            field=models.TextField(blank=True, db_index=True, null=True),
        ),
        migrations.AlterField(
            model_name='artefactsearch',
            name='case_name',
            field=models.TextField(blank=True, null=True),
        ),
    ]
