import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='ListType',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=128, unique=True)),
                ('friendly_name', models.CharField(blank=True, max_length=256)),
                ('welsh_friendly_name', models.CharField(blank=True, max_length=256)),
                ('provenance', models.CharField(choices=[('B2C_IDAM', 'B2C'), ('CFT_IDAM', 'CFT IdAM'), ('CRIME_IDAM', 'Crime IdAM'), ('SSO', 'Single sign-on')], max_length=32)),
                ('is_non_strategic', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'publication_list_types',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Artefact',
            fields=[
                ('artefact_id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('location_id', models.CharField(db_index=True, max_length=64)),
                ('sensitivity', models.CharField(choices=[('PUBLIC', 'Public'), ('PRIVATE', 'Private'), ('CLASSIFIED', 'Classified')], db_index=True, default='CLASSIFIED', max_length=16)),
                ('provenance', models.CharField(blank=True, help_text='Source system, kept for audit', max_length=64)),
                ('language', models.CharField(choices=[('ENGLISH', 'English'), ('WELSH', 'Welsh'), ('BI_LINGUAL', 'Bilingual')], default='ENGLISH', max_length=16)),
                ('content_date', models.DateField()),
                ('display_from', models.DateTimeField()),
                ('display_to', models.DateTimeField(db_index=True)),
                ('is_flat_file', models.BooleanField(default=False)),
                ('payload', models.JSONField(blank=True, null=True)),
                ('last_received_date', models.DateTimeField(auto_now=True)),
                ('superseded_count', models.PositiveIntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('list_type', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='artefacts', to='publication.listtype')),
            ],
            options={
                'db_table': 'publication_artefacts',
                'ordering': ['-content_date'],
                'indexes': [models.Index(fields=['location_id', 'content_date'], name='pub_artefact_loc_date_idx')],
                'constraints': [models.UniqueConstraint(fields=('location_id', 'list_type', 'content_date', 'language'), name='publication_artefact_version_unique')],
            },
        ),
        migrations.CreateModel(
            name='ArtefactSearch',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('case_number', models.CharField(blank=True, db_index=True, max_length=255, null=True)),
                ('case_name', models.CharField(blank=True, max_length=512, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('artefact', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='search_records', to='publication.artefact')),
            ],
            options={
                'db_table': 'publication_artefact_search',
                'indexes': [models.Index(fields=['artefact', 'created_at'], name='pub_search_artefact_idx')],
            },
        ),
    ]
