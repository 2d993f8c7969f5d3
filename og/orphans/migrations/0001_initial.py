from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('contenttypes', '0002_remove_content_type_name'),
    ]

    operations = [
        migrations.CreateModel(
            name='OrphanRegistration',
            fields=[
                ('id', models.AutoField(primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('group_id', models.PositiveIntegerField()),
                ('plugin_id', models.CharField(max_length=100)),
                ('scheduled_at', models.DateTimeField(default=django.utils.timezone.now)),
                (
                    'group_content_type',
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name='+',
                        to='contenttypes.contenttype',
                    )
                ),
            ],
            options={
                'db_table': 'og_orphan_registration',
            },
        ),
        migrations.CreateModel(
            name='OrphanQueueItem',
            fields=[
                ('id', models.AutoField(primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                (
                    'queue',
                    models.CharField(
                        choices=[
                            ('og_orphaned_group_content', 'og_orphaned_group_content'),
                            ('og_orphaned_group_content_cron', 'og_orphaned_group_content_cron'),
                        ],
                        db_index=True,
                        max_length=100,
                    )
                ),
                ('object_id', models.PositiveIntegerField()),
                ('attempts', models.PositiveIntegerField(default=0)),
                (
                    'content_type',
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name='+',
                        to='contenttypes.contenttype',
                    )
                ),
                (
                    'registration',
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name='items',
                        to='orphans.orphanregistration',
                    )
                ),
            ],
            options={
                'db_table': 'og_orphan_queue_item',
            },
        ),
    ]
