from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('contenttypes', '0002_remove_content_type_name'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='OgRole',
            fields=[
                ('id', models.AutoField(primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('group_entity_type', models.CharField(max_length=255)),
                ('name', models.CharField(max_length=255)),
                ('permissions', models.JSONField(blank=True, default=list)),
            ],
            options={
                'db_table': 'og_role',
                'unique_together': {('group_entity_type', 'name')},
            },
        ),
        migrations.CreateModel(
            name='OgMembership',
            fields=[
                ('id', models.AutoField(primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('group_id', models.PositiveIntegerField()),
                (
                    'state',
                    models.CharField(
                        choices=[('active', 'Active'), ('pending', 'Pending'), ('blocked', 'Blocked')],
                        default='active',
                        max_length=20,
                    )
                ),
                (
                    'group_content_type',
                    models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to='contenttypes.contenttype')
                ),
                ('roles', models.ManyToManyField(blank=True, related_name='memberships', to='groups.ogrole')),
                (
                    'user',
                    models.ForeignKey(
                        db_constraint=False,
                        on_delete=django.db.models.deletion.DO_NOTHING,
                        related_name='og_memberships',
                        to=settings.AUTH_USER_MODEL,
                    )
                ),
            ],
            options={
                'db_table': 'og_membership',
                'permissions': [('administer_group', 'Administer all groups, regardless of membership')],
                'unique_together': {('user', 'group_content_type', 'group_id')},
                'indexes': [models.Index(fields=['group_content_type', 'group_id'], name='og_membership_group_idx')],
            },
        ),
    ]
