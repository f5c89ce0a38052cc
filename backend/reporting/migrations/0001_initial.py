import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('academics', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Report',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('week_of_reporting', models.CharField(blank=True, default='', max_length=32)),
                ('date_of_lecture', models.DateField()),
                ('scheduled_time', models.CharField(blank=True, default='', max_length=32)),
                ('venue', models.CharField(blank=True, default='', max_length=128)),
                ('actual_students_present', models.PositiveIntegerField(default=0)),
                ('total_registered_students', models.PositiveIntegerField(default=0)),
                ('topic_taught', models.CharField(max_length=255)),
                ('learning_outcomes', models.TextField(blank=True, default='')),
                ('recommendations', models.TextField(blank=True, default='')),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('reviewed', 'Reviewed'), ('completed', 'Completed')], default='pending', max_length=16)),
                ('principal_feedback', models.TextField(blank=True, null=True)),
                ('student_name', models.CharField(blank=True, max_length=128, null=True)),
                ('student_number', models.CharField(blank=True, max_length=32, null=True)),
                ('signed_at', models.DateTimeField(blank=True, null=True)),
                ('revision', models.PositiveIntegerField(default=1)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('faculty', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='reports', to='academics.faculty')),
                ('lecturer', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='reports', to=settings.AUTH_USER_MODEL)),
                ('module', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='reports', to='academics.module')),
                ('program', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='reports', to='academics.program')),
                ('reviewed_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='reviewed_reports', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ('-date_of_lecture', '-id'),
                'indexes': [
                    models.Index(fields=['status'], name='reporting_r_status_8c1e2b_idx'),
                    models.Index(fields=['lecturer', '-date_of_lecture'], name='reporting_r_lecture_5d7a90_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Challenge',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('kind', models.CharField(choices=[('lecturer', 'Lecturer'), ('student', 'Student')], max_length=16)),
                ('title', models.CharField(blank=True, default='', max_length=255)),
                ('description', models.TextField()),
                ('priority', models.CharField(blank=True, choices=[('low', 'Low'), ('medium', 'Medium'), ('high', 'High')], default='', max_length=8)),
                ('challenge_type', models.CharField(blank=True, default='', max_length=64)),
                ('impact', models.TextField(blank=True, default='')),
                ('proposed_solution', models.TextField(blank=True, default='')),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('in_progress', 'In progress'), ('resolved', 'Resolved')], default='pending', max_length=16)),
                ('feedback', models.TextField(blank=True, null=True)),
                ('submitted_date', models.DateField(default=django.utils.timezone.localdate)),
                ('resolved_date', models.DateField(blank=True, null=True)),
                ('revision', models.PositiveIntegerField(default=1)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('faculty', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='challenges', to='academics.faculty')),
                ('module', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='challenges', to='academics.module')),
                ('program', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='challenges', to='academics.program')),
                ('raised_by', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='challenges', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ('-created_at', '-id'),
                'indexes': [
                    models.Index(fields=['kind', 'status'], name='reporting_c_kind_3f9b41_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='ModuleRating',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('rating', models.PositiveSmallIntegerField()),
                ('comments', models.TextField(blank=True, default='')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('module', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='ratings', to='academics.module')),
                ('rated_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='module_ratings', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ('created_at', 'id'),
                'constraints': [
                    models.UniqueConstraint(fields=('module', 'rated_by'), name='uniq_module_rating_per_user'),
                ],
            },
        ),
        migrations.CreateModel(
            name='ExportLog',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('entity', models.CharField(max_length=32)),
                ('export_type', models.CharField(default='csv', max_length=8)),
                ('row_count', models.IntegerField(default=0)),
                ('filename', models.CharField(max_length=255)),
                ('ip_address', models.GenericIPAddressField(blank=True, null=True)),
                ('user_agent', models.TextField(blank=True, default='')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('user', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='export_logs', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ('-created_at',),
            },
        ),
    ]
