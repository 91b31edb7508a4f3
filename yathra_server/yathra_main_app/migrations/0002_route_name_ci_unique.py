from django.db import migrations, models
import django.db.models.functions.text


class Migration(migrations.Migration):

    dependencies = [
        ('yathra_main_app', '0001_initial'),
    ]

    operations = [
        migrations.AddConstraint(
            model_name='route',
            constraint=models.UniqueConstraint(django.db.models.functions.text.Lower('name'), name='route_name_ci_unique'),
        ),
    ]
