from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Case",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("number_of_case", models.IntegerField()),
                ("number_of_death", models.IntegerField()),
                ("number_of_recovered", models.IntegerField()),
                ("location", models.CharField(db_index=True, max_length=100)),
                ("date", models.DateTimeField(unique=True)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
        ),
    ]
