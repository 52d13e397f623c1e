from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Profile",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("nombre_completo", models.CharField(blank=True, max_length=150, verbose_name="Nombre completo")),
                ("nombre_corto", models.CharField(blank=True, max_length=40, verbose_name="Nombre corto")),
                ("celular", models.CharField(blank=True, max_length=30, verbose_name="Celular")),
                ("is_approved", models.BooleanField(default=False, verbose_name="Aprobado")),
                ("is_admin", models.BooleanField(default=False, verbose_name="Administrador")),
                ("creado_en", models.DateTimeField(auto_now_add=True)),
                ("actualizado_en", models.DateTimeField(auto_now=True)),
                ("user", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="perfil", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "verbose_name": "Perfil",
                "verbose_name_plural": "Perfiles",
                "ordering": ["-creado_en"],
            },
        ),
    ]
