from django import forms
from django.contrib.auth.forms import UserCreationForm
from django.db import transaction


class RegistroForm(UserCreationForm):
    """
    Alta de usuario desde la app. La cuenta queda pendiente de aprobación
    (el perfil lo crea la señal de perfiles).
    """

    nombre_completo = forms.CharField(label="Nombre completo", max_length=150)
    nombre_corto = forms.CharField(
        label="Nombre corto",
        max_length=40,
        help_text="Como aparecerá en las cotizaciones",
    )
    celular = forms.CharField(label="Celular", max_length=30)
    email = forms.EmailField(label="Correo")

    class Meta(UserCreationForm.Meta):
        fields = ("username", "email")

    def clean_nombre_completo(self):
        return self.cleaned_data["nombre_completo"].strip()

    def clean_nombre_corto(self):
        return self.cleaned_data["nombre_corto"].strip()

    def clean_celular(self):
        return self.cleaned_data["celular"].strip()

    def save(self, commit=True):
        with transaction.atomic():
            user = super().save(commit=commit)
            if commit:
                perfil = user.perfil
                perfil.nombre_completo = self.cleaned_data["nombre_completo"]
                perfil.nombre_corto = self.cleaned_data["nombre_corto"]
                perfil.celular = self.cleaned_data["celular"]
                perfil.save(update_fields=["nombre_completo", "nombre_corto", "celular", "actualizado_en"])
        return user
