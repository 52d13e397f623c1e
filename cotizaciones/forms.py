from django import forms

from . import catalogo
from .borrador import CotizacionBorrador
from .models import Quotation
from .pricing import a_centavos, anios_disponibles, interpretar_precio


class CotizacionForm(forms.Form):
    tipo = forms.ChoiceField(choices=Quotation.Tipo.choices, widget=forms.RadioSelect)

    numero_siniestro = forms.CharField(label="Número de siniestro", max_length=60, required=False)
    marca = forms.CharField(max_length=80, required=False)
    modelo = forms.CharField(max_length=120)
    anio = forms.TypedChoiceField(label="Año", coerce=int)
    placas = forms.CharField(max_length=20, required=False)

    piezas = forms.MultipleChoiceField(
        label="Laminado y pintura",
        choices=catalogo.opciones_por_categoria(),
        widget=forms.CheckboxSelectMultiple,
        required=False,
    )
    piezas_personalizadas = forms.CharField(
        label="Piezas personalizadas",
        widget=forms.Textarea(attrs={"rows": 3}),
        required=False,
        help_text="Una pieza por línea",
    )

    def __init__(self, *args, anio_actual=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.anio_actual = anio_actual
        self.fields["anio"].choices = [("", "Selecciona el año")] + [
            (a, str(a)) for a in anios_disponibles(anio_actual)
        ]

    def clean_piezas_personalizadas(self):
        texto = self.cleaned_data.get("piezas_personalizadas") or ""
        return [ln.strip() for ln in texto.splitlines() if ln.strip()]

    def construir_borrador(self, repuestos_formset=None) -> CotizacionBorrador:
        data = self.cleaned_data

        borrador = CotizacionBorrador(data["tipo"], anio_actual=self.anio_actual)
        borrador.numero_siniestro = data.get("numero_siniestro", "")
        borrador.marca = data.get("marca", "")
        borrador.modelo = data["modelo"]
        borrador.anio = data["anio"]
        borrador.placas = data.get("placas", "")

        borrador.seleccionar_piezas(data.get("piezas") or [])
        for nombre in data.get("piezas_personalizadas") or []:
            borrador.agregar_pieza_personalizada(nombre)

        if repuestos_formset is not None:
            for f in repuestos_formset:
                if not getattr(f, "cleaned_data", None):
                    continue
                borrador.agregar_repuesto(
                    f.cleaned_data["nombre"],
                    f.cleaned_data["precio"],
                    f.cleaned_data.get("url_referencia", ""),
                )
        return borrador


class RepuestoForm(forms.Form):
    nombre = forms.CharField(
        label="Nombre de la pieza",
        max_length=200,
        # sugerencias: <datalist id="ejemplos-repuestos"> en nueva.html
        widget=forms.TextInput(attrs={"list": "ejemplos-repuestos"}),
    )
    precio = forms.CharField(
        label="Costo estimado",
        max_length=30,
        # 👇 texto para permitir "$ 1,250.50"
        widget=forms.TextInput(attrs={
            "inputmode": "decimal",
            "autocomplete": "off",
            "placeholder": "0.00",
        }),
    )
    url_referencia = forms.URLField(label="Liga Mercado Libre", max_length=500, required=False)

    def clean_precio(self):
        valor = interpretar_precio(self.cleaned_data.get("precio"))
        if valor is None:
            raise forms.ValidationError("Escribe un costo válido (número mayor o igual a 0).")
        valor = a_centavos(valor)
        if valor is None:
            raise forms.ValidationError("Máximo dos decimales.")
        return valor


RepuestoFormSet = forms.formset_factory(RepuestoForm, extra=3)
