# core/forms.py
from django import forms

from .validators import validate_bik, validate_inn, validate_kpp


class IdentifierCheckForm(forms.Form):
    """Форма проверки реквизитов контрагента: ИНН обязателен, КПП и БИК — по желанию"""

    inn = forms.CharField(
        label="ИНН", strip=False, validators=[validate_inn],
        widget=forms.TextInput(attrs={
            "class": "input w-full",
            "placeholder": "1234567890",
            "pattern": r"\d{10}|\d{12}"
        }),
    )
    kpp = forms.CharField(
        label="КПП", strip=False, required=False, validators=[validate_kpp],
        widget=forms.TextInput(attrs={
            "class": "input w-full",
            "placeholder": "123456789",
            "pattern": r"\d{9}"
        }),
    )
    bik = forms.CharField(
        label="БИК", strip=False, required=False, validators=[validate_bik],
        widget=forms.TextInput(attrs={
            "class": "input w-full",
            "placeholder": "044525225",
            "pattern": r"\d{9}"
        }),
    )

    def clean(self):
        cleaned = super().clean()
        inn = cleaned.get("inn") or ""
        kpp = cleaned.get("kpp") or ""
        # у ИП нет КПП
        if len(inn) == 12 and kpp:
            self.add_error("kpp", forms.ValidationError(
                "КПП указывается только для организаций (ИНН из 10 цифр)",
                code="kpp_for_individual",
            ))
        return cleaned
