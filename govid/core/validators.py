from django.core.exceptions import ValidationError

from .errors import IdentifierError
from .identifiers import Bik, Inn, Kpp

MISMATCH_MESSAGES = {
    "inn": "Неверная контрольная сумма ИНН",
    "kpp": "Некорректный КПП",
    "bik": "БИК должен начинаться с 04",
}


def _run(cls, value: str):
    try:
        ok = cls.from_text(value or "").is_valid()
    except IdentifierError as e:
        raise ValidationError(str(e), code=e.code)
    if not ok:
        raise ValidationError(MISMATCH_MESSAGES[cls.kind], code="checksum")


def validate_inn(value: str):
    _run(Inn, value)


def validate_kpp(value: str):
    _run(Kpp, value)


def validate_bik(value: str):
    _run(Bik, value)
