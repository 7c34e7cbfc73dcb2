import re

import pytest
from django.core.exceptions import ValidationError

from core.forms import IdentifierCheckForm
from core.validators import validate_bik, validate_inn, validate_kpp


def test_validate_inn_accepts_valid():
    validate_inn("7827004526")
    validate_inn("760307073214")


@pytest.mark.parametrize("value,code", [
    ("", "empty"),
    (None, "empty"),
    ("782f004526", "expected_numbers_only"),
    ("772053", "wrong_length"),
    ("7827004527", "checksum"),
])
def test_validate_inn_rejects(value, code):
    with pytest.raises(ValidationError) as exc:
        validate_inn(value)
    assert exc.value.code == code


def test_validate_kpp_and_bik():
    validate_kpp("773601001")
    validate_bik("044525225")
    with pytest.raises(ValidationError) as exc:
        validate_bik("123456789")
    assert exc.value.code == "checksum"


class TestIdentifierCheckForm:
    def test_valid_legal_entity(self):
        form = IdentifierCheckForm(data={"inn": "7827004526", "kpp": "773601001", "bik": "044525225"})
        assert form.is_valid(), form.errors

    def test_inn_only(self):
        form = IdentifierCheckForm(data={"inn": "760307073214"})
        assert form.is_valid(), form.errors

    def test_bad_checksum(self):
        form = IdentifierCheckForm(data={"inn": "7827004527"})
        assert not form.is_valid()
        assert form.has_error("inn", code="checksum")

    def test_spaces_are_not_stripped(self):
        form = IdentifierCheckForm(data={"inn": "7827004526 "})
        assert not form.is_valid()
        assert form.has_error("inn", code="expected_numbers_only")

    def test_kpp_not_allowed_for_individual(self):
        form = IdentifierCheckForm(data={"inn": "760307073214", "kpp": "773601001"})
        assert not form.is_valid()
        assert form.has_error("kpp", code="kpp_for_individual")


def test_inn_widget_pattern_rejects_eleven_digits():
    pattern = IdentifierCheckForm().fields["inn"].widget.attrs["pattern"]
    assert re.fullmatch(pattern, "7827004526")
    assert re.fullmatch(pattern, "760307073214")
    assert re.fullmatch(pattern, "00000000000") is None
