# core/identifiers.py
"""
Проверка реквизитов: ИНН (с контрольными цифрами), КПП и БИК (только структура).

Значение хранится ровно в том виде, в каком его передали: пробелы, ведущие
нули и т.п. не трогаем. Проверки чистые — повторный вызов даёт тот же ответ.
"""
import logging

from .errors import EmptyValue, ExpectedNumbersOnly, WrongLength

logger = logging.getLogger(__name__)

DIGITS = "0123456789"

# Весовые коэффициенты ИНН. Для 10-значного берём срез с 2-го элемента,
# для 12-значного — с 1-го (первая контрольная цифра) и весь (вторая).
INN_WEIGHTS = (3, 7, 2, 4, 10, 3, 5, 9, 4, 6, 8)
INN10_WEIGHTS = INN_WEIGHTS[2:]
INN12_FIRST_WEIGHTS = INN_WEIGHTS[1:]
INN12_SECOND_WEIGHTS = INN_WEIGHTS

BIK_COUNTRY_PREFIX = "04"


def only_digits(text: str) -> bool:
    """Только ASCII-цифры 0–9 (str.isdigit пропускает '²' и прочие)."""
    return all(ch in DIGITS for ch in text)


def get_digit(text: str, n: int) -> int:
    """
    Цифра на позиции n; 0, если позиции нет или там не цифра.

    Никогда не падает, поэтому вызывать только после only_digits(),
    иначе мусор молча превратится в нули.
    """
    if n < 0 or n >= len(text):
        return 0
    ch = text[n]
    if ch not in DIGITS:
        return 0
    return DIGITS.index(ch)


def check_digit(text: str, weights) -> int:
    """Контрольная цифра: Σ digit·weight mod 11 mod 10 (остаток 10 → 0)."""
    total = sum(get_digit(text, i) * w for i, w in enumerate(weights))
    return total % 11 % 10


class Identifier:
    """Базовый реквизит. Неизменяем: value задаётся один раз в конструкторе."""

    kind = ""
    __slots__ = ("_value",)

    def __init__(self, value: str):
        self._value = value

    @classmethod
    def from_text(cls, text: str):
        return cls(text)

    @property
    def value(self) -> str:
        return self._value

    def __str__(self):
        return self._value

    def __repr__(self):
        return f"{type(self).__name__}({self._value!r})"

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __hash__(self):
        return hash((type(self), self._value))

    def _check_composition(self):
        if not self._value:
            raise EmptyValue()
        if not only_digits(self._value):
            raise ExpectedNumbersOnly()

    def is_valid(self) -> bool:
        """Переопределяется в каждом реквизите."""
        raise NotImplementedError


class TaxpayerIdentificationNumber(Identifier):
    """
    ИНН: 10 цифр у юрлиц, 12 — у физлиц и ИП.

    is_valid() возвращает True/False по контрольным цифрам, а если посчитать
    их нельзя — бросает EmptyValue, ExpectedNumbersOnly или WrongLength.
    """

    kind = "inn"
    __slots__ = ()

    def _check_len10(self) -> bool:
        return check_digit(self._value, INN10_WEIGHTS) == get_digit(self._value, 9)

    def _check_len12(self) -> bool:
        first = check_digit(self._value, INN12_FIRST_WEIGHTS)
        second = check_digit(self._value, INN12_SECOND_WEIGHTS)
        return first == get_digit(self._value, 10) and second == get_digit(self._value, 11)

    def is_valid(self) -> bool:
        self._check_composition()

        length = len(self._value)
        if length == 10:
            result = self._check_len10()
        elif length == 12:
            result = self._check_len12()
        elif length < 10:
            raise WrongLength(10)
        else:
            # 11 и длиннее 12 — подсказываем 12
            raise WrongLength(12)

        logger.debug("ИНН %s: контрольная сумма %s", self._value, "OK" if result else "не совпала")
        return result


class ReasonCode(Identifier):
    """КПП — 9 цифр, контрольной суммы нет."""

    kind = "kpp"
    __slots__ = ()

    def is_valid(self) -> bool:
        self._check_composition()
        if len(self._value) != 9:
            raise WrongLength(9)
        return True


class BankIdentificationCode(Identifier):
    """БИК — 9 цифр, у российских банков начинается с кода страны 04."""

    kind = "bik"
    __slots__ = ()

    def is_valid(self) -> bool:
        self._check_composition()
        if len(self._value) != 9:
            raise WrongLength(9)
        return self._value.startswith(BIK_COUNTRY_PREFIX)


# Короткие имена, как в документах
Inn = TaxpayerIdentificationNumber
Kpp = ReasonCode
Bik = BankIdentificationCode

IDENTIFIERS = {cls.kind: cls for cls in (Inn, Kpp, Bik)}


def validate(text: str) -> bool:
    """Проверить ИНН: True/False по контрольной сумме либо IdentifierError."""
    return Inn.from_text(text).is_valid()


validate_inn = validate


def check(kind: str, text: str) -> bool:
    """Проверить реквизит по типу: "inn", "kpp" или "bik"."""
    try:
        cls = IDENTIFIERS[kind]
    except KeyError:
        raise ValueError(f"Неизвестный тип реквизита: {kind}") from None
    return cls.from_text(text).is_valid()
