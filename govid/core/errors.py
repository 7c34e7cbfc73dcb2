# core/errors.py
"""
Ошибки проверки реквизитов (ИНН, КПП, БИК).

Плоская иерархия: каждая ошибка означает, что контрольную сумму посчитать
нельзя. Несовпадение контрольной суммы ошибкой не является — это просто False.
"""


class IdentifierError(ValueError):
    code = "invalid"
    message = "Некорректный реквизит"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)

    def __str__(self):
        return self.args[0]


class EmptyValue(IdentifierError):
    code = "empty"
    message = "Пустое значение"


class ExpectedNumbersOnly(IdentifierError):
    code = "expected_numbers_only"
    message = "Ожидаются только цифры"


class WrongLength(IdentifierError):
    """`expected` — ближайшая допустимая длина, подсказка для пользователя."""
    code = "wrong_length"

    def __init__(self, expected: int):
        self.expected = expected
        super().__init__(f"Неверная длина, ожидается {expected} цифр")
