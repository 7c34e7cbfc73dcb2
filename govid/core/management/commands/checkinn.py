# core/management/commands/checkinn.py
from core.identifiers import Inn
from core.management.base import CheckIdentifierCommand

class Command(CheckIdentifierCommand):
    help = "Проверяет ИНН: длину, состав и контрольные цифры."
    identifier_class = Inn
    label = "ИНН"
