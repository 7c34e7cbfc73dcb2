# core/management/commands/checkbik.py
from core.identifiers import Bik
from core.management.base import CheckIdentifierCommand

class Command(CheckIdentifierCommand):
    help = "Проверяет БИК: 9 цифр, код страны 04."
    identifier_class = Bik
    label = "БИК"
