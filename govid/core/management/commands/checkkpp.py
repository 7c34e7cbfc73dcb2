# core/management/commands/checkkpp.py
from core.identifiers import Kpp
from core.management.base import CheckIdentifierCommand

class Command(CheckIdentifierCommand):
    help = "Проверяет КПП: 9 цифр."
    identifier_class = Kpp
    label = "КПП"
