# core/management/base.py
import logging

from django.core.management.base import BaseCommand, CommandError

from core.errors import IdentifierError

logger = logging.getLogger(__name__)


class CheckIdentifierCommand(BaseCommand):
    """
    Общая часть команд checkinn / checkkpp / checkbik.

    Печатает "yes" или "no", а ошибку проверки — строкой "Error: ...".
    Ошибка проверки — это ответ, а не падение: код выхода 0,
    если только не передан --strict.
    """

    identifier_class = None
    label = ""
    requires_system_checks = []

    def add_arguments(self, parser):
        parser.add_argument("value", help=f"{self.label} для проверки")
        parser.add_argument(
            "--strict", action="store_true",
            help="Завершиться с кодом 1, если ответ не yes",
        )

    def handle(self, *args, **options):
        value = options["value"]
        identifier = self.identifier_class.from_text(value)
        logger.debug("Проверка %s %r", self.label, value)

        try:
            ok = identifier.is_valid()
        except IdentifierError as e:
            logger.info("%s %r: %s", self.label, value, e)
            self.stdout.write(f"Error: {e}")
            if options["strict"]:
                raise CommandError(f"{self.label} не прошёл проверку", returncode=1)
            return

        self.stdout.write("yes" if ok else "no")
        if not ok and options["strict"]:
            raise CommandError(f"{self.label} не прошёл проверку", returncode=1)
