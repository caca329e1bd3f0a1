from typing import Iterable

from marketplace.core.router import Command

GREETING_TEXT = (
    "\n\n*******************************************************\n"
    "              User Interface      	               \n"
    "*******************************************************\n"
)

MENU_SEPARATOR = "---------"
FOOTER_SEPARATOR = "........................."
UNRECOGNIZED_CHOICE_TEXT = "Unrecognized choice!"


def get_menu_text(commands: Iterable[Command]) -> str:
    """Возвращает текст меню; команды с footer=True идут после разделителя"""
    commands = list(commands)
    lines = ["MAIN MENU", MENU_SEPARATOR]
    lines.extend(f"{c.choice}. {c.title}" for c in commands if not c.footer)

    footer = [c for c in commands if c.footer]
    if footer:
        lines.append(FOOTER_SEPARATOR)
        lines.extend(f"{c.choice}. {c.title}" for c in footer)
    return "\n".join(lines)
