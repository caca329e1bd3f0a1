import asyncio
import sys
from typing import Optional, TextIO

INVALID_INPUT_TEXT = "Your input is invalid!"
CHOICE_PROMPT = "Please make your choice: "


class Console:
    """Построчный ввод-вывод для интерактивного меню"""

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def write(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self.stdout, flush=True)

    async def ask(self, prompt: str) -> str:
        """Выводит приглашение и читает одну строку.

        Raises:
            EOFError: если ввод закончился
        """
        self.stdout.write(prompt)
        self.stdout.flush()

        # чтение блокирующее, поэтому уводим его из цикла событий
        line = await asyncio.to_thread(self.stdin.readline)
        if not line:
            raise EOFError("End of input")
        return line.rstrip("\r\n")

    async def read_choice(self) -> int:
        """Читает номер пункта меню, переспрашивая до корректного целого"""
        while True:
            text = await self.ask(CHOICE_PROMPT)
            try:
                return int(text.strip())
            except ValueError:
                self.write(INVALID_INPUT_TEXT)
