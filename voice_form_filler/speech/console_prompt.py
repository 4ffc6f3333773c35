"""
Yes/no confirmation on the terminal.
"""

import asyncio

from .base import ConfirmationPrompt


class ConsolePrompt(ConfirmationPrompt):
    """Asks the question on stdin/stdout."""

    YES = {'y', 'yes', 'ok', 'okay', 'sure', 'correct'}

    async def confirm(self, question: str) -> bool:
        answer = await asyncio.to_thread(input, f"\n{question} [y/N]: ")
        return answer.strip().lower() in self.YES
