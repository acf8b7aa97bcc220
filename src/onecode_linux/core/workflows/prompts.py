"""Interactive confirmation protocol used by the workflows.

Workflows ask questions through a Prompter so they can run against the
terminal, unattended with ``--yes``, or scripted in tests.
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class Prompter(Protocol):
    """Asks the user yes/no and multiple-choice questions."""

    def confirm(self, question: str, *, default: bool) -> bool:
        """Ask a yes/no question.

        Args:
            question: Question text without the [y/N] suffix
            default: Answer used when the user just presses Enter

        Returns:
            The user's answer

        """
        ...

    def choose(
        self, question: str, options: Sequence[str], *, default: int = 0
    ) -> int:
        """Ask the user to pick one of options.

        Args:
            question: Question text
            options: Labels shown as a numbered list
            default: Index used when the user just presses Enter

        Returns:
            Index of the chosen option

        """
        ...
