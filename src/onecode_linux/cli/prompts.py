"""Terminal implementation of the workflow Prompter."""

from collections.abc import Callable, Sequence

from onecode_linux.logger import flush_all_handlers, get_logger

logger = get_logger(__name__)

_YES = ("y", "yes")
_NO = ("n", "no")


class ConsolePrompter:
    """Asks questions on stdin; ``assume_yes`` answers without asking."""

    def __init__(
        self,
        assume_yes: bool = False,  # noqa: FBT001, FBT002
        input_func: Callable[[str], str] = input,
    ) -> None:
        """Initialize prompter.

        Args:
            assume_yes: Confirm everything and pick default choices
            input_func: Line reader, replaceable in tests

        """
        self.assume_yes = assume_yes
        self._input = input_func

    def _ask(self, prompt: str) -> str | None:
        # Queued log output must reach the terminal before the prompt
        flush_all_handlers()
        try:
            return self._input(prompt).strip().lower()
        except EOFError:
            return None

    def confirm(self, question: str, *, default: bool) -> bool:
        """Ask a yes/no question; Enter or EOF gives default."""
        if self.assume_yes:
            logger.debug("Auto-confirmed: %s", question)
            return True

        suffix = "[Y/n]" if default else "[y/N]"
        answer = self._ask(f"{question} {suffix} ")
        if answer in _YES:
            return True
        if answer in _NO:
            return False
        return default

    def choose(
        self, question: str, options: Sequence[str], *, default: int = 0
    ) -> int:
        """Ask for a numbered choice; invalid input gives default."""
        if self.assume_yes or not options:
            return default

        logger.info(question)
        for number, option in enumerate(options, start=1):
            marker = " (default)" if number - 1 == default else ""
            logger.info("  %d) %s%s", number, option, marker)

        answer = self._ask(f"Choice [1-{len(options)}]: ")
        if not answer:
            return default
        try:
            index = int(answer) - 1
        except ValueError:
            logger.warning("⚠️  Invalid choice %r, using default", answer)
            return default
        if not 0 <= index < len(options):
            logger.warning(
                "⚠️  Choice %s out of range, using default", answer
            )
            return default
        return index
