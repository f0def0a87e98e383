"""
reporting.py — Action Reporting

Strategies never print. Every simulated side effect (payment, delivery,
notification, computed amounts) is handed to an ActionReporter, which
records it, logs it and optionally echoes the message to a sink such as
print(). Tests inspect ActionReporter.actions instead of parsing stdout.
"""

from typing import Callable, List, Optional

from .logging_config import get_logger
from .models import ReportedAction

log = get_logger(__name__)


class ActionReporter:
    """
    Collects ReportedAction entries in emission order.

    Args:
        echo (Callable[[str], None], optional): Receives each action message
            as it is reported (the CLI passes print).
    """

    def __init__(self, echo: Optional[Callable[[str], None]] = None):
        self.echo = echo
        self.actions: List[ReportedAction] = []

    def report(self, kind: str, variant: str, message: str, amount: Optional[float] = None) -> ReportedAction:
        """
        Records one action and forwards it to the log and the echo sink.

        Returns:
            ReportedAction: The recorded action.
        """
        action = ReportedAction(kind=kind, variant=variant, message=message, amount=amount)
        self.actions.append(action)
        log.info(f"[{kind}:{variant}] {message}")
        if self.echo is not None:
            self.echo(message)
        return action

    def __len__(self) -> int:
        return len(self.actions)
