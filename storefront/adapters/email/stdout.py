"""Stdout email adapter.

Implements EmailPort by printing each message to the terminal with
human-readable formatting instead of delivering it.
"""

import asyncio
import logging
from datetime import datetime

from storefront.core.ports import EmailPort

logger = logging.getLogger(__name__)


class StdoutEmailAdapter(EmailPort):
    """Prints outgoing email to stdout."""

    def __init__(self, sender: str = "no-reply@storefront.local", verbose: bool = False):
        """Initialize stdout email adapter.

        Args:
            sender: Address shown in the From line.
            verbose: If True, include a timestamp in the output.
        """
        self.sender = sender
        self.verbose = verbose
        self.sent_count = 0

    async def send_email(self, recipient: str, subject: str) -> None:
        """Print an email to stdout."""
        message = self._format_message(recipient, subject)
        await asyncio.to_thread(print, message)
        self.sent_count += 1
        logger.debug(f"Email printed for {recipient}", extra={"recipient": recipient})

    def _format_message(self, recipient: str, subject: str) -> str:
        """Format the message block."""
        lines = [
            "=" * 80,
            "EMAIL",
            "=" * 80,
            f"From: {self.sender}",
            f"To: {recipient}",
            f"Subject: {subject}",
        ]
        if self.verbose:
            lines.append(f"Date: {datetime.now().isoformat(timespec='seconds')}")
        lines.append("=" * 80)
        return "\n".join(lines)
