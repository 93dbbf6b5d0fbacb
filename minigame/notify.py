"""
Completion notification to the embedding host.

A solved captcha is reported exactly once, with the literal payload
"success". In a browser build the message is posted to the top frame;
natively it is handed to an injected sender.
"""
import sys
from typing import Callable, Optional

from minigame.logging import get_logger

log = get_logger('notify')

SUCCESS_PAYLOAD = "success"

Sender = Callable[[str], None]


def stdout_sender(payload: str) -> None:
    """Write the payload as one line on stdout for a parent process to read."""
    sys.stdout.write(payload + "\n")
    sys.stdout.flush()


class CompletionNotifier:
    """Fire-once success notification.

    Create one notifier per round; notify() only sends on its first call.
    """

    def __init__(self, sender: Optional[Sender] = None):
        """
        Args:
            sender: Callable receiving the payload when not running in a
                browser. Defaults to stdout_sender.
        """
        self._sender = sender or stdout_sender
        self._sent = False

    @property
    def sent(self) -> bool:
        return self._sent

    def notify(self) -> bool:
        """Send the success payload if it has not been sent yet.

        Returns:
            True if this call sent the notification.
        """
        if self._sent:
            return False
        self._sent = True

        try:
            if sys.platform == 'emscripten':
                import platform
                platform.window.top.postMessage(SUCCESS_PAYLOAD, '*')
            else:
                self._sender(SUCCESS_PAYLOAD)
        except Exception:
            # Transport errors are logged, never raised
            log.exception("Failed to deliver completion notification")
            return True

        log.info("Completion notification sent")
        return True
