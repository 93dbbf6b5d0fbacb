"""Common GameState enum for captcha minigames.

Minigames can have additional internal states, but report one of these
through their `state` property so hosts and tests can follow a round.
"""
from enum import Enum


class GameState(Enum):
    """Standard round states.

    States:
        READY: Round set up, waiting for the first press inside the arena
        PLAYING: Active gameplay in progress
        PAUSED: Focus left the arena; the scheduler is paused
        FAILED: Round lost; a fresh round waits behind a "try again" overlay
        WON: Captcha solved; the completion notification has been sent
    """
    READY = "ready"
    PLAYING = "playing"
    PAUSED = "paused"
    FAILED = "failed"
    WON = "won"

    @property
    def is_terminal(self) -> bool:
        """True once the captcha is solved and input no longer matters."""
        return self is GameState.WON
