"""
Minigame runtime.

Provides:
- scheduler: EventScheduler servicing input-armed callbacks on a fixed tick
- input: InputEvent model and host input sources (pygame, scripted)
- game_state: Standard GameState enum for rounds
- notify: Fire-once completion notification to the embedding host
- logging: Per-module leveled logging
"""

from minigame.game_state import GameState
from minigame.notify import CompletionNotifier, SUCCESS_PAYLOAD
from minigame.scheduler import EventScheduler, ListenerRegistration

__all__ = [
    'GameState',
    'CompletionNotifier',
    'SUCCESS_PAYLOAD',
    'EventScheduler',
    'ListenerRegistration',
]
