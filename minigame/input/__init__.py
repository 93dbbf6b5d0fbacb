"""
Input abstraction layer.

Provides unified input handling that works identically with keyboard,
mouse, touch or scripted sources.
"""

from minigame.input.input_event import InputEvent
from minigame.input.sources import InputSource, PygameInputSource, ScriptedInputSource

__all__ = ['InputEvent', 'InputSource', 'PygameInputSource', 'ScriptedInputSource']
