"""
Input sources: the host-facing side of the input layer.
"""
from minigame.input.sources.base import InputSource, InputHandler
from minigame.input.sources.pygame_source import PygameInputSource
from minigame.input.sources.scripted import ScriptedInputSource

__all__ = ['InputSource', 'InputHandler', 'PygameInputSource', 'ScriptedInputSource']
