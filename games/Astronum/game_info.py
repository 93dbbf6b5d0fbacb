"""
Astronum - Game Info

Steer a ship into the asteroids that solve an addition equation.
"""

# Game metadata
NAME = "Astronum"
DESCRIPTION = "Steer into the asteroids whose numbers solve the equation."
VERSION = "1.0.0"
AUTHOR = "Astronum Team"

# CLI argument definitions
ARGUMENTS = [
    {
        'name': '--count',
        'type': int,
        'default': None,
        'help': 'Number of asteroids (minimum 3, default: 6)'
    },
    {
        'name': '--max-sum',
        'type': int,
        'default': None,
        'help': 'Exclusive bound on asteroid values and on any three of them summed (default: 100)'
    },
    {
        'name': '--width',
        'type': int,
        'default': None,
        'help': 'Window width in pixels (default: 480)'
    },
    {
        'name': '--height',
        'type': int,
        'default': None,
        'help': 'Window height in pixels, equation strip included (default: 560)'
    },
    {
        'name': '--seed',
        'type': int,
        'default': None,
        'help': 'Random seed for reproducible rounds'
    },
    {
        'name': '--legacy-steering',
        'action': 'store_true',
        'default': False,
        'help': 'Use the legacy sqrt(dx + dy) steering distance'
    },
]


def get_game_mode(source, **kwargs):
    """
    Build an AstronumMode from parsed CLI options.

    Options that are None keep the config.py defaults; unknown options are
    ignored.

    Args:
        source: Input source feeding the game
        **kwargs: CLI options (count, max_sum, width, height, seed,
            legacy_steering) and optionally a completion sender
    """
    from games.Astronum.game_mode import AstronumMode

    accepted = ('count', 'max_sum', 'seed', 'legacy_steering', 'sender')
    options = {name: kwargs[name] for name in accepted if kwargs.get(name) is not None}

    # Window size options are named after the window, not the arena
    if kwargs.get('width') is not None:
        options['screen_width'] = kwargs['width']
    if kwargs.get('height') is not None:
        options['screen_height'] = kwargs['height']

    return AstronumMode(source, **options)
