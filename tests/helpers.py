from frostfire.state.level import build_level

CORRIDOR = [
    [1, 1, 1, 1, 1],
    [1, 0, 0, 0, 1],
    [1, 1, 1, 1, 1],
]


def corridor_level(**overrides):
    kwargs = dict(
        tiles=CORRIDOR,
        hazards=[(3, 1)],
        platforms=[((1, 2), 3)],
        player_start=(1, 1),
        tile_size=(16, 16),
    )
    kwargs.update(overrides)
    return build_level(**kwargs)
