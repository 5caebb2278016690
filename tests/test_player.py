import pytest

from orbcatch.player import MAX_SPEED, SPRITE_SIZE, Direction, Player, make_player_sprites


def test_initial_state():
    p = Player()
    assert (p.x, p.y, p.speed, p.direction) == (100, 100, 0, Direction.RIGHT)


@pytest.mark.parametrize(
    "method, expected",
    [("up", Direction.UP), ("down", Direction.DOWN), ("left", Direction.LEFT), ("right", Direction.RIGHT)],
)
def test_key_sets_direction_and_speed(method, expected):
    p = Player()
    getattr(p, method)()
    assert p.direction == expected
    assert p.speed == 1


def test_speed_capped():
    p = Player()
    for _ in range(MAX_SPEED + 4):
        p.up()
    assert p.speed == MAX_SPEED


@pytest.mark.parametrize(
    "method, dx, dy",
    [("up", 0, -1), ("down", 0, 1), ("left", -1, 0), ("right", 1, 0)],
)
def test_move_follows_direction(method, dx, dy):
    p = Player()
    getattr(p, method)()
    getattr(p, method)()
    p.move(640, 480)
    assert (p.x, p.y) == (100 + 2 * dx, 100 + 2 * dy)
    assert p.speed == 2


def test_move_clamps_right_edge_and_stops():
    p = Player(x=640 - SPRITE_SIZE, y=100)
    p.right()
    p.move(640, 480)
    assert p.x == 640 - SPRITE_SIZE
    assert p.speed == 0


def test_move_clamps_top_edge_and_stops():
    p = Player(x=100, y=1)
    p.up()
    p.up()
    p.move(640, 480)
    assert p.y == 0
    assert p.speed == 0


def test_move_clamps_bottom_and_left():
    p = Player(x=1, y=480 - SPRITE_SIZE)
    p.down()
    p.move(640, 480)
    assert p.y == 480 - SPRITE_SIZE
    p.left()
    p.left()
    p.move(640, 480)
    assert p.x == 0
    assert p.speed == 0


def test_sprites_one_per_direction():
    sprites = make_player_sprites()
    assert len(sprites) == len(Direction)
    assert all(s.get_size() == (SPRITE_SIZE, SPRITE_SIZE) for s in sprites)


def test_sprite_hair_colour():
    sprites = make_player_sprites()
    for sprite in sprites:
        assert tuple(sprite.get_at((32, 22)))[:3] == (50, 50, 100)


def test_mirrored_sprites_differ():
    sprites = make_player_sprites()
    right = sprites[Direction.RIGHT]
    left = sprites[Direction.LEFT]
    differs = any(
        right.get_at((px, py)) != left.get_at((px, py)) for px in range(SPRITE_SIZE) for py in range(SPRITE_SIZE)
    )
    assert differs


def test_draw_blits_at_position():
    import pygame

    surface = pygame.Surface((300, 300))
    surface.fill((0, 0, 0))
    p = Player(x=50, y=60)
    p.draw(surface, make_player_sprites())
    assert tuple(surface.get_at((50 + 32, 60 + 22)))[:3] == (50, 50, 100)