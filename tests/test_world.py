import pytest

from advent.body import BoxBody
from advent.palette import GROUND_COLOR, VALID_COLORS
from advent.vector import Vec2
from advent.world import (
    BLOCK_SIZE,
    LEVEL,
    LEVEL_HEIGHT,
    LEVEL_WIDTH,
    Collision,
    World,
    intersect_polygons,
    project_vertices,
)


def _box(x, y, size=2.0, is_static=False):
    return BoxBody(x, y, 0.0, size, size, VALID_COLORS[0], is_static)


def test_world_bodies_fit_in_level_grid():
    assert len(LEVEL) == LEVEL_WIDTH * LEVEL_HEIGHT
    world = World()
    for body in world.bodies:
        column = int(body.position.x // BLOCK_SIZE)
        row = int(body.position.y // BLOCK_SIZE)
        assert 0 <= column < LEVEL_WIDTH
        assert 0 <= row < LEVEL_HEIGHT


def test_world_has_player_and_one_block_per_tile():
    world = World()
    assert len(world.bodies) == 1 + LEVEL.count("#")
    assert not world.player.is_static
    assert all(body.is_static for body in world.bodies[1:])
    assert all(body.color == GROUND_COLOR for body in world.bodies[1:])


def test_player_starting_position_and_color():
    world = World()
    half = BLOCK_SIZE / 2
    assert world.player.position == Vec2(half, 11 * BLOCK_SIZE + half)
    assert world.player.color == VALID_COLORS[2]


def test_blocks_sit_on_hash_tiles():
    world = World()
    for body in world.bodies[1:]:
        column = int(body.position.x // BLOCK_SIZE)
        row = int(body.position.y // BLOCK_SIZE)
        assert LEVEL[row * LEVEL_WIDTH + column] == "#"


def test_project_vertices():
    vertices = [Vec2(0, 0), Vec2(1, 2), Vec2(3, -1)]
    assert project_vertices(vertices, Vec2(1, 0)) == (0, 3)
    assert project_vertices(vertices, Vec2(0, 1)) == (-1, 2)


def test_intersect_overlapping_boxes():
    a = _box(0.0, 0.0)
    b = _box(1.5, 0.0)
    hit = intersect_polygons(a.vertices, b.vertices, a.position, b.position)
    assert isinstance(hit, Collision)
    assert hit.normal.x == pytest.approx(1.0)
    assert hit.normal.y == pytest.approx(0.0)
    assert hit.depth == pytest.approx(0.5)


def test_intersect_normal_points_from_a_to_b():
    a = _box(1.5, 0.0)
    b = _box(0.0, 0.0)
    hit = intersect_polygons(a.vertices, b.vertices, a.position, b.position)
    assert hit is not None
    assert hit.normal.x == pytest.approx(-1.0)


def test_intersect_separated_boxes():
    a = _box(0.0, 0.0)
    b = _box(5.0, 0.0)
    assert intersect_polygons(a.vertices, b.vertices, a.position, b.position) is None


def test_intersect_touching_boxes_is_not_collision():
    a = _box(0.0, 0.0)
    b = _box(2.0, 0.0)
    assert intersect_polygons(a.vertices, b.vertices, a.position, b.position) is None


def test_add_body():
    world = World()
    count = len(world.bodies)
    body = world.add_body((100, 200))
    assert len(world.bodies) == count + 1
    assert world.bodies[-1] is body
    assert body.position == Vec2(100.0, 200.0)
    assert 30.0 <= body.width < 50.0
    assert body.width == body.height
    assert body.color in VALID_COLORS
    assert not body.is_static


def test_remove_body():
    world = World()
    count = len(world.bodies)
    last = world.bodies[-1]
    assert world.remove_body(count - 1) is last
    assert len(world.bodies) == count - 1


def test_remove_body_out_of_range():
    world = World()
    with pytest.raises(IndexError):
        world.remove_body(len(world.bodies))


def test_resolve_collision_conserves_momentum_and_separates():
    world = World()
    a = _box(0.0, 0.0)
    b = _box(1.5, 0.0)
    a.linear_velocity = Vec2(10.0, 0.0)
    b.linear_velocity = Vec2(-10.0, 0.0)
    world.resolve_collision(a, b, Vec2(1.0, 0.0), 0.5)
    total = a.linear_velocity + b.linear_velocity
    assert total.x == pytest.approx(0.0)
    assert b.linear_velocity.x > a.linear_velocity.x


def test_resolve_collision_ignores_separating_bodies():
    world = World()
    a = _box(0.0, 0.0)
    b = _box(1.5, 0.0)
    a.linear_velocity = Vec2(-3.0, 0.0)
    b.linear_velocity = Vec2(3.0, 0.0)
    world.resolve_collision(a, b, Vec2(1.0, 0.0), 0.5)
    assert a.linear_velocity == Vec2(-3.0, 0.0)
    assert b.linear_velocity == Vec2(3.0, 0.0)


def test_handle_collision_pushes_dynamic_bodies_apart():
    world = World()
    world.bodies = [_box(0.0, 0.0), _box(1.5, 0.0)]
    world.handle_collision()
    a, b = world.bodies
    assert b.position.x - a.position.x >= 2.0 - 1e-9


def test_step_leaves_static_blocks_in_place():
    world = World()
    before = [body.position for body in world.bodies[1:]]
    world.step(1 / 60)
    assert [body.position for body in world.bodies[1:]] == before


def test_player_falls_and_lands_on_ground():
    world = World()
    start_y = world.player.position.y
    for _ in range(30):
        world.step(1 / 20)
    player = world.player
    assert player.position.y > start_y
    assert player.touch_ground
    assert player.position.y + player.height / 2 == pytest.approx(13 * BLOCK_SIZE, abs=1.0)