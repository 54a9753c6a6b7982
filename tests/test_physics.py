import pytest
from pygame.math import Vector2

from endless_runner.world.physics import (
    ArcadePhysics,
    Body,
    hex_to_rgb,
    overlaps,
)


def test_gravity_and_velocity_integrate_for_dynamic_bodies() -> None:
    world = ArcadePhysics(800, 600, gravity_y=600)
    body = world.add_sprite(100, 100, None, (10, 10))
    body.set_velocity_x(50)

    world.step(0.5)

    assert body.velocity.y == pytest.approx(300)
    assert body.y == pytest.approx(250)
    assert body.x == pytest.approx(125)


def test_static_bodies_do_not_move() -> None:
    world = ArcadePhysics()
    wall = world.add_static(400, 725, "foreground", (800, 250))

    world.step(1.0)

    assert wall.position == Vector2(400, 725)


def test_dynamic_body_rests_on_static_and_reports_contact() -> None:
    world = ArcadePhysics(800, 600, gravity_y=600)
    ground = world.add_static(400, 725, None, (800, 250))
    box = world.add_sprite(100, 500, None, (50, 100))
    contacts = []
    world.add_collider(box, ground, lambda a, b: contacts.append((a, b)))

    for _ in range(120):
        world.step(1 / 60)

    assert box.bounds[3] == pytest.approx(600)
    assert box.velocity.y == 0
    assert contacts and contacts[-1] == (box, ground)


def test_dynamic_pair_reports_without_separating() -> None:
    world = ArcadePhysics(gravity_y=0)
    a = world.add_sprite(100, 100, None, (50, 50))
    b = world.add_sprite(120, 100, None, (50, 50))
    hits = []
    world.add_collider(a, b, lambda x, y: hits.append((x, y)))

    world.step(1 / 60)

    assert hits == [(a, b)]
    assert a.x == pytest.approx(100)
    assert b.x == pytest.approx(120)


def test_horizontal_edge_contact_is_not_a_collision() -> None:
    a = Body(position=(0, 0), size=(10, 10))
    b = Body(position=(10, 0), size=(10, 10))
    assert not overlaps(a, b)


def test_world_bounds_clamp() -> None:
    world = ArcadePhysics(800, 600, gravity_y=0)
    body = world.add_sprite(10, 10, None, (50, 100))
    body.collide_world_bounds = True
    body.velocity = Vector2(-500, -500)

    world.step(0.1)

    assert body.bounds[0] == pytest.approx(0)
    assert body.bounds[1] == pytest.approx(0)
    assert body.velocity == Vector2(0, 0)


def test_out_of_bounds_kill_destroys_and_drops_colliders() -> None:
    world = ArcadePhysics(800, 600, gravity_y=0)
    player = world.add_sprite(400, 300, None, (50, 50))
    group = world.add_group()
    leaving = group.create(-20, 300, None, (50, 100))
    leaving.set_velocity_x(-200)
    leaving.out_of_bounds_kill = True
    world.add_collider(player, leaving)

    world.step(0.1)

    assert not leaving.alive
    assert len(group) == 0
    assert leaving not in world.bodies
    assert world.colliders == []


def test_bodies_without_kill_flag_survive_leaving_the_world() -> None:
    world = ArcadePhysics(800, 600, gravity_y=0)
    body = world.add_sprite(-100, 300, None, (50, 50))

    world.step(0.1)

    assert body.alive


def test_group_collider_covers_every_member() -> None:
    world = ArcadePhysics(800, 600, gravity_y=600)
    ground = world.add_static(400, 725, None, (800, 250))
    group = world.add_group()
    first = group.create(200, 500, None, (50, 100))
    second = group.create(600, 500, None, (50, 100))
    world.add_collider(group, ground)

    for _ in range(120):
        world.step(1 / 60)

    assert first.y == pytest.approx(550)
    assert second.y == pytest.approx(550)


def test_pause_freezes_everything() -> None:
    world = ArcadePhysics()
    body = world.add_sprite(100, 100, None, (10, 10))
    body.set_velocity_x(100)
    world.pause()

    world.step(1.0)

    assert body.position == Vector2(100, 100)
    assert body.velocity == Vector2(100, 0)


def test_set_tint_and_hex_to_rgb() -> None:
    body = Body(position=(0, 0), size=(1, 1))
    body.set_tint(0xFF0000)
    assert body.tint == (255, 0, 0)
    assert hex_to_rgb(0x12AB34) == (0x12, 0xAB, 0x34)


def test_pausing_inside_a_handler_skips_remaining_colliders() -> None:
    world = ArcadePhysics(gravity_y=0)
    a = world.add_sprite(100, 100, None, (50, 50))
    b = world.add_sprite(110, 100, None, (50, 50))
    c = world.add_sprite(120, 100, None, (50, 50))
    hits = []

    def first(x, y):
        hits.append("first")
        world.pause()

    world.add_collider(a, b, first)
    world.add_collider(a, c, lambda x, y: hits.append("second"))

    world.step(1 / 60)

    assert hits == ["first"]
