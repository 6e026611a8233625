import pytest

from rockfield.physics import (
    Body,
    BoundingVolumeCircle,
    BoundingVolumeHyperRectangle,
    Physics,
)


def circle_body(position, radius, velocity, *args):
    return Body(BoundingVolumeCircle(position, radius), velocity, *args)


def three_bodies():
    return (
        circle_body((2.0, 2.0), 1.0, (-0.5, -0.5)),
        circle_body((0.0, 0.0), 1.0, (0.0, -1.0)),
        circle_body((0.0, -3.0), 1.0, (0.0, 0.5)),
    )


def test_circle_does_not_collide():
    assert not BoundingVolumeCircle((0.0, 0.0), 1.0).collides(BoundingVolumeCircle((2.0, 2.0), 0.5))


def test_circle_collides():
    assert BoundingVolumeCircle((0.0, 0.0), 1.0).collides(BoundingVolumeCircle((1.0, 1.0), 1.0))


def test_circle_collides_inside():
    assert BoundingVolumeCircle((0.0, 0.0), 10.0).collides(BoundingVolumeCircle((1.0, 1.0), 1.0))


def test_circle_collides_inside2():
    assert BoundingVolumeCircle((2.0, 2.0), 1.0).collides(BoundingVolumeCircle((0.0, 0.0), 10.0))


def test_rectangle_does_not_collide():
    first = BoundingVolumeHyperRectangle((0.0, 0.0), (1.0, 1.0))
    second = BoundingVolumeHyperRectangle((2.0, 2.0), (0.5, 0.5))
    assert not first.collides(second)


def test_rectangle_collides1():
    first = BoundingVolumeHyperRectangle((0.0, 0.0), (1.0, 1.0))
    second = BoundingVolumeHyperRectangle((0.5, 0.5), (1.0, 1.0))
    assert first.collides(second)


def test_rectangle_collides2():
    first = BoundingVolumeHyperRectangle((1.0, 1.0), (1.0, 1.0))
    second = BoundingVolumeHyperRectangle((0.0, 0.0), (1.5, 2.0))
    assert first.collides(second)


def test_rectangle_collides_inside():
    first = BoundingVolumeHyperRectangle((1.0, 1.0), (3.0, 3.0))
    second = BoundingVolumeHyperRectangle((2.0, 2.0), (0.5, 0.5))
    assert first.collides(second)


def test_rectangle_edge_length():
    rectangle = BoundingVolumeHyperRectangle((0.0, 0.0), (1.5, 2.0))
    assert rectangle.edge_length(0) == pytest.approx(1.5)
    assert rectangle.edge_length(1) == pytest.approx(2.0)


def test_rectangle_dimension_mismatch():
    with pytest.raises(ValueError):
        BoundingVolumeHyperRectangle((0.0, 0.0), (1.0,))


def test_body_move():
    body = circle_body((0.0, 0.0), 1.0, (1.0, 0.0))
    body.move()
    assert body.position[0] == pytest.approx(1.0, abs=1e-5)
    assert body.position[1] == pytest.approx(0.0, abs=1e-5)


def test_body_is_marked_for_deletion():
    body = circle_body((0.0, 0.0), 1.0, (1.0, 0.0))
    body.mark_for_deletion()
    assert body.is_marked_for_deletion()


def test_body_set_time_for_deletion_false():
    body = circle_body((0.0, 0.0), 1.0, (1.0, 0.0))
    body.set_time_to_delete(1.0)
    body.move(0.7)
    assert not body.is_marked_for_deletion()


def test_body_time_set_time_to_delete():
    body = circle_body((0.0, 0.0), 1.0, (1.0, 0.0))
    body.set_time_to_delete(1.0)
    assert not body.is_marked_for_deletion()
    assert body.get_time_to_delete() == pytest.approx(1.0)


def test_body_time_set_time_to_delete_and_move():
    body = circle_body((0.0, 0.0), 1.0, (1.0, 0.0))
    body.set_time_to_delete(1.0)
    body.move(1.1)
    assert body.is_marked_for_deletion()


def test_body_without_lifetime_never_deleted():
    body = circle_body((0.0, 0.0), 1.0, (1.0, 0.0))
    body.move(100.0)
    assert not body.is_marked_for_deletion()


def test_body_bounce0():
    body = circle_body((0.0, 0.0), 1.0, (1.0, 0.0))
    body.bounce(0)
    assert body.velocity[0] == pytest.approx(-1.0, abs=1e-5)


def test_body_bounce1():
    body = circle_body((0.0, 0.0), 1.0, (0.0, 1.0))
    body.bounce(1)
    assert body.velocity[1] == pytest.approx(-1.0, abs=1e-5)


def test_body_bounce_bounce0():
    body = circle_body((0.0, 0.0), 1.0, (-1.5, 0.0))
    body.bounce(0)
    body.bounce(0)
    assert body.velocity[0] == pytest.approx(-1.5, abs=1e-5)


def test_body_bounce_out_of_range():
    body = circle_body((0.0, 0.0), 1.0, (1.0, 0.0))
    with pytest.raises(IndexError):
        body.bounce(2)


def test_body_accelerate_and_move():
    body = circle_body((0.0, 0.0), 1.0, (1.0, 0.0))
    body.accelerate(-0.5)
    body.move()
    assert body.position[0] == pytest.approx(0.5, abs=1e-5)
    assert body.position[1] == pytest.approx(0.0, abs=1e-5)


def test_body_accelerate_and_move_with_minimum_velocity():
    body = circle_body((0.0, 0.0), 1.0, (1.0, 0.0), 10.0, 1.0)
    body.accelerate(-0.5)
    body.move()
    assert body.position[0] == pytest.approx(1.0, abs=1e-5)
    assert body.position[1] == pytest.approx(0.0, abs=1e-5)


def test_body_accelerate_and_move_with_maximum_velocity():
    body = circle_body((0.0, 0.0), 1.0, (1.0, 0.0), 2.0)
    body.accelerate(0.5)
    body.accelerate(0.5)
    body.accelerate(0.5)
    body.move()
    assert body.position[0] == pytest.approx(2.0, abs=1e-5)
    assert body.position[1] == pytest.approx(0.0, abs=1e-5)


def test_body_turn_accumulates_angle():
    body = circle_body((0.0, 0.0), 1.0, (0.0, 0.0))
    body.turn(0.5, 2.0)
    body.turn(0.25)
    assert body.angle == pytest.approx(1.25)


def test_body_fix_called_after_move():
    calls = []

    def fix(body, seconds):
        calls.append((body.position, seconds))
        body.position = (0.0, 0.0)

    body = Body(BoundingVolumeCircle((0.0, 0.0), 1.0), (2.0, 0.0), fix=fix)
    body.move(0.5)
    assert calls == [((1.0, 0.0), 0.5)]
    assert body.position == (0.0, 0.0)


def test_body_velocity_dimension_checked():
    with pytest.raises(ValueError):
        Body(BoundingVolumeCircle((0.0, 0.0), 1.0), (1.0, 0.0, 0.0))


def test_physics_is_area_free_of_bodies_true():
    physics = Physics()
    for body in three_bodies():
        physics.add_body(body)
    physics.tick(0.01)
    assert physics.is_area_free_of_bodies(BoundingVolumeCircle((5.0, 5.0), 1.0))


def test_physics_is_area_free_of_bodies_false():
    physics = Physics()
    physics.add_body(circle_body((2.0, 2.0), 1.0, (-0.5, -0.5)))
    physics.tick()
    assert not physics.is_area_free_of_bodies(BoundingVolumeCircle((0.0, 0.0), 10.0))


def test_physics_is_area_free_with_custom_check():
    physics = Physics()
    physics.add_body(circle_body((2.0, 2.0), 1.0, (-0.5, -0.5)))
    physics.tick()
    area = BoundingVolumeCircle((0.0, 0.0), 10.0)
    assert physics.is_area_free_of_bodies(area, lambda body: False)


def test_physics_tick_check_movement():
    b1, b2, b3 = three_bodies()
    physics = Physics()
    for body in (b1, b2, b3):
        physics.add_body(body)
    physics.tick(1.0)
    assert b1.position == pytest.approx((1.5, 1.5), abs=1e-5)
    assert b2.position == pytest.approx((0.0, -1.0), abs=1e-5)
    assert b3.position == pytest.approx((0.0, -2.5), abs=1e-5)


def test_physics_tick_check_collision():
    b1, b2, b3 = three_bodies()
    collisions = []
    physics = Physics(lambda a, b: True, lambda a, b: collisions.append((a, b)))
    for body in (b1, b2, b3):
        physics.add_body(body)
    physics.tick(1.0)
    assert len(physics.bodies) == 3
    assert b1.position == pytest.approx((1.5, 1.5), abs=1e-5)
    assert b2.position == pytest.approx((0.0, -1.0), abs=1e-5)
    assert b3.position == pytest.approx((0.0, -2.5), abs=1e-5)
    assert len(collisions) == 1
    assert collisions[0][0] is b2 and collisions[0][1] is b3


def test_physics_collision_vetoed_by_check():
    b1, b2, b3 = three_bodies()
    collisions = []
    physics = Physics(lambda a, b: False, lambda a, b: collisions.append((a, b)))
    for body in (b1, b2, b3):
        physics.add_body(body)
    physics.tick(1.0)
    assert collisions == []


def test_physics_tick_bodies_deleted_when_marked_for_deletion():
    b1, b2, b3 = three_bodies()
    b1.set_time_to_delete(1.0)
    b3.set_time_to_delete(2.1)
    deleted = []
    physics = Physics(resolve_deleted_body=deleted.append)
    for body in (b1, b2, b3):
        physics.add_body(body)
    physics.tick(1.0)
    b2.mark_for_deletion()
    physics.tick(1.0)
    assert b1.is_marked_for_deletion()
    assert b2.is_marked_for_deletion()
    assert not b3.is_marked_for_deletion()
    assert len(physics.bodies) == 1
    assert physics.get_body(0) is b3
    assert deleted[0] is b1 and deleted[1] is b2


def test_physics_get_recently_added_bodies():
    body = circle_body((2.0, 2.0), 1.0, (-0.5, -0.5))
    physics = Physics()
    physics.add_body(body)
    physics.tick(1.0)
    added = physics.recently_added_bodies
    assert len(added) == 1
    assert added[0] is body
    physics.tick(1.0)
    assert physics.recently_added_bodies == ()


def test_physics_body_added_only_at_tick():
    physics = Physics()
    physics.add_body(circle_body((2.0, 2.0), 1.0, (0.0, 0.0)))
    assert physics.bodies == ()
    physics.tick()
    assert len(physics.bodies) == 1


def test_physics_get_bodies():
    b1, b2, b3 = three_bodies()
    physics = Physics()
    for body in (b1, b2, b3):
        physics.add_body(body)
    physics.tick(1.0)
    bodies = physics.bodies
    assert len(bodies) == 3
    assert bodies[0] is b1
    assert bodies[1] is b2
    assert bodies[2] is b3


def test_physics_tick_time_kept():
    physics = Physics()
    physics.tick(0.25)
    assert physics.tick_time == pytest.approx(0.25)
    body = circle_body((0.0, 0.0), 1.0, (4.0, 0.0), 4.0)
    physics.add_body(body)
    physics.tick()
    assert body.position[0] == pytest.approx(1.0)


@pytest.mark.parametrize("fps, ticks", [(60, 120), (120, 240)])
def test_physics_tick_time(fps, ticks):
    tick_time = 1.0 / fps
    velocity = 768.0 / 2.0
    body = circle_body((0.0, 0.0), 1.0, (0.0, velocity), velocity)
    physics = Physics()
    physics.add_body(body)
    for _ in range(ticks):
        physics.tick(tick_time)
    assert round(body.position[1]) == pytest.approx(768.0, abs=1e-5)