from raytracer.canvas import Canvas
from raytracer.projectile import Environment, Projectile, trajectory
from raytracer.typings.color import BLACK, RED
from raytracer.utils.tuples import origin, point, vector


def test_tick_moves_then_accelerates():
    projectile = Projectile(origin(), vector(1, 1, 0))
    env = Environment(gravity=vector(0, -0.5, 0), wind=vector(-0.1, 0, 0))

    after_one = projectile.tick(env, 1.0)
    assert after_one.position == point(1, 1, 0)
    assert after_one.velocity == vector(0.9, 0.5, 0)

    after_two = projectile.tick(env, 2.0)
    assert after_two.position == point(2, 2, 0)
    assert after_two.velocity == vector(0.8, 0.0, 0)


def test_bounds_and_drawing_flip_y():
    canvas = Canvas(10, 5)
    projectile = Projectile(point(2, 1, 0), vector(0, 0, 0))
    assert not projectile.is_out_of_bounds(canvas)
    projectile.draw_on(canvas)
    assert canvas.pixel_at(2, 3) == RED
    assert canvas.pixel_at(2, 1) == BLACK

    assert Projectile(point(-1, 0, 0), vector(0, 0, 0)).is_out_of_bounds(canvas)
    assert Projectile(point(0, 5, 0), vector(0, 0, 0)).is_out_of_bounds(canvas)


def test_trajectory_stops_when_leaving_canvas():
    canvas = Canvas(50, 30)
    projectile = Projectile(point(0, 1, 0), vector(1, 1.8, 0).normalize() * 5)
    env = Environment(gravity=vector(0, -0.1, 0), wind=vector(-0.01, 0, 0))
    ticks = trajectory(projectile, env, canvas, dtime=1.0)
    assert ticks > 0
    assert canvas.pixel_at(0, 28) == RED


def test_coords_round_halves_away_from_zero():
    assert Projectile(point(2.5, 0.5, 0), vector(0, 0, 0)).coords() == (3, 1)
    assert Projectile(point(-2.5, 1.49, 0), vector(0, 0, 0)).coords() == (-3, 1)
