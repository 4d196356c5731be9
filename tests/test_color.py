from raytracer.typings.color import BLACK, RED, WHITE, Color


def test_colors_are_red_green_blue_tuples():
    c = Color(-0.5, 0.4, 1.7)
    assert (c.red, c.green, c.blue) == (-0.5, 0.4, 1.7)


def test_adding_and_subtracting_colors():
    c1 = Color(0.9, 0.6, 0.75)
    c2 = Color(0.7, 0.1, 0.25)
    assert c1 + c2 == Color(1.6, 0.7, 1.0)
    assert c1 - c2 == Color(0.2, 0.5, 0.5)


def test_multiplying_by_scalar_is_commutative():
    c = Color(0.2, 0.3, 0.4)
    assert c * 2 == Color(0.4, 0.6, 0.8)
    assert 2 * c == Color(0.4, 0.6, 0.8)
    assert c / 2 == Color(0.1, 0.15, 0.2)


def test_multiplying_colors_is_hadamard_product():
    assert Color(1, 0.2, 0.4) * Color(0.9, 1, 0.1) == Color(0.9, 0.2, 0.04)


def test_clamp():
    assert Color(1.5, -0.5, 0.5).clamp() == Color(1, 0, 0.5)


def test_ppm_channels_round_up():
    assert Color(2, 0, 0.5).to_ppm_channels() == (255, 0, 128)
    assert Color(-1, 0.001, 1).to_ppm_channels() == (0, 1, 255)


def test_constants():
    assert BLACK == Color(0, 0, 0)
    assert WHITE == Color(1, 1, 1)
    assert RED == Color(1, 0, 0)
    assert -WHITE == Color(-1, -1, -1)
