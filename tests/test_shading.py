import pytest

from raymaze.shading import floor_shade, shade_bands, wall_shade, wall_span


def test_shade_bands_are_brightest_first() -> None:
    bands = shade_bands(20.0, 5)
    assert [level for _limit, level in bands] == [4, 3, 2, 1]
    assert [limit for limit, _level in bands] == pytest.approx([5.0, 20.0 / 3, 10.0, 20.0])


def test_wall_shade_band_edges() -> None:
    # level L while distance < max_depth / L
    assert wall_shade(0.5, 20.0, 9) == 8
    assert wall_shade(20.0 / 8 - 1e-6, 20.0, 9) == 8
    assert wall_shade(20.0 / 8, 20.0, 9) == 7
    assert wall_shade(9.99, 20.0, 9) == 2
    assert wall_shade(10.0, 20.0, 9) == 1
    assert wall_shade(19.99, 20.0, 9) == 1


@pytest.mark.parametrize("distance", [20.0, 25.0, 1e9, float("inf")])
def test_wall_shade_at_or_beyond_max_depth_is_background(distance: float) -> None:
    assert wall_shade(distance, 20.0, 9) == 0


def test_wall_shade_is_non_increasing_with_distance() -> None:
    levels = 20
    previous = levels
    for i in range(0, 3000):
        level = wall_shade(i * 0.01, 25.0, levels)
        assert 0 <= level < levels
        assert level <= previous
        previous = level


def test_wall_shade_single_level() -> None:
    assert wall_shade(1.0, 20.0, 1) == 0


def test_floor_shade_gradient() -> None:
    h, levels = 40, 20
    assert floor_shade(20, h, levels) == 0  # horizon
    assert floor_shade(5, h, levels) == 0  # above horizon clamps
    assert floor_shade(39, h, levels) == int((19 / 20) * 19)
    assert floor_shade(60, h, levels) == levels - 1  # below screen clamps

    values = [floor_shade(row, h, levels) for row in range(h // 2, h)]
    assert values == sorted(values)


def test_floor_shade_degenerate_screen() -> None:
    assert floor_shade(0, 0, 10) == 0


def test_wall_span_matches_projection() -> None:
    assert wall_span(4.0, 40) == (10, 30)
    assert wall_span(20.0, 40) == (18, 22)


def test_wall_span_close_walls_fill_the_column() -> None:
    assert wall_span(1.0, 40) == (0, 40)
    assert wall_span(0.5, 40) == (0, 40)


def test_wall_span_zero_distance_does_not_divide_by_zero() -> None:
    assert wall_span(0.0, 24) == (0, 24)
