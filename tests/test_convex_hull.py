import random

import pytest

from cseskit.convex_hull import LiChaoTree, Line, MonotoneHull


def _lower(lines, x):
    return min(line.value(x) for line in lines)


def test_line_value():
    assert Line(2, 3).value(4) == 11


def test_monotone_hull_matches_lower_envelope():
    rng = random.Random(7)
    for _ in range(30):
        slopes = sorted((rng.randint(-50, 50) for _ in range(12)), reverse=True)
        lines = [Line(s, rng.randint(-500, 500)) for s in slopes]
        hull = MonotoneHull()
        for line in lines:
            hull.add(line)
        for x in sorted(rng.randint(-40, 40) for _ in range(25)):
            assert hull.query(x) == _lower(lines, x)


def test_monotone_hull_interleaved_adds_and_queries():
    rng = random.Random(11)
    slopes = sorted((rng.randint(0, 100) for _ in range(40)), reverse=True)
    xs = sorted(rng.randint(0, 100) for _ in range(40))
    hull = MonotoneHull()
    added = []
    for slope, x in zip(slopes, xs):
        line = Line(slope, rng.randint(0, 1000))
        hull.add(line)
        added.append(line)
        assert hull.query(x) == _lower(added, x)


def test_monotone_hull_equal_slopes_keep_lower():
    hull = MonotoneHull()
    hull.add(Line(3, 10))
    hull.add(Line(3, 4))
    hull.add(Line(3, 8))
    assert hull.query(2) == Line(3, 4).value(2)
    assert len(hull) == 1


def test_monotone_hull_empty_query():
    with pytest.raises(ValueError):
        MonotoneHull().query(0)


def test_monotone_hull_rejects_increasing_slope():
    hull = MonotoneHull()
    hull.add(Line(1, 0))
    with pytest.raises(ValueError):
        hull.add(Line(2, 0))


def test_monotone_hull_rejects_decreasing_query():
    hull = MonotoneHull()
    hull.add(Line(1, 0))
    hull.query(5)
    with pytest.raises(ValueError):
        hull.query(4)


def test_li_chao_matches_lower_envelope():
    rng = random.Random(3)
    for _ in range(20):
        tree = LiChaoTree(-30, 30)
        lines = []
        for _ in range(15):
            line = Line(rng.randint(-20, 20), rng.randint(-300, 300))
            tree.add(line)
            lines.append(line)
            x = rng.randint(-30, 30)
            assert tree.query(x) == _lower(lines, x)
        for x in range(-30, 31):
            assert tree.query(x) == _lower(lines, x)


def test_li_chao_single_point_domain():
    tree = LiChaoTree(5, 5)
    tree.add(Line(2, 1))
    tree.add(Line(-1, 20))
    assert tree.query(5) == min(Line(2, 1).value(5), Line(-1, 20).value(5))


def test_li_chao_single_line_everywhere():
    line = Line(-7, 42)
    tree = LiChaoTree(0, 100)
    tree.add(line)
    assert [tree.query(x) for x in range(101)] == [line.value(x) for x in range(101)]


def test_li_chao_errors():
    with pytest.raises(ValueError):
        LiChaoTree(3, 2)
    tree = LiChaoTree(0, 10)
    with pytest.raises(ValueError):
        tree.query(3)
    tree.add(Line(1, 1))
    with pytest.raises(ValueError):
        tree.query(11)
    with pytest.raises(ValueError):
        tree.query(-1)