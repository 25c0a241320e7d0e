"""Dynamic programs sped up by lower envelopes of lines."""

from __future__ import annotations

from .convex_hull import LiChaoTree, Line


def monster_game(initial_skill: int, strengths, skills) -> int:
    """Return the least time to kill the last monster.

    Killing a monster of strength ``s`` with skill ``f`` takes ``s * f`` time;
    after killing monster ``i`` the skill becomes ``skills[i]``. Monsters are
    met in order and any but the last may be skipped.
    """
    strengths = list(strengths)
    skills = list(skills)
    if not strengths:
        raise ValueError("there must be at least one monster")
    if len(strengths) != len(skills):
        raise ValueError("strengths and skills must have the same length")
    hull = LiChaoTree(min(strengths), max(strengths))
    hull.add(Line(initial_skill, 0))
    time = 0
    for strength, skill in zip(strengths, skills):
        time = hull.query(strength)
        hull.add(Line(skill, time))
    return time


def houses_schools(children, schools: int) -> int:
    """Return the least total walking distance with ``schools`` schools placed in houses.

    House ``i`` (1-based) holds ``children[i - 1]`` children, each walking to
    the nearest school; houses lie one unit apart.
    """
    children = list(children)
    n = len(children)
    if n == 0:
        raise ValueError("there must be at least one house")
    if not 1 <= schools <= n:
        raise ValueError(f"schools must be in 1..{n}")
    if any(count < 0 for count in children):
        raise ValueError("children counts must not be negative")

    pref = [0]
    left = [0]
    right = [0]
    for house, count in enumerate(children, start=1):
        pref.append(pref[-1] + count)
        left.append(left[-1] + count * house)
        right.append(right[-1] + count * (n - house))
    hi = max(n, pref[n])

    peak: list[int | None] = [0] + [None] * n
    valley = [0] * (n + 1)
    for _ in range(schools):
        before = LiChaoTree(0, hi)
        after = LiChaoTree(0, hi)
        before.add(Line(0, 0))
        valley = [0] * (n + 1)
        next_peak: list[int | None] = [0] * (n + 1)
        for i in range(n + 1):
            valley[i] = right[i] - (n - i) * pref[i] + before.query(i)
            if peak[i] is not None:
                before.add(Line(-pref[i], n * pref[i] - right[i] + peak[i]))
            after.add(Line(-i, valley[i] + i * pref[i] - left[i]))
            next_peak[i] = left[i] + after.query(pref[i])
        peak = next_peak
    return min(valley[n], peak[n])