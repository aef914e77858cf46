from pygame.math import Vector2

from aysteroids.score import Mineral, ScoreSystem


def test_starts_at_zero():
    scores = ScoreSystem()
    assert scores.score == 0
    assert scores.highscore == 0


def test_add_score_accumulates_and_notifies():
    seen = []
    scores = ScoreSystem(seen.append)
    scores.add_score(3)
    scores.add_score(4)
    assert scores.score == 3 + 4
    assert seen == [3, 3 + 4]


def test_setting_score_notifies():
    seen = []
    scores = ScoreSystem(seen.append)
    scores.add_score(5)
    scores.score = 0
    assert scores.score == 0
    assert seen[-1] == 0


def test_highscore_does_not_notify():
    seen = []
    scores = ScoreSystem(seen.append)
    scores.highscore = 10
    assert scores.highscore == 10
    assert seen == []


def test_no_callback_is_fine():
    scores = ScoreSystem()
    scores.add_score(5)
    assert scores.score == 5


def test_mineral_holds_fields():
    mineral = Mineral(Vector2(1, 2), 9)
    assert mineral.position == Vector2(1, 2)
    assert mineral.minerals == 9