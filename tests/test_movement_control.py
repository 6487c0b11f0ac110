import pytest

from movement_control import Action, SpriteController, clamp, decide_action


def blob_at(x):
    return {'center_x': x, 'center_y': 200, 'area': 20000, 'contour': None}


class TestDecideAction:
    def test_no_blob(self):
        assert decide_action(None) == Action.NONE

    def test_zero_centroid_means_nothing_found(self):
        assert decide_action(blob_at(0)) == Action.NONE

    @pytest.mark.parametrize("x, expected", [
        (1, Action.MOVE_RIGHT),
        (500, Action.MOVE_RIGHT),
        (999, Action.MOVE_RIGHT),
        (1000, Action.NONE),
        (1100, Action.NONE),
        (1200, Action.NONE),
        (1201, Action.MOVE_LEFT),
        (1800, Action.MOVE_LEFT),
    ])
    def test_thresholds(self, x, expected):
        assert decide_action(blob_at(x)) == expected


def test_clamp():
    assert clamp(5, 10, 800) == 10
    assert clamp(900, 10, 800) == 800
    assert clamp(400, 10, 800) == 400


class TestSpriteController:
    def test_starting_position(self):
        assert SpriteController().position == (500, 500)

    def test_steps(self):
        controller = SpriteController()

        assert controller.apply(Action.MOVE_RIGHT) == (510, 500)
        assert controller.apply(Action.MOVE_LEFT) == (500, 500)
        assert controller.apply(Action.NONE) == (500, 500)

    def test_position_stays_in_range(self):
        controller = SpriteController()

        for _ in range(100):
            controller.apply(Action.MOVE_RIGHT)
        assert controller.x == 800

        for _ in range(100):
            controller.apply(Action.MOVE_LEFT)
        assert controller.x == 10
        assert controller.y == 500

    def test_start_outside_range_is_clamped(self):
        assert SpriteController(start=(2000, 40)).position == (800, 40)

    def test_logs_only_action_changes(self, caplog):
        controller = SpriteController()
        with caplog.at_level("INFO", logger="movement_control"):
            controller.apply(Action.MOVE_RIGHT)
            controller.apply(Action.MOVE_RIGHT)
            controller.apply(Action.NONE)

        messages = [r.getMessage() for r in caplog.records if r.name == "movement_control"]
        assert messages == ["Action: MOVE_RIGHT", "Action: NONE"]
