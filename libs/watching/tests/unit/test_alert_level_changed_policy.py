"""AlertLevelChangedPolicy 單元測試"""

from libs.watching.src.application.policies.alert_level_changed_policy import (
    AlertLevelChangedPolicy,
)


def levels(g: int, r: int, s: int) -> dict:
    return {"g": g, "r": r, "s": s}


class TestAlertLevelChangedPolicy:
    """SWPC 警報等級變化策略測試"""

    def test_below_minimum_does_not_notify(self) -> None:
        """全部低於最低通知等級不應發送"""
        policy = AlertLevelChangedPolicy(g_min=2, r_min=2, s_min=2)

        assert policy.evaluate(levels(1, 1, 1)) is False
        assert policy.evaluate(levels(0, 0, 0)) is False

    def test_first_qualifying_level_notifies(self) -> None:
        policy = AlertLevelChangedPolicy(g_min=2, r_min=2, s_min=2)

        assert policy.evaluate(levels(2, 0, 0)) is True

    def test_any_scale_change_notifies_immediately(self) -> None:
        """(2,0,0) → (2,1,0) 應立即發送，不受冷卻限制"""
        policy = AlertLevelChangedPolicy(g_min=2, r_min=2, s_min=2)
        policy.mark_sent(levels(2, 0, 0))

        assert policy.evaluate(levels(2, 1, 0)) is True

    def test_repeated_levels_do_not_notify(self) -> None:
        """相同等級不應重複發送"""
        policy = AlertLevelChangedPolicy(g_min=2, r_min=2, s_min=2)
        policy.mark_sent(levels(2, 1, 0))

        assert policy.last_levels == (2, 1, 0)
        assert policy.evaluate(levels(2, 1, 0)) is False

    def test_drop_below_minimum_keeps_last_levels(self) -> None:
        """降到最低等級以下不發送，也不更新上次等級"""
        policy = AlertLevelChangedPolicy(g_min=2, r_min=2, s_min=2)
        policy.mark_sent(levels(3, 0, 0))

        assert policy.evaluate(levels(1, 0, 0)) is False
        assert policy.last_levels == (3, 0, 0)
        assert policy.evaluate(levels(3, 0, 0)) is False

    def test_per_scale_minimums(self) -> None:
        policy = AlertLevelChangedPolicy(g_min=4, r_min=1, s_min=5)

        assert policy.evaluate(levels(3, 0, 4)) is False
        assert policy.evaluate(levels(0, 1, 0)) is True

    def test_reset_clears_state(self) -> None:
        policy = AlertLevelChangedPolicy(g_min=2, r_min=2, s_min=2)
        policy.mark_sent(levels(2, 0, 0))
        policy.reset()

        assert policy.last_levels == (0, 0, 0)
        assert policy.evaluate(levels(2, 0, 0)) is True
