"""
Tests for the adversary turn pacers.
"""

import pytest
from skirmish.combat.pacing import sleep_pacer


def test_sleep_pacer_sleeps_for_delay(mocker):
    sleep = mocker.patch("skirmish.combat.pacing.time.sleep")
    pacer = sleep_pacer(0.25)

    sleep.assert_not_called()
    pacer()
    pacer()

    assert sleep.call_count == 2
    sleep.assert_called_with(0.25)


def test_sleep_pacer_rejects_negative_delay():
    with pytest.raises(ValueError):
        sleep_pacer(-1.0)
