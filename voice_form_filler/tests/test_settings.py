"""
Tests for runtime configuration.
"""

import pytest

from voice_form_filler.config.settings import Settings, TransitionDelays


@pytest.fixture
def restore_settings(monkeypatch):
    for key in ('MAX_RETRIES', 'LISTEN_DELAY', 'LOG_LEVEL', 'DEBUG_MODE'):
        monkeypatch.setattr(Settings, key, getattr(Settings, key))


def test_update_sets_known_keys_case_insensitively(restore_settings):
    Settings.update(log_level="DEBUG", debug_mode=True, max_retries=5)

    assert Settings.LOG_LEVEL == "DEBUG"
    assert Settings.DEBUG_MODE is True
    assert Settings.MAX_RETRIES == 5


def test_update_ignores_unknown_keys(restore_settings):
    Settings.update(no_such_setting=1)

    assert not hasattr(Settings, 'NO_SUCH_SETTING')


def test_delays_snapshot_current_settings(restore_settings):
    Settings.update(listen_delay=0.25)

    assert TransitionDelays.from_settings().listen == 0.25
    assert TransitionDelays.none() == TransitionDelays()


def test_controller_reads_retry_budget_from_settings(restore_settings, make_controller):
    Settings.update(max_retries=5)

    controller = make_controller(None)

    assert controller.max_retries == 5
