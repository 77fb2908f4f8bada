from __future__ import annotations

import pytest

from tty_editor.runtime.config import EditorConfig


def test_defaults() -> None:
    config = EditorConfig()
    assert config.tab_stop == 8
    assert config.quit_times == 1
    assert config.message_timeout == 5.0
    assert config.banner == "Text editor -- version 0.1"


def test_from_env_reads_prefixed_variables() -> None:
    config = EditorConfig.from_env(
        {
            "TTY_EDITOR_TAB_STOP": "4",
            "TTY_EDITOR_QUIT_TIMES": "3",
            "TTY_EDITOR_MESSAGE_TIMEOUT": "1.5",
            "TAB_STOP": "99",
        }
    )
    assert (config.tab_stop, config.quit_times, config.message_timeout) == (4, 3, 1.5)


def test_from_env_ignores_unparseable_values() -> None:
    config = EditorConfig.from_env({"TTY_EDITOR_TAB_STOP": "wide"})
    assert config.tab_stop == 8


def test_with_overrides_skips_none() -> None:
    config = EditorConfig(tab_stop=2).with_overrides(tab_stop=None, quit_times=0)
    assert config.tab_stop == 2
    assert config.quit_times == 0


@pytest.mark.parametrize(
    "changes",
    [{"tab_stop": 0}, {"quit_times": -1}, {"message_timeout": -0.1}],
)
def test_invalid_values_rejected(changes: dict) -> None:
    with pytest.raises(ValueError):
        EditorConfig(**changes)
