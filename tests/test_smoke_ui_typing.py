from __future__ import annotations

import os
from pathlib import Path


def _keydown(key: int, unicode: str = "", mod: int = 0):
    import pygame

    return pygame.event.Event(pygame.KEYDOWN, {"key": key, "unicode": unicode, "mod": mod})


def test_ui_smoke_type_open_dialogs_and_history(tmp_path: Path) -> None:
    # Headless SDL for CI.
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

    import pygame

    from wpm_trainer.app import run
    from wpm_trainer.persistence import HistoryStore

    script = {
        1: [_keydown(pygame.K_TAB)],
        2: [_keydown(pygame.K_h, "h"), _keydown(pygame.K_i, "i"), _keydown(pygame.K_SPACE, " ")],
        3: [_keydown(pygame.K_LCTRL), _keydown(pygame.K_BACKSPACE)],
        4: [_keydown(pygame.K_RETURN)],
        # Custom duration dialog: invalid entry keeps it open, Esc dismisses.
        5: [_keydown(pygame.K_F4)],
        6: [_keydown(pygame.K_BACKSPACE), _keydown(pygame.K_BACKSPACE), _keydown(pygame.K_MINUS, "-"), _keydown(pygame.K_5, "5")],
        7: [_keydown(pygame.K_RETURN)],
        8: [_keydown(pygame.K_ESCAPE)],
        9: [_keydown(pygame.K_F2)],
        # History screen and back.
        10: [_keydown(pygame.K_F5)],
        11: [_keydown(pygame.K_DOWN), _keydown(pygame.K_DELETE)],
        12: [_keydown(pygame.K_c, "C", pygame.KMOD_SHIFT)],
        13: [_keydown(pygame.K_ESCAPE)],
    }

    def inject(frame: int) -> None:
        for event in script.get(frame, []):
            pygame.event.post(event)

    store = HistoryStore(tmp_path / "history.json")
    assert run(max_frames=20, event_injector=inject, history=store) == 0
    assert store.records() == []


def test_ui_countdown_finishes_while_history_screen_is_open(tmp_path: Path) -> None:
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

    import pygame

    from tests.fakes import FakeClock
    from wpm_trainer.app import run
    from wpm_trainer.persistence import HistoryStore
    from wpm_trainer.settings import SessionConfig

    clock = FakeClock()
    script = {
        1: [_keydown(pygame.K_a, "a")],
        2: [_keydown(pygame.K_F5)],
    }

    def inject(frame: int) -> None:
        for event in script.get(frame, []):
            pygame.event.post(event)
        # History stays on top from frame 2 on; the clock keeps moving.
        if frame >= 3:
            clock.advance(1.0)

    store = HistoryStore(tmp_path / "history.json")
    exit_code = run(
        max_frames=10,
        event_injector=inject,
        history=store,
        config=SessionConfig(duration_s=1),
        engine_clock=clock,
    )
    assert exit_code == 0

    records = store.records()
    assert len(records) == 1
    assert records[0].length_s == 1
