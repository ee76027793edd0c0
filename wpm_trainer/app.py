"""Pygame UI shell for the WPM Trainer.

Screens:
- Typing test (countdown, word rows, input box, live/final stats)
- Custom duration dialog (overlay on the typing test)
- History (past results, delete one / clear all)

Deterministic timing/scoring/RNG/state lives in wpm_trainer/* (core modules).
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from typing import Protocol

import pygame

from .clock import Clock, RealClock
from .input_tracker import KeyAction, KeyKind, Keystroke
from .persistence import HistoryStore
from .settings import DURATION_PRESETS, SessionConfig
from .typing_core import CharFeedback, Status, TypingSnapshot
from .typing_test import TypingTestController, build_typing_test

log = logging.getLogger("wpm_trainer.app")

WINDOW_SIZE = (960, 540)
TARGET_FPS = 60

BG = (24, 26, 32)
PANEL_BG = (36, 39, 48)
BORDER = (90, 98, 120)
TEXT_MAIN = (235, 235, 245)
TEXT_MUTED = (130, 136, 150)
TEXT_GOOD = (150, 200, 150)
TEXT_BAD = (230, 90, 90)
ACCENT = (90, 150, 240)


class Screen(Protocol):
    def handle_event(self, event: pygame.event.Event) -> None: ...
    def render(self, surface: pygame.Surface) -> None: ...


class App:
    def __init__(self, surface: pygame.Surface) -> None:
        self._surface = surface
        self._screens: list[Screen] = []
        self._tickers: list[Callable[[], None]] = []
        self._running = True

    @property
    def running(self) -> bool:
        return self._running

    def push(self, screen: Screen) -> None:
        self._screens.append(screen)

    def pop(self) -> None:
        # Never pop the last/root screen.
        if len(self._screens) > 1:
            self._screens.pop()

    def quit(self) -> None:
        self._running = False

    def add_ticker(self, tick: Callable[[], None]) -> None:
        """Run ``tick`` once per frame whichever screen is on top."""
        self._tickers.append(tick)

    def update(self) -> None:
        for tick in self._tickers:
            tick()

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.quit()
            return
        if not self._screens:
            return
        self._screens[-1].handle_event(event)

    def render(self) -> None:
        if not self._screens:
            return
        self._screens[-1].render(self._surface)


def keystroke_from_pygame(event: pygame.event.Event) -> Keystroke:
    key = event.key
    if key in (pygame.K_RETURN, pygame.K_KP_ENTER):
        return Keystroke(KeyKind.ENTER)
    if key == pygame.K_ESCAPE:
        return Keystroke(KeyKind.ESCAPE)
    if key == pygame.K_BACKSPACE:
        return Keystroke(KeyKind.BACKSPACE)
    if key in (pygame.K_LCTRL, pygame.K_RCTRL):
        return Keystroke(KeyKind.CONTROL)
    if key == pygame.K_SPACE:
        return Keystroke(KeyKind.SPACE, " ")
    ch = getattr(event, "unicode", "") or ""
    if len(ch) == 1 and ch.isascii() and ch.isalpha():
        return Keystroke(KeyKind.LETTER, ch)
    return Keystroke(KeyKind.OTHER, ch)


class SettingsDialog:
    """Custom duration entry; the text is validated by the engine on save."""

    def __init__(self, *, current_s: int) -> None:
        self.text = str(current_s)
        self.error = False

    def edit(self, event: pygame.event.Event) -> None:
        if event.key == pygame.K_BACKSPACE:
            self.text = self.text[:-1]
            self.error = False
            return
        ch = getattr(event, "unicode", "") or ""
        if len(ch) == 1 and (ch.isdigit() or ch in ".-") and len(self.text) < 8:
            self.text += ch
            self.error = False


class TypingTestScreen:
    def __init__(
        self,
        app: App,
        *,
        engine_factory: Callable[[Callable[[], None]], TypingTestController],
        history: HistoryStore,
    ) -> None:
        self._app = app
        self._engine = engine_factory(self._on_row_boundary)
        self._history = history
        self._dialog: SettingsDialog | None = None
        self._show_live_stats = False

        # Words committed in the current row, with correctness; cleared per row.
        self._row_marks: list[tuple[str, bool]] = []
        self._row_crossed = False

        self._big_font = pygame.font.Font(None, 96)
        self._word_font = pygame.font.Font(None, 38)
        self._small_font = pygame.font.Font(None, 26)
        self._tiny_font = pygame.font.Font(None, 20)

    @property
    def engine(self) -> TypingTestController:
        return self._engine

    def _on_row_boundary(self) -> None:
        self._row_crossed = True

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type != pygame.KEYDOWN:
            return

        if self._dialog is not None:
            self._handle_dialog_key(event)
            return

        if event.key in (pygame.K_F1, pygame.K_F2, pygame.K_F3):
            preset = DURATION_PRESETS[(pygame.K_F1, pygame.K_F2, pygame.K_F3).index(event.key)]
            self._engine.select_duration(preset)
            self._row_marks.clear()
            return
        if event.key == pygame.K_F4:
            self._dialog = SettingsDialog(current_s=self._engine.duration_s)
            return
        if event.key == pygame.K_F5:
            self._app.push(HistoryScreen(self._app, history=self._history))
            return
        if event.key == pygame.K_TAB:
            self._show_live_stats = not self._show_live_stats
            return

        keystroke = keystroke_from_pygame(event)
        before = self._engine.snapshot()
        action = self._engine.handle_key(keystroke)
        if keystroke.kind is KeyKind.ENTER:
            self._row_marks.clear()
            self._row_crossed = False
        elif action is KeyAction.COMMIT and before.head_word is not None:
            after = self._engine.snapshot()
            if self._row_crossed:
                self._row_marks.clear()
                self._row_crossed = False
            else:
                self._row_marks.append((before.head_word, after.correct > before.correct))

    def _handle_dialog_key(self, event: pygame.event.Event) -> None:
        assert self._dialog is not None
        if event.key == pygame.K_ESCAPE:
            self._dialog = None
            return
        if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            if self._engine.save_custom_duration(self._dialog.text):
                self._dialog = None
                self._row_marks.clear()
            else:
                self._dialog.error = True
            return
        self._dialog.edit(event)

    def render(self, surface: pygame.Surface) -> None:
        snap = self._engine.snapshot()

        w, h = surface.get_size()
        surface.fill(BG)

        presets = "   ".join(
            f"F{i + 1}: {s}s" + (" *" if s == snap.duration_s else "")
            for i, s in enumerate(DURATION_PRESETS)
        )
        top = self._small_font.render(f"{presets}   F4: custom   F5: history", True, TEXT_MUTED)
        surface.blit(top, (24, 16))

        countdown = self._big_font.render(str(snap.remaining_s), True, TEXT_MAIN)
        surface.blit(countdown, countdown.get_rect(midtop=(w // 2, 44)))

        if self._show_live_stats or snap.status is Status.FINISHED:
            self._render_stats(surface, snap, y=130)

        words_rect = pygame.Rect(40, 190, w - 80, 150)
        pygame.draw.rect(surface, PANEL_BG, words_rect)
        pygame.draw.rect(surface, BORDER, words_rect, 1)
        self._render_rows(surface, snap, words_rect)

        input_rect = pygame.Rect(w // 2 - 220, words_rect.bottom + 24, 440, 44)
        input_border = TEXT_MUTED if snap.accepting_input else BORDER
        pygame.draw.rect(surface, PANEL_BG, input_rect)
        pygame.draw.rect(surface, input_border, input_rect, 2)
        typed = self._word_font.render(snap.input_buffer, True, TEXT_MAIN)
        surface.blit(typed, (input_rect.x + 10, input_rect.y + (input_rect.h - typed.get_height()) // 2))

        if snap.status is Status.FINISHED:
            hint = "Time! Press Enter to try again."
        elif snap.status is Status.WAITING:
            hint = "Start typing to begin. Enter: reset   Tab: live stats"
        else:
            hint = "Space: next word   Enter: reset   Tab: live stats"
        foot = self._tiny_font.render(hint, True, TEXT_MUTED)
        surface.blit(foot, foot.get_rect(midbottom=(w // 2, h - 12)))

        if self._dialog is not None:
            self._render_dialog(surface, self._dialog)

    def _render_stats(self, surface: pygame.Surface, snap: TypingSnapshot, *, y: int) -> None:
        w = surface.get_width()
        text = f"WPM {snap.wpm}     Accuracy {snap.accuracy}%"
        color = ACCENT if snap.status is Status.FINISHED else TEXT_MAIN
        img = self._small_font.render(text, True, color)
        surface.blit(img, img.get_rect(midtop=(w // 2, y)))

    def _render_rows(self, surface: pygame.Surface, snap: TypingSnapshot, rect: pygame.Rect) -> None:
        space_w = self._word_font.size(" ")[0]
        line_h = self._word_font.get_linesize() + 8
        y = rect.y + 12
        for row_idx, row in enumerate(snap.rows):
            x = rect.x + 14
            if row_idx == 0:
                for word, ok in self._row_marks:
                    img = self._word_font.render(word, True, TEXT_MUTED if ok else TEXT_BAD)
                    surface.blit(img, (x, y))
                    x += img.get_width() + space_w
            for word_idx, word in enumerate(row):
                is_head = row_idx == 0 and word_idx == 0
                for char_idx, ch in enumerate(word):
                    color = TEXT_MAIN
                    if is_head and snap.status is Status.PLAYING and char_idx == snap.cursor_index:
                        if snap.head_feedback is CharFeedback.CORRECT:
                            color = TEXT_GOOD
                        elif snap.head_feedback is CharFeedback.INCORRECT:
                            color = TEXT_BAD
                    img = self._word_font.render(ch, True, color)
                    surface.blit(img, (x, y))
                    x += img.get_width()
                x += space_w
            y += line_h
            if y > rect.bottom - line_h // 2:
                break

    def _render_dialog(self, surface: pygame.Surface, dialog: SettingsDialog) -> None:
        w, h = surface.get_size()
        box = pygame.Rect(w // 2 - 200, h // 2 - 80, 400, 160)
        pygame.draw.rect(surface, PANEL_BG, box)
        pygame.draw.rect(surface, ACCENT, box, 2)
        title = self._small_font.render("Custom duration (seconds)", True, TEXT_MAIN)
        surface.blit(title, (box.x + 16, box.y + 14))
        entry = self._word_font.render(dialog.text + "_", True, TEXT_MAIN)
        surface.blit(entry, (box.x + 16, box.y + 56))
        if dialog.error:
            msg, color = "Enter a positive number.", TEXT_BAD
        else:
            msg, color = "Enter: save   Esc: cancel", TEXT_MUTED
        hint = self._tiny_font.render(msg, True, color)
        surface.blit(hint, (box.x + 16, box.bottom - 30))


class HistoryScreen:
    def __init__(self, app: App, *, history: HistoryStore) -> None:
        self._app = app
        self._history = history
        self._selected = 0
        self._title_font = pygame.font.Font(None, 42)
        self._row_font = pygame.font.Font(None, 30)
        self._hint_font = pygame.font.Font(None, 22)

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type != pygame.KEYDOWN:
            return
        count = len(self._history.records())
        if event.key in (pygame.K_ESCAPE, pygame.K_F5):
            self._app.pop()
        elif event.key == pygame.K_UP and count:
            self._selected = (self._selected - 1) % count
        elif event.key == pygame.K_DOWN and count:
            self._selected = (self._selected + 1) % count
        elif event.key == pygame.K_DELETE and count:
            self._history.remove(self._selected)
            self._selected = max(0, min(self._selected, count - 2))
        elif event.key == pygame.K_c and (event.mod & pygame.KMOD_SHIFT):
            self._history.clear()
            self._selected = 0

    def render(self, surface: pygame.Surface) -> None:
        w, h = surface.get_size()
        surface.fill(BG)
        title = self._title_font.render("Past results", True, TEXT_MAIN)
        surface.blit(title, title.get_rect(midtop=(w // 2, 20)))

        records = self._history.records()
        if not records:
            empty = self._row_font.render("No finished tests yet.", True, TEXT_MUTED)
            surface.blit(empty, empty.get_rect(center=(w // 2, h // 2)))

        line_h = self._row_font.get_linesize() + 6
        max_rows = max(1, (h - 120) // line_h)
        first = max(0, self._selected - max_rows + 1)
        y = 80
        for idx in range(first, min(len(records), first + max_rows)):
            r = records[idx]
            label = f"{r.date} {r.time}    {r.wpm} wpm    {r.accuracy}%    {r.length_s}s"
            color = ACCENT if idx == self._selected else TEXT_MAIN
            img = self._row_font.render(label, True, color)
            surface.blit(img, (60, y))
            y += line_h

        footer = "Up/Down: select  |  Del: remove  |  Shift+C: clear all  |  Esc: back"
        foot = self._hint_font.render(footer, True, TEXT_MUTED)
        surface.blit(foot, foot.get_rect(midbottom=(w // 2, h - 12)))


def _new_seed() -> int:
    return random.SystemRandom().randrange(1, 2**31 - 1)


def run(
    *,
    max_frames: int | None = None,
    event_injector: Callable[[int], None] | None = None,
    history: HistoryStore | None = None,
    config: SessionConfig | None = None,
    engine_clock: Clock | None = None,
) -> int:
    pygame.init()

    pygame.display.set_caption("WPM Trainer")
    surface = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)

    clock = pygame.time.Clock()

    app = App(surface=surface)

    cfg = SessionConfig() if config is None else config
    store = HistoryStore.default(limit=cfg.history_limit) if history is None else history
    log.info("history file: %s", store.path)

    test_clock = RealClock() if engine_clock is None else engine_clock
    seed = _new_seed()
    typing_screen = TypingTestScreen(
        app,
        engine_factory=lambda on_row: build_typing_test(
            clock=test_clock,
            seed=seed,
            config=cfg,
            history=store,
            on_row_boundary=on_row,
        ),
        history=store,
    )
    app.push(typing_screen)
    # The countdown keeps running while the history screen is open.
    app.add_ticker(typing_screen.engine.update)

    frame = 0
    try:
        while app.running:
            if event_injector is not None:
                event_injector(frame)

            for event in pygame.event.get():
                app.handle_event(event)

            app.update()
            app.render()

            pygame.display.flip()

            frame += 1
            if max_frames is not None and frame >= max_frames:
                break

            clock.tick(TARGET_FPS)
    finally:
        pygame.quit()

    return 0
