from __future__ import annotations

import os
from typing import Iterable

import pytest

pygame = pytest.importorskip("pygame")

from keybind_engine.adapters.pygame import PygameInputSource  # noqa: E402
from keybind_engine.keybinds import Keybind  # noqa: E402


@pytest.fixture(autouse=True, scope="module")
def headless_pygame():
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    pygame.init()
    yield
    pygame.quit()


class FakePressed:
    def __init__(self, codes: Iterable[int] = ()) -> None:
        self.codes = set(codes)

    def __getitem__(self, code: int) -> bool:
        return code in self.codes


def keydown(code: int) -> "pygame.event.Event":
    return pygame.event.Event(pygame.KEYDOWN, key=code)


def test_nothing_held_before_first_tick() -> None:
    source = PygameInputSource(get_pressed=lambda: FakePressed({pygame.K_x}))

    assert not source.is_held("x")
    assert not source.is_newly_pressed("x")


def test_keydown_edge_lasts_one_tick() -> None:
    state = FakePressed({pygame.K_x})
    source = PygameInputSource(get_pressed=lambda: state)

    source.process_events([keydown(pygame.K_x)])
    source.tick()
    assert source.is_held("x")
    assert source.is_newly_pressed("x")

    source.tick()
    assert source.is_held("x")
    assert not source.is_newly_pressed("x")


def test_plain_modifier_names_match_either_side() -> None:
    state = FakePressed({pygame.K_RSHIFT, pygame.K_x})
    source = PygameInputSource(get_pressed=lambda: state)
    sprint = Keybind("sprint", "Sprint", "x", "shift")

    source.process_events([keydown(pygame.K_x)])
    source.tick()

    assert sprint.is_pressed(source)
    assert sprint.is_down(source)


def test_unknown_key_name_is_not_held() -> None:
    source = PygameInputSource(get_pressed=lambda: FakePressed({pygame.K_x}))
    source.tick()

    assert not source.is_held("not-a-key")
    assert not source.is_held("")
