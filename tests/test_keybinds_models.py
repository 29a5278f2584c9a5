import pytest

from keybind_engine.input import InputSnapshot
from keybind_engine.keybinds import NO_MODIFIER, Keybind


def make_keybind(modifier: str | None = None) -> Keybind:
    if modifier is None:
        return Keybind("jump", "Jump", "space")
    return Keybind("sprint", "Sprint", "x", modifier)


def test_modifier_defaults_to_none() -> None:
    keybind = make_keybind()

    assert keybind.modifier == NO_MODIFIER
    assert not keybind.has_modifier
    assert keybind.owner is None


def test_values_are_normalized() -> None:
    keybind = Keybind("sprint", "Sprint", " X ", "Shift")

    assert keybind.key == "x"
    assert keybind.modifier == "shift"
    assert keybind.signature == "shift+x"


def test_python_none_modifier_means_no_modifier() -> None:
    keybind = Keybind("jump", "Jump", "space", None)

    assert keybind.modifier == NO_MODIFIER


def test_empty_id_rejected() -> None:
    with pytest.raises(ValueError):
        Keybind("", "Nameless", "a")


def test_rebinding_by_assignment_is_normalized() -> None:
    keybind = make_keybind()

    keybind.key = "F"
    keybind.modifier = "CTRL"

    assert keybind.key == "f"
    assert keybind.signature == "ctrl+f"


def test_snapshot_is_value_equal_and_independent() -> None:
    keybind = make_keybind("shift")
    keybind.owner = "mod-a"

    copy = keybind.snapshot()
    keybind.key = "y"

    assert copy is not keybind
    assert copy.key == "x"
    assert (copy.id, copy.name, copy.modifier, copy.owner) == (
        "sprint",
        "Sprint",
        "shift",
        "mod-a",
    )


@pytest.mark.parametrize(
    ("held", "expected"),
    [
        ((), False),
        (("space",), True),
        (("space", "shift"), True),
        (("shift",), False),
    ],
)
def test_is_pressed_without_modifier(held: tuple[str, ...], expected: bool) -> None:
    keybind = make_keybind()

    assert keybind.is_pressed(InputSnapshot.of(held=held)) is expected


@pytest.mark.parametrize(
    ("held", "expected"),
    [
        (("x",), False),
        (("shift",), False),
        (("shift", "x"), True),
    ],
)
def test_is_pressed_requires_modifier(held: tuple[str, ...], expected: bool) -> None:
    keybind = make_keybind("shift")

    assert keybind.is_pressed(InputSnapshot.of(held=held)) is expected


def test_is_down_without_modifier_follows_edge() -> None:
    keybind = make_keybind()

    assert keybind.is_down(InputSnapshot.of(held=["space"], pressed=["space"]))
    assert not keybind.is_down(InputSnapshot.of(held=["space"]))


def test_modifier_held_then_key_tapped() -> None:
    keybind = make_keybind("shift")

    held_only = InputSnapshot.of(held=["shift", "x"])
    assert keybind.is_pressed(held_only)
    assert not keybind.is_down(held_only)

    tapped = InputSnapshot.of(held=["shift", "x"], pressed=["x"])
    assert keybind.is_down(tapped)


def test_is_down_needs_modifier_held_not_pressed() -> None:
    keybind = make_keybind("shift")

    assert not keybind.is_down(InputSnapshot.of(held=["x"], pressed=["x", "shift"]))
    assert not keybind.is_down(InputSnapshot.of(held=["shift"], pressed=["shift"]))


def test_unbound_key_is_never_pressed() -> None:
    keybind = Keybind("unused", "Unused", "")

    snapshot = InputSnapshot.of(held=["a"], pressed=["a"])
    assert not keybind.is_pressed(snapshot)
    assert not keybind.is_down(snapshot)
