import pytest

pytest.importorskip("PySide6.QtCore")

from zeemanmachine.app.state import DisplayOptions, Store
from zeemanmachine.model.geometry_primitives import Vector2
from zeemanmachine.model.machine import Machine


def test_pointer_event_updates_machine():
    store = Store()
    received = []
    store.machine_changed.connect(received.append)

    assert store.move_pointer(Vector2(3.0, -1.5))
    assert store.machine.pointer == Vector2(3.0, -1.5)
    assert received == [store.machine]


def test_locked_pointer_ignores_events():
    store = Store()
    store.set_option("pointer_locked", True)

    assert not store.move_pointer(Vector2(3.0, -1.5))
    assert store.machine == Machine()


def test_set_option_emits_only_on_change():
    store = Store()
    received = []
    store.options_changed.connect(received.append)

    store.set_option("show_grid", True)
    store.set_option("show_grid", True)

    assert received == [DisplayOptions(show_grid=True)]


def test_unknown_option_raises():
    with pytest.raises(ValueError):
        Store().set_option("show_everything", True)


def test_reset_restores_default_machine():
    store = Store()
    store.move_pointer(Vector2(3.0, -1.5))
    store.reset()

    assert store.machine == Machine()
