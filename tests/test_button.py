from foxgame.button import Button, ButtonState
from foxgame.ui import Ui
from foxgame.util import Rect, Vec2

INSIDE = Vec2(15.0, 15.0)
OUTSIDE = Vec2(100.0, 100.0)


def make_button(**kwargs):
    return Button(Rect(10.0, 10.0, 20.0, 12.0), **kwargs)


def frame(button, mouse=INSIDE, pressed=False, down=False, released=False):
    ui = Ui()
    button.update(ui, mouse, pressed, down, released)
    return ui


def test_full_click_sequence():
    button = make_button(label="Play!")
    frame(button)
    assert button.state is ButtonState.HOVERED
    frame(button, pressed=True, down=True)
    assert button.state is ButtonState.CLICKED
    frame(button, down=True)
    assert button.state is ButtonState.HELD
    frame(button, released=True)
    assert button.state is ButtonState.RELEASED
    assert button.released
    frame(button)
    assert button.state is ButtonState.HOVERED
    assert not button.released


def test_mouse_outside_makes_idle():
    button = make_button()
    frame(button)
    frame(button, mouse=OUTSIDE)
    assert button.state is ButtonState.IDLE


def test_no_mouse_makes_idle():
    button = make_button()
    frame(button)
    frame(button, mouse=None)
    assert button.state is ButtonState.IDLE


def test_disabled_stays_idle_and_does_not_interact():
    button = make_button()
    button.disabled = True
    ui = frame(button)
    assert button.state is ButtonState.IDLE
    assert ui.interacted is False


def test_already_interacted_ui_blocks_update():
    button = make_button()
    ui = Ui()
    ui.interact()
    button.update(ui, INSIDE, False, False, False)
    assert button.state is ButtonState.IDLE


def test_hover_takes_interaction_and_sets_tooltip():
    button = make_button(tooltip="Refresh list")
    ui = frame(button)
    assert ui.interacted is True
    assert ui.tooltip == "Refresh list"


def test_colors_follow_state():
    button = make_button()
    assert button.color() == (210, 105, 0)
    frame(button)
    assert button.color() == (250, 135, 0)
    frame(button, pressed=True)
    assert button.color() == (170, 80, 0)
    button.disabled = True
    assert button.color() != (170, 80, 0)


def test_set_pos_keeps_size():
    button = make_button()
    button.set_pos(Vec2(50.0, 60.0))
    assert button.rect == Rect(50.0, 60.0, 20.0, 12.0)


def test_set_label_replaces_and_creates():
    button = make_button()
    button.set_label("Back")
    assert button.label == "Back"
    button.set_label("Exit")
    assert button.label == "Exit"