import pytest

from tablecat.pet import (
    FRAME_INTERVAL_MS,
    MENU_ITEMS,
    Alignment,
    DragFilter,
    Pet,
    RoleAct,
    action_frames,
    frame_position,
    load_role_act_res,
)


@pytest.mark.parametrize(
    "act, count",
    [
        (RoleAct.COLD, 20),
        (RoleAct.FLY, 16),
        (RoleAct.HAPPY, 8),
        (RoleAct.JUMP, 8),
        (RoleAct.LIEDOWN, 57),
        (RoleAct.OIOIOI, 6),
        (RoleAct.SAYHELLO, 12),
    ],
)
def test_frame_counts(act, count):
    assert len(action_frames(act)) == count


def test_frame_names_follow_resource_pattern():
    frames = action_frames(RoleAct.COLD)
    assert frames[0] == ":/cold/image/cold.png/cold(0).png"
    assert frames[-1].endswith(f"cold({len(frames) - 1}).png")


def test_frames_are_distinct():
    for act in RoleAct:
        frames = action_frames(act)
        assert len(set(frames)) == len(frames)


def test_load_role_act_res_covers_every_action():
    res = load_role_act_res()
    assert set(res) == set(RoleAct)
    for act, frames in res.items():
        assert frames == action_frames(act)


def test_jump_is_drawn_top_left():
    assert frame_position(RoleAct.JUMP, 50, 400) == (100, 100)


@pytest.mark.parametrize("act", [a for a in RoleAct if a is not RoleAct.JUMP])
def test_bottom_aligned_frames_touch_bottom(act):
    x, y = frame_position(act, 120, 400)
    assert x == 0
    assert y + 120 == 400


def test_tall_frame_is_clamped_to_top():
    assert frame_position(RoleAct.FLY, 500, 300)[1] == 0


def test_pet_starts_saying_hello():
    pet = Pet()
    assert pet.act is RoleAct.SAYHELLO
    assert pet.frame is None
    assert pet.running
    assert pet.interval == FRAME_INTERVAL_MS
    assert pet.alignment is Alignment.BOTTOM


def test_next_frame_cycles():
    pet = Pet()
    frames = action_frames(RoleAct.SAYHELLO)
    played = [pet.next_frame() for _ in range(len(frames) + 1)]
    assert played[: len(frames)] == list(frames)
    assert played[-1] == frames[0]
    assert pet.frame == frames[0]


def test_frame_counter_is_shared_between_actions():
    pet = Pet()
    for _ in range(3):
        pet.next_frame()
    pet.show_action(RoleAct.HAPPY)
    assert pet.next_frame() == action_frames(RoleAct.HAPPY)[3]
    assert pet.alignment is Alignment.BOTTOM


def test_missing_action_raises():
    pet = Pet({RoleAct.SAYHELLO: ("a", "b")})
    assert pet.next_frame() == "a"
    pet.show_action(RoleAct.JUMP)
    assert pet.alignment is Alignment.TOP_LEFT
    with pytest.raises(LookupError):
        pet.next_frame()


def test_menu_items_select_their_actions():
    assert MENU_ITEMS[0] == "跑酷游戏"
    assert MENU_ITEMS[-1] == "Hide"
    action_values = {act.value for act in RoleAct}
    pet = Pet()
    selected = []
    for label in MENU_ITEMS:
        if label in action_values:
            act = RoleAct(label)
            pet.show_action(act)
            assert pet.act is act
            assert pet.running
            selected.append(act)
    assert set(selected) == set(RoleAct)


def test_drag_moves_by_press_offset():
    drag = DragFilter()
    drag.press(10, 20)
    assert drag.drag(110, 220, True) == (100, 200)


def test_drag_without_left_button_does_nothing():
    drag = DragFilter()
    drag.press(10, 20)
    assert drag.drag(110, 220, False) is None


def test_drag_without_press_uses_origin():
    drag = DragFilter()
    assert drag.drag(30, 40, True) == (30, 40)