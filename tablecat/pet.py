"""The desktop pet: animated actions, their alignment and window dragging."""

from __future__ import annotations

import enum
from typing import Dict, Mapping, Optional, Sequence, Tuple

FRAME_INTERVAL_MS = 70
TOP_LEFT_POSITION = (100, 100)


class RoleAct(enum.Enum):
    """Actions the pet can play."""

    COLD = "cold"
    FLY = "fly"
    HAPPY = "happy"
    JUMP = "jump"
    LIEDOWN = "liedown"
    OIOIOI = "oioioi"
    SAYHELLO = "sayhello"


class Alignment(enum.Enum):
    """Where a frame is drawn inside the pet window."""

    BOTTOM = "bottom"
    TOP_LEFT = "top-left"


_FRAME_COUNTS: Dict[RoleAct, int] = {
    RoleAct.COLD: 20,
    RoleAct.FLY: 16,
    RoleAct.HAPPY: 8,
    RoleAct.JUMP: 8,
    RoleAct.LIEDOWN: 57,
    RoleAct.OIOIOI: 6,
    RoleAct.SAYHELLO: 12,
}

_ALIGNMENTS: Dict[RoleAct, Alignment] = {
    RoleAct.SAYHELLO: Alignment.BOTTOM,
    RoleAct.FLY: Alignment.BOTTOM,
    RoleAct.HAPPY: Alignment.BOTTOM,
    RoleAct.COLD: Alignment.BOTTOM,
    RoleAct.LIEDOWN: Alignment.BOTTOM,
    RoleAct.OIOIOI: Alignment.BOTTOM,
    RoleAct.JUMP: Alignment.TOP_LEFT,
}

GAME_MENU_LABEL = "跑酷游戏"
HIDE_MENU_LABEL = "Hide"
MENU_ITEMS: Tuple[str, ...] = (
    GAME_MENU_LABEL,
    *(act.value for act in RoleAct),
    HIDE_MENU_LABEL,
)


def action_frames(act: RoleAct) -> Tuple[str, ...]:
    """Resource names of every animation frame of an action, in play order."""
    name = act.value
    return tuple(
        f":/{name}/image/{name}.png/{name}({index}).png"
        for index in range(_FRAME_COUNTS[act])
    )


def load_role_act_res() -> Dict[RoleAct, Tuple[str, ...]]:
    """Map every action to its frames."""
    return {act: action_frames(act) for act in RoleAct}


def alignment_of(act: RoleAct) -> Alignment:
    return _ALIGNMENTS.get(act, Alignment.TOP_LEFT)


def frame_position(act: RoleAct, frame_height: int, window_height: int) -> Tuple[int, int]:
    """Top-left corner at which a frame of the given height is drawn."""
    if alignment_of(act) is Alignment.BOTTOM:
        return 0, max(0, window_height - frame_height)
    return TOP_LEFT_POSITION


class Pet:
    """Plays the frames of the current action in a loop."""

    def __init__(self, action_map: Optional[Mapping[RoleAct, Sequence[str]]] = None) -> None:
        self.action_map: Dict[RoleAct, Tuple[str, ...]] = (
            {act: tuple(frames) for act, frames in action_map.items()}
            if action_map is not None
            else load_role_act_res()
        )
        self.visible = True
        self.running = False
        self.interval = FRAME_INTERVAL_MS
        self.frame: Optional[str] = None
        self._counter = 0
        self.act = RoleAct.SAYHELLO
        self.show_action(RoleAct.SAYHELLO)

    @property
    def alignment(self) -> Alignment:
        return alignment_of(self.act)

    def show_action(self, act: RoleAct) -> None:
        """Switch to another action; the frame counter keeps running."""
        self.act = act
        self.interval = FRAME_INTERVAL_MS
        self.running = True

    def next_frame(self) -> str:
        """Step to the next frame of the current action and return it."""
        frames = self.action_map.get(self.act, ())
        if not frames:
            raise LookupError(f"no frames for action {self.act.value!r}")
        self.frame = frames[self._counter % len(frames)]
        self._counter += 1
        return self.frame


class DragFilter:
    """Turns mouse presses and moves into new window positions."""

    def __init__(self) -> None:
        self.pos: Tuple[int, int] = (0, 0)

    def press(self, x: int, y: int) -> None:
        """Remember where inside the window the mouse went down."""
        self.pos = (x, y)

    def drag(self, global_x: int, global_y: int, left_button: bool) -> Optional[Tuple[int, int]]:
        """New window position for a mouse move, or None if not dragging."""
        if not left_button:
            return None
        return global_x - self.pos[0], global_y - self.pos[1]