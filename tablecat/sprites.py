"""Game pieces for the runner: the player, cakes to collect and obstacles."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Optional

GROUND_Y = 500
GRAVITY = 0.8
JUMP_VELOCITY = -15.0
DUCK_OFFSET = 55
PLAYER_SCALE = 0.7
START_LIVES = 5

RUN_FRAMES = tuple(f"fly({index})" for index in range(1, 5))
DUCK_FRAMES = tuple(f"liedown({index})" for index in range(1, 3))

COIN_SIZE = 50
OBSTACLE_SIZE = 360
OBSTACLE_SPEED = 5


class Key(enum.Enum):
    """Keys the game reacts to."""

    W = "w"
    S = "s"
    Q = "q"
    OTHER = "other"


class PlayerState(enum.Enum):
    RUNNING = "running"
    JUMPING = "jumping"
    DUCKING = "ducking"


@dataclass(frozen=True)
class Box:
    """An axis-aligned rectangle in scene coordinates."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def intersects(self, other: Box) -> bool:
        """True when the two rectangles overlap by a non-zero area."""
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )


@dataclass
class Coin:
    """A cake that scrolls towards the player and can be collected."""

    x: float = 0.0
    y: float = 0.0
    size: int = COIN_SIZE

    def bounds(self) -> Box:
        return Box(self.x, self.y, self.size, self.size)


@dataclass
class Obstacle:
    """An obstacle sliding left across the scene."""

    x: float = 0.0
    y: float = 0.0
    width: int = OBSTACLE_SIZE
    height: int = OBSTACLE_SIZE
    alive: bool = True

    def move(self) -> bool:
        """Step left; return whether the obstacle is still on screen."""
        self.x -= OBSTACLE_SPEED
        if self.x + self.width < 0:
            self.alive = False
        return self.alive

    def bounds(self) -> Box:
        return Box(self.x, self.y, self.width, self.height)


class Player:
    """The running character: jumps, ducks and cycles through animation frames."""

    def __init__(
        self,
        width: int = 100,
        height: int = 100,
        x: float = 0.0,
        y: float = 0.0,
        scale: float = PLAYER_SCALE,
    ) -> None:
        self.width = width
        self.height = height
        self.x = x
        self.y = y
        self.scale = scale
        self.velocity_y = 0.0
        self.is_jumping = False
        self.state = PlayerState.RUNNING
        self.current_frame = -1
        self.animation_interval = 150
        self.ground_y = 0.0
        self.lives = START_LIVES
        self.coins = 0
        self.image = RUN_FRAMES[0]
        self.on_lives_changed: Optional[Callable[[int], None]] = None
        self.on_game_over: Optional[Callable[[], None]] = None
        self.animate()

    @property
    def ground_level(self) -> float:
        return GROUND_Y - self.height

    def move(self) -> None:
        """Apply gravity while jumping and land on the ground."""
        if self.is_jumping:
            self.velocity_y += GRAVITY
            self.y += self.velocity_y
        if self.y >= self.ground_level:
            self.y = self.ground_level
            if self.is_jumping or self.state is not PlayerState.RUNNING:
                self.is_jumping = False
                self.velocity_y = 0.0
                self.state = PlayerState.RUNNING
                self.current_frame = -1
                self.animate()

    def animate(self) -> None:
        """Advance to the next frame of the current state's animation."""
        self.current_frame += 1
        if self.state is PlayerState.DUCKING:
            frames, interval = DUCK_FRAMES, 200
        elif self.state is PlayerState.JUMPING:
            frames, interval = RUN_FRAMES, 100
        else:
            frames, interval = RUN_FRAMES, 150
        self.image = frames[self.current_frame % len(frames)]
        self.animation_interval = interval

    def key_press(self, key: Key) -> None:
        if key is Key.W and not self.is_jumping:
            self.is_jumping = True
            self.velocity_y = JUMP_VELOCITY
            self.state = PlayerState.JUMPING
            self.animate()
        if key is Key.S and not self.is_jumping:
            self.state = PlayerState.DUCKING
            self.y = self.ground_y + DUCK_OFFSET
            self.animate()

    def key_release(self, key: Key) -> None:
        if key is Key.S and self.state is PlayerState.DUCKING:
            self.state = PlayerState.RUNNING

    def take_damage(self) -> None:
        self.lives -= 1
        if self.lives <= 0 and self.on_game_over is not None:
            self.on_game_over()
        if self.on_lives_changed is not None:
            self.on_lives_changed(self.lives)

    def bounds(self) -> Box:
        return Box(self.x, self.y, self.width * self.scale, self.height * self.scale)