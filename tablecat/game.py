"""The side-scrolling run: scrolling background, cakes, obstacles and lives."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional

from tablecat.sprites import GROUND_Y, Coin, Key, Obstacle, Player

SCENE_WIDTH = 800
SCENE_HEIGHT = 600
TICK_MS = 16
COIN_SPAWN_MS = 2000
OBSTACLE_STEP_MS = 30
BG_SCROLL_SPEED = 2
COIN_SPEED = 3
PLAYER_START_X = 100
OBSTACLE_START = (800, -10)
START_LIVES = 5
CAKES_PER_LIFE = 10
GAME_OVER_TITLE = "游戏结束"
GAME_OVER_MESSAGE = "小八体力已耗尽！"


@dataclass
class FloatingText:
    """A label that rises 40 pixels and fades out over one second."""

    text: str
    x: float
    start_y: float
    duration: int = 1000
    rise: float = 40.0
    elapsed: int = 0

    @property
    def progress(self) -> float:
        return self.elapsed / self.duration

    @property
    def y(self) -> float:
        return self.start_y - self.rise * self.progress

    @property
    def opacity(self) -> float:
        return 1.0 - self.progress

    @property
    def finished(self) -> bool:
        return self.elapsed >= self.duration

    def advance(self, ms: int) -> bool:
        """Advance the animation; return whether it is still running."""
        self.elapsed = min(self.duration, self.elapsed + ms)
        return not self.finished


class Game:
    """State of one run; driven by tick() or by advance_timers()."""

    def __init__(
        self, rng: Optional[random.Random] = None, player: Optional[Player] = None
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.player = player if player is not None else Player()
        self.player.x = PLAYER_START_X
        self.player.y = GROUND_Y - self.player.height
        self.player.ground_y = self.player.y
        self.background = [0.0, float(SCENE_WIDTH)]
        self.coins: List[Coin] = []
        self.obstacles: List[Obstacle] = []
        self.floating_texts: List[FloatingText] = []
        self.coin_count = 0
        self.lives = START_LIVES
        self.running = True
        self.game_over_message: Optional[str] = None
        self.next_spawn_interval = self.rng.randrange(50, 200)
        self._frame_counter = 0
        self._clock = 0
        self._anim_elapsed = 0

    @property
    def coin_text(self) -> str:
        return f"蛋糕: {self.coin_count}"

    @property
    def lives_text(self) -> str:
        return f"体力: {self.lives}"

    def _scroll_background(self) -> None:
        first, second = (x - BG_SCROLL_SPEED for x in self.background)
        if first + SCENE_WIDTH <= 0:
            first = second + SCENE_WIDTH
        if second + SCENE_WIDTH <= 0:
            second = first + SCENE_WIDTH
        self.background = [first, second]

    def tick(self) -> None:
        """One frame of the main loop."""
        self._scroll_background()
        self.player.move()
        self.spawn_obstacle()
        for coin in self.coins:
            coin.x -= COIN_SPEED
        self.coins = [coin for coin in self.coins if coin.x + coin.size >= 0]
        self.check_collisions()

    def spawn_obstacle(self) -> Optional[Obstacle]:
        """Count a frame; spawn an obstacle when the interval is reached."""
        self._frame_counter += 1
        if self._frame_counter < self.next_spawn_interval:
            return None
        self._frame_counter = 0
        self.next_spawn_interval = self.rng.randrange(250, 500)
        obstacle = Obstacle(*OBSTACLE_START)
        self.obstacles.append(obstacle)
        return obstacle

    def spawn_coin(self) -> Coin:
        coin = Coin(x=SCENE_WIDTH, y=self.rng.randrange(200, 400))
        self.coins.append(coin)
        return coin

    def _collect(self, coin: Coin) -> None:
        self.coins.remove(coin)
        self.coin_count += 1
        self.floating_texts.append(FloatingText("+1", coin.x, coin.y))

    def _hit(self, obstacle: Obstacle) -> None:
        self.lives -= 1
        self.obstacles.remove(obstacle)
        if self.lives <= 0:
            self.running = False
            self.game_over_message = GAME_OVER_MESSAGE

    def check_collisions(self) -> None:
        """Handle the first cake or obstacle the player touches."""
        box = self.player.bounds()
        for coin in self.coins:
            if coin.bounds().intersects(box):
                self._collect(coin)
                return
        for obstacle in self.obstacles:
            if obstacle.bounds().intersects(box):
                self._hit(obstacle)
                return

    def key_press(self, key: Key) -> None:
        """Q trades ten cakes for one life; other keys go to the player."""
        if key is Key.Q and self.coin_count >= CAKES_PER_LIFE:
            self.coin_count -= CAKES_PER_LIFE
            self.lives += 1
        else:
            self.player.key_press(key)

    def key_release(self, key: Key) -> None:
        self.player.key_release(key)

    def _move_obstacles(self) -> None:
        self.obstacles = [obstacle for obstacle in self.obstacles if obstacle.move()]

    def advance_timers(self, ms: int) -> None:
        """Run every timer of the game forward by ms milliseconds."""
        if ms < 0:
            raise ValueError("time cannot run backwards")
        for _ in range(ms):
            if not self.running:
                break
            self._clock += 1
            if self._clock % TICK_MS == 0:
                self.tick()
            if self._clock % OBSTACLE_STEP_MS == 0:
                self._move_obstacles()
            if self._clock % COIN_SPAWN_MS == 0:
                self.spawn_coin()
            self._anim_elapsed += 1
            if self._anim_elapsed >= self.player.animation_interval:
                self._anim_elapsed = 0
                self.player.animate()
            self.floating_texts = [
                text for text in self.floating_texts if text.advance(1)
            ]