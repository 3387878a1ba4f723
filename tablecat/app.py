"""The start menu, the game loop on screen and the desktop pet entry point."""

from __future__ import annotations

import argparse
import enum
from typing import Callable, Optional, Sequence

import pygame

from tablecat.game import SCENE_HEIGHT, SCENE_WIDTH, Game
from tablecat.pet import DragFilter, Pet, RoleAct, frame_position
from tablecat.sprites import Key

GAME_TITLE = "跑酷游戏"
FPS = 60
GAME_OVER_WAIT_MS = 3000
PET_SIZE = 300

_KEYS = {pygame.K_w: Key.W, pygame.K_s: Key.S, pygame.K_q: Key.Q}
_ACTION_KEYS = {pygame.K_1 + index: act for index, act in enumerate(RoleAct)}


class Page(enum.Enum):
    MAIN = "main"
    HELP = "help"


class MainMenu:
    """The game's start window: a main page, a help page and the run itself."""

    def __init__(self, game_factory: Callable[[], Game] = Game) -> None:
        self.game_factory = game_factory
        self.title = GAME_TITLE
        self.page = Page.MAIN
        self.visible = True
        self.closed = False
        self.game: Optional[Game] = None

    def show_help(self) -> None:
        self.page = Page.HELP

    def back(self) -> None:
        self.page = Page.MAIN

    def start_game(self) -> Game:
        """Stop any run in progress, start a new one and hide the menu."""
        if self.game is not None:
            self.game.running = False
        self.game = self.game_factory()
        self.visible = False
        return self.game

    def _end_game(self) -> None:
        self.game = None
        self.visible = True

    def quit(self) -> None:
        self.closed = True
        self.visible = False


def _draw_game(screen: pygame.Surface, game: Game, font: pygame.font.Font) -> None:
    screen.fill((135, 206, 235))
    for index, x in enumerate(game.background):
        colour = (150, 210, 240) if index == 0 else (120, 190, 230)
        pygame.draw.rect(screen, colour, pygame.Rect(int(x), 0, SCENE_WIDTH, SCENE_HEIGHT))
    pygame.draw.rect(screen, (90, 160, 70), pygame.Rect(0, 500, SCENE_WIDTH, SCENE_HEIGHT - 500))
    for obstacle in game.obstacles:
        box = obstacle.bounds()
        pygame.draw.rect(screen, (90, 90, 90), pygame.Rect(box.x, box.y, box.width, box.height))
    for coin in game.coins:
        radius = coin.size // 2
        pygame.draw.circle(screen, (240, 200, 40), (int(coin.x) + radius, int(coin.y) + radius), radius)
    box = game.player.bounds()
    pygame.draw.rect(screen, (255, 255, 255), pygame.Rect(box.x, box.y, box.width, box.height))
    label = font.render(game.player.image, True, (0, 0, 0))
    screen.blit(label, (box.x, box.y))
    for text in game.floating_texts:
        surface = font.render(text.text, True, (0, 0, 255))
        surface.set_alpha(int(255 * text.opacity))
        screen.blit(surface, (text.x, text.y))
    screen.blit(font.render(game.coin_text, True, (255, 255, 0)), (650, 10))
    screen.blit(font.render(game.lives_text, True, (255, 0, 0)), (650, 40))


def _play(screen: pygame.Surface, game: Game) -> Game:
    clock = pygame.time.Clock()
    font = pygame.font.Font(None, 28)
    while game.running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                game.running = False
            elif event.type == pygame.KEYDOWN:
                game.key_press(_KEYS.get(event.key, Key.OTHER))
            elif event.type == pygame.KEYUP:
                game.key_release(_KEYS.get(event.key, Key.OTHER))
        game.advance_timers(clock.tick(FPS))
        _draw_game(screen, game, font)
        pygame.display.flip()
    if game.game_over_message is not None:
        message = font.render(game.game_over_message, True, (255, 255, 255))
        screen.blit(message, message.get_rect(center=(SCENE_WIDTH // 2, SCENE_HEIGHT // 2)))
        pygame.display.flip()
        waited = 0
        while waited < GAME_OVER_WAIT_MS:
            if any(e.type in (pygame.QUIT, pygame.KEYDOWN) for e in pygame.event.get()):
                break
            waited += clock.tick(FPS)
    return game


def run_game(screen: pygame.Surface) -> Game:
    """Play one run on the given surface until it ends; return its final state."""
    return _play(screen, Game())


def _run_menu(screen: pygame.Surface) -> None:
    menu = MainMenu()
    font = pygame.font.Font(None, 36)
    clock = pygame.time.Clock()
    pygame.display.set_caption(menu.title)
    while not menu.closed:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                menu.quit()
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_RETURN and menu.page is Page.MAIN:
                    _play(screen, menu.start_game())
                    menu._end_game()
                elif event.key == pygame.K_h:
                    menu.show_help()
                elif event.key == pygame.K_BACKSPACE:
                    menu.back()
                elif event.key == pygame.K_ESCAPE:
                    menu.quit()
        screen.fill((30, 30, 60))
        if menu.page is Page.MAIN:
            lines = [menu.title, "Enter: start", "H: help", "Esc: quit"]
        else:
            lines = ["W: jump", "S: duck", "Q: 10 cakes -> +1 life", "Backspace: back"]
        for row, line in enumerate(lines):
            screen.blit(font.render(line, True, (255, 255, 255)), (60, 60 + row * 50))
        pygame.display.flip()
        clock.tick(FPS)


def _run_pet(screen: pygame.Surface) -> None:
    pet = Pet()
    drag = DragFilter()
    font = pygame.font.Font(None, 24)
    clock = pygame.time.Clock()
    origin = (0, 0)
    elapsed = 0
    while pet.visible:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pet.visible = False
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                drag.press(event.pos[0] - origin[0], event.pos[1] - origin[1])
            elif event.type == pygame.MOUSEMOTION:
                moved = drag.drag(event.pos[0], event.pos[1], bool(event.buttons[0]))
                if moved is not None:
                    origin = moved
            elif event.type == pygame.KEYDOWN:
                if event.key in _ACTION_KEYS:
                    pet.show_action(_ACTION_KEYS[event.key])
                elif event.key == pygame.K_g:
                    pet.visible = False
                    _run_menu(screen)
                elif event.key in (pygame.K_h, pygame.K_ESCAPE):
                    pet.visible = False
        if not pet.visible:
            break
        elapsed += clock.tick(FPS)
        if pet.running and elapsed >= pet.interval:
            elapsed = 0
            pet.next_frame()
        screen.fill((0, 0, 0))
        if pet.frame is not None:
            label = font.render(pet.frame.rsplit("/", 1)[-1], True, (255, 255, 255))
            x, y = frame_position(pet.act, label.get_height(), PET_SIZE)
            screen.blit(label, (origin[0] + x, origin[1] + y))
        pygame.display.flip()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="tablecat", description="Desktop pet with a runner game.")
    parser.add_argument("--play", action="store_true", help="start the runner game directly")
    args = parser.parse_args(argv)
    pygame.init()
    try:
        screen = pygame.display.set_mode((SCENE_WIDTH, SCENE_HEIGHT))
        if args.play:
            pygame.display.set_caption(GAME_TITLE)
            run_game(screen)
        else:
            _run_pet(screen)
    finally:
        pygame.quit()
    return 0