# tablecat

A small desktop pet and an endless runner game built on pygame.

## Installation

```
pip install .
```

## Running

```
tablecat
```

This opens the pet window. The pet loops through the frames of its
current action, starting with `sayhello`. Controls:

| Input              | Effect                                        |
|--------------------|-----------------------------------------------|
| Left mouse drag    | Move the pet inside the window                |
| 1 to 7             | Play `cold`, `fly`, `happy`, `jump`, `liedown`, `oioioi`, `sayhello` |
| G                  | Close the pet and open the game menu          |
| H or Esc           | Hide the pet (exits)                          |

The game menu has a main page and a help page:

| Key        | Effect                        |
|------------|-------------------------------|
| Enter      | Start a run (from the main page) |
| H          | Show the help page            |
| Backspace  | Back to the main page         |
| Esc        | Quit                          |

To skip the pet and the menu and start a run directly:

```
tablecat --play
```

## The runner game

The hero runs across a scrolling background. Obstacles slide in from the
right at random intervals and a cake appears every two seconds.

| Key | Action                                        |
|-----|-----------------------------------------------|
| W   | Jump                                          |
| S   | Duck; release to run again                    |
| Q   | Trade 10 cakes for one extra stamina          |

You start with 5 stamina (`体力`). Each obstacle you touch costs one; when
it reaches zero the run ends with a game-over message. Each cake you catch
adds one to the cake count (`蛋糕`) and shows a floating "+1" that rises and
fades over one second.

## Using it from Python

The game logic runs without a display and can be driven step by step:

```python
import random

from tablecat.game import Game
from tablecat.sprites import Key

game = Game(rng=random.Random(1))
game.key_press(Key.W)          # jump
for _ in range(60):
    game.tick()                # one frame
game.advance_timers(2000)      # run every timer forward 2000 ms
print(game.coin_text, game.lives_text, game.running)
```

`tablecat.sprites` holds `Player`, `Coin`, `Obstacle`, the `Box` rectangle
used for collisions, and the `Key` and `PlayerState` enums.

The pet's animation tables live in `tablecat.pet`:

```python
from tablecat.pet import DragFilter, Pet, RoleAct, action_frames, frame_position

pet = Pet()
pet.show_action(RoleAct.HAPPY)
frame = pet.next_frame()
print(len(action_frames(RoleAct.LIEDOWN)))      # 57
print(frame_position(RoleAct.JUMP, 80, 300))    # (100, 100)

drag = DragFilter()
drag.press(10, 20)
print(drag.drag(110, 220, left_button=True))    # (100, 200)
```

`tablecat.app` provides `MainMenu`, `run_game(screen)` and `main(argv)`.

## What it does not do

No artwork is included. On screen the game draws plain shapes (rectangles
for the hero and obstacles, circles for cakes) and the pet shows the name of
its current frame as text. The pet lives in an ordinary pygame window: it is
not frameless or transparent, and its actions are chosen with number keys
rather than a right-click menu.

## Tests

```
pip install .[test]
pytest
```