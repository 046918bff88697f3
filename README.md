# handcricket

This package holds the game logic for hand cricket played against the
computer. It has no drawing or input code. A front end passes in clicks,
typed text and frame times, and then shows the state the objects hold.

The package has no runtime dependencies.

## How a game runs

1. **Toss** (`handcricket.toss.Toss`)
   - Call a side with `choose(Coin.HEADS)` or `choose(Coin.TAILS)`.
   - The coin spins at 720 degrees per second. Call `update(dt)` to move it on. After one second it lands: `result` holds the side it landed on, and `user_won` tells you whether your call was right.
   - `computer_chooses` is true when you lost the toss, which means the computer picks to bat or bowl.
   - `proceed()` returns `GameState.BAT_BOWL` once the toss is done. Before that it returns `None`.
2. **Match** (`handcricket.match.Match`)
   - A match has two innings of six balls each.
   - On each ball, `play(n)` takes your number from 1 to 6. Any other number raises `ValueError`. The computer throws its own number with `computer_choice(rng)`.
   - Equal numbers mean a wicket (`is_wicket`). Otherwise the batter scores the number they showed.
   - The side batting second chases `target`. The match ends as soon as that side passes the target.
   - `play` returns an `Outcome` message, or `None` once the match is over.
   - `update(dt)` counts down the wicket popup. It returns `GameState.SUMMARY` when the match is over and the popup has gone.
3. **Summary** (`handcricket.summary.Summary`)
   - Holds the result message and both scores.
   - If your score is higher than the stored high score, `awaiting_name` is true.
   - `type_text`, `backspace` and `submit` edit the name and save it. Only printable characters are kept, up to 32 of them.
   - `click(point, screen_width, screen_height)` returns `GameState.MENU` when the point is on the menu button. `menu_button` gives the button's rectangle.
   - `high_score` reads the entry that is stored now.

`Match.summary(path)` gives a `Summary` only when the match finished with a win or a tie. If the side batting second is bowled out ("You are OUT!" or "Computer OUT!"), the match is over but no summary is made, and `summary` returns `None`.

## Example

```python
import random

from handcricket.match import Match
from handcricket.toss import Coin, Toss

rng = random.Random(7)

toss = Toss(rng)
toss.choose(Coin.HEADS)
toss.update(1.0)              # the coin lands
print(toss.result, toss.user_won, toss.proceed())

match = Match(user_bats_first=True, rng=rng)
while match.update(0.1) is None:
    match.play(rng.randint(1, 6))
print(match.message.value)

summary = match.summary("highscore.dat")
if summary is not None and summary.awaiting_name:
    summary.type_text("Ada")
    summary.submit()
```

## High scores

`handcricket.highscore` stores the single best score in a fixed-size binary
record. The default file is `highscore.dat`.

- `load_high_score(path)` returns a `HighScoreEntry`. If the file is missing or too short, you get a score of 0 and the name `"None"`.
- `save_high_score(score, name, path)` writes the record. Names are cut to 32 bytes. A file that cannot be written is ignored silently.

## Layout helpers

`handcricket.layout` holds screen geometry that any front end can use:

- `Rect` and `Rect.contains`
- `shot_buttons(screen_width, screen_height)`, the row of six shot buttons
- `choice_record_slots(start_x, start_y)`, the six per-ball record boxes
- `hover_rect` and `center_text`
- `gradient_strips` and `lerp_color`
- `circular_mask`, the opaque pixels of a circular crop

`handcricket.state.GameState` names the screens: `MENU`, `TOSS`, `BAT_BOWL`, `PLAY` and `SUMMARY`.

## What the package does not do

The package does not include:

- a window, drawing, fonts or images;
- a command to start a game;
- a main menu;
- the screen where you choose to bat or bowl after the toss.

`GameState` names these screens so that a front end can switch between them, but their behaviour is left to the front end.

## Tests

```
pip install -e .[test]
pytest
```