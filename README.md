# spritequest

A small game built on pygame, plus a dialog demo that types its text out
one character at a time.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running the game

```
spritequest
spritequest --assets path/to/assets
```

The game opens a 640x480 window titled "Chapter 1" and runs at up to 60
frames per second. It starts on a menu with two buttons, loaded from
`button.png` and `exit.png` in the assets directory (`assets` by default,
changed with `--assets`). Each image is a sprite sheet of 400x100 frames.
Frame 0 is shown normally, frame 1 while the mouse is over the button and
frame 2 while the left mouse button is held over it.

Pressing Enter leaves the menu for the play state. Closing the window
ends the game. Progress messages are written through `logging`.

If the button images cannot be loaded, the error is logged. The menu then
shows no buttons, but the game keeps running.

## Running the dialog demo

```
spritequest-dialog
spritequest-dialog --font path/to/font.ttf
```

This opens a 640x480 window titled "Dialog Example". A black box at the
bottom of the window types out a greeting, one character every 50 ms. The
text is word-wrapped to fit the box. The font defaults to
`assets/fonts/monogram.ttf` at size 24. If the window or the font cannot
be opened, the demo prints "Init failed!" to standard error and exits
with status 1.

## Using the pieces

- `spritequest.vector.Vector2D`: a mutable 2D vector (a dataclass with
  `x` and `y`). It supports `+`, `-`, `*`, `/` and their in-place forms.
  `length()` returns the length truncated to an integer. `normalize()`
  divides the vector by that length.
- `spritequest.textures`
  - `TextureManager` stores images by id: `load(file_name, texture_id)`
    raises `TextureError` on failure.
  - `draw(...)` and `draw_frame(...)` copy a region of an image onto a
    surface, with an optional `Flip`. Frame rows count from 1 and frames
    from 0.
  - `remove(texture_id)` and `clear()` forget images. Use `in` to test
    whether an id is loaded.
  - `texture_manager()` returns a shared instance.
- `spritequest.input`
  - `InputHandler` tracks state from pygame events. For joysticks it keeps
    stick directions (`xvalue`, `yvalue`, with a dead zone of 10000 on
    the raw axis scale) and buttons (`button_state`).
  - It also tracks the mouse (`mouse_position`, and `mouse_button_state`
    with `MouseButton`) and held keys (`is_key_down`).
  - `handle_event(event)` applies one event and `update()` drains the
    queue. `attach_joystick` registers a joystick by id.
  - `input_handler()` returns a shared instance.
- `spritequest.objects`
  - `LoaderParams` sets an object's position, size and texture.
  - `SpriteObject` is an animated, velocity-driven sprite.
  - `Player` takes its velocity from joystick, mouse and arrow keys. Its
    velocity then follows the mouse position, and the arrow keys override
    it.
  - `Enemy` drifts one pixel right and down each frame.
  - `MenuButton`, with its `ButtonState` frames, is the menu button
    described above.
- `spritequest.states`
  - `GameStateMachine` keeps a stack of states and updates and draws only
    the top one. `change_state` does nothing if the new state has the
    same `state_id` as the top one.
  - The states are `MenuState` (`"MENU"`) and `PlayState` (`"PLAY"`).
- `spritequest.game.Game`: owns the window, the input handler and the
  state machine.
- `spritequest.dialog`
  - `wrap_text_to_fit(text, max_width, measure)` and
    `visible_lines(text, chars_to_show)` work on the text.
  - `render_dialog_box(target, font, text, chars_to_show)` draws the box.
  - `Typewriter` decides when the next character is revealed.

## What it does not do

- The play state is empty: it draws nothing and nothing moves in it.
  `Player` and `Enemy` are available as classes, but the game itself
  never places them.
- The menu's exit button only changes frame under the mouse. Clicking it
  does not quit, and there is no way back from the play state to the menu.
- No assets are included. The images and the font must be supplied.