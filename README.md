# ptsd

A small framework for writing 2D games on top of pygame, plus a sample
phase-based game built with it.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What the framework has

- `ptsd.game_object.GameObject` – a scene object with a `drawable`, a
  `transform`, a `z_index`, a `pivot`, a `visible` flag and `children`.
- `ptsd.renderer.Renderer` – holds root game objects; `update()` draws every
  object in the tree, lowest `z_index` first (higher is drawn on top).
- `ptsd.image.Image` – an image loaded from a file. Loaded files are cached
  and shared. A file that fails to load is logged and replaced by a magenta
  and black checkerboard (`missing_texture_surface()`).
- `ptsd.text.Text` – text rendered with a font file (or pygame's built-in
  font when the font is `None`); lines split on `\n`. Setting `text` or
  `color` renders it again. A font path that does not exist raises
  `FileNotFoundError`.
- `ptsd.animation.Animation` – cycles through image frames every `interval`
  milliseconds. With `looping` it waits `cooldown` milliseconds after the last
  frame and starts again; without it, it ends on the last frame (`State.ENDED`).
  `play()`, `pause()` and `set_current_frame()` control it. Time is read from a
  `ptsd.clock.Time` passed as `clock`.
- `ptsd.transform.Transform` – translation, rotation (radians) and scale;
  `convert_to_uniform_buffer_data()` turns one into model and projection
  matrices (`ptsd.drawable.Matrices`).
- `ptsd.color.Color` and `ptsd.color.Colors` – RGBA colours on a 0–255 scale,
  built with `from_rgb`, `from_hsl`, `from_hsv`, `from_hex` (a number or a
  string such as `"FFA500FF"`) and `from_name`. Out-of-range or malformed
  values raise `ValueError`.
- `ptsd.input.Input` – per-frame keyboard and mouse state keyed by
  `ptsd.keycode.Keycode`: `is_key_pressed`, `is_key_down` (went down this
  frame), `is_key_up` (released this frame), `is_scrolling`,
  `scroll_distance`, `is_mouse_moving`, `cursor_position` (origin at the
  window centre, y up) and `exit_requested`. `update(events, mouse_position)`
  feeds it a frame's pygame events.
- `ptsd.clock.Time` – `elapsed_ms()`, `delta_ms()` and `delta_seconds()`;
  `update()` marks a new frame.
- `ptsd.audio.BGM` and `ptsd.audio.SFX` – background music streamed from disk
  and sound effects held in memory, with volumes from 0 to 128.
- `ptsd.asset_store.AssetStore` – a cache that loads each asset once through a
  loader function.
- `ptsd.context.Context` – opens the window and the mixer, and each frame
  (`update()`) reads input into `context.input`, shows and clears the frame,
  waits out the 60 FPS cap and advances `context.time`. `get_instance()`
  returns a shared context; `close()` (or leaving a `with` block) shuts it down.
- `ptsd.logger` – `init()`, `set_level()`, `get_level()` with the levels of
  `Level` (including `TRACE`), logging as `name [level] message`.
- `ptsd.b64.decode_base64()` and `ptsd.textfile.load_text_file()` – small
  helpers for base64 data and text files.

Window size, title and frame cap are in `ptsd.config`.

## Using the framework

Caching assets:

```python
from ptsd.asset_store import AssetStore

store = AssetStore(lambda path: open(path, "rb").read())
data = store.get("sprites/giraffe.png")   # loaded once, then cached
store.remove("sprites/giraffe.png")
```

Colours:

```python
from ptsd.color import Color, Colors

white = Color.from_name(Colors.WHITE)
orange = Color.from_hex("FFA500FF")
teal = Color.from_rgb(0, 128, 128, 255)
```

A minimal main loop:

```python
from ptsd.context import Context
from ptsd.game_object import GameObject
from ptsd.image import Image
from ptsd.keycode import Keycode
from ptsd.renderer import Renderer

with Context.get_instance() as context:
    root = Renderer([GameObject(Image("res/player.png"), 50)])
    while not context.exit:
        if context.input.is_key_down(Keycode.ESCAPE) or context.input.exit_requested():
            context.exit = True
        root.update()
        context.update()
```

## Running the sample game

```
ptsd-game [RESOURCE_DIR]
```

`RESOURCE_DIR` (default: the current directory) holds `res/player.png`,
`res/logo.png`, `res/Background.png`, `res/Background1.png`,
`res/Background2.png` and, optionally, `Font/Inkfree.ttf`. Missing images are
shown as the checkerboard; a missing font falls back to the built-in one.

The game opens a title screen. Press `K` to leave it, release `Enter` to
advance the phase, and press `Escape` (or close the window) to quit.

## What the sample game does not do

The package ships no game art or fonts. The game has a title screen and two
phases reached with `Enter`; after that, `Enter` does nothing more. The task
texts only describe the tasks: there is no player movement, and
`Character.if_collides()` always returns `False`, so no task is actually
checked.