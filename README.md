# tiphereth

Building blocks for a small top-down 2D tile game: movable and animated
entities, a layered tile map with collision and a plain-text map format,
GUI widgets, a pause menu, a tile-map editor screen and two game screens.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install .[test]
pytest
```

## Modules

- `tiphereth.geometry`: `FloatRect`, `IntRect`, `Sprite` and `View` (a 2D
  camera with `zoom`, `move` and `map_pixel_to_coords`).
- `tiphereth.movement_component`: `MovementComponent` gives a sprite
  acceleration, deceleration and a speed limit; `MovementState` names the
  directions tested by `state_is`.
- `tiphereth.animation_component`: `AnimationComponent` plays named sprite-sheet
  animations, with at most one priority animation running to the end of its
  cycle.
- `tiphereth.hitbox_component`: `HitboxComponent` keeps a collision box at a
  fixed offset from a sprite.
- `tiphereth.entity`: `Entity`, a sprite with optional movement, animation and
  hitbox components.
- `tiphereth.character`: `Character2`, an animated walking character that
  attacks on a left click, and `Dwarf`, an entity without components.
- `tiphereth.tile`: `Tile` and `TileType` (`DEFAULT`, `DAMAGING`, `DOODAD`).
- `tiphereth.tile_map`: `TileMap`, tiles stacked per cell and layer, with
  rendering, saving, loading and collision resolution for an `Entity`.
- `tiphereth.graphics_settings`: `GraphicsSettings`, read from and written to a
  small text file.
- `tiphereth.gui`: `Button`, `DropDownList` and `TextureSelector`.
- `tiphereth.pause_menu`: `PauseMenu`, a dimmed overlay with named buttons.
- `tiphereth.state`: the abstract `State` screen and the `StateData` it shares
  with the others.
- `tiphereth.editor_state`: `EditorState`, the tile-map editor screen.
- `tiphereth.game_mode_states`: `GameMode1State` and `GameMode2State`, the
  playable screens.

## Drawing

Nothing in the package draws to a window by itself. Everything that renders is
given a *render target*: any object offering

- `draw_rect(rect, fill, outline, thickness)`,
- `draw_sprite(sprite)`,
- `draw_text(text, position, font, size, color)`,

and, optionally, `set_view(view)`. Colours are `(r, g, b, a)` tuples.

## Examples

Movement:

```python
from tiphereth.geometry import Sprite
from tiphereth.movement_component import MovementComponent, MovementState

sprite = Sprite()
movement = MovementComponent(sprite, 100.0, 5000.0, 2500.0)
movement.move(1.0, 0.0, 0.01)      # accelerate to the right
movement.update(0.01)              # friction, then the sprite moves
movement.state_is(MovementState.MOVING_RIGHT)   # True
```

A tile map:

```python
from tiphereth.geometry import IntRect
from tiphereth.tile import TileType
from tiphereth.tile_map import TileMap

tile_map = TileMap(32.0, 20, 13, "assets/Map01.png")
tile_map.add_tile(3, 4, 0, IntRect(0, 0, 32, 32), True, TileType.DEFAULT)
tile_map.layer_size(3, 4, 0)       # 1
tile_map.save_to_file("level.mp")
tile_map.load_from_file("level.mp")
```

If the tile-sheet image cannot be loaded, a warning is logged and the map keeps
working without a texture. Positions outside the map are ignored by `add_tile`
and `remove_tile`.

## File formats

**Maps.** `TileMap.save_to_file` writes the map width and height in tiles, the
tile size, the number of layers and the tile-sheet path, each on its own line,
followed by one `x y z left top collision type` record per tile, separated by
spaces. `TileMap.load_from_file` reads the same format; it raises `OSError` if
the file can't be read and `ValueError` for a malformed header or a tile lying
outside the map, and stops reading tiles at the first incomplete or malformed
record.

**Graphics settings.** `GraphicsSettings.save_to_file` writes the window title
on the first line, then width and height, the fullscreen flag, the frame-rate
limit, the vsync flag and the antialiasing level. `load_from_file` reads them
back and raises `ValueError` if any is missing or malformed.

**Key binds.** `State.load_key_binds` reads `action key-name` pairs, for example
`Close Escape`, and maps each action to the code that `StateData.supported_keys`
gives the key name. A missing file leaves the binds empty; an unknown key name
raises `KeyError`.

## Screens

A `StateData` holds what the screens share: the `window` (a render target with a
`size` and a `close()` method), the `GraphicsSettings`, the supported keys, the
stack of states, the grid size, an `input` object (by default read through
pygame), and the locations of the data files: `config_dir` (`Config`),
`assets_dir` (`assets`), `font_path` (`fonts/Lato-Bold.ttf`) and `map_file`
(`test.mp`).

- `EditorState` reads `editor_keys` from the config directory. The left mouse
  button places a tile, or picks a tile from the texture selector when the
  mouse is over it; the right button removes the topmost tile. `COLLISION`
  toggles collision for new tiles, `TYPE_INC` / `TYPE_DEC` change their type,
  the `MOVE_CAM_*` binds move the camera and `Close` opens the pause menu, which
  quits, saves the map to `map_file` or loads it back.
- `GameMode1State` reads `game_mode_1_keys` and steers a `Dwarf` with `Left`,
  `Right`, `Up` and `Down`; `Close` ends the state. It draws nothing.
- `GameMode2State` reads `game_mode_1_keys`, loads the map from `map_file` and
  lets a `Character2` walk on it with collision; the camera follows the
  character and `Close` pauses. Its optional `exit_state_factory` builds the
  state pushed when QUIT is chosen; without it the state ends.

Font and texture loading go through pygame and raise `OSError` when a file is
missing.

## What this package does not do

There is no command to start a game and no main loop: the package opens no
window, polls no events and does not run a stack of states by itself. It has no
main menu, settings screen or character selection screens; only the editor and
the two game screens above exist, and an application has to create the window,
the render target and the `StateData`, and drive `update` and `render` itself.