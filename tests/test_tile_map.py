import pygame
import pytest

from tiphereth.entity import Entity
from tiphereth.geometry import IntRect
from tiphereth.tile import TileType
from tiphereth.tile_map import TileMap


class RecordingTarget:
    def __init__(self):
        self.rects = []
        self.sprites = []

    def draw_rect(self, rect, fill, outline, thickness):
        self.rects.append(rect)

    def draw_sprite(self, sprite):
        self.sprites.append(sprite)


@pytest.fixture
def tile_map(tmp_path):
    return TileMap(32.0, 20, 13, str(tmp_path / "missing.png"))


def make_entity(x, y):
    entity = Entity()
    entity.create_hitbox_component(entity.sprite, 0, 0, 20, 20)
    entity.create_movement_component(200.0, 1000.0, 500.0)
    entity.set_position(x, y)
    return entity


def test_new_map_is_empty(tile_map):
    assert tile_map.layer_size(0, 0, 0) == 0
    assert tile_map.layer_size(19, 12, 0) == 0
    assert tile_map.tile_sheet is None


@pytest.mark.parametrize("cell", [(-1, 0, 0), (20, 0, 0), (0, 13, 0), (0, 0, 1)])
def test_layer_size_outside_map(tile_map, cell):
    assert tile_map.layer_size(*cell) == -1


def test_add_tile_stacks(tile_map):
    rect = IntRect(0, 0, 32, 32)
    tile_map.add_tile(3, 4, 0, rect, False, TileType.DEFAULT)
    tile_map.add_tile(3, 4, 0, rect, True, TileType.DEFAULT)
    assert tile_map.layer_size(3, 4, 0) == 2
    assert tile_map.grid[3][4][0][-1].collision is True


def test_add_tile_outside_map_is_ignored(tile_map):
    tile_map.add_tile(20, 0, 0, IntRect(0, 0, 32, 32), False, 0)
    tile_map.add_tile(0, 0, 1, IntRect(0, 0, 32, 32), False, 0)
    assert sum(len(cell[0]) for column in tile_map.grid for cell in column) == 0


def test_remove_tile_pops_topmost(tile_map):
    tile_map.add_tile(1, 1, 0, IntRect(0, 0, 32, 32), False, 0)
    tile_map.add_tile(1, 1, 0, IntRect(32, 0, 32, 32), False, 0)
    tile_map.remove_tile(1, 1, 0)
    assert tile_map.layer_size(1, 1, 0) == 1
    assert tile_map.grid[1][1][0][0].texture_rect.left == 0


def test_remove_from_empty_cell_is_noop(tile_map):
    tile_map.remove_tile(2, 2, 0)
    tile_map.remove_tile(-1, 2, 0)
    assert tile_map.layer_size(2, 2, 0) == 0


def test_save_writes_header(tile_map, tmp_path):
    path = tmp_path / "map.mp"
    tile_map.save_to_file(str(path))
    lines = path.read_text().split("\n")
    assert lines[0] == "20 13"
    assert lines[1] == "32"
    assert lines[2] == "1"
    assert lines[3] == tile_map.texture_file


def test_save_and_load_round_trip(tile_map, tmp_path):
    path = tmp_path / "map.mp"
    tile_map.add_tile(1, 2, 0, IntRect(32, 64, 32, 32), True, TileType.DOODAD)
    tile_map.add_tile(1, 2, 0, IntRect(0, 32, 32, 32), False, TileType.DAMAGING)
    tile_map.add_tile(7, 9, 0, IntRect(96, 0, 32, 32), False, TileType.DEFAULT)
    tile_map.save_to_file(str(path))

    other = TileMap(16.0, 5, 5, tile_map.texture_file)
    other.load_from_file(str(path))

    assert other.max_size_world_grid == tile_map.max_size_world_grid
    assert other.grid_size_i == tile_map.grid_size_i
    assert other.layer_size(1, 2, 0) == 2
    assert other.layer_size(7, 9, 0) == 1
    saved = [t.as_string() for t in tile_map.grid[1][2][0]]
    loaded = [t.as_string() for t in other.grid[1][2][0]]
    assert loaded == saved
    assert other.grid[7][9][0][0].global_bounds() == tile_map.grid[7][9][0][0].global_bounds()


def test_load_missing_file_raises(tile_map, tmp_path):
    with pytest.raises(FileNotFoundError):
        tile_map.load_from_file(str(tmp_path / "nothing.mp"))


def test_load_bad_header_raises(tile_map, tmp_path):
    path = tmp_path / "bad.mp"
    path.write_text("wide high\n")
    with pytest.raises(ValueError):
        tile_map.load_from_file(str(path))


def test_load_stops_at_malformed_record(tile_map, tmp_path):
    path = tmp_path / "partial.mp"
    path.write_text("4 4\n32\n1\nnone.png\n1 1 0 0 0 1 0 2 2 0 a b 0 0 3 3 0 0 0 0 0 ")
    tile_map.load_from_file(str(path))
    assert tile_map.layer_size(1, 1, 0) == 1
    assert tile_map.layer_size(2, 2, 0) == 0
    assert tile_map.layer_size(3, 3, 0) == 0


def test_load_tile_outside_map_raises(tile_map, tmp_path):
    path = tmp_path / "outside.mp"
    path.write_text("2 2\n32\n1\nnone.png\n5 5 0 0 0 0 0 ")
    with pytest.raises(ValueError):
        tile_map.load_from_file(str(path))


def test_texture_is_loaded(tmp_path):
    path = tmp_path / "sheet.bmp"
    pygame.image.save(pygame.Surface((64, 32)), str(path))
    loaded = TileMap(32.0, 4, 4, str(path))
    assert loaded.tile_sheet.get_size() == (64, 32)


def test_render_defers_doodads(tile_map):
    rect = IntRect(0, 0, 32, 32)
    tile_map.add_tile(1, 1, 0, rect, False, TileType.DOODAD)
    tile_map.add_tile(2, 1, 0, rect, True, TileType.DEFAULT)
    target = RecordingTarget()
    tile_map.render(target, (1, 1))
    assert len(target.sprites) == 1
    assert len(target.rects) == 1
    assert target.rects[0].left == tile_map.grid[2][1][0][0].position[0]

    tile_map.render_deferred(target)
    assert len(target.sprites) == 2
    assert target.sprites[1] is tile_map.grid[1][1][0][0].sprite

    tile_map.render_deferred(target)
    assert len(target.sprites) == 2


def test_render_range_is_narrower_than_editor(tile_map):
    tile_map.add_tile(19, 12, 0, IntRect(0, 0, 32, 32), False, TileType.DEFAULT)
    game_target = RecordingTarget()
    tile_map.render(game_target, (0, 0))
    assert game_target.sprites == []

    editor_target = RecordingTarget()
    tile_map.render_editor(editor_target, (0, 0))
    assert len(editor_target.sprites) == 1


def test_editor_render_draws_doodads_directly(tile_map):
    tile_map.add_tile(0, 0, 0, IntRect(0, 0, 32, 32), True, TileType.DOODAD)
    target = RecordingTarget()
    tile_map.render_editor(target, (0, 0))
    assert len(target.sprites) == 1
    assert len(target.rects) == 1


def test_collision_keeps_entity_inside_left_edge(tile_map):
    entity = make_entity(-5.0, 50.0)
    entity.movement_component.velocity_x = -50.0
    tile_map.update_collision(entity, 0.1)
    assert entity.position == (0.0, 50.0)
    assert entity.movement_component.velocity_x == 0.0


def test_collision_keeps_entity_inside_right_edge(tile_map):
    entity = make_entity(tile_map.max_size_world[0] + 10.0, 50.0)
    tile_map.update_collision(entity, 0.1)
    bounds = entity.global_bounds()
    assert bounds.left + bounds.width == tile_map.max_size_world[0]


def test_collision_keeps_entity_inside_top_edge(tile_map):
    entity = make_entity(50.0, -3.0)
    entity.movement_component.velocity_y = -20.0
    tile_map.update_collision(entity, 0.1)
    assert entity.position[1] == 0.0
    assert entity.movement_component.velocity_y == 0.0


def test_collision_pushes_entity_out_of_wall_on_the_right(tile_map):
    tile_map.add_tile(5, 5, 0, IntRect(0, 0, 32, 32), True, TileType.DEFAULT)
    wall = tile_map.grid[5][5][0][0].global_bounds()
    entity = make_entity(135.0, 165.0)
    entity.movement_component.velocity_x = 100.0
    tile_map.update_collision(entity, 0.1)
    assert entity.position == (wall.left - 20.0, 165.0)
    assert entity.movement_component.velocity_x == 0.0


def test_tile_without_collision_does_not_block(tile_map):
    tile_map.add_tile(5, 5, 0, IntRect(0, 0, 32, 32), False, TileType.DEFAULT)
    entity = make_entity(135.0, 165.0)
    entity.movement_component.velocity_x = 100.0
    tile_map.update_collision(entity, 0.1)
    assert entity.position == (135.0, 165.0)
    assert entity.movement_component.velocity_x == 100.0