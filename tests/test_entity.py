import pytest

from tiphereth.entity import Entity
from tiphereth.geometry import FloatRect, IntRect


class FakeTexture:
    def get_size(self):
        return (64, 48)


@pytest.fixture
def full_entity():
    entity = Entity()
    entity.create_hitbox_component(entity.sprite, 5.0, 5.0, 18.0, 20.0)
    entity.create_movement_component(100.0, 5000.0, 2500.0)
    return entity


def test_bare_entity_ignores_movement():
    entity = Entity()
    entity.move(1.0, 1.0, 1.0)
    entity.update(1.0)
    entity.stop_velocity()
    assert entity.position == (0.0, 0.0)
    assert entity.next_position_bounds(1.0) == FloatRect(-1.0, -1.0, -1.0, -1.0)


def test_bare_entity_set_position_moves_sprite():
    entity = Entity()
    entity.set_position(12.0, 34.0)
    assert entity.sprite.position == (12.0, 34.0)
    assert entity.position == (12.0, 34.0)


def test_grid_position_truncates_toward_zero():
    entity = Entity()
    entity.set_position(64.0, 96.0)
    assert entity.grid_position(32) == (2, 3)
    entity.set_position(-5.0, -5.0)
    assert entity.grid_position(32) == (0, 0)


def test_position_comes_from_hitbox(full_entity):
    full_entity.set_position(100.0, 50.0)
    assert full_entity.position == (100.0, 50.0)
    assert full_entity.sprite.position == (100.0 - 5.0, 50.0 - 5.0)
    assert full_entity.global_bounds() == full_entity.hitbox_component.global_bounds()


def test_move_and_update_moves_sprite(full_entity):
    start = full_entity.sprite.position
    full_entity.move(0.01, 1.0, 0.0)
    full_entity.update(0.01)
    assert full_entity.sprite.position[0] > start[0]
    assert full_entity.sprite.position[1] == start[1]


def test_next_position_bounds_uses_velocity(full_entity):
    full_entity.move(0.01, 1.0, 0.0)
    bounds = full_entity.next_position_bounds(0.5)
    assert bounds.left > full_entity.global_bounds().left
    assert bounds.top == full_entity.global_bounds().top
    assert (bounds.width, bounds.height) == (18.0, 20.0)


def test_stop_velocity_axes(full_entity):
    full_entity.move(0.01, 1.0, 1.0)
    full_entity.stop_velocity_x()
    assert full_entity.movement_component.velocity_x == 0.0
    assert full_entity.movement_component.velocity_y > 0.0
    full_entity.stop_velocity_y()
    assert full_entity.movement_component.velocity == (0.0, 0.0)


def test_set_texture_fills_empty_texture_rect():
    entity = Entity()
    texture = FakeTexture()
    entity.set_texture(texture)
    assert entity.sprite.texture is texture
    assert entity.sprite.texture_rect == IntRect(0, 0, 64, 48)


def test_animation_component_drives_entity_sprite():
    entity = Entity()
    entity.create_animation_component(FakeTexture())
    entity.animation_component.add_animation("IDLE", 10.0, 0, 0, 0, 0, 90, 90)
    assert entity.sprite.texture_rect == IntRect(0, 0, 90, 90)
    assert entity.animation_component.play("IDLE", 1.0) is True