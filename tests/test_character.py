from unittest import mock

from tiphereth.character import Character2, Dwarf
from tiphereth.movement_component import MovementState


class RecordingTarget:
    def __init__(self):
        self.calls = []

    def draw_rect(self, rect, fill, outline, thickness):
        self.calls.append(("rect", rect))

    def draw_sprite(self, sprite):
        self.calls.append(("sprite", sprite))

    def draw_text(self, text, position, font, size, color):
        self.calls.append(("text", text))


def test_character_starts_at_position():
    hero = Character2(100.0, 100.0, None)
    assert hero.sprite.position == (100.0, 100.0)
    hx, hy = hero.hitbox_component.position
    assert (hx - hero.sprite.position[0], hy - hero.sprite.position[1]) == (5.0, 5.0)
    assert hero.attacking is False
    assert set(hero.animation_component.animations) == {"IDLE", "WALK", "ATTACK"}


def test_hitbox_follows_sprite_after_update():
    hero = Character2(100.0, 100.0, None)
    hero.move(0.01, 0.0, 1.0)
    hero.update(0.01)
    sx, sy = hero.sprite.position
    hx, hy = hero.hitbox_component.position
    assert sy > 100.0
    assert (hx - sx, hy - sy) == (5.0, 5.0)


def test_walking_right_faces_right():
    hero = Character2(100.0, 100.0, None)
    hero.move(0.01, 1.0, 0.0)
    hero.update(0.01)
    assert hero.movement_component.state_is(MovementState.MOVING_RIGHT)
    assert hero.sprite.scale == (0.30, 0.30)
    assert hero.sprite.origin == (0.0, 0.0)


def test_walking_left_flips_sprite():
    hero = Character2(100.0, 100.0, None)
    hero.move(0.01, -1.0, 0.0)
    hero.update(0.01)
    assert hero.movement_component.state_is(MovementState.MOVING_LEFT)
    assert hero.sprite.scale == (-0.30, 0.30)
    assert hero.sprite.origin == (90.0, 0.0)


def test_click_starts_attack():
    hero = Character2(100.0, 100.0, None)
    with mock.patch("pygame.mouse.get_pressed", return_value=(True, False, False)):
        hero.update_attack()
    assert hero.attacking is True


def test_no_click_no_attack():
    hero = Character2(100.0, 100.0, None)
    hero.update(0.01)
    assert hero.attacking is False


def test_attack_finishes_after_a_cycle():
    hero = Character2(100.0, 100.0, None)
    with mock.patch("pygame.mouse.get_pressed", return_value=(True, False, False)):
        hero.update(0.1)
    assert hero.attacking is True
    for _ in range(10):
        if not hero.attacking:
            break
        hero.update(0.1)
    assert hero.attacking is False


def test_render_draws_sprite_and_hitbox():
    hero = Character2(100.0, 100.0, None)
    target = RecordingTarget()
    hero.render(target)
    assert target.calls[0] == ("sprite", hero.sprite)
    assert target.calls[1] == ("rect", hero.hitbox_component.global_bounds())


def test_dwarf_draws_nothing_and_stays_put():
    dwarf = Dwarf(10.0, 20.0, None)
    dwarf.update(0.5)
    target = RecordingTarget()
    dwarf.render(target)
    assert target.calls == []
    assert dwarf.sprite.position == (0.0, 0.0)
    assert dwarf.movement_component is None