import pytest

from tiphereth.animation_component import Animation, AnimationComponent
from tiphereth.geometry import IntRect, Sprite


@pytest.fixture
def setup():
    sprite = Sprite()
    component = AnimationComponent(sprite, object())
    component.add_animation("IDLE", 10.0, 0, 1, 0, 1, 90, 90)
    component.add_animation("ATTACK", 7.5, 0, 0, 3, 0, 90, 90)
    return sprite, component


def test_adding_sets_texture_and_start_frame():
    sprite = Sprite()
    texture = object()
    component = AnimationComponent(sprite, texture)
    component.add_animation("WALK", 5.0, 0, 0, 0, 0, 90, 90)
    assert sprite.texture is texture
    assert sprite.texture_rect == IntRect(0, 0, 90, 90)


def test_cycle_finishes_after_last_frame(setup):
    sprite, component = setup
    results = [component.play("ATTACK", 1.0) for _ in range(4)]
    assert results == [False, False, False, True]
    assert sprite.texture_rect == IntRect(0, 0, 90, 90)
    assert component.is_done("ATTACK") is True


def test_first_tick_advances_one_frame(setup):
    sprite, component = setup
    component.play("ATTACK", 1.0)
    assert sprite.texture_rect.left == 90


def test_small_step_does_not_advance(setup):
    sprite, component = setup
    assert component.play("ATTACK", 0.01) is False
    assert sprite.texture_rect.left == 0


def test_modifier_slows_but_not_below_half(setup):
    sprite, component = setup
    component.play("ATTACK", 0.1, modifier=0.0, modifier_max=100.0)
    assert sprite.texture_rect.left == 0
    component.play("ATTACK", 0.1, modifier=0.0, modifier_max=100.0)
    assert sprite.texture_rect.left == 90


def test_animation_floor_directly():
    sprite = Sprite()
    animation = Animation(sprite, object(), 10.0, 0, 0, 1, 0, 10, 10)
    animation.play(0.1, 0.0)
    assert animation.current_rect == animation.start_rect
    animation.play(0.1, 0.0)
    assert animation.current_rect.left == 10


def test_priority_blocks_others_until_done(setup):
    sprite, component = setup
    component.play("ATTACK", 1.0, priority=True)
    assert component.play("IDLE", 1.0) is False
    assert sprite.texture_rect.left == 90
    assert sprite.texture_rect.top == 0
    assert [component.play("ATTACK", 1.0) for _ in range(3)] == [False, False, True]
    assert component.play("IDLE", 1.0) is True
    assert sprite.texture_rect.top == 90


def test_switching_resets_previous_animation(setup):
    sprite, component = setup
    component.play("ATTACK", 1.0)
    component.play("ATTACK", 1.0)
    assert sprite.texture_rect.left == 180
    component.play("IDLE", 0.0)
    component.play("ATTACK", 0.0)
    assert sprite.texture_rect.left == 90


def test_reset_returns_to_start():
    sprite = Sprite()
    animation = Animation(sprite, object(), 5.0, 0, 0, 2, 0, 16, 16)
    animation.play(1.0)
    animation.reset()
    assert animation.current_rect == animation.start_rect
    assert animation.timer == animation.animation_timer


def test_unknown_key_raises(setup):
    _, component = setup
    with pytest.raises(KeyError):
        component.play("JUMP", 1.0)
    with pytest.raises(KeyError):
        component.is_done("JUMP")