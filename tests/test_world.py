"""Tests for the scene driver: movement, animation, drawing and scene generation."""

import math

import pytest

from flythrough import config
from flythrough.player import MoveIntent
from flythrough.world import World, scatter_boxes
from wireframe.camera import look_at
from wireframe.math3d import Vec2, Vec3
from wireframe.mesh import Mesh
from wireframe.transform import Transform


def make_world(surface, intent=MoveIntent(), **kwargs):
    return World(surface, lambda: intent, **kwargs)


class TestMoveIntent:
    def test_direction(self):
        assert MoveIntent(forward=True, right=True).direction() == Vec2(1, 1)
        assert MoveIntent(back=True, left=True).direction() == Vec2(-1, -1)

    def test_opposing_keys_cancel(self):
        assert MoveIntent(forward=True, back=True).direction() == Vec2(0, 0)


class TestMovement:
    def test_forward_moves_along_camera_forward(self, surface):
        world = make_world(surface, MoveIntent(forward=True))
        start = world.camera.position
        forward = world.camera.forward()
        world.tick(0.1)
        step = world.camera.position - start
        assert step.values() == pytest.approx((forward * (config.MOVE_SPEED * 0.1)).values())

    def test_boost_multiplies_speed(self, surface):
        world = make_world(surface, MoveIntent(forward=True, boost=True))
        start = world.camera.position
        world.tick(0.1)
        moved = (world.camera.position - start).length()
        assert moved == pytest.approx(config.MOVE_SPEED * config.BOOST_MULTIPLIER * 0.1)

    def test_diagonal_is_not_faster(self, surface):
        world = make_world(surface, MoveIntent(forward=True, left=True))
        start = world.camera.position
        world.tick(0.2)
        assert (world.camera.position - start).length() == pytest.approx(config.MOVE_SPEED * 0.2)

    def test_strafe_is_perpendicular_to_forward(self, surface):
        world = make_world(surface, MoveIntent(right=True))
        start = world.camera.position
        forward = world.camera.forward()
        world.tick(0.1)
        step = world.camera.position - start
        assert step.length() > 0
        assert sum(a * b for a, b in zip(step, forward)) == pytest.approx(0.0, abs=1e-9)

    def test_no_intent_no_motion(self, surface):
        world = make_world(surface, MoveIntent(forward=True, back=True))
        start = world.camera.position
        view = world.view
        world.tick(0.5)
        assert world.camera.position == start
        assert world.view == view

    def test_view_follows_camera(self, surface):
        world = make_world(surface, MoveIntent(forward=True))
        world.tick(0.05)
        cam = world.camera
        assert world.view == look_at(cam.position, cam.position + cam.forward(), cam.up)


class TestLook:
    def test_mouse_deltas_turn_camera(self, surface):
        world = make_world(surface)
        yaw, pitch = world.camera.yaw, world.camera.pitch
        world.look(100, 50)
        assert world.camera.yaw == pytest.approx(yaw + 100 * config.MOUSE_SENSITIVITY)
        assert world.camera.pitch == pytest.approx(pitch - 50 * config.MOUSE_SENSITIVITY)
        assert world.view == world.camera.view_matrix()

    def test_pitch_is_clamped_below_the_pole(self, surface):
        world = make_world(surface)
        world.look(0, -1e6)
        assert world.camera.pitch == pytest.approx(config.PITCH_LIMIT)
        world.look(0, 2e6)
        assert world.camera.pitch == pytest.approx(-config.PITCH_LIMIT)


class TestDrawing:
    def test_tick_clears_then_draws(self, surface):
        world = make_world(surface)
        world.tick(0.0)
        assert surface.clears == 1
        assert surface.lines
        assert world.lines_drawn == len(surface.lines)

    def test_grid_drawn_first_in_grid_style(self, surface):
        world = make_world(surface)
        world.tick(0.0)
        grid_lines = [l for l in surface.lines if l[2] == config.GRID_COLOR]
        assert 0 < len(grid_lines) <= 21 * 21 * 4
        assert all(width == config.GRID_LINE_WIDTH for _, _, _, width in grid_lines)
        assert surface.lines[0][2] == config.GRID_COLOR

    def test_only_scene_colors_are_used(self, surface):
        world = make_world(surface)
        world.tick(0.0)
        colors = {line[2] for line in surface.lines}
        assert colors <= {
            config.GRID_COLOR,
            config.SPINNER_COLOR,
            config.COUNTER_SPINNER_COLOR,
            config.STATIC_BOX_COLOR,
        }
        assert config.SPINNER_COLOR in colors
        assert config.COUNTER_SPINNER_COLOR in colors

    def test_each_animated_box_draws_all_twelve_edges(self, surface):
        world = make_world(surface, static_boxes=0)
        world.tick(0.0)
        assert len([l for l in surface.lines if l[2] == config.SPINNER_COLOR]) == 12
        assert len([l for l in surface.lines if l[2] == config.COUNTER_SPINNER_COLOR]) == 12

    def test_edges_with_hidden_endpoint_are_skipped(self, surface):
        world = make_world(surface)
        eye = Vec3(*config.CAMERA_START)
        target = Vec3(*config.CAMERA_TARGET)
        behind = eye + (eye - target)
        mesh = Mesh([target, behind, target + Vec3(1, 0, 0)], [[0, 1], [0, 2]])
        assert world.draw_mesh(mesh, Transform(), "#ffffff", 1.0) == 1
        assert len(surface.lines) == 1

    def test_redraw_replaces_previous_frame(self, surface):
        world = make_world(surface)
        world.tick(0.0)
        first = len(surface.lines)
        world.tick(0.0)
        assert len(surface.lines) == first


class TestAnimation:
    def test_first_frame_does_not_rotate(self, surface):
        world = make_world(surface)
        world.tick(0.0)
        assert world.angle == 0.0

    def test_angle_advances_by_speed_times_delta(self, surface):
        world = make_world(surface)
        world.tick(0.5)
        assert world.angle == pytest.approx(math.radians(config.ROTATION_SPEED_DEG * 0.5))
        world.tick(0.5)
        assert world.angle == pytest.approx(math.radians(config.ROTATION_SPEED_DEG))

    def test_animated_boxes_counter_rotate(self, surface):
        world = make_world(surface)
        world.angle = math.pi / 2
        spinner, counter = world.animated_objects()
        assert spinner.transform.rotation == Transform.from_rotation((0, 1, 0), math.pi / 2).rotation
        assert counter.transform.rotation == Transform.from_rotation((0, 1, 0), -math.pi / 2).rotation
        assert counter.transform.scaling == Transform.from_scaling(1, 2, 1).scaling


class TestScatter:
    def test_count_and_color(self):
        boxes = scatter_boxes(7, seed=3)
        assert len(boxes) == 7
        assert all(b.color == config.STATIC_BOX_COLOR for b in boxes)

    def test_same_seed_same_scene(self):
        a = [b.transform.matrix() for b in scatter_boxes(10, seed=1234)]
        b = [b.transform.matrix() for b in scatter_boxes(10, seed=1234)]
        assert a == b

    def test_different_seed_different_scene(self):
        a = [b.transform.matrix() for b in scatter_boxes(3, seed=1)]
        b = [b.transform.matrix() for b in scatter_boxes(3, seed=2)]
        assert a != b

    def test_boxes_stay_within_placement_range(self):
        rx, ry, rz = config.STATIC_BOX_RANGE
        for box in scatter_boxes(50, seed=42):
            x, y, z = (box.transform.translation.column(3)[i] for i in range(3))
            assert -rx <= x <= rx
            assert -ry <= y <= ry
            assert -rz <= z <= rz

    def test_world_uses_configured_count(self, surface):
        world = make_world(surface, seed=9, static_boxes=4)
        assert len(world.objects()) == 6
