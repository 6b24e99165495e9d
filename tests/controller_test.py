import sys
sys.path.append('..')

import unittest
from pyslice2d import *

def almost_equal(v1, v2, tol=1e-6):
    return abs(v1[0] - v2[0]) < tol and abs(v1[1] - v2[1]) < tol

class PickyWorld(World):
    """Refuses to compute the mass of anything left of x = 200"""
    def compute_mass(self, polygon):
        if all(v[0] < 200 for v in polygon):
            raise ValueError('Refusing to weigh %s' % (polygon, ))
        return World.compute_mass(self, polygon)

class history_test(unittest.TestCase):
    def test_eviction(self):
        history = StrokeHistory(0.5)
        entry = history.begin((0, 0), 0.0)
        entry.append((1, 0), 0.2)
        entry.append((2, 0), 0.4)
        assert(len(history) == 1 and len(entry) == 3)

        history.evict(0.6)
        assert([p.time for p in entry] == [0.2, 0.4])

        # Open entries survive even when empty
        history.evict(10.0)
        assert(len(entry) == 0)
        assert(list(history) == [entry])

        entry.closed = True
        history.evict(10.0)
        assert(len(history) == 0)

    def test_segments(self):
        history = StrokeHistory(0.5)
        entry = history.begin((0, 0), 0.0)
        entry.append((1, 0), 0.25)

        segments = list(history.segments(0.25))
        assert(len(segments) == 1)
        p0, p1, alpha = segments[0]
        assert(p0 == (0, 0) and p1 == (1, 0))
        assert(abs(alpha - 1.0) < 1e-9)

        alpha = list(history.segments(0.5))[0][2]
        assert(abs(alpha - 0.5) < 1e-9)
        alpha = list(history.segments(5.0))[0][2]
        assert(alpha == 0.0)

    def test_invalid(self):
        self.assertRaises(ValueError, StrokeHistory, 0)

class controller_test(unittest.TestCase):
    def setUp(self):
        self.world = World(gravity=(0, 0))
        self.box = self.world.create_box((400, 250), 40, 40)
        self.drag = DragConstraint(self.world)
        self.controller = SliceController(self.world, drag=self.drag)

    def stroke(self, points, controller=None):
        controller = controller or self.controller
        time = 0.0
        controller.pointer_down(points[0], time)
        for point in points[1:-1]:
            time += 0.05
            controller.pointer_move(point, time)
        return controller.pointer_up(points[-1], time + 0.05)

    def test_slice(self):
        controller = self.controller
        assert(controller.state == SliceController.IDLE)

        assert(controller.pointer_down((340, 250), 0.0) == SliceController.SLICING)
        assert(not self.drag.enabled)
        controller.pointer_move((400, 250), 0.05)
        assert(len(controller.stroke) == 2)

        events = controller.pointer_up((460, 250), 0.1)
        assert(controller.state == SliceController.IDLE)
        assert(self.drag.enabled)
        assert(controller.stroke == [])

        assert(len(events) == 1)
        event = events[0]
        assert(event.body is self.box)
        assert(event.unresolved == [])
        assert(len(event.bodies) == 2)
        assert(self.box not in self.world.bodies)
        assert(len(self.world.bodies) == 2)

        top, bottom = sorted(event.bodies, key=lambda b: b.position.y)
        assert(almost_equal(top.position, (400, 230)))
        assert(almost_equal(bottom.position, (400, 270)))
        self.assertAlmostEqual(top.mass, 3.2)
        assert(almost_equal(top.linear_velocity, (0, -2)))
        assert(almost_equal(bottom.linear_velocity, (0, 2)))

        # A horizontal stroke carries no force upwards
        assert(top.force == (0, 0))

        # The stroke stays visible until it ages out
        assert(len(controller.history) == 1)
        controller.update(10.0)
        assert(len(controller.history) == 0)

    def test_slice_inherits_spin(self):
        self.box.angular_velocity = 1.0
        events = self.stroke([(340, 250), (460, 250)])
        for body in events[0].bodies:
            assert(body.angular_velocity == 1.0)

        top = min(events[0].bodies, key=lambda b: b.position.y)
        # w x r with r = (0, -20), plus the kerf
        assert(almost_equal(top.linear_velocity, (20, -2)))

    def test_upward_force(self):
        events = self.stroke([(400, 300), (400, 200)])
        assert(len(events) == 1)
        for fragment, body in zip(events[0].fragments, events[0].bodies):
            force, point = fragment.forces[0]
            assert(force.y < 0.0)
            assert(almost_equal(body.force, force))

    def test_drag(self):
        controller = self.controller
        assert(controller.pointer_down((400, 250), 0.0) == SliceController.DRAGGING)
        assert(self.drag.body is self.box)
        controller.pointer_move((420, 250), 0.1)
        assert(self.drag.target == (420, 250))

        events = controller.pointer_up((420, 250), 0.2)
        assert(events == [])
        assert(not self.drag.active)
        assert(controller.state == SliceController.IDLE)
        assert(self.world.bodies == [self.box])
        assert(len(controller.history) == 0)

    def test_click(self):
        assert(self.stroke([(340, 250), (340, 250)]) == [])
        assert(self.world.bodies == [self.box])

    def test_miss(self):
        assert(self.stroke([(340, 100), (460, 100)]) == [])
        assert(self.world.bodies == [self.box])

    def test_path(self):
        controller = SliceController(self.world, SliceParams.carve(),
                                     mode=SliceController.PATH, drag=self.drag)
        events = self.stroke([(340, 250), (460, 250), (460, 300)], controller)
        assert(len(events) == 1)
        assert(len(self.world.bodies) == 2)

        top = min(events[0].bodies, key=lambda b: b.position.y)
        assert(almost_equal(top.linear_velocity, (0, -3)))

    def test_path_per_segment(self):
        # Neither segment crosses the outline twice
        controller = SliceController(self.world, mode=SliceController.PATH)
        assert(self.stroke([(340, 250), (400, 250), (460, 250)], controller) == [])

    def test_path_not_committed(self):
        controller = SliceController(self.world, mode=SliceController.PATH,
                                     commit_path=False)
        assert(self.stroke([(340, 250), (460, 250)], controller) == [])
        assert(self.world.bodies == [self.box])
        assert(len(controller.history) == 1)

    def test_several_bodies(self):
        other = self.world.create_box((200, 250), 40, 40)
        events = self.stroke([(100, 250), (500, 250)])
        assert([e.body for e in events] == [self.box, other])
        assert(len(self.world.bodies) == 4)

    def test_skips_failing_body(self):
        world = PickyWorld(gravity=(0, 0))
        left = world.create_box((100, 250), 40, 40)
        right = world.create_box((400, 250), 40, 40)
        controller = SliceController(world)

        events = self.stroke([(0, 250), (500, 250)], controller)
        assert(len(events) == 1)
        assert(events[0].body is right)
        assert(left in world.bodies)
        assert(len(world.bodies) == 3)

    def test_cut_keeps_mass(self):
        world = World(gravity=(0, 0))
        u_shape = world.create_body([(0, 0), (30, 0), (30, 30), (20, 30), (20, 10),
                                     (10, 10), (10, 30), (0, 30)])
        comb = world.create_body([(100, 0), (140, 0), (140, 20), (130, 20), (130, 5),
                                  (125, 5), (120, 10), (115, 5), (110, 5), (110, 20),
                                  (100, 20)])
        controller = SliceController(world)
        total_mass = sum(body.mass for body in world.bodies)
        self.assertAlmostEqual(total_mass, 0.7 + 0.525)

        # Starts inside the left leg of the U and misses the comb
        assert(controller.cut(((5, 20), (35, 20))) == [])
        assert(world.bodies == [u_shape, comb])

        # Grazes the middle prong of the comb
        events = controller.cut(((95, 10), (145, 10)))
        assert(len(events) == 1)
        assert(events[0].body is comb)
        assert(len(events[0].bodies) == 3)
        assert(len(world.bodies) == 4)
        self.assertAlmostEqual(sum(body.mass for body in world.bodies), total_mass)

    def test_cut(self):
        events = self.controller.cut(((340, 250), (460, 250)))
        assert(len(events) == 1)
        assert(self.controller.state == SliceController.IDLE)

    def test_interrupted(self):
        controller = self.controller
        controller.pointer_down((340, 250), 0.0)
        controller.pointer_down((400, 250), 0.1)
        assert(controller.state == SliceController.DRAGGING)
        assert(self.drag.enabled)
        assert(controller.history.entries[0].closed)

    def test_invalid_mode(self):
        self.assertRaises(ValueError, SliceController, self.world, mode='knife')

if __name__ ==  '__main__':
    unittest.main()
