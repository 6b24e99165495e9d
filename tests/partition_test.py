import sys
sys.path.append('..')

import unittest
from pyslice2d import *
from pyslice2d.partition import (UNRESOLVED, Resolved, as_path, pair_crossings,
                                 conserves_area)

square = [(0, 0), (10, 0), (10, 10), (0, 10)]
u_shape = [(0, 0), (30, 0), (30, 30), (20, 30), (20, 10), (10, 10), (10, 30), (0, 30)]
comb = [(0, 0), (40, 0), (40, 20), (30, 20), (30, 5), (25, 5), (20, 10), (15, 5),
        (10, 5), (10, 20), (0, 20)]
tolerance = 1e-6

def areas(polygons):
    return sorted(polygon_area(p) for p in polygons)

class partition_test(unittest.TestCase):
    def check_area_conserved(self, polygon, polygons):
        total = sum(polygon_area(p) for p in polygons)
        self.assertAlmostEqual(total, polygon_area(polygon), delta=tolerance)

    def test_cut_segment(self):
        seg = CutSegment((1, 2), (4, 6))
        assert(seg.start == (1, 2))
        assert(seg.end == (4, 6))
        assert(seg.vector == (3, 4))
        assert(seg.length == 5.0)
        self.assertRaises(ValueError, CutSegment, (1, 1), (1, 1))

    def test_as_path(self):
        path = as_path(((0, 0), (1, 0)))
        assert(len(path) == 1 and path[0].end == (1, 0))

        seg = CutSegment((0, 0), (1, 1))
        assert(as_path(seg) == [seg])

        path = as_path([((0, 0), (1, 0)), CutSegment((1, 0), (1, 1))])
        assert(len(path) == 2)
        assert(path[1].start == (1, 0))

        self.assertRaises(ValueError, as_path, [])

    def test_square_halves(self):
        box = [(360, 210), (440, 210), (440, 290), (360, 290)]
        result = slice_polygon(box, ((360, 250), (440, 250)))
        assert(result.split)
        assert(result.reason is None)
        assert(result.unresolved == [])
        assert(len(result.polygons) == 2)

        for fragment in result.polygons:
            assert(len(fragment) == 4)
            self.assertAlmostEqual(polygon_area(fragment), 3200.0, delta=tolerance)

        centroids = sorted(compute_centroid(p).y for p in result.polygons)
        self.assertAlmostEqual(centroids[0], 230.0, delta=tolerance)
        self.assertAlmostEqual(centroids[1], 270.0, delta=tolerance)

    def test_clockwise_input(self):
        ring = list(reversed(square))
        polygons = partition(ring, ((-5, 4), (15, 4)))
        assert(len(polygons) == 2)
        self.check_area_conserved(ring, polygons)
        assert(abs(areas(polygons)[0] - 40.0) < tolerance)

    def test_concave(self):
        result = slice_polygon(u_shape, ((-5, 20), (35, 20)))
        assert(result.split)
        assert(len(result.polygons) == 3)
        self.check_area_conserved(u_shape, result.polygons)

        a = areas(result.polygons)
        self.assertAlmostEqual(a[0], 100.0, delta=tolerance)
        self.assertAlmostEqual(a[1], 100.0, delta=tolerance)
        self.assertAlmostEqual(a[2], 500.0, delta=tolerance)

        # No more fragments than pairs of crossings plus one
        assert(len(result.polygons) <= 4 // 2 + 1)

    def test_through_vertices(self):
        polygons = partition(square, ((-5, -5), (15, 15)))
        assert(len(polygons) == 2)
        for fragment in polygons:
            assert(len(fragment) == 3)
            self.assertAlmostEqual(polygon_area(fragment), 50.0, delta=tolerance)

    def test_ends_inside(self):
        # Starting inside a leg, the chord to the first crossing runs outside
        result = slice_polygon(u_shape, ((5, 20), (35, 20)))
        assert(not result.split)
        assert(result.reason == SliceResult.NO_CROSSING)
        assert(result.polygons[0] is u_shape)

        # Both ends inside, crossing the gap between the legs
        assert(partition(u_shape, ((5, 20), (25, 20)))[0] is u_shape)
        assert(partition(u_shape, ((25, 20), (5, 20)))[0] is u_shape)

        # Ending on the boundary is outside
        polygons = partition(square, ((0, 5), (10, 5)))
        assert(len(polygons) == 2)
        self.check_area_conserved(square, polygons)

    def test_vertex_touch(self):
        # The cut grazes the tip of the middle prong without crossing it
        result = slice_polygon(comb, ((-5, 10), (45, 10)))
        assert(result.split)
        assert(result.unresolved == [])
        assert(len(result.polygons) == 3)
        self.check_area_conserved(comb, result.polygons)
        for fragment in result.polygons:
            assert(is_simple_polygon(fragment))

        a = areas(result.polygons)
        self.assertAlmostEqual(a[0], 100.0, delta=tolerance)
        self.assertAlmostEqual(a[1], 100.0, delta=tolerance)
        self.assertAlmostEqual(a[2], 325.0, delta=tolerance)

        # Touching a corner of a convex polygon leaves it whole
        triangle = [(0, 0), (10, 0), (5, 10)]
        result = slice_polygon(triangle, ((-5, 10), (15, 10)))
        assert(result.reason == SliceResult.NO_CROSSING)

    def test_area_conserved(self):
        star = [(0, -10), (3, -3), (10, 0), (3, 3), (0, 10), (-3, 3), (-10, 0), (-3, -3)]
        cuts = [((-20, 0), (20, 0)), ((-20, 3), (20, 3)), ((-20, 1), (20, 2)),
                ((-20, -20), (20, 20)), ((0, -20), (0, 20)), ((-20, 7), (20, -7))]
        for polygon in (u_shape, comb, star):
            for cut in cuts + [((-5, 10), (45, 10)), ((-5, 20), (35, 20)),
                               ((15, -5), (15, 35)), ((-5, 5), (45, 5))]:
                result = slice_polygon(polygon, cut)
                if result.split:
                    self.check_area_conserved(polygon, result.polygons)
                else:
                    assert(result.polygons[0] is polygon)

    def test_conserves_area(self):
        halves = [[(0, 0), (10, 0), (10, 5), (0, 5)], [(0, 5), (10, 5), (10, 10), (0, 10)]]
        assert(conserves_area(square, halves))
        assert(not conserves_area(square, halves + [[(0, 0), (1, 0), (0, 1)]]))
        assert(not conserves_area(square, halves[:1]))

    def test_multi_segment_path(self):
        path = [((-5, 3), (15, 3)), ((15, 7), (-5, 7))]
        result = slice_polygon(square, path)
        assert(len(result.polygons) == 3)
        self.check_area_conserved(square, result.polygons)
        a = areas(result.polygons)
        self.assertAlmostEqual(a[0], 30.0, delta=tolerance)
        self.assertAlmostEqual(a[1], 30.0, delta=tolerance)
        self.assertAlmostEqual(a[2], 40.0, delta=tolerance)

    def test_no_crossing(self):
        # Completely outside
        result = slice_polygon(square, ((20, 20), (30, 30)))
        assert(not result.split)
        assert(result.reason == SliceResult.NO_CROSSING)
        assert(result.polygons[0] is square)
        assert(len(result.polygons) == 1)

        # Ends inside: a single crossing does nothing
        result = slice_polygon(square, ((5, 5), (15, 5)))
        assert(result.reason == SliceResult.NO_CROSSING)
        assert(partition(square, ((5, 5), (15, 5)))[0] is square)

        # Entirely inside
        result = slice_polygon(square, ((2, 2), (8, 8)))
        assert(result.reason == SliceResult.NO_CROSSING)

    def test_grazing_edge(self):
        # Running along an edge would leave a sliver with no area
        result = slice_polygon(square, ((-5, 0), (15, 0)))
        assert(not result.split)
        assert(result.reason == SliceResult.DEGENERATE_FRAGMENT)
        assert(result.polygons == [square])

    def test_degenerate_input(self):
        for polygon in ([(0, 0), (1, 1)],
                        [(0, 0), (5, 0), (10, 0)],
                        [(0, 0), (10, 10), (10, 0), (0, 10)]):
            result = slice_polygon(polygon, ((-5, 5), (15, 5)))
            assert(not result.split)
            assert(result.reason == SliceResult.DEGENERATE)
            assert(result.polygons[0] is polygon)

    def test_input_untouched(self):
        polygon = [Vec2(*v) for v in u_shape]
        before = [Vec2(*v) for v in polygon]
        partition(polygon, ((-5, 20), (35, 20)))
        assert(polygon == before)

    def test_idempotent_when_whole(self):
        first = partition(square, ((20, 0), (20, 10)))
        second = partition(first[0], ((20, 0), (20, 10)))
        assert(second == [square])

    def test_pair_crossings(self):
        # Ring positions: 0 a 1 c 2 b 3 d, a/b/c/d being crossings 10..13
        flags = [False] * 14
        for i in (10, 11, 12, 13):
            flags[i] = True
        ring = [0, 10, 1, 12, 2, 11, 3, 13]

        # a and b have c between them one way and d the other
        assert(pair_crossings(ring, flags, 10, 11) is UNRESOLVED)
        assert(not pair_crossings(ring, flags, 11, 10))

        outcome = pair_crossings(ring, flags, 10, 12)
        assert(isinstance(outcome, Resolved))
        assert(outcome.loop == [10, 1, 12])
        assert(outcome.rest == [12, 2, 11, 3, 13, 0, 10])

        # Wrapping around the end of the ring, given in reverse
        outcome = pair_crossings(ring, flags, 10, 13)
        assert(outcome.pair == (13, 10))
        assert(outcome.loop == [13, 0, 10])

if __name__ ==  '__main__':
    unittest.main()
