import unittest
from PySide6.QtCore import QPointF, QRectF

from core.colliders import (
    PointCollider, BoxCollider, LineCollider, copy_point, box_from_two_points
)


class TestHelpers(unittest.TestCase):
    def test_copy_point_keeps_target_identity(self):
        target = QPointF(1, 2)
        result = copy_point(target, QPointF(7, -3))
        self.assertIs(result, target)
        self.assertEqual(target, QPointF(7, -3))

    def test_box_from_two_points_normalizes(self):
        """Corner order does not matter."""
        rect = box_from_two_points(QPointF(40, 10), QPointF(-10, -10))
        self.assertEqual(rect, QRectF(-10, -10, 50, 20))


class TestPointCollider(unittest.TestCase):
    def test_copies_position(self):
        pos = QPointF(3, 4)
        point = PointCollider(pos)
        pos.setX(100)
        self.assertEqual(point.position, QPointF(3, 4))

    def test_point_point(self):
        self.assertTrue(PointCollider(QPointF(1, 1)).is_colliding(PointCollider(QPointF(1, 1))))
        self.assertFalse(PointCollider(QPointF(1, 1)).is_colliding(PointCollider(QPointF(1, 2))))

    def test_point_delegates_to_box(self):
        box = BoxCollider(QPointF(0, 0), 10, 10)
        self.assertTrue(PointCollider(QPointF(5, 5)).is_colliding(box))


class TestBoxCollider(unittest.TestCase):
    def setUp(self):
        self.box = BoxCollider(QPointF(0, 0), 10, 20)

    def test_contains_inside_and_edges(self):
        self.assertTrue(self.box.is_colliding(PointCollider(QPointF(5, 5))))
        self.assertTrue(self.box.is_colliding(PointCollider(QPointF(0, 0))))
        self.assertTrue(self.box.is_colliding(PointCollider(QPointF(10, 20))))

    def test_rejects_outside(self):
        self.assertFalse(self.box.is_colliding(PointCollider(QPointF(10.5, 5))))
        self.assertFalse(self.box.is_colliding(PointCollider(QPointF(5, -0.1))))

    def test_box_box_overlap(self):
        self.assertTrue(self.box.is_colliding(BoxCollider(QPointF(5, 5), 10, 10)))
        self.assertFalse(self.box.is_colliding(BoxCollider(QPointF(11, 0), 5, 5)))

    def test_touching_boxes_do_not_overlap(self):
        self.assertFalse(self.box.is_colliding(BoxCollider(QPointF(10, 0), 5, 5)))

    def test_rect(self):
        self.assertEqual(self.box.rect(), QRectF(0, 0, 10, 20))

    def test_set_geometry_in_place(self):
        """Moving the box keeps the same position object."""
        position = self.box.position
        self.box.set_geometry(QPointF(3, 4), 6, 8)
        self.assertIs(self.box.position, position)
        self.assertEqual(self.box.rect(), QRectF(3, 4, 6, 8))

    def test_from_rect(self):
        box = BoxCollider.from_rect(QRectF(-1, -2, 3, 4))
        self.assertEqual(box.position, QPointF(-1, -2))
        self.assertEqual((box.width, box.height), (3, 4))


class TestLineCollider(unittest.TestCase):
    def setUp(self):
        self.line = LineCollider(QPointF(0, 0), QPointF(100, 0), 4)

    def test_point_within_half_width(self):
        self.assertTrue(self.line.is_colliding(PointCollider(QPointF(50, 1.9))))
        self.assertTrue(self.line.is_colliding(PointCollider(QPointF(50, -1.5))))
        self.assertFalse(self.line.is_colliding(PointCollider(QPointF(50, 2.5))))

    def test_round_cap_past_segment_end(self):
        self.assertTrue(self.line.is_colliding(PointCollider(QPointF(101, 0))))
        self.assertFalse(self.line.is_colliding(PointCollider(QPointF(103, 0))))

    def test_degenerate_segment(self):
        dot = LineCollider(QPointF(5, 5), QPointF(5, 5), 2)
        self.assertTrue(dot.is_colliding(PointCollider(QPointF(5, 5.5))))
        self.assertFalse(dot.is_colliding(PointCollider(QPointF(5, 7))))

    def test_line_box(self):
        self.assertFalse(self.line.is_colliding(BoxCollider(QPointF(50, -10), 5, 5)))
        self.assertTrue(self.line.is_colliding(BoxCollider(QPointF(50, -3), 5, 2)))
        self.assertTrue(self.line.is_colliding(BoxCollider(QPointF(-10, -10), 200, 20)))
        # Box delegates back to the line
        self.assertTrue(BoxCollider(QPointF(50, -3), 5, 2).is_colliding(self.line))

    def test_shape_follows_endpoints(self):
        """The hit area is rebuilt from endpoints updated in place."""
        copy_point(self.line.end_position, QPointF(0, 100))
        self.assertTrue(self.line.is_colliding(PointCollider(QPointF(1, 50))))
        self.assertFalse(self.line.is_colliding(PointCollider(QPointF(50, 0))))

    def test_line_line(self):
        a = LineCollider(QPointF(0, 0), QPointF(10, 10), 1)
        b = LineCollider(QPointF(0, 10), QPointF(10, 0), 1)
        self.assertTrue(a.is_colliding(b))

        c = LineCollider(QPointF(0, 0), QPointF(10, 0), 2)
        d = LineCollider(QPointF(0, 5), QPointF(10, 5), 2)
        self.assertFalse(c.is_colliding(d))
        d.width = 10
        self.assertTrue(c.is_colliding(d))


if __name__ == "__main__":
    unittest.main()
