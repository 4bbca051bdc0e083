import unittest
import numpy as np
from py3r.ellipses.util.linalg_utils import (
    rotation_mat,
    elementwise_pseudoinvert,
    canonical_angle,
)

class TestRotationMat(unittest.TestCase):
    def test_zero_angle_is_identity(self):
        self.assertTrue(np.array_equal(rotation_mat(0), np.eye(2)))

    def test_ccw_matches_negated_cw(self):
        for theta in [0.3, -1.2, np.pi / 4, 2.5]:
            self.assertTrue(
                np.allclose(rotation_mat(theta, ccw=True), rotation_mat(-theta, ccw=False))
            )

    def test_quarter_turn_ccw(self):
        v = rotation_mat(np.pi / 2) @ np.array([1.0, 0.0])
        self.assertTrue(np.allclose(v, [0.0, 1.0]))

    def test_orthonormal(self):
        R = rotation_mat(0.7)
        self.assertTrue(np.allclose(R @ R.T, np.eye(2)))
        self.assertAlmostEqual(np.linalg.det(R), 1.0)

class TestElementwisePseudoinvert(unittest.TestCase):
    def test_all_zero_returned_unchanged(self):
        v = np.zeros(3)
        out = elementwise_pseudoinvert(v)
        self.assertTrue(np.array_equal(out, v))

    def test_reciprocal(self):
        out = elementwise_pseudoinvert(np.array([-2.0, 4.0]))
        self.assertTrue(np.allclose(out, [-0.5, 0.25]))

    def test_tiny_entries_map_to_zero(self):
        out = elementwise_pseudoinvert(np.array([1.0, 1e-12, 2.0]))
        self.assertEqual(out[1], 0.0)
        self.assertTrue(np.allclose(out, [1.0, 0.0, 0.5]))

    def test_exact_zero_maps_to_zero(self):
        out = elementwise_pseudoinvert(np.array([0.0, 4.0]))
        self.assertTrue(np.array_equal(out, [0.0, 0.25]))

    def test_custom_tolerance(self):
        out = elementwise_pseudoinvert(np.array([1.0, 1e-3]), tol=1e-2)
        self.assertTrue(np.array_equal(out, [1.0, 0.0]))

class TestCanonicalAngle(unittest.TestCase):
    def test_folds_opposite_direction(self):
        self.assertAlmostEqual(canonical_angle(np.pi), 0.0)
        self.assertAlmostEqual(canonical_angle(3 * np.pi / 4), -np.pi / 4)
        self.assertAlmostEqual(canonical_angle(-3 * np.pi / 4), np.pi / 4)

    def test_closed_on_the_right(self):
        self.assertEqual(canonical_angle(np.pi / 2), np.pi / 2)
        self.assertEqual(canonical_angle(-np.pi / 2), np.pi / 2)

    def test_inside_interval_unchanged(self):
        self.assertAlmostEqual(canonical_angle(0.4), 0.4)

if __name__ == '__main__':
    unittest.main()
