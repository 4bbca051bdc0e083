import unittest
import warnings
import numpy as np
from py3r.ellipses.qform import QuadraticFormEllipse, evaluate_qform, make_qform
from py3r.ellipses.exceptions import DegenerateEllipseWarning

class TestQuadraticFormEllipse(unittest.TestCase):
    def test_circle_has_equal_axes_and_zero_angle(self):
        for A in [0.5, 1.0, 2.0, 9.0]:
            q = make_qform(A, 0.0, A)
            self.assertAlmostEqual(q.semi_axis_a, q.semi_axis_b)
            self.assertAlmostEqual(q.semi_axis_a, 1 / np.sqrt(A))
            self.assertEqual(q.rotation_angle, 0.0)
            self.assertFalse(q.is_fallback)

    def test_axis_aligned(self):
        q = make_qform(1.0, 0.0, 0.25)
        a, b, theta = q.canon
        self.assertAlmostEqual(a, 1.0)
        self.assertAlmostEqual(b, 2.0)
        self.assertAlmostEqual(theta, 0.0)

    def test_axis_aligned_tall(self):
        # semi_axis_a is measured along rotation_angle
        q = make_qform(0.25, 0.0, 1.0)
        self.assertAlmostEqual(q.rotation_angle, np.pi / 2)
        self.assertAlmostEqual(q.semi_axis_a, 1.0)
        self.assertAlmostEqual(q.semi_axis_b, 2.0)

    def test_rotated(self):
        q = make_qform(0.625, -0.75, 0.625)
        self.assertAlmostEqual(q.rotation_angle, -np.pi / 4)
        self.assertAlmostEqual(q.semi_axis_a, 1.0)
        self.assertAlmostEqual(q.semi_axis_b, 2.0)

    def test_negative_definite_falls_back_to_unit_circle(self):
        with self.assertWarns(DegenerateEllipseWarning):
            q = make_qform(-1.0, 0.0, -1.0)
        self.assertTrue(q.is_fallback)
        self.assertEqual(q.params, (1.0, 0.0, 1.0))
        self.assertEqual(q.canon, (1.0, 1.0, 0.0))

    def test_zero_form_falls_back_to_unit_circle(self):
        with self.assertWarns(DegenerateEllipseWarning):
            q = make_qform(0.0, 0.0, 0.0)
        self.assertTrue(q.is_fallback)
        self.assertEqual(q.params, (1.0, 0.0, 1.0))

    def test_hyperbola_clamps_one_axis(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            q = make_qform(1.0, 0.0, -1.0)
        self.assertAlmostEqual(q.semi_axis_a, 1.0)
        self.assertEqual(q.semi_axis_b, 0.0)
        self.assertFalse(q.is_fallback)

    def test_non_finite_raises(self):
        with self.assertRaises(ValueError):
            make_qform(np.nan, 0.0, 1.0)
        with self.assertRaises(ValueError):
            make_qform(1.0, np.inf, 1.0)

    def test_evaluate(self):
        q = make_qform(0.25, 0.0, 1.0)
        self.assertAlmostEqual(q.evaluate(2.0, 0.0), 1.0)
        self.assertAlmostEqual(q.evaluate(0.0, -1.0), 1.0)
        x = np.array([2.0, 0.0, 1.0])
        y = np.array([0.0, 1.0, 1.0])
        self.assertTrue(np.allclose(q.evaluate(x, y), [1.0, 1.0, 1.25]))

    def test_evaluate_qform_free_function(self):
        self.assertEqual(evaluate_qform(1.0, 2.0, 3.0, 1.0, 1.0), 6.0)

    def test_immutable(self):
        q = QuadraticFormEllipse.from_coefficients(1.0, 0.0, 1.0)
        with self.assertRaises(Exception):
            q.A = 2.0

if __name__ == '__main__':
    unittest.main()
