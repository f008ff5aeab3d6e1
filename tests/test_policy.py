import unittest
import tilenames.policy as policy
from tilenames.mercator import DomainError, MAX_LATITUDE


class TestPolicy(unittest.TestCase):

    def test_wrap_longitude(self):
        self.assertEqual(policy.wrap_longitude(190.0), -170.0)
        self.assertEqual(policy.wrap_longitude(-190.0), 170.0)
        self.assertEqual(policy.wrap_longitude(180.0), -180.0)
        self.assertEqual(policy.wrap_longitude(-180.0), -180.0)
        self.assertEqual(policy.wrap_longitude(12.5), 12.5)
        self.assertEqual(policy.wrap_longitude(720.0 + 45.0), 45.0)

    def test_clamp_latitude(self):
        self.assertEqual(policy.clamp_latitude(89.0), MAX_LATITUDE)
        self.assertEqual(policy.clamp_latitude(-90.0), -MAX_LATITUDE)
        self.assertEqual(policy.clamp_latitude(45.0), 45.0)

    def test_clamp_tile(self):
        self.assertEqual(policy.clamp_tile(-1, 5, 2), (0, 3))
        self.assertEqual(policy.clamp_tile(2, 1, 2), (2, 1))
        self.assertEqual(policy.clamp_tile(7, 7, 0), (0, 0))

    def test_wrap_tile(self):
        self.assertEqual(policy.wrap_tile(-1, -1, 2), (3, 0))
        self.assertEqual(policy.wrap_tile(5, 2, 2), (1, 2))
        self.assertEqual(policy.wrap_tile(4, 9, 2), (0, 3))

    def test_apply_policy(self):
        self.assertEqual(policy.apply_policy('extrapolate', -1, 9, 2),
                         (-1, 9))
        self.assertEqual(policy.apply_policy('clamp', -1, 9, 2), (0, 3))
        self.assertEqual(policy.apply_policy('wrap', -1, 9, 2), (3, 3))

    def test_unknown_policy(self):
        with self.assertRaises(ValueError):
            policy.apply_policy('bounce', 0, 0, 0)
        with self.assertRaises(ValueError):
            policy.check_policy(None)

    def test_bad_zoom(self):
        for name in sorted(policy.POLICIES.keys()):
            with self.assertRaises(DomainError):
                policy.apply_policy(name, 0, 0, -1)
