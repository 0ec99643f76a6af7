import itertools
import unittest

from gcloudjob.job import BackoffPolicy


class TestBackoffPolicy(unittest.TestCase):
    def test_defaults(self) -> None:
        policy = BackoffPolicy()
        self.assertEqual(policy.initial_delay_sec, 10.0)
        self.assertEqual(policy.multiplier, 1.3)
        self.assertEqual(policy.max_delay_sec, 300.0)

    def test_delays_grow_and_are_clamped(self) -> None:
        policy = BackoffPolicy(initial_delay_sec=1.0, multiplier=2.0, max_delay_sec=5.0)
        delays = list(itertools.islice(policy.delays(), 6))
        self.assertEqual(delays, [1.0, 2.0, 4.0, 5.0, 5.0, 5.0])

    def test_delays_never_decrease(self) -> None:
        delays = list(itertools.islice(BackoffPolicy().delays(), 50))
        self.assertEqual(delays, sorted(delays))
        self.assertEqual(delays[-1], 300.0)

    def test_constant_policy(self) -> None:
        policy = BackoffPolicy(initial_delay_sec=2.0, multiplier=1.0, max_delay_sec=2.0)
        self.assertEqual(list(itertools.islice(policy.delays(), 3)), [2.0, 2.0, 2.0])

    def test_zero_initial_delay_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            BackoffPolicy(initial_delay_sec=0.0, multiplier=2.0, max_delay_sec=60.0)
        with self.assertRaises(ValueError):
            BackoffPolicy(initial_delay_sec=0.0, multiplier=1.0, max_delay_sec=0.0)

    def test_invalid_values_raise(self) -> None:
        with self.assertRaises(ValueError):
            BackoffPolicy(initial_delay_sec=-1.0)
        with self.assertRaises(ValueError):
            BackoffPolicy(multiplier=0.5)
        with self.assertRaises(ValueError):
            BackoffPolicy(initial_delay_sec=10.0, max_delay_sec=1.0)


if __name__ == "__main__":
    unittest.main()
