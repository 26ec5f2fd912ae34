import unittest
from reading.domain.PlanType import PlanType
from reading.domain.errors import UnknownPlanType
from reading.logic.reporting.stats import compute_stats, suggested_minutes, suggested_time


class TestComputeStats(unittest.TestCase):
    def test_half_way(self):
        stats = compute_stats(PlanType.NT90, 45)
        self.assertEqual(stats, {
            'totalDays': 90,
            'completed': 45,
            'percent': 50,
            'remaining': 45,
            'avgChaptersPerDay': 2.89,
        })

    def test_nothing_completed(self):
        stats = compute_stats("ot365", 0)
        self.assertEqual(stats['percent'], 0)
        self.assertEqual(stats['remaining'], 365)
        self.assertEqual(stats['avgChaptersPerDay'], 2.54)

    def test_rounds_to_nearest(self):
        # 1.11 -> 1, 5.56 -> 6, 0.55 -> 1
        self.assertEqual(compute_stats(PlanType.NT90, 1)['percent'], 1)
        self.assertEqual(compute_stats(PlanType.NT90, 5)['percent'], 6)
        self.assertEqual(compute_stats(PlanType.ETHIOPIAN, 2)['percent'], 1)

    def test_over_completion_is_clamped(self):
        stats = compute_stats(PlanType.NT90, 120)
        self.assertEqual(stats['completed'], 120)
        self.assertEqual(stats['percent'], 100)
        self.assertEqual(stats['remaining'], 0)

    def test_negative_count_rejected(self):
        with self.assertRaises(ValueError):
            compute_stats(PlanType.NT90, -1)

    def test_unknown_plan(self):
        with self.assertRaises(UnknownPlanType):
            compute_stats("nt60", 1)


class TestSuggestedTime(unittest.TestCase):
    def test_nt90(self):
        self.assertEqual(suggested_minutes(PlanType.NT90), 15)
        self.assertEqual(suggested_time(PlanType.NT90), "15-25 min")

    def test_ot_plans(self):
        self.assertEqual(suggested_time(PlanType.OT365), "13-23 min")
        self.assertEqual(suggested_time("ethiopian"), "13-23 min")


if __name__ == '__main__':
    unittest.main()
