import unittest
from reading.domain.PlanType import PlanType
from reading.domain.errors import UnknownPlanType
from reading.events.Event_Bus import GLOBAL_EVENT_BUS, PLAN_LOAD_FAILED, PLAN_LOADED
from reading.infra.Plan_Store import PlanStore


def _nt90(n, prefix="Matthew"):
    return {"schedule": [{"day": d, "reading": f"{prefix} {d}", "theme": f"T{d}"} for d in range(1, n + 1)]}


class TestPlanStore(unittest.TestCase):
    def setUp(self):
        self.store = PlanStore()
        self.events = []
        GLOBAL_EVENT_BUS.subscribe(PLAN_LOADED, self._record)
        GLOBAL_EVENT_BUS.subscribe(PLAN_LOAD_FAILED, self._record)

    def tearDown(self):
        GLOBAL_EVENT_BUS.unsubscribe(PLAN_LOADED, self._record)
        GLOBAL_EVENT_BUS.unsubscribe(PLAN_LOAD_FAILED, self._record)

    def _record(self, name, payload):
        self.events.append((name, payload))

    def test_empty_until_loaded(self):
        for plan_type in PlanType:
            self.assertFalse(self.store.is_loaded(plan_type))
            self.assertIsNone(self.store.lookup(plan_type, 1))

    def test_ingest_and_lookup(self):
        self.assertTrue(self.store.ingest(PlanType.NT90, _nt90(90)))
        self.assertTrue(self.store.is_loaded("nt90"))
        self.assertEqual(self.store.lookup(PlanType.NT90, 45).reading, "Matthew 45")
        self.assertIsNone(self.store.lookup(PlanType.NT90, 91))
        self.assertFalse(self.store.is_loaded(PlanType.OT365))
        self.assertEqual(self.events, [(PLAN_LOADED, {"plan_type": PlanType.NT90, "days": 90})])

    def test_failed_reload_keeps_previous_table(self):
        self.store.ingest(PlanType.NT90, _nt90(3))
        with self.assertLogs("reading.infra.Plan_Store", level="WARNING"):
            self.assertFalse(self.store.ingest(PlanType.NT90, {"oops": True}))
        self.assertEqual(len(self.store.table(PlanType.NT90)), 3)
        self.assertEqual(self.events[-1][0], PLAN_LOAD_FAILED)

    def test_reload_replaces_whole_table(self):
        self.store.ingest(PlanType.NT90, _nt90(5))
        self.store.ingest(PlanType.NT90, _nt90(2, prefix="Mark"))
        table = self.store.table(PlanType.NT90)
        self.assertEqual(len(table), 2)
        self.assertEqual(table[1].reading, "Mark 1")

    def test_tables_are_read_only(self):
        self.store.ingest(PlanType.NT90, _nt90(2))
        with self.assertRaises(TypeError):
            self.store.table(PlanType.NT90)[3] = None

    def test_unknown_plan(self):
        with self.assertRaises(UnknownPlanType):
            self.store.lookup("daily-psalms", 1)


if __name__ == '__main__':
    unittest.main()
