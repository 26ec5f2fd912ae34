import asyncio
import json
import tempfile
import unittest
from datetime import date
from pathlib import Path
from fastapi.testclient import TestClient
from reading.api.api_run import app
from reading.api.deps import get_service
from reading.infra.Plan_Source import PlanSource
from reading.infra.Progress_Repository import ProgressRepository
from reading.logic.plans.service import ReadingPlanService

OT365_DOC = {"monthlyPlans": [
    {"month": "January", "focus": "Law", "days": [
        {"day": d, "reading": f"Genesis {d}", "theme": f"Gen {d}", "chapters": 2} for d in range(1, 32)
    ]},
]}


class TestReadingAPI(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.tmp = tempfile.TemporaryDirectory()
        root = Path(cls.tmp.name)
        (root / "ot365.json").write_text(json.dumps(OT365_DOC), encoding="utf-8")
        cls.service = ReadingPlanService(
            progress_store=ProgressRepository(root / "progress.json"),
            source=PlanSource(data_dir=root, base_url=""),
        )
        asyncio.run(cls.service.init())
        app.dependency_overrides[get_service] = lambda: cls.service
        cls.client = TestClient(app)

    @classmethod
    def tearDownClass(cls):
        app.dependency_overrides.pop(get_service, None)
        cls.tmp.cleanup()

    def test_list_plans(self):
        resp = self.client.get('/api/plans')
        self.assertEqual(resp.status_code, 200)
        plans = {p['plan_type']: p for p in resp.json()['plans']}
        self.assertEqual(set(plans), {'nt90', 'ot365', 'ethiopian'})
        self.assertTrue(plans['ot365']['loaded'])
        self.assertFalse(plans['nt90']['loaded'])
        self.assertEqual(plans['nt90']['suggestedTime'], '15-25 min')

    def test_plan_info(self):
        resp = self.client.get('/api/plans/ETHIOPIAN')
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data['name'], 'Ethiopian Calendar Plan')
        self.assertEqual(data['days'], 365)
        self.assertEqual(data['totalChapters'], 929)

    def test_unknown_plan_is_bad_request(self):
        self.assertEqual(self.client.get('/api/plans/nt45').status_code, 400)
        self.assertEqual(self.client.get('/api/reading', params={'plan': 'nt45'}).status_code, 400)

    def test_reading_for_date(self):
        resp = self.client.post('/api/progress/start-date', json={'plan': 'ot365', 'start_date': '2024-01-01'})
        self.assertEqual(resp.status_code, 200)
        resp = self.client.get('/api/reading', params={'plan': 'ot365', 'date': '2024-01-05'})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data['day'], 5)
        self.assertEqual(data['title'], 'Day 5: Gen 5')
        self.assertEqual(data['passages'], ['Genesis 5'])
        self.assertEqual(data['month'], 'January')
        self.assertEqual(data['focus'], 'Law')
        self.assertEqual(data['date'], '2024-01-05')
        self.assertFalse(data['is_fallback'])

    def test_fallback_reading(self):
        self.client.post('/api/progress/start-date', json={'plan': 'nt90', 'start_date': '2024-01-01'})
        data = self.client.get('/api/reading', params={'plan': 'nt90', 'date': '2023-12-31'}).json()
        self.assertEqual(data['day'], 90)
        self.assertEqual(data['title'], 'NT90 Day 90')
        self.assertEqual(data['passages'], ['Matthew 1-4'])
        self.assertTrue(data['is_fallback'])

    def test_invalid_date(self):
        resp = self.client.get('/api/reading', params={'plan': 'nt90', 'date': '05/01/2024'})
        self.assertEqual(resp.status_code, 400)

    def test_progress_flow(self):
        self.service.progress_store.clear_completed()
        resp = self.client.post('/api/progress/complete', json={'plan': 'nt90', 'day': 1, 'completed_on': '2024-01-01'})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['status'], 'ok')
        self.assertEqual(resp.json()['stats']['completed'], 1)
        again = self.client.post('/api/progress/complete', json={'plan': 'nt90', 'day': 1})
        self.assertEqual(again.json()['status'], 'already_completed')

        stats = self.client.get('/api/plans/nt90/stats').json()
        self.assertEqual(stats['completed'], 1)
        self.assertEqual(stats['percent'], 1)
        self.assertEqual(stats['remaining'], 89)

        progress = self.client.get('/api/progress').json()
        self.assertEqual(len(progress['completed']), 1)

    def test_completed_day_validation(self):
        resp = self.client.post('/api/progress/complete', json={'plan': 'nt90', 'day': 0})
        self.assertEqual(resp.status_code, 422)

    def test_completed_day_must_fit_plan_cycle(self):
        resp = self.client.post('/api/progress/complete', json={'plan': 'nt90', 'day': 200})
        self.assertEqual(resp.status_code, 400)
        self.assertIn('90-day', resp.json()['detail'])
        resp = self.client.post('/api/progress/complete', json={'plan': 'ot365', 'day': 200})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['status'], 'ok')

    def test_current_plan_and_reset(self):
        resp = self.client.post('/api/progress/current-plan', json={'plan': 'ethiopian'})
        self.assertEqual(resp.json()['current_plan'], 'ethiopian')
        self.assertEqual(self.client.get('/api/progress').json()['current_plan'], 'ethiopian')

        self.client.post('/api/progress/start-date', json={'plan': 'ethiopian', 'start_date': '2024-01-01'})
        resp = self.client.delete('/api/progress/start-date/ethiopian')
        self.assertEqual(resp.json()['status'], 'ok')
        # no plan given -> current plan; no start date -> today becomes day 1
        data = self.client.get('/api/reading').json()
        self.assertEqual(data['plan_type'], 'ethiopian')
        self.assertEqual(data['day'], 1)
        self.assertEqual(data['date'], date.today().isoformat())

    def test_suggested_time(self):
        data = self.client.get('/api/plans/ot365/suggested-time').json()
        self.assertEqual(data, {'plan': 'ot365', 'suggestedTime': '13-23 min'})


if __name__ == '__main__':
    unittest.main()
