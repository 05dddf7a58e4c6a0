import unittest
from datetime import datetime, timedelta, timezone
from unittest import mock

from cashier.core.activation_gate import ActivationGate, is_protected_page
from cashier.core.errors import ActivationError, PersistenceError
from cashier.models.activation import ActivationRecord
from cashier.repositories.activation import ActivationRepository
from cashier.services.activation_service import ActivationService, license_expired
from helpers import SteppingClock, make_session_factory

NOW = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)


class LicenseExpiryTest(unittest.TestCase):
    def test_expiry_is_strict(self):
        self.assertFalse(license_expired(NOW, NOW))
        self.assertTrue(license_expired(NOW, NOW + timedelta(seconds=1)))
        self.assertFalse(license_expired(None, NOW))

    def test_naive_values_are_treated_as_utc(self):
        self.assertFalse(license_expired(NOW.replace(tzinfo=None), NOW))


class ActivationServiceTest(unittest.TestCase):
    def setUp(self):
        self.session_factory = make_session_factory()
        self.clock = SteppingClock(start=NOW, step=timedelta(0))
        self.repository = ActivationRepository(self.session_factory, clock=self.clock)
        self.service = ActivationService(self.repository, validity_days=30, clock=self.clock)

    def test_not_activated_without_record(self):
        self.assertIsNone(self.service.get_status())
        self.assertFalse(self.service.is_license_valid())

    def test_activate_grants_validity_window(self):
        saved = self.service.activate(" KEY-123 ", "fp-1")

        self.assertTrue(saved.is_activated)
        self.assertEqual(saved.activation_key, "KEY-123")
        self.assertEqual(saved.expires_at, NOW + timedelta(days=30))
        self.assertTrue(self.service.is_license_valid())

    def test_activation_record_is_a_singleton(self):
        self.service.activate("FIRST")
        self.service.activate("SECOND")

        with self.session_factory() as db:
            self.assertEqual(db.query(ActivationRecord).count(), 1)
        self.assertEqual(self.service.get_status().activation_key, "SECOND")

    def test_expired_license_is_invalid(self):
        self.service.activate("KEY")
        self.clock.current = NOW + timedelta(days=30)
        self.assertTrue(self.service.is_license_valid())
        self.clock.current = NOW + timedelta(days=30, seconds=1)
        self.assertFalse(self.service.is_license_valid())

    def test_deactivate_removes_record(self):
        self.service.activate("KEY")
        self.assertTrue(self.service.deactivate())
        self.assertFalse(self.service.is_license_valid())

    def test_store_failures_degrade_to_not_activated(self):
        repository = mock.Mock(spec=ActivationRepository)
        repository.get.side_effect = PersistenceError()
        repository.save_singleton.side_effect = PersistenceError()
        repository.delete_all.side_effect = PersistenceError()
        service = ActivationService(repository, validity_days=30, clock=self.clock)

        with self.assertLogs("cashier.services.activation_service", level="ERROR"):
            self.assertFalse(service.is_license_valid())
            self.assertIsNone(service.activate("KEY"))
            self.assertFalse(service.deactivate())


class ActivationGateTest(unittest.TestCase):
    def test_reads_fresh_state_without_cache(self):
        answers = iter([False, True])
        gate = ActivationGate(lambda: next(answers))
        self.assertFalse(gate.is_licensed())
        self.assertTrue(gate.is_licensed())

    def test_cached_answer_is_dropped_by_reset(self):
        state = {"licensed": False, "calls": 0}

        def check():
            state["calls"] += 1
            return state["licensed"]

        gate = ActivationGate(check, cache_seconds=60, monotonic=lambda: 100.0)
        self.assertFalse(gate.is_licensed())
        state["licensed"] = True
        self.assertFalse(gate.is_licensed())
        self.assertEqual(state["calls"], 1)

        gate.reset()
        self.assertTrue(gate.is_licensed())

    def test_require_raises_when_unlicensed(self):
        with self.assertRaises(ActivationError):
            ActivationGate(lambda: False).require()

    def test_protected_pages(self):
        self.assertTrue(is_protected_page("/"))
        self.assertTrue(is_protected_page("/products"))
        self.assertFalse(is_protected_page("/api/products"))
        self.assertFalse(is_protected_page("/health"))
        self.assertFalse(is_protected_page("/activation"))


if __name__ == "__main__":
    unittest.main()
