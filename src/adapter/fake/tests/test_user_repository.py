"""Unit tests for FakeUserRepository: verifies Port contract compliance."""

import copy
import threading
import time
import unittest
from unittest.mock import patch

from adapter.fake.user_repository import FakeUserRepository
from domain.model.errors import DuplicateError
from domain.model.user import Phone, User


class TestFakeUserRepository(unittest.TestCase):
    """Tests that FakeUserRepository correctly implements UserRepository Protocol."""

    def setUp(self):
        self.repo = FakeUserRepository()
        self.user = User.create(
            email='a@b.com',
            password_hash='$2b$04$hash',
            name='Alice',
            phones=[Phone(number=1234567, city_code=1, country_code='57')],
        )

    # ── save + find_by_email (round-trip) ─────────────────────

    def test_save_and_find_by_email(self):
        saved = self.repo.save(self.user)

        found = self.repo.find_by_email('a@b.com')
        self.assertEqual(saved, self.user)
        self.assertEqual(found, self.user)
        self.assertEqual(found.phones, [Phone(number=1234567, city_code=1, country_code='57')])

    def test_find_by_email_returns_none_for_missing(self):
        self.assertIsNone(self.repo.find_by_email('missing@b.com'))

    def test_exists_by_email(self):
        self.assertFalse(self.repo.exists_by_email('a@b.com'))
        self.repo.save(self.user)
        self.assertTrue(self.repo.exists_by_email('a@b.com'))

    # ── upsert semantics ──────────────────────────────────────

    def test_save_same_id_updates(self):
        self.repo.save(self.user)
        self.user.record_login()
        self.repo.save(self.user)

        found = self.repo.find_by_email('a@b.com')
        self.assertEqual(found.last_login, self.user.last_login)
        self.assertEqual(len(self.repo.store), 1)

    def test_save_other_id_same_email_raises(self):
        self.repo.save(self.user)
        other = User.create(email='a@b.com', password_hash='$2b$04$other')

        with self.assertRaises(DuplicateError):
            self.repo.save(other)
        self.assertEqual(self.repo.find_by_email('a@b.com').id, self.user.id)

    # ── isolation ─────────────────────────────────────────────

    def test_returned_user_is_a_copy(self):
        self.repo.save(self.user)
        found = self.repo.find_by_email('a@b.com')
        found.name = 'Mallory'
        found.phones.append(Phone(number=1, city_code=1, country_code='1'))

        stored = self.repo.find_by_email('a@b.com')
        self.assertEqual(stored.name, 'Alice')
        self.assertEqual(len(stored.phones), 1)


    # ── concurrency ───────────────────────────────────────────

    def test_concurrent_saves_same_email_one_wins(self):
        real_deepcopy = copy.deepcopy

        def slow_deepcopy(value, *args):
            time.sleep(0.001)
            return real_deepcopy(value, *args)

        users = [User.create(email='a@b.com', password_hash=f'$2b$04$h{i}') for i in range(5)]
        barrier = threading.Barrier(len(users))
        duplicates = []

        def register(user):
            barrier.wait()
            try:
                self.repo.save(user)
            except DuplicateError:
                duplicates.append(user.id)

        with patch('adapter.fake.user_repository.copy.deepcopy', side_effect=slow_deepcopy):
            threads = [threading.Thread(target=register, args=(u,)) for u in users]
            for t in threads:
                t.start()
            for t in threads:
                t.join()

        self.assertEqual(len(duplicates), len(users) - 1)
        winner = self.repo.find_by_email('a@b.com')
        self.assertNotIn(winner.id, duplicates)


if __name__ == '__main__':
    unittest.main()
