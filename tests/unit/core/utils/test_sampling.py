"""Unit tests for random-offset sampling."""

import random
import unittest
from unittest.mock import MagicMock

from core.models import User
from core.utils import random_offset_sample
from tests.base import BaseUnitTest
from tests.factories import create_user


def _queryset(rows: list) -> MagicMock:
    queryset = MagicMock()
    queryset.count.return_value = len(rows)
    queryset.order_by.return_value = rows
    return queryset


class TestRandomOffsetSample(unittest.TestCase):
    """Tests for the sampling arithmetic."""

    def test_empty_table_returns_empty_list(self):
        """Test zero rows is an empty sample, not an error."""
        queryset = _queryset([])

        self.assertEqual(random_offset_sample(queryset, 4, ("pk",)), [])
        queryset.order_by.assert_not_called()

    def test_non_positive_request_returns_empty_list(self):
        """Test asking for nothing returns nothing."""
        queryset = _queryset(list(range(5)))

        self.assertEqual(random_offset_sample(queryset, 0, ("pk",)), [])
        queryset.count.assert_not_called()

    def test_fewer_rows_than_requested_returns_all(self):
        """Test k is capped at the row count."""
        rows = list(range(3))

        sample = random_offset_sample(_queryset(rows), 10, ("pk",))

        self.assertEqual(sample, rows)

    def test_sample_is_a_consecutive_window(self):
        """Test rows come from one window starting at the random offset."""
        rows = list(range(10))
        rng = MagicMock()
        rng.randrange.return_value = 5

        sample = random_offset_sample(_queryset(rows), 4, ("pk",), rng=rng)

        rng.randrange.assert_called_once_with(6)
        self.assertEqual(sample, [5, 6, 7, 8])

    def test_offset_range_is_at_least_one(self):
        """Test N == k still draws from a non-empty range."""
        rng = MagicMock()
        rng.randrange.return_value = 0

        random_offset_sample(_queryset(list(range(4))), 4, ("pk",), rng=rng)

        rng.randrange.assert_called_once_with(1)

    def test_sample_size_never_exceeds_bounds(self):
        """Test size is min(requested, total) across many draws."""
        rng = random.Random(42)
        for total in range(0, 12):
            for requested in range(1, 8):
                with self.subTest(total=total, requested=requested):
                    sample = random_offset_sample(
                        _queryset(list(range(total))), requested, ("pk",), rng=rng
                    )
                    self.assertEqual(len(sample), min(requested, total))


class TestRandomOffsetSampleQueries(BaseUnitTest):
    """Tests against the database."""

    def test_samples_real_rows_in_stable_order(self):
        """Test the sample is ordered by the given key."""
        for followers in (3, 1, 2):
            create_user(followers=followers)

        sample = random_offset_sample(
            User.objects.all(), 3, ("-followers", "user_id"), rng=random.Random(0)
        )

        self.assertEqual([u.followers for u in sample], [3, 2, 1])
