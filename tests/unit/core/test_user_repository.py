"""Unit tests for core.repositories.user_repository module."""

import unittest
import uuid
from unittest.mock import MagicMock, patch

from core.repositories import UserRepository
from tests.base import BaseUnitTest
from tests.factories import create_blog, create_follow, create_user


class TestUserRepository(unittest.TestCase):
    """Tests for UserRepository query construction."""

    @patch("core.repositories.user_repository.UserFollow")
    def test_user_follows_returns_true_when_exists(self, mock_userfollow_model):
        """Test that user_follows returns True when relationship exists."""
        follower_id = uuid.uuid4()
        followee_id = uuid.uuid4()
        mock_queryset = MagicMock()
        mock_queryset.exists.return_value = True
        mock_userfollow_model.objects.filter.return_value = mock_queryset

        result = UserRepository.user_follows(follower_id, followee_id)

        mock_userfollow_model.objects.filter.assert_called_once_with(
            follower_id=follower_id, followee_id=followee_id
        )
        self.assertTrue(result)

    @patch("core.repositories.user_repository.User")
    def test_get_by_auth_id_returns_none_when_missing(self, mock_user_model):
        """Test that unknown identities resolve to None."""
        mock_user_model.objects.filter.return_value.first.return_value = None

        self.assertIsNone(UserRepository.get_by_auth_id("auth|missing"))
        mock_user_model.objects.filter.assert_called_once_with(
            auth_user_id="auth|missing"
        )


class TestUserRepositoryQueries(BaseUnitTest):
    """Tests for UserRepository against the database."""

    def test_with_counts_annotates_relationships(self):
        """Test the three counts are annotated without row multiplication."""
        user = create_user()
        fans = [create_user(), create_user()]
        for fan in fans:
            create_follow(fan, user)
        create_follow(user, fans[0])
        create_blog(user)
        create_blog(user)

        annotated = UserRepository.with_counts().get(user_id=user.user_id)

        self.assertEqual(annotated.followed_by_count, 2)
        self.assertEqual(annotated.following_count, 1)
        self.assertEqual(annotated.blog_count, 2)

    def test_matching_searches_names_and_email(self):
        """Test matching covers first name, last name and email."""
        create_user(first_name="Zoe", last_name="Q", email="zoe@example.com")
        create_user(first_name="Q", last_name="Zoellner", email="q@example.com")
        create_user(first_name="Q", last_name="Q", email="hello.zoe@example.com")
        create_user(first_name="No", last_name="Match", email="nm@example.com")

        self.assertEqual(UserRepository.matching("zoe").count(), 3)
