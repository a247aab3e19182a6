"""Unit tests for DashboardService."""

from core.services.dashboard_service import dashboard_service
from tests.base import BaseUnitTest
from tests.factories import create_blog, create_user


class TestDashboardService(BaseUnitTest):
    """Tests for get_dashboard."""

    def test_empty_store_returns_empty_state(self):
        """Test no blogs yields the empty message instead of an error."""
        dashboard = dashboard_service.get_dashboard()

        self.assertEqual(dashboard.latest_blogs, [])
        self.assertEqual(dashboard.empty_message, "No blogs found.")
        self.assertEqual(dashboard.suggested_blogs, [])
        self.assertEqual(dashboard.suggested_authors, [])
        self.assertEqual(dashboard.selected_category, "All")
        self.assertEqual(
            dashboard.categories,
            ["All", "Tech", "Lifestyle", "Travel", "Food", "Education", "Health"],
        )

    def test_latest_blogs_are_capped_at_six(self):
        """Test the latest section shows at most six blogs."""
        author = create_user()
        for _ in range(8):
            create_blog(author)

        dashboard = dashboard_service.get_dashboard("All")

        self.assertEqual(len(dashboard.latest_blogs), 6)
        self.assertIsNone(dashboard.empty_message)
        self.assertEqual(len(dashboard.suggested_blogs), 3)
        self.assertEqual(len(dashboard.suggested_authors), 1)

    def test_category_filter(self):
        """Test a category only shows blogs with that tag."""
        author = create_user()
        travel = create_blog(author, categories=["Travel"])
        create_blog(author, categories=["Food"])

        dashboard = dashboard_service.get_dashboard("Travel")

        self.assertEqual(dashboard.selected_category, "Travel")
        self.assertEqual(
            [b.blog_id for b in dashboard.latest_blogs], [travel.blog_id]
        )

    def test_category_without_blogs_is_empty_state(self):
        """Test an unused category yields the empty message."""
        create_blog(create_user(), categories=["Food"])

        dashboard = dashboard_service.get_dashboard("Health")

        self.assertEqual(dashboard.latest_blogs, [])
        self.assertEqual(dashboard.empty_message, "No blogs found.")

    def test_unknown_category_falls_back_to_all(self):
        """Test an unknown category is treated as All."""
        create_blog(create_user(), categories=["Food"])

        dashboard = dashboard_service.get_dashboard("Gardening")

        self.assertEqual(dashboard.selected_category, "All")
        self.assertEqual(len(dashboard.latest_blogs), 1)

    def test_latest_blogs_carry_author_summary(self):
        """Test latest blogs embed the author card."""
        author = create_user(first_name="Mia")
        create_blog(author)

        dashboard = dashboard_service.get_dashboard()

        self.assertEqual(dashboard.latest_blogs[0].author.first_name, "Mia")
