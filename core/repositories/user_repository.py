"""Repository for user-related database queries."""

from uuid import UUID

from django.db.models import Count, Q, QuerySet

from core.models import User, UserFollow


class UserRepository:
    """Repository for encapsulating user database queries."""

    @staticmethod
    def get_by_auth_id(auth_user_id: str) -> User | None:
        """Look up a user by identity provider subject.

        Returns:
            The User, or None if the identity has never been synced
        """
        return User.objects.filter(auth_user_id=auth_user_id).first()

    @staticmethod
    def get_by_id(user_id: UUID | str) -> User | None:
        """Look up a user by primary key, None if absent."""
        return User.objects.filter(user_id=user_id).first()

    @staticmethod
    def with_counts(queryset: QuerySet[User] | None = None) -> QuerySet[User]:
        """Annotate users with following, follower-edge and blog counts.

        Example:
            >>> user = UserRepository.with_counts().get(user_id=user_id)
            >>> user.following_count, user.followed_by_count, user.blog_count
        """
        if queryset is None:
            queryset = User.objects.all()
        return queryset.annotate(
            following_count=Count("following_edges", distinct=True),
            followed_by_count=Count("follower_edges", distinct=True),
            blog_count=Count("blogs", distinct=True),
        )

    @staticmethod
    def matching(query: str) -> QuerySet[User]:
        """Users whose first name, last name or email contains ``query``."""
        return User.objects.filter(
            Q(first_name__icontains=query)
            | Q(last_name__icontains=query)
            | Q(email__icontains=query)
        )

    @staticmethod
    def user_follows(follower_id: UUID, followee_id: UUID) -> bool:
        """Check if one user follows another.

        Args:
            follower_id: UUID of the user who might be following
            followee_id: UUID of the user who might be followed

        Returns:
            True if follower_id follows followee_id, False otherwise
        """
        return UserFollow.objects.filter(
            follower_id=follower_id, followee_id=followee_id
        ).exists()

    @staticmethod
    def followers_of(user_id: UUID) -> QuerySet[User]:
        """Users with an edge pointing at ``user_id``."""
        return User.objects.filter(following_edges__followee_id=user_id)

    @staticmethod
    def followed_by(user_id: UUID) -> QuerySet[User]:
        """Users that ``user_id`` follows."""
        return User.objects.filter(follower_edges__follower_id=user_id)
