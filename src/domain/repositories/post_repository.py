"""Post repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.post import Comment, Like, Post


class IPostRepository(Protocol):
    """Repository interface for Post aggregates."""

    async def get(self, id: UUID) -> Post | None:
        """Get a post by ID with likes and comments."""
        ...

    async def exists(self, id: UUID) -> bool:
        """Check whether a post exists."""
        ...

    async def get_all(self) -> list[Post]:
        """Get all posts, newest first."""
        ...

    async def create(self, post: Post) -> Post:
        """Create a new post."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete a post with its likes and comments."""
        ...

    async def add_like(self, post_id: UUID, user_id: UUID) -> bool:
        """Insert a like unless one exists; False when the user already liked."""
        ...

    async def remove_like(self, post_id: UUID, user_id: UUID) -> bool:
        """Delete the user's like; False when there was none."""
        ...

    async def get_likes(self, post_id: UUID) -> list[Like]:
        """Get likes on a post, newest first."""
        ...

    async def get_comment(self, post_id: UUID, comment_id: UUID) -> Comment | None:
        """Get a single comment on a post."""
        ...

    async def add_comment(self, post_id: UUID, comment: Comment) -> Comment:
        """Insert a comment."""
        ...

    async def remove_comment(self, post_id: UUID, comment_id: UUID, user_id: UUID) -> bool:
        """Delete the comment with this id if owned by user_id."""
        ...

    async def get_comments(self, post_id: UUID) -> list[Comment]:
        """Get comments on a post, newest first."""
        ...
