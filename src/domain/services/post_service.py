"""Post service layer: ownership-checked CRUD plus likes and comments."""

from collections.abc import Callable
from uuid import UUID

import structlog

from core.exceptions import (
    AlreadyLikedError,
    AuthorizationError,
    CommentNotFoundError,
    InvalidInputError,
    NotLikedError,
    PostNotFoundError,
    UserNotFoundError,
)
from domain.entities.post import Comment, Like, Post
from domain.entities.user import User
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class PostService:
    """Service layer for Post business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def create(self, user_id: UUID, text: str) -> Post:
        """Create a post, snapshotting the author's name and avatar."""
        _require_text(text)
        async with self._uow_factory() as uow:
            author = await self._require_user(uow, user_id)
            post = Post(
                user_id=user_id,
                text=text,
                name=author.name,
                avatar=author.avatar,
            )
            created = await uow.posts.create(post)
            await uow.commit()

        logger.info("post_created", post_id=str(created.id), user_id=str(user_id))
        return created

    async def list_all(self) -> list[Post]:
        """Get all posts, newest first."""
        async with self._uow_factory() as uow:
            return await uow.posts.get_all()  # type: ignore[no-any-return]

    async def get_by_id(self, post_id: UUID) -> Post:
        """Get a post by ID."""
        async with self._uow_factory() as uow:
            post = await uow.posts.get(post_id)
            if not post:
                raise PostNotFoundError(str(post_id))
            return post

    async def delete(self, user_id: UUID, post_id: UUID) -> None:
        """Delete a post. Only its owner may do so."""
        async with self._uow_factory() as uow:
            post = await uow.posts.get(post_id)
            if not post:
                raise PostNotFoundError(str(post_id))
            if not post.is_owned_by(user_id):
                raise AuthorizationError()

            await uow.posts.delete(post_id)
            await uow.commit()

        logger.info("post_deleted", post_id=str(post_id), user_id=str(user_id))

    async def like(self, user_id: UUID, post_id: UUID) -> list[Like]:
        """Like a post. Liking twice is rejected, not ignored."""
        async with self._uow_factory() as uow:
            await self._require_post(uow, post_id)
            if not await uow.posts.add_like(post_id, user_id):
                raise AlreadyLikedError(str(post_id))
            await uow.commit()
            likes = await uow.posts.get_likes(post_id)

        logger.info("post_liked", post_id=str(post_id), user_id=str(user_id))
        return likes  # type: ignore[no-any-return]

    async def unlike(self, user_id: UUID, post_id: UUID) -> list[Like]:
        """Withdraw the caller's like."""
        async with self._uow_factory() as uow:
            await self._require_post(uow, post_id)
            if not await uow.posts.remove_like(post_id, user_id):
                raise NotLikedError(str(post_id))
            await uow.commit()
            likes = await uow.posts.get_likes(post_id)

        logger.info("post_unliked", post_id=str(post_id), user_id=str(user_id))
        return likes  # type: ignore[no-any-return]

    async def add_comment(self, user_id: UUID, post_id: UUID, text: str) -> list[Comment]:
        """Comment on any post; the comment belongs to the caller."""
        _require_text(text)
        async with self._uow_factory() as uow:
            await self._require_post(uow, post_id)
            author = await self._require_user(uow, user_id)
            comment = Comment(
                user_id=user_id,
                text=text,
                name=author.name,
                avatar=author.avatar,
            )
            await uow.posts.add_comment(post_id, comment)
            await uow.commit()
            comments = await uow.posts.get_comments(post_id)

        logger.info("comment_added", post_id=str(post_id), comment_id=str(comment.id))
        return comments  # type: ignore[no-any-return]

    async def remove_comment(
        self, user_id: UUID, post_id: UUID, comment_id: UUID
    ) -> list[Comment]:
        """Remove exactly the comment with ``comment_id``, if the caller wrote it."""
        async with self._uow_factory() as uow:
            await self._require_post(uow, post_id)
            comment = await uow.posts.get_comment(post_id, comment_id)
            if not comment:
                raise CommentNotFoundError(str(comment_id))
            if comment.user_id != user_id:
                raise AuthorizationError()

            if not await uow.posts.remove_comment(post_id, comment_id, user_id):
                raise CommentNotFoundError(str(comment_id))
            await uow.commit()
            comments = await uow.posts.get_comments(post_id)

        logger.info("comment_removed", post_id=str(post_id), comment_id=str(comment_id))
        return comments  # type: ignore[no-any-return]

    async def _require_post(self, uow: IUnitOfWork, post_id: UUID) -> None:
        if not await uow.posts.exists(post_id):
            raise PostNotFoundError(str(post_id))

    async def _require_user(self, uow: IUnitOfWork, user_id: UUID) -> User:
        user = await uow.users.get(user_id)
        if not user:
            raise UserNotFoundError(str(user_id))
        return user


def _require_text(text: str) -> None:
    if not text or not text.strip():
        raise InvalidInputError("text", "Text is required")
