"""SQLAlchemy implementation of Post repository."""

from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from domain.entities.post import Comment, Like, Post
from infrastructure.database.models import PostCommentModel, PostLikeModel, PostModel


class SQLAlchemyPostRepository:
    """SQLAlchemy implementation of IPostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    def _select_full(self):  # type: ignore[no-untyped-def]
        return (
            select(PostModel)
            .options(selectinload(PostModel.likes), selectinload(PostModel.comments))
            .execution_options(populate_existing=True)
        )

    async def get(self, id: UUID) -> Post | None:
        """Get a post by ID."""
        stmt = self._select_full().where(PostModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def exists(self, id: UUID) -> bool:
        """Check whether a post exists."""
        stmt = select(PostModel.id).where(PostModel.id == id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def get_all(self) -> list[Post]:
        """Get all posts, newest first."""
        stmt = self._select_full().order_by(PostModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, post: Post) -> Post:
        """Create a new post."""
        model = PostModel(
            id=post.id,
            user_id=post.user_id,
            text=post.text,
            name=post.name,
            avatar=post.avatar,
            created_at=post.created_at,
            likes=[],
            comments=[],
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: UUID) -> bool:
        """Delete a post together with its likes and comments."""
        await self._session.execute(delete(PostLikeModel).where(PostLikeModel.post_id == id))
        await self._session.execute(
            delete(PostCommentModel).where(PostCommentModel.post_id == id)
        )
        result = await self._session.execute(delete(PostModel).where(PostModel.id == id))
        await self._session.flush()
        return bool(result.rowcount)

    async def add_like(self, post_id: UUID, user_id: UUID) -> bool:
        """Insert a like; the unique (post_id, user_id) key absorbs duplicates."""
        stmt = (
            self._insert(PostLikeModel.__table__)
            .values(
                id=uuid4(),
                post_id=post_id,
                user_id=user_id,
                created_at=datetime.utcnow(),
            )
            .on_conflict_do_nothing(index_elements=["post_id", "user_id"])
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount == 1

    async def remove_like(self, post_id: UUID, user_id: UUID) -> bool:
        """Delete the user's like on a post."""
        stmt = delete(PostLikeModel).where(
            PostLikeModel.post_id == post_id,
            PostLikeModel.user_id == user_id,
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        return bool(result.rowcount)

    async def get_likes(self, post_id: UUID) -> list[Like]:
        """Get likes on a post, newest first."""
        stmt = (
            select(PostLikeModel)
            .where(PostLikeModel.post_id == post_id)
            .order_by(PostLikeModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._like_to_entity(model) for model in result.scalars()]

    async def get_comment(self, post_id: UUID, comment_id: UUID) -> Comment | None:
        """Get a comment on a post by id."""
        stmt = select(PostCommentModel).where(
            PostCommentModel.id == comment_id,
            PostCommentModel.post_id == post_id,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._comment_to_entity(model) if model else None

    async def add_comment(self, post_id: UUID, comment: Comment) -> Comment:
        """Insert a comment."""
        model = PostCommentModel(
            id=comment.id,
            post_id=post_id,
            user_id=comment.user_id,
            text=comment.text,
            name=comment.name,
            avatar=comment.avatar,
            created_at=comment.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._comment_to_entity(model)

    async def remove_comment(self, post_id: UUID, comment_id: UUID, user_id: UUID) -> bool:
        """Delete one comment, matched by id and author."""
        stmt = delete(PostCommentModel).where(
            PostCommentModel.id == comment_id,
            PostCommentModel.post_id == post_id,
            PostCommentModel.user_id == user_id,
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        return bool(result.rowcount)

    async def get_comments(self, post_id: UUID) -> list[Comment]:
        """Get comments on a post, newest first."""
        stmt = (
            select(PostCommentModel)
            .where(PostCommentModel.post_id == post_id)
            .order_by(PostCommentModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._comment_to_entity(model) for model in result.scalars()]

    def _insert(self, table: Any) -> Any:
        """Dialect-specific INSERT supporting ON CONFLICT."""
        if self._session.get_bind().dialect.name == "postgresql":
            return pg_insert(table)
        return sqlite_insert(table)

    def _to_entity(self, model: PostModel) -> Post:
        """Convert ORM model (with likes and comments loaded) to domain entity."""
        return Post(
            id=model.id,
            user_id=model.user_id,
            text=model.text,
            name=model.name,
            avatar=model.avatar,
            likes=[self._like_to_entity(like) for like in model.likes],
            comments=[self._comment_to_entity(c) for c in model.comments],
            created_at=model.created_at,
        )

    def _like_to_entity(self, model: PostLikeModel) -> Like:
        return Like(user_id=model.user_id, created_at=model.created_at)

    def _comment_to_entity(self, model: PostCommentModel) -> Comment:
        return Comment(
            id=model.id,
            user_id=model.user_id,
            text=model.text,
            name=model.name,
            avatar=model.avatar,
            created_at=model.created_at,
        )
