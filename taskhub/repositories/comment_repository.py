# taskhub/repositories/comment_repository.py
from typing import List, Tuple

from sqlalchemy.orm import joinedload

from taskhub.errors import ErrorCode, not_found
from taskhub.models.comment import Comment
from taskhub.models.task import Task
from taskhub.repositories.base import SQLAlchemyRepository


class CommentRepository(SQLAlchemyRepository):
    def _query(self):
        return self.db.query(Comment).options(joinedload(Comment.author))

    def _ensure_task(self, task_id: str) -> None:
        with self.translate_errors("failed to get task"):
            exists = self.db.query(Task.id).filter(Task.id == task_id).first()
        if exists is None:
            raise not_found(ErrorCode.TASK_NOT_FOUND, "task not found")

    def create_comment(self, task_id: str, user_id: str, content: str) -> Comment:
        self._ensure_task(task_id)
        comment = Comment(task_id=task_id, user_id=user_id, content=content)
        with self.translate_errors("failed to create comment"):
            self.db.add(comment)
            self.db.commit()
        return self.get_comment_by_id(comment.id)

    def get_comment_by_id(self, comment_id: str) -> Comment:
        with self.translate_errors("failed to get comment"):
            comment = self._query().filter(Comment.id == comment_id).first()
        if comment is None:
            raise not_found(ErrorCode.COMMENT_NOT_FOUND, "comment not found")
        return comment

    def list_comments_by_task(self, task_id: str, limit: int, offset: int) -> Tuple[List[Comment], int]:
        """Oldest first, so a task's thread reads top to bottom"""
        self._ensure_task(task_id)
        with self.translate_errors("failed to list comments"):
            total = self.db.query(Comment).filter(Comment.task_id == task_id).count()
            comments = (
                self._query()
                .filter(Comment.task_id == task_id)
                .order_by(Comment.created_at.asc())
                .offset(offset)
                .limit(limit)
                .all()
            )
        return comments, total

    def list_recent_comments(self, limit: int, offset: int) -> Tuple[List[Comment], int]:
        with self.translate_errors("failed to list recent comments"):
            total = self.db.query(Comment).count()
            comments = (
                self._query()
                .order_by(Comment.created_at.desc())
                .offset(offset)
                .limit(limit)
                .all()
            )
        return comments, total

    def update_comment(self, comment_id: str, content: str) -> Comment:
        comment = self.get_comment_by_id(comment_id)
        comment.content = content
        self.commit("failed to update comment")
        return self.get_comment_by_id(comment_id)

    def delete_comment(self, comment_id: str) -> None:
        comment = self.get_comment_by_id(comment_id)
        with self.translate_errors("failed to delete comment"):
            self.db.delete(comment)
            self.db.commit()
