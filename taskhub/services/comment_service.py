# taskhub/services/comment_service.py
import logging
from typing import Optional

from taskhub.errors import ErrorCode, forbidden, not_found, validation_error
from taskhub.models.comment import Comment
from taskhub.repositories.interfaces import CommentStore
from taskhub.utils.pagination import SMALL_PAGE_SIZE, PageResult, Pagination
from taskhub.utils.validation import validate_comment_content

logger = logging.getLogger(__name__)


class CommentService:
    def __init__(self, comments: CommentStore):
        self.comments = comments

    def create_comment(self, task_id: str, user_id: str, content: str) -> Comment:
        if not task_id or not user_id:
            raise validation_error(ErrorCode.INVALID_INPUT, "invalid task ID or user ID")
        validate_comment_content(content)
        return self.comments.create_comment(task_id, user_id, content.strip())

    def get_comment(self, comment_id: str, task_id: Optional[str] = None) -> Comment:
        comment = self.comments.get_comment_by_id(comment_id)
        if task_id is not None and comment.task_id != task_id:
            raise not_found(ErrorCode.COMMENT_NOT_FOUND, "comment not found")
        return comment

    def list_comments(
        self, task_id: str, page: Optional[int] = None, page_size: Optional[int] = None
    ) -> PageResult[Comment]:
        pagination = Pagination.clamp(page, page_size, SMALL_PAGE_SIZE)
        items, total = self.comments.list_comments_by_task(task_id, pagination.limit, pagination.offset)
        return PageResult(items=items, total=total, pagination=pagination)

    def list_recent_comments(self, page: Optional[int] = None, page_size: Optional[int] = None) -> PageResult[Comment]:
        pagination = Pagination.clamp(page, page_size, SMALL_PAGE_SIZE)
        items, total = self.comments.list_recent_comments(pagination.limit, pagination.offset)
        return PageResult(items=items, total=total, pagination=pagination)

    def _authored_comment(self, comment_id: str, user_id: str, task_id: Optional[str]) -> Comment:
        comment = self.get_comment(comment_id, task_id)
        if comment.user_id != user_id:
            logger.warning(f"User {user_id} denied write access to comment {comment_id}")
            raise forbidden("only the author can modify this comment")
        return comment

    def update_comment(self, comment_id: str, user_id: str, content: str, task_id: Optional[str] = None) -> Comment:
        validate_comment_content(content)
        self._authored_comment(comment_id, user_id, task_id)
        return self.comments.update_comment(comment_id, content.strip())

    def delete_comment(self, comment_id: str, user_id: str, task_id: Optional[str] = None) -> None:
        self._authored_comment(comment_id, user_id, task_id)
        self.comments.delete_comment(comment_id)
        logger.info(f"Comment {comment_id} deleted by user {user_id}")
