"""Threaded comment structures.

`CommentRecord` is the flat input handed to the tree builder and
`ThreadedCommentNode` its immutable output. Both are independent of the
`Comment` entity so that any comment source can be threaded.
"""

from typing import Any, Optional

from pydantic import computed_field

from campus.domain.model.common import DomainModel


class CommentRecord(DomainModel):
    """One comment in a flat batch.

    `created_at` is kept exactly as supplied and may be of any type. Values
    that cannot be read as a point in time order as the epoch.
    """

    id: str
    parent_id: Optional[str] = None
    created_at: Any = None
    payload: Any = None


class ThreadedCommentNode(DomainModel):
    """A comment with its direct replies, oldest first."""

    record: CommentRecord
    children: tuple["ThreadedCommentNode", ...] = ()

    @computed_field
    @property
    def reply_count(self) -> int:
        """Number of direct replies."""
        return len(self.children)

    @property
    def id(self) -> str:
        return self.record.id

    def descendant_count(self) -> int:
        """Count all replies below this node, at any depth."""
        total = 0
        stack = list(self.children)
        while stack:
            node = stack.pop()
            total += 1
            stack.extend(node.children)
        return total
