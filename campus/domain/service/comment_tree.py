"""Threaded comment tree construction.

Turns a flat batch of parent-referencing comment records into a forest:

1. Index every record by id (the last occurrence of a duplicate id wins).
2. Attach each record to its parent, in input order. Records without a
   parent, or whose parent is not in the batch, follow the orphan policy.
3. Sort replies oldest first at every level, and the top-level threads
   newest first.

Records caught in a parent cycle are never reachable from a top-level
thread and do not appear in the output.
"""

import math
from collections import defaultdict
from datetime import datetime, timezone
from typing import Iterable

from campus.domain.model.thread import CommentRecord, ThreadedCommentNode
from campus.domain.value import OrphanPolicy

EPOCH = 0.0


def timestamp_of(record: CommentRecord) -> float:
    """Read a record's creation time as POSIX seconds.

    Naive datetimes are taken as UTC. Anything unreadable, including NaN
    and infinities, is the epoch.
    """
    value = record.created_at
    if isinstance(value, datetime):
        return _posix(value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            seconds = float(value)
        except OverflowError:
            return EPOCH
        return seconds if math.isfinite(seconds) else EPOCH
    if isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            return _posix(datetime.fromisoformat(text))
        except ValueError:
            return EPOCH
    return EPOCH


def _posix(value: datetime) -> float:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.timestamp()


def build_tree(
    records: Iterable[CommentRecord],
    orphan_policy: OrphanPolicy | str = OrphanPolicy.PROMOTE,
) -> list[ThreadedCommentNode]:
    """Build a threaded comment forest from a flat batch.

    Args:
        records: Flat comment records, in any order
        orphan_policy: What to do with replies whose parent is missing
            ("promote" to a top-level thread, or "drop")

    Returns:
        Top-level threads, newest first. Replies are reachable through each
        node's `children`, oldest first.

    Raises:
        ValueError: If orphan_policy is not a known policy
    """
    policy = OrphanPolicy(orphan_policy)

    # First pass: index by id, later duplicates replace earlier ones
    by_id: dict[str, CommentRecord] = {}
    for record in records:
        by_id[record.id] = record

    # Second pass: link replies to parents
    replies: dict[str, list[CommentRecord]] = defaultdict(list)
    roots: list[CommentRecord] = []
    for record in by_id.values():
        parent_id = record.parent_id or None
        if parent_id is not None and parent_id in by_id:
            replies[parent_id].append(record)
        elif parent_id is None or policy is OrphanPolicy.PROMOTE:
            roots.append(record)

    for siblings in replies.values():
        siblings.sort(key=timestamp_of)
    roots.sort(key=timestamp_of, reverse=True)

    return [_build_subtree(root, replies) for root in roots]


def _build_subtree(
    root: CommentRecord, replies: dict[str, list[CommentRecord]]
) -> ThreadedCommentNode:
    # Post-order walk with an explicit stack; reply chains can be deeper
    # than the interpreter's recursion limit.
    built: dict[str, ThreadedCommentNode] = {}
    stack: list[tuple[CommentRecord, bool]] = [(root, False)]
    while stack:
        record, expanded = stack.pop()
        kids = replies.get(record.id, [])
        if not expanded:
            stack.append((record, True))
            stack.extend((kid, False) for kid in kids)
            continue
        built[record.id] = ThreadedCommentNode(
            record=record,
            children=tuple(built.pop(kid.id) for kid in kids),
        )
    return built[root.id]


def count_nodes(roots: Iterable[ThreadedCommentNode]) -> int:
    """Count every node in a forest."""
    return sum(1 + root.descendant_count() for root in roots)
