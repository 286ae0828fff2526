"""Selection and completion policy for task rotation.

This module holds the two rules that move a task through its lifecycle:

- try_assign: pick the next holder for a task, respecting the load cap and
  the no-immediate-repeat rule, and preferring users who have never held it.
- finalize: complete a task once every current user has held it.

Both functions mutate the RotationTask they are given and must only be called
from inside an exclusive store write.

Selection Rules:
1. Completed tasks and empty rosters are never assigned.
2. Users already holding MAX_ACTIVE_TASKS_PER_USER non-completed tasks are
   skipped. Load is counted over all tasks, not just this one.
3. The current holder and the previous holder are always skipped.
4. Users absent from the task's history are preferred; only when every
   candidate has held the task before may one of them be picked again.
5. The winner is drawn uniformly at random from the preferred pool.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable, Sequence
from datetime import datetime, timedelta
from uuid import UUID

from src.domain.models.rotation_task import RotationTask, TaskState
from src.domain.models.user import User

MAX_ACTIVE_TASKS_PER_USER: int = 3

PickIndex = Callable[[int], int]
"""Returns an index in range(n) for a pool of size n."""


def active_load(tasks: Iterable[RotationTask]) -> Counter[UUID]:
    """Count non-completed tasks held by each user.

    Args:
        tasks: All tasks in the store.

    Returns:
        Counter mapping user id to the number of tasks that user holds.
    """
    return Counter(
        task.assigned_user_id
        for task in tasks
        if not task.is_completed and task.assigned_user_id is not None
    )


def eligible_candidates(
    task: RotationTask,
    users: Sequence[User],
    all_tasks: Iterable[RotationTask],
) -> list[User]:
    """List users who may take the task next, in roster order.

    Args:
        task: The task being assigned.
        users: Current roster.
        all_tasks: Every task in the store, used for load counting.

    Returns:
        Users under the load cap who are neither the current nor the
        previous holder.
    """
    load = active_load(all_tasks)
    excluded = {task.assigned_user_id, task.previous_user_id}
    return [
        user
        for user in users
        if load[user.id] < MAX_ACTIVE_TASKS_PER_USER and user.id not in excluded
    ]


def try_assign(
    task: RotationTask,
    users: Sequence[User],
    all_tasks: Iterable[RotationTask],
    *,
    pick_index: PickIndex,
    force_different: bool = False,
) -> bool:
    """Try to hand the task to one eligible user.

    The current and previous holders are excluded whether or not
    force_different is set; the flag marks rotation-sweep calls and can
    only narrow the candidate set, never widen it.

    Args:
        task: The task to assign. Mutated in place on success.
        users: Current roster.
        all_tasks: Every task in the store.
        pick_index: Random index source; pick_index(n) returns 0 <= i < n.
        force_different: True when called from the rotation sweep.

    Returns:
        True if a user was selected, False if the task was left untouched.
    """
    if task.state == TaskState.COMPLETED or not users:
        return False

    candidates = eligible_candidates(task, users, all_tasks)
    if not candidates:
        return False

    visited = task.visited_user_ids
    unseen = [c for c in candidates if c.id not in visited]
    pool = unseen or candidates

    index = pick_index(len(pool))
    if not 0 <= index < len(pool):
        raise ValueError(f"pick_index returned {index} for a pool of {len(pool)}")

    task.assign_to(pool[index].id)
    return True


def finalize(
    task: RotationTask,
    users: Sequence[User],
    *,
    now: datetime | None = None,
    min_retention: timedelta | None = None,
) -> bool:
    """Complete the task if every current user has held it.

    Completion is judged against the roster as it is right now. If users
    join before the task has visited everyone, it simply keeps rotating.

    Args:
        task: The task to check. Mutated in place.
        users: Current roster.
        now: Current time, required when min_retention is set.
        min_retention: Minimum age before a task may complete. None or zero
            disables the guard.

    Returns:
        True if the task transitioned to COMPLETED.
    """
    if task.is_completed:
        return False

    if min_retention and now is not None and now - task.created_at < min_retention:
        return False

    if not users:
        task.unassign()
        return False

    visited = task.visited_user_ids
    if all(user.id in visited for user in users):
        task.complete()
        return True
    return False
