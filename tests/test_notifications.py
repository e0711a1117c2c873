from __future__ import annotations

import asyncio

import pytest

from roster_admin.notifications.queue import NotificationKind, NotificationQueue


@pytest.mark.asyncio
async def test_show_appends_in_insertion_order_without_dedup() -> None:
    queue = NotificationQueue(timeout=5.0)
    try:
        a = queue.success("Saved")
        b = queue.error("Boom")
        c = queue.success("Saved")

        assert [n.id for n in queue.items] == [a.id, b.id, c.id]
        assert len({a.id, b.id, c.id}) == 3
        assert b.kind is NotificationKind.error
        assert [n.text for n in queue.items] == ["Saved", "Boom", "Saved"]
    finally:
        queue.clear()


@pytest.mark.asyncio
async def test_show_accepts_kind_as_string() -> None:
    queue = NotificationQueue(timeout=5.0)
    try:
        n = queue.show("hi", "success")
        assert n.kind is NotificationKind.success
        with pytest.raises(ValueError):
            queue.show("hi", "warning")
    finally:
        queue.clear()


@pytest.mark.asyncio
async def test_notifications_expire_after_timeout() -> None:
    queue = NotificationQueue(timeout=0.05)
    queue.success("short-lived")
    assert len(queue.items) == 1

    await asyncio.sleep(0.15)
    assert queue.items == ()


@pytest.mark.asyncio
async def test_each_notification_has_its_own_timer() -> None:
    queue = NotificationQueue(timeout=0.3)
    first = queue.success("first")
    await asyncio.sleep(0.15)
    second = queue.success("second")

    await asyncio.sleep(0.2)
    assert [n.id for n in queue.items] == [second.id]
    assert first.id not in {n.id for n in queue.items}

    await asyncio.sleep(0.2)
    assert queue.items == ()


@pytest.mark.asyncio
async def test_dismiss_cancels_pending_removal() -> None:
    queue = NotificationQueue(timeout=0.05)
    snapshots: list[int] = []
    queue.subscribe(lambda items: snapshots.append(len(items)))

    n = queue.error("dismiss me")
    queue.dismiss(n.id)
    await asyncio.sleep(0.1)

    assert queue.items == ()
    # one change for show, one for dismiss; the cancelled timer never fires
    assert snapshots == [1, 0]


@pytest.mark.asyncio
async def test_dismiss_unknown_id_is_a_noop() -> None:
    queue = NotificationQueue(timeout=5.0)
    try:
        queue.success("stay")
        queue.dismiss("does-not-exist")
        assert len(queue.items) == 1
    finally:
        queue.clear()


@pytest.mark.asyncio
async def test_clear_cancels_everything() -> None:
    queue = NotificationQueue(timeout=0.05)
    queue.success("a")
    queue.error("b")

    queue.clear()
    await asyncio.sleep(0.1)

    assert queue.items == ()
