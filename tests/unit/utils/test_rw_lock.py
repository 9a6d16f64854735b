# -*- coding: utf-8 -*-
"""Unit tests for AsyncReadWriteLock."""

from __future__ import annotations

import asyncio

from eth_parser.utils.rw_lock import AsyncReadWriteLock


async def test_readers_share_the_lock() -> None:
    lock = AsyncReadWriteLock()
    both_inside = asyncio.Event()
    inside = 0

    async def reader() -> None:
        nonlocal inside
        async with lock.read():
            inside += 1
            if inside == 2:
                both_inside.set()
            await asyncio.wait_for(both_inside.wait(), timeout=1.0)

    await asyncio.gather(reader(), reader())

    assert lock.readers == 0


async def test_writer_waits_for_readers_to_leave() -> None:
    lock = AsyncReadWriteLock()
    order: list[str] = []
    reader_in = asyncio.Event()
    release_reader = asyncio.Event()

    async def reader() -> None:
        async with lock.read():
            order.append("read-start")
            reader_in.set()
            await release_reader.wait()
            order.append("read-end")

    async def writer() -> None:
        await reader_in.wait()
        async with lock.write():
            order.append("write")

    reader_task = asyncio.create_task(reader())
    writer_task = asyncio.create_task(writer())
    await reader_in.wait()
    await asyncio.sleep(0.01)
    assert order == ["read-start"]

    release_reader.set()
    await asyncio.gather(reader_task, writer_task)

    assert order == ["read-start", "read-end", "write"]
    assert lock.write_locked is False


async def test_waiting_writer_blocks_new_readers() -> None:
    lock = AsyncReadWriteLock()
    order: list[str] = []
    release_first = asyncio.Event()

    async def first_reader() -> None:
        async with lock.read():
            await release_first.wait()
            order.append("first-read")

    async def writer() -> None:
        async with lock.write():
            order.append("write")

    async def late_reader() -> None:
        async with lock.read():
            order.append("late-read")

    t1 = asyncio.create_task(first_reader())
    await asyncio.sleep(0)
    t2 = asyncio.create_task(writer())
    await asyncio.sleep(0.01)
    t3 = asyncio.create_task(late_reader())
    await asyncio.sleep(0.01)
    assert order == []

    release_first.set()
    await asyncio.gather(t1, t2, t3)

    assert order == ["first-read", "write", "late-read"]


async def test_writers_are_mutually_exclusive() -> None:
    lock = AsyncReadWriteLock()
    active = 0
    max_active = 0

    async def writer() -> None:
        nonlocal active, max_active
        async with lock.write():
            active += 1
            max_active = max(max_active, active)
            await asyncio.sleep(0)
            active -= 1

    await asyncio.gather(*(writer() for _ in range(10)))

    assert max_active == 1
