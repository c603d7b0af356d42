"""Thread lessons: timed workers, shared counters, channels and shared data."""

from __future__ import annotations

import queue
import threading
import time
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

_DONE = object()


def run_timed_threads(count: int = 10, duration: float = 0.25) -> list[int]:
    """Run workers that each sleep, and return how many milliseconds each took."""
    if count < 0:
        raise ValueError("count must not be negative")

    def work(index: int) -> int:
        start = time.perf_counter()
        time.sleep(duration)
        print(f"thread {index} is complete")
        return int((time.perf_counter() - start) * 1000)

    results: list[int] = []
    if count:
        with ThreadPoolExecutor(max_workers=count) as pool:
            results = list(pool.map(work, range(count)))

    if len(results) != count:
        raise RuntimeError("Oh no! All the spawned threads did not finish!")

    print()
    for index, result in enumerate(results):
        print(f"thread {index} took {result}ms")
    return results


@dataclass
class JobStatus:
    """A counter of completed jobs, safe to update from many threads."""

    jobs_completed: int = 0
    _lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )

    def _complete(self) -> None:
        with self._lock:
            self.jobs_completed += 1


def run_jobs(count: int = 10, duration: float = 0.25) -> JobStatus:
    """Run jobs that each mark themselves completed; return the final status."""
    status = JobStatus()

    def job() -> None:
        time.sleep(duration)
        status._complete()

    workers = [threading.Thread(target=job) for _ in range(count)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
        with status._lock:
            print(f"jobs completed {status.jobs_completed}")
    return status


@dataclass
class Queue:
    """Ten values split into two halves to be sent from two threads."""

    length: int = 10
    first_half: list[int] = field(default_factory=lambda: [1, 2, 3, 4, 5])
    second_half: list[int] = field(default_factory=lambda: [6, 7, 8, 9, 10])


def send_tx(
    queue: Queue, channel: queue.Queue, delay: float = 1.0
) -> tuple[threading.Thread, ...]:
    """Send both halves of the queue on the channel from two threads."""

    def sender(values: list[int]) -> None:
        try:
            for value in values:
                print(f"sending {value}")
                channel.put(value)
                time.sleep(delay)
        finally:
            channel.put(_DONE)

    threads = tuple(
        threading.Thread(target=sender, args=(half,), daemon=True)
        for half in (queue.first_half, queue.second_half)
    )
    for thread in threads:
        thread.start()
    return threads


def collect(queue: Queue | None = None, delay: float = 1.0) -> list[int]:
    """Receive every value sent for the queue, in arrival order."""
    source = Queue() if queue is None else queue
    channel: _ChannelType = _new_channel()
    senders = send_tx(source, channel, delay)

    received: list[int] = []
    open_senders = len(senders)
    while open_senders:
        item = channel.get()
        if item is _DONE:
            open_senders -= 1
            continue
        print(f"Got: {item}")
        received.append(item)

    print(f"total numbers received: {len(received)}")
    if len(received) != source.length:
        raise RuntimeError(
            f"received {len(received)} numbers, expected {source.length}"
        )
    return received


_ChannelType = "queue.Queue"


def _new_channel():
    import queue as _queue_module  # the parameter name shadows the module above

    return _queue_module.Queue()


def offset_sums(numbers: Sequence[int], workers: int = 8) -> list[int]:
    """Sum every workers-th number per offset, one thread per offset."""
    if workers <= 0:
        raise ValueError("workers must be positive")
    shared = tuple(numbers)

    def sum_offset(offset: int) -> int:
        total = sum(n for n in shared if n % workers == offset)
        print(f"Sum of offset {offset} is {total}")
        return total

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(sum_offset, range(workers)))