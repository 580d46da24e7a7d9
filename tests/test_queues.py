import threading

from voxelcraft.voxel.queues import ChunkQueue, CompletedData, CompletedQueue


def test_chunk_queue_serves_newest_first():
    queue = ChunkQueue()
    queue.push((1, 0, 1))
    queue.push((2, 0, 2))
    assert queue.pop() == (2, 0, 2)
    assert queue.pop() == (1, 0, 1)
    assert queue.pop() is None


def test_chunk_queue_empty_and_has():
    queue = ChunkQueue()
    assert queue.is_empty() is True
    queue.push([3, 4, 5])
    assert queue.is_empty() is False
    assert queue.has((3, 4, 5)) is True
    assert queue.has((5, 4, 3)) is False


def test_chunk_queue_concurrent_pushes():
    queue = ChunkQueue()

    def worker(offset):
        for i in range(100):
            queue.push((offset, i, 0))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    popped = []
    while (item := queue.pop()) is not None:
        popped.append(item)
    assert len(set(popped)) == 4 * 100


def test_completed_queue_is_fifo():
    queue = CompletedQueue()
    first = CompletedData((0, 0, 0), [], [0, 1, 2])
    second = CompletedData((1, 0, 0))
    queue.push(first)
    queue.push(second)
    assert queue.pop() is first
    assert queue.pop() is second
    assert queue.pop() is None
    assert queue.is_empty() is True