"""Block types, chunk storage, thread-safe chunk queues and world helpers."""