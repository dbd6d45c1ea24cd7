"""Watch files for changes and deliver the events through queues."""

import os
import queue

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from ascendkit.filecheck import path_string_checker


def _event_paths(event: FileSystemEvent) -> list:
    paths = [os.fsdecode(event.src_path)]
    dest = getattr(event, "dest_path", "")
    if dest:
        paths.append(os.fsdecode(dest))
    return [os.path.abspath(p) for p in paths if p]


class _QueueHandler(FileSystemEventHandler):
    """Forward events for the watched paths into the watcher's queues."""

    def __init__(self, events: queue.Queue, errors: queue.Queue):
        super().__init__()
        self._events = events
        self._errors = errors
        self.files: set = set()
        self.dirs: set = set()

    def _wanted(self, path: str) -> bool:
        return path in self.files or path in self.dirs or os.path.dirname(path) in self.dirs

    def dispatch(self, event: FileSystemEvent) -> None:
        try:
            if any(self._wanted(path) for path in _event_paths(event)):
                self._events.put(event)
        except Exception as err:  # reported through the error queue
            self._errors.put(err)


class FileWatcher:
    """Watches individual files (or directories) and queues their change events.

    ``events`` receives watchdog event objects; ``errors`` receives exceptions
    raised while handling them.
    """

    def __init__(self):
        self.events: queue.Queue = queue.Queue()
        self.errors: queue.Queue = queue.Queue()
        self._handler = _QueueHandler(self.events, self.errors)
        self._scheduled: set = set()
        self._closed = False
        self._observer = Observer()
        self._observer.start()

    def watch_file(self, file_path: str) -> None:
        """Start watching ``file_path``; it must exist and be a valid path string."""
        if self._closed:
            raise RuntimeError("file watcher is closed")
        os.stat(file_path)
        path_string_checker(file_path)
        abs_path = os.path.abspath(file_path)
        if os.path.isdir(abs_path):
            self._handler.dirs.add(abs_path)
            directory = abs_path
        else:
            self._handler.files.add(abs_path)
            directory = os.path.dirname(abs_path) or "/"
        if directory not in self._scheduled:
            self._observer.schedule(self._handler, directory, recursive=False)
            self._scheduled.add(directory)

    def close(self) -> None:
        """Stop watching; safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        self._observer.stop()
        self._observer.join()

    def __enter__(self) -> "FileWatcher":
        return self

    def __exit__(self, *args) -> None:
        self.close()


def get_file_watcher_queues(file_path: str) -> tuple:
    """Watch ``file_path`` and return its ``(events, errors)`` queues."""
    try:
        watcher = FileWatcher()
    except Exception as err:
        raise OSError(f"new file watcher failed, error: {err}") from err
    try:
        watcher.watch_file(file_path)
    except Exception as err:
        watcher.close()
        raise ValueError(f"watch file <{file_path}> failed, error: {err}") from err
    print(f"watching file <{file_path}>...")
    return watcher.events, watcher.errors