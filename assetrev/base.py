"""Common interface for tree writers.

A build tool resolves an input tree to a directory and hands it, along with
an empty destination directory, to a writer.  Writers do their work
synchronously; :meth:`TreeWriter.write` wraps that work in a completed
:class:`~concurrent.futures.Future` so it can be chained into an asynchronous
pipeline.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from concurrent.futures import Future
from typing import Any, Callable


class TreeWriter(ABC):
    """Base class for writers.

    Sub-classes only need to implement :meth:`produce`.
    """

    def __init__(self, input_tree: Any) -> None:
        self.input_tree = input_tree

    @abstractmethod
    def produce(self, src_dir: str, dest_dir: str) -> None:
        """Populate ``dest_dir`` from the fully materialised ``src_dir``."""

    def write(self, read_tree: Callable[[Any], str], dest_dir: str) -> "Future[None]":
        """Resolve the input tree with ``read_tree`` and run :meth:`produce`.

        The returned future is already done.  Any error, including one raised
        by ``read_tree``, is stored on the future rather than raised.
        """
        future: "Future[None]" = Future()
        future.set_running_or_notify_cancel()
        try:
            src_dir = read_tree(self.input_tree)
            self.produce(src_dir, dest_dir)
        except BaseException as exc:
            future.set_exception(exc)
        else:
            future.set_result(None)
        return future
