"""Whitespace token streams fed through a producer/consumer channel."""

from __future__ import annotations

import queue
import re
import sys
import threading
from typing import Callable, Iterable, Iterator, TextIO, TypeVar

T = TypeVar("T")

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_CLOSED = object()
_INT_TOKEN = re.compile(r"[+-]?[0-9]+")
_POLL_INTERVAL = 0.05  # seconds a blocked producer waits before rechecking the stop flag
_JOIN_TIMEOUT = 1.0


def parse_int(token: str) -> int:
    if _INT_TOKEN.fullmatch(token) is None:
        raise ValueError(f"malformed integer token {token!r}")
    value = int(token, 10)
    if not INT32_MIN <= value <= INT32_MAX:
        raise ValueError(f"integer token {token!r} out of 32-bit range")
    return value


def pairs(values: Iterable[int]) -> Iterator[tuple[int, int]]:
    """Group a flat integer stream into ``(p, q)`` pairs.

    A trailing value without a partner is dropped.
    """
    it = iter(values)
    for p in it:
        q = next(it, None)
        if q is None:
            return
        yield p, q


class TokenSource:
    """Lazy whitespace tokenizer over a text stream.

    The first token may be read directly with :meth:`read_sites`; the rest is
    delivered once, either as integers or as strings, by a producer thread
    writing into a bounded queue.
    """

    def __init__(
        self,
        stream: TextIO,
        name: str = "<stream>",
        *,
        buffer_size: int = 1,
        owns_stream: bool = False,
    ) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self.stream = stream
        self.name = name
        self.buffer_size = buffer_size
        self._owns_stream = owns_stream
        self._words = self._split(stream)
        self._stop = threading.Event()
        self._producer: threading.Thread | None = None
        self._streaming = False

    @classmethod
    def open(cls, filename: str = "stdin", **kwargs) -> "TokenSource":
        if filename == "stdin":
            return cls(sys.stdin, "stdin", **kwargs)
        handle = open(filename, encoding="utf-8")
        return cls(handle, filename, owns_stream=True, **kwargs)

    @staticmethod
    def _split(stream: TextIO) -> Iterator[str]:
        for line in stream:
            yield from line.split()

    def read_sites(self) -> int:
        token = next(self._words, None)
        if token is None:
            raise ValueError(f"missing site count in {self.name}")
        return parse_int(token)

    def ints(self) -> Iterator[int]:
        return self._stream(parse_int)

    def strings(self) -> Iterator[str]:
        return self._stream(str)

    def _stream(self, convert: Callable[[str], T]) -> Iterator[T]:
        if self._streaming:
            raise RuntimeError(f"tokens of {self.name} were already streamed")
        self._streaming = True
        return self._consume(convert)

    def _put(self, channel: queue.Queue, item) -> bool:
        while not self._stop.is_set():
            try:
                channel.put(item, timeout=_POLL_INTERVAL)
            except queue.Full:
                continue
            return True
        return False

    def _produce(self, convert: Callable[[str], T], channel: queue.Queue) -> None:
        try:
            for word in self._words:
                if not self._put(channel, convert(word)):
                    return
        except (OSError, ValueError) as exc:
            self._put(channel, exc)
            return
        self._put(channel, _CLOSED)

    def _consume(self, convert: Callable[[str], T]) -> Iterator[T]:
        # the producer starts on the first request for a token
        channel: queue.Queue = queue.Queue(maxsize=self.buffer_size)
        self._producer = threading.Thread(
            target=self._produce,
            args=(convert, channel),
            name=f"tokens:{self.name}",
            daemon=True,
        )
        self._producer.start()
        try:
            while True:
                item = channel.get()
                if item is _CLOSED:
                    break
                if isinstance(item, Exception):
                    raise item
                yield item
        finally:
            self._halt(channel)

    def _halt(self, channel: queue.Queue | None = None) -> None:
        """Stop the producer thread and wait for it to finish."""
        self._stop.set()
        if channel is not None:
            while True:
                try:
                    channel.get_nowait()
                except queue.Empty:
                    break
        producer = self._producer
        if producer is not None:
            producer.join(_JOIN_TIMEOUT)

    def close(self) -> None:
        self._halt()
        if self._owns_stream:
            self.stream.close()

    def __enter__(self) -> "TokenSource":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"TokenSource({self.name!r})"


__all__ = ["TokenSource", "pairs", "parse_int"]
