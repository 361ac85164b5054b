import threading
from typing import Optional, Set


class FairLock:
    """
    Mutual exclusion lock that hands ownership out in arrival order.

    Each acquirer draws a ticket and waits until that ticket is served, so a
    steady stream of short critical sections cannot starve an early waiter.
    A waiter interrupted before its turn gives up its ticket, and the queue
    skips it. Not reentrant.
    """
    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._next_ticket = 0
        self._now_serving = 0
        self._abandoned: Set[int] = set()
        self._owner: Optional[int] = None

    def acquire(self) -> None:
        with self._cond:
            ticket = self._next_ticket
            self._next_ticket += 1
            try:
                while ticket != self._now_serving:
                    self._cond.wait()
            except BaseException:
                if ticket == self._now_serving:
                    # Our turn came as we were interrupted: pass it on
                    self._advance()
                else:
                    self._abandoned.add(ticket)
                raise
            self._owner = threading.get_ident()

    def release(self) -> None:
        with self._cond:
            if self._owner != threading.get_ident():
                raise RuntimeError("Cannot release a FairLock held by another thread.")
            self._owner = None
            self._advance()

    def locked(self) -> bool:
        with self._cond:
            return self._owner is not None

    @property
    def waiting(self) -> int:
        """Number of threads queued behind the current owner."""
        with self._cond:
            queued = self._next_ticket - self._now_serving - len(self._abandoned)
            return queued - (1 if self._owner is not None else 0)

    def _advance(self) -> None:
        """Serves the next live ticket. Caller holds the condition."""
        self._now_serving += 1
        while self._now_serving in self._abandoned:
            self._abandoned.discard(self._now_serving)
            self._now_serving += 1
        self._cond.notify_all()

    def __enter__(self) -> "FairLock":
        self.acquire()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()
