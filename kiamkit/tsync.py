"""Thread synchronisation: a recursive exclusive section and events."""

from __future__ import annotations

import threading


class TSync:
    """Recursive lock: ``mono`` enters exclusive mode, ``multi`` leaves it."""

    def __init__(self):
        self._lock = threading.RLock()

    def __enter__(self):
        self.mono()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.multi()

    def mono(self):
        """Enter the exclusive section, waiting for other threads to leave it."""
        self._lock.acquire()

    def multi(self):
        """Leave the exclusive section."""
        self._lock.release()

    def try_mono(self):
        """Enter the exclusive section only if that needs no waiting."""
        return self._lock.acquire(blocking=False)


class AutoSync:
    """Scoped holder of a :class:`TSync`; ``None`` makes it a no-op."""

    def __init__(self, sync):
        self._sync = sync
        self._held = False

    def mono(self):
        """Enter the exclusive section unless already held."""
        if self._sync is not None and not self._held:
            self._sync.mono()
            self._held = True

    def multi(self):
        """Leave the exclusive section if held."""
        if self._sync is not None and self._held:
            self._held = False
            self._sync.multi()

    @property
    def held(self):
        """True while this holder keeps the section."""
        return self._held

    def __enter__(self):
        self.mono()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.multi()


class TEvent:
    """A manual-reset event that can also wake any :class:`TEventSet` watching it."""

    def __init__(self):
        self._cond = threading.Condition()
        self._flag = False
        self._watchers = set()

    def is_set(self):
        """True once the event has been signalled."""
        return self._flag

    def signal(self):
        """Signal the event, waking every waiter."""
        with self._cond:
            self._flag = True
            self._cond.notify_all()
            watchers = list(self._watchers)
        for watcher in watchers:
            with watcher:
                watcher.notify_all()

    def wait(self, timeout=None):
        """Wait for the signal; False if ``timeout`` seconds passed first."""
        with self._cond:
            return self._cond.wait_for(lambda: self._flag, timeout)

    def _watch(self, cond):
        with self._cond:
            self._watchers.add(cond)

    def _unwatch(self, cond):
        with self._cond:
            self._watchers.discard(cond)


class TEventSet:
    """A set of events that can be waited on together."""

    def __init__(self):
        self._events = []
        self._cond = threading.Condition()

    def __len__(self):
        return len(self._events)

    def add(self, event):
        """Add an event to the set."""
        if any(e is event for e in self._events):
            raise ValueError("event already in the set")
        self._events.append(event)

    def remove(self, event):
        """Remove an event from the set."""
        for i, e in enumerate(self._events):
            if e is event:
                del self._events[i]
                return
        raise ValueError("event not in the set")

    def _first_signalled(self, events):
        return next((e for e in events if e.is_set()), None)

    def wait(self, timeout=None):
        """Wait until any event is signalled; return it, or None on timeout."""
        events = list(self._events)
        if not events:
            raise ValueError("waiting on an empty event set")
        for event in events:
            event._watch(self._cond)
        try:
            with self._cond:
                self._cond.wait_for(lambda: self._first_signalled(events) is not None, timeout)
            return self._first_signalled(events)
        finally:
            for event in events:
                event._unwatch(self._cond)