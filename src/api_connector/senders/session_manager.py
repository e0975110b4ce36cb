# src/api_connector/senders/session_manager.py
"""
Thread-local requests.Session storage for RequestsSender.

A connector (and therefore its sender) is long-lived and may be shared by
several threads; each thread gets its own Session.
"""
import threading
import weakref
from typing import Callable, Set

import requests


class ThreadSafeSessionManager:
    """
    Manages thread-local requests.Session instances.

    Sessions are created lazily on first access per thread and tracked with
    weak references so ``close_all`` can close sessions of every thread.

    Example:
        >>> manager = ThreadSafeSessionManager(requests.Session)
        >>> session = manager.get_session()
        >>> manager.close_all()
    """

    def __init__(self, session_factory: Callable[[], requests.Session]):
        self._session_factory = session_factory
        self._local = threading.local()
        self._all_sessions: Set[weakref.ref] = set()
        self._sessions_lock = threading.Lock()

    def get_session(self) -> requests.Session:
        session = getattr(self._local, 'session', None)
        if session is None:
            session = self._session_factory()
            self._local.session = session

            with self._sessions_lock:
                self._all_sessions.add(weakref.ref(session, self._discard))

        return session

    def _discard(self, ref: weakref.ref) -> None:
        with self._sessions_lock:
            self._all_sessions.discard(ref)

    def close_all(self) -> None:
        """Close sessions from all threads. Safe to call multiple times."""
        self._local.session = None

        with self._sessions_lock:
            sessions = [ref() for ref in self._all_sessions]
            self._all_sessions.clear()

        for session in sessions:
            if session is not None:
                session.close()

    def get_active_sessions_count(self) -> int:
        with self._sessions_lock:
            return sum(1 for ref in self._all_sessions if ref() is not None)
