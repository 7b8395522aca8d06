import threading


class ConcurrencyGuard:
    """Serializes calls into the shared render engine.

    Usage::

        with guard:
            html = engine.markdown_to_html(text)

    Acquisition blocks without a timeout. The lock is released on every
    exit path, including when the render call raises.
    """

    def __init__(self):
        self._lock = threading.Lock()

    def __enter__(self):
        self._lock.acquire()
        return self

    def __exit__(self, exc_type, exc, tb):
        self._lock.release()
        return False

    def locked(self):
        return self._lock.locked()
