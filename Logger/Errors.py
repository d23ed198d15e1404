# Logger/errors.py


class CapacityExceeded(RuntimeError):
    """add_frame / start_new_trial called past the capacity given at construction."""
    def __init__(self, kind: str, capacity: int):
        super().__init__(f"FrameLogger {kind} full: capacity={capacity}")
        self.kind = kind
        self.capacity = capacity


class AlreadyFlushed(RuntimeError):
    pass
