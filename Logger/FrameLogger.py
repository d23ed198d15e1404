# Logger/frame_logger.py
from __future__ import annotations
import logging
from typing import Any, Dict, List, Sequence, Tuple, Union

import numpy as np

from Logger.Errors import AlreadyFlushed
from Memory.FrameBuffer import FrameBuffer
from Memory.Schema import RecordSchema
from Utils.Format import join_text, to_text

log = logging.getLogger("framelog")

_NUMPY_DTYPES = {int: np.int64, float: np.float64, bool: np.bool_}


def _header_text(header: Union[str, Sequence[str]]) -> str:
    if isinstance(header, str):
        return header
    return "\t".join(str(h) for h in header)


class FrameLogger:
    """
    Per-frame table logger, written once to a tab separated text file.
    - start_new_trial() marks the next frame as a trial start
    - add_frame(*values) stores one record per frame
    - add_line() / add_word() write text straight to the file
    - write() dumps trial indices and frames; close() (or leaving a `with`
      block, or garbage collection) calls it if nobody did

    One owner, one thread: nothing here is locked.
    """
    def __init__(self, path: str, num_frames: int, num_trials: int,
                 fields: Union[RecordSchema, Sequence[type]], header: Union[str, Sequence[str]] = ""):
        if int(num_frames) <= 0:
            raise ValueError(f"num_frames must be > 0, got {num_frames}")
        if int(num_trials) < 0:
            raise ValueError(f"num_trials must be >= 0, got {num_trials}")
        self.schema = fields if isinstance(fields, RecordSchema) else RecordSchema(tuple(fields))
        self.frames = FrameBuffer(num_frames, kind="frames")
        self.trial_index = FrameBuffer(num_trials, kind="trials")
        self.header = _header_text(header) if header else ""
        self.flushed = False
        self.closed = False
        self.path = path

        self._outfile = open(path, "w", encoding="utf-8")
        log.info("Logging %d fields per frame to %s (frames<=%d, trials<=%d)",
                 self.schema.arity, path, self.num_frames, self.num_trials)

    # ---- sizes ----
    @property
    def num_frames(self) -> int: return self.frames.capacity
    @property
    def num_trials(self) -> int: return self.trial_index.capacity
    @property
    def frame_count(self) -> int: return len(self.frames)
    @property
    def trial_count(self) -> int: return len(self.trial_index)
    def __len__(self): return self.frame_count

    def _check_open(self, op: str):
        if self.flushed:
            raise AlreadyFlushed(f"{op}() after write(): table already written to {self.path}")

    # ---- table ----
    def set_header(self, header: Union[str, Sequence[str]]):
        self._check_open("set_header")
        self.header = _header_text(header)

    def start_new_trial(self) -> int:
        self._check_open("start_new_trial")
        idx = self.frame_count
        self.trial_index.add(idx)
        return idx

    def add_frame(self, *values: Any) -> int:
        self._check_open("add_frame")
        return self.frames.add(self.schema.make(values))

    # ---- free text ----
    def add_line(self, *values: Any):
        self._outfile.write(join_text(*values) + "\n")

    def add_word(self, *values: Any):
        self._outfile.write(join_text(*values))

    # ---- output ----
    def write(self):
        if self.flushed:
            raise AlreadyFlushed(f"write() called twice on {self.path}")
        out = self._outfile
        out.write("trial index:\n")
        out.write("".join(f"{i}\t" for i in self.trial_index) + "\n")
        out.write("\n")
        out.write(f"fr_nr\t{self.header}\n")
        for i, rec in enumerate(self.frames):
            out.write(str(i) + "".join("\t" + to_text(v) for v in rec) + "\n")
        out.flush()
        self.flushed = True
        log.info("Wrote %d frames, %d trials to %s", self.frame_count, self.trial_count, self.path)

    def close(self):
        if self.closed:
            return
        try:
            if not self.flushed:
                log.warning("%s closed without write(); writing now", self.path)
                self.write()
        finally:
            self.closed = True
            self._outfile.close()
            log.debug("Closed %s", self.path)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def __del__(self):
        if getattr(self, "_outfile", None) is not None and not self.closed:
            self.close()

    # ---- views ----
    def trials(self) -> List[Tuple[int, int]]:
        """(start, stop) frame range of every trial; the last one runs to frame_count."""
        starts = list(self.trial_index)
        stops = starts[1:] + [self.frame_count]
        return list(zip(starts, stops))

    def columns(self) -> Dict[str, np.ndarray]:
        out = {}
        for k, (name, t) in enumerate(zip(self.schema.names, self.schema.types)):
            dtype = _NUMPY_DTYPES.get(t, object)
            col = [rec[k] for rec in self.frames]
            if dtype is object:
                arr = np.empty(len(col), dtype=object)
                for j, v in enumerate(col):
                    arr[j] = v
            else:
                arr = np.asarray(col, dtype=dtype)
            out[name] = arr
        return out
