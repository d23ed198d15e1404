# Logger/factory.py
from Logger.FrameLogger import FrameLogger
from Logger.Registry import get_schema
from Memory.Schema import RecordSchema


class FrameLoggerFactory:
    @staticmethod
    def schema_from_config(record_cfg) -> RecordSchema:
        if record_cfg.get("type"):
            return get_schema(str(record_cfg["type"]))
        if record_cfg.get("fields"):
            return RecordSchema.from_config(record_cfg["fields"])
        raise ValueError("Config must contain Record.type (e.g. 'gaze') or Record.fields")

    @staticmethod
    def from_config(cfg, path=None) -> FrameLogger:
        """
        Build a FrameLogger from a loaded config.
        cfg:
          Logger:
            path: logs/session.txt
            num_frames: 1000
            num_trials: 10
          Record:
            type: gaze
        path overrides Logger.path when given.
        """
        log_cfg = cfg.get("Logger", {})
        schema = FrameLoggerFactory.schema_from_config(cfg.get("Record", {}))
        return FrameLogger(path or log_cfg["path"],
                           num_frames=int(log_cfg["num_frames"]),
                           num_trials=int(log_cfg.get("num_trials", 0)),
                           fields=schema,
                           header=log_cfg.get("header", "") or "")
