# config_loader.py
import yaml


def load_cfg(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}

    # fail early on missing keys
    for k in ("Logger", "Record"):
        if k not in cfg:
            raise KeyError(f"Config missing top-level key: {k}")

    log_cfg = cfg["Logger"] or {}
    for k in ("path", "num_frames"):
        if k not in log_cfg:
            raise KeyError(f"Config missing Logger.{k}")
    log_cfg.setdefault("num_trials", 0)
    if log_cfg.get("header") is None:
        log_cfg["header"] = ""
    cfg["Logger"] = log_cfg

    rec_cfg = cfg["Record"] or {}
    if "type" not in rec_cfg and "fields" not in rec_cfg:
        raise KeyError("Config Record needs 'type' or 'fields'")
    cfg["Record"] = rec_cfg

    return cfg
