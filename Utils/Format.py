# Utils/format.py
from typing import Any
import numpy as np
import torch


def to_text(value: Any) -> str:
    # single numbers read as plain numbers, not tensor(...) / np.float32(...)
    if isinstance(value, torch.Tensor):
        value = value.detach().cpu()
        if value.numel() == 1:
            return str(value.item())
        value = value.numpy()
    if isinstance(value, np.ndarray):
        if value.size == 1:
            return str(value.reshape(-1)[0].item())
        return " ".join(str(v) for v in value.reshape(-1).tolist())
    if isinstance(value, np.generic):
        return str(value.item())
    return str(value)


def join_text(*values: Any) -> str:
    return "".join(to_text(v) for v in values)
