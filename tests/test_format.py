import numpy as np
import torch

from Utils.Format import join_text, to_text


def test_plain_values_use_str():
    assert to_text(1) == "1"
    assert to_text(0.1) == "0.1"
    assert to_text("abc") == "abc"
    assert to_text(True) == "True"


def test_numpy_scalars():
    assert to_text(np.int64(5)) == "5"
    assert to_text(np.float64(0.25)) == "0.25"
    assert to_text(np.array([[2]])) == "2"
    assert to_text(np.array([1, 2, 3])) == "1 2 3"


def test_torch_tensors():
    assert to_text(torch.tensor(3)) == "3"
    assert to_text(torch.tensor([0.5], requires_grad=True)) == "0.5"
    assert to_text(torch.tensor([[1, 2], [3, 4]])) == "1 2 3 4"


def test_join_text_has_no_separator():
    assert join_text("a", 1, np.int8(2), "b") == "a12b"
    assert join_text() == ""
