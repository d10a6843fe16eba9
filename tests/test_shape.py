import json

import numpy as np
import pytest

from plotshape.shape import Shape


def test_points_are_copied_and_read_only():
  src = np.array([[0.0, 1.0], [2.0, 3.0]])
  shape = Shape(src)
  src[0, 0] = 99
  assert shape.points[0, 0] == 0.0
  with pytest.raises(ValueError):
    shape.points[0, 0] = 5


@pytest.mark.parametrize("points", [[1, 2, 3], [[1, 2, 3]], np.zeros((2, 2, 2))])
def test_rejects_non_pairs(points):
  with pytest.raises(ValueError):
    Shape(points)


def test_empty_shape():
  shape = Shape([])
  assert len(shape) == 0
  assert "bounds" not in shape.meta


def test_meta_and_json():
  shape = Shape([[0, 0], [4, -2]], closed=False, stroke="red", stroke_width=2, fill=None)
  meta = shape.meta
  assert meta["points"] == 2
  assert meta["bounds"] == [[0.0, -2.0], [4.0, 0.0]]
  assert json.loads(shape.json) == meta
  meta["stroke"] = "blue"
  assert shape.stroke == "red"


def test_repr_and_str():
  shape = Shape([[0, 0]], fill="gray")
  assert repr(shape) == "<Shape points=1 closed=True>"
  assert '"fill": "gray"' in str(shape)
