import json
import numbers

from h3viz.models import CircleOverlay
from h3viz.overlays import circle_instruction, circle_instructions


def test_circle_instruction():
    circle = CircleOverlay(lat=48.8566, lng=2.3522, radius_meters=500)
    assert circle_instruction(circle) == "L.circle([48.8566, 2.3522], {radius: 500}).addTo(map);"


def test_order_preserved():
    circles = [CircleOverlay(1.0, 2.0, 10), CircleOverlay(-3.5, 4.25, 20), CircleOverlay(0.0, 0.0, 5)]
    statements = circle_instructions(circles)
    assert len(statements) == 3
    assert "[1.0, 2.0]" in statements[0]
    assert "[-3.5, 4.25]" in statements[1]
    assert "{radius: 5}" in statements[2]


def test_degenerate_values_pass_through():
    assert "{radius: 0}" in circle_instruction(CircleOverlay(0.0, 0.0, 0))
    assert "[95.0, 400.0]" in circle_instruction(CircleOverlay(95.0, 400.0, 1))


def test_no_circles():
    assert circle_instructions([]) == []


class _Scalar(float):
    """Float subclass whose repr is not a JavaScript literal (like numpy scalars)."""

    def __repr__(self):
        return f"Scalar({float(self)})"


class _IntScalar:
    """Integer-like value that is not an ``int`` (like ``numpy.int64``)."""

    def __init__(self, value):
        self.value = value

    def __int__(self):
        return self.value

    def __repr__(self):
        return f"IntScalar({self.value})"


numbers.Integral.register(_IntScalar)


def test_float_subclass_emitted_as_plain_number():
    statement = circle_instruction(CircleOverlay(_Scalar(1.5), _Scalar(2.0), 10))
    assert statement == "L.circle([1.5, 2.0], {radius: 10}).addTo(map);"


def test_integer_like_radius_emitted_as_plain_number():
    statement = circle_instruction(CircleOverlay(1.5, 2.0, _IntScalar(10)))
    assert "{radius: 10}" in statement
    assert "IntScalar" not in statement


def test_nan_and_infinity_use_javascript_spelling():
    statement = circle_instruction(CircleOverlay(float("nan"), float("inf"), 5))
    assert statement == "L.circle([NaN, Infinity], {radius: 5}).addTo(map);"


def test_circle_payload_is_plain_json():
    data = CircleOverlay(_Scalar(1.5), 2.0, _IntScalar(10)).to_dict()
    assert json.dumps(data, sort_keys=True) == '{"lat": 1.5, "lng": 2.0, "radius_meters": 10}'
