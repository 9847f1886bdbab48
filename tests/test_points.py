import pytest
import gpreg.num as gnp
from gpreg import PointSet


def test_construction_from_array():
    p = PointSet([[0.0, 1.0], [2.0, 3.0], [4.0, 5.0]])
    assert len(p) == 3
    assert p.dimension == 2
    assert gnp.allclose(p[1], gnp.asarray([2.0, 3.0]))
    assert p.as_array().shape == (3, 2)


def test_empty_point_set():
    p = PointSet(dimension=3)
    assert len(p) == 0
    assert p.as_array().shape == (0, 3)
    p.append([1.0, 2.0, 3.0])
    assert len(p) == 1


def test_dimension_inferred_from_first_point():
    p = PointSet()
    assert p.dimension is None
    p.append([0.5])
    assert p.dimension == 1
    with pytest.raises(ValueError):
        p.append([0.5, 0.5])


def test_invalid_dimension():
    with pytest.raises(ValueError):
        PointSet(dimension=0)
    with pytest.raises(ValueError):
        PointSet([[[0.0]]])


def test_appended_points_are_copies():
    x = gnp.asarray([1.0, 2.0])
    p = PointSet()
    p.append(x)
    x[0] = 100.0
    assert p[0][0] == 1.0


def test_iteration_order():
    rows = [[float(i)] for i in range(5)]
    p = PointSet(rows)
    assert [float(x[0]) for x in p] == [0.0, 1.0, 2.0, 3.0, 4.0]


def test_one_dimensional_array_is_a_column():
    p = PointSet([0.0, 0.5, 1.0])
    assert len(p) == 3
    assert p.dimension == 1
    assert p.as_array().shape == (3, 1)


def test_pop():
    p = PointSet([[0.0], [1.0]])
    assert float(p.pop()[0]) == 1.0
    assert len(p) == 1
    p.pop()
    with pytest.raises(IndexError):
        p.pop()
