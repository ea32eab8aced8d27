import pytest

from foamcore.boundary_fields import BoundaryFields
from foamcore.executors import CPUExecutor, GPUExecutor, SerialExecutor


@pytest.fixture
def boundary():
    bf = BoundaryFields(SerialExecutor(), 5, 2)
    bf.offset.data()[:] = [0, 2, 5]
    return bf


@pytest.mark.parametrize("exec_", [SerialExecutor(), CPUExecutor(), GPUExecutor()])
def test_sizes(exec_):
    bf = BoundaryFields(exec_, 10, 3)
    assert bf.n_boundary_faces == 10
    assert bf.n_boundaries == 3
    assert len(bf.value) == 10
    assert len(bf.ref_value) == 10
    assert len(bf.value_fraction) == 10
    assert len(bf.ref_grad) == 10
    assert len(bf.boundary_types) == 3
    assert len(bf.offset) == 4
    assert bf.exec == exec_


def test_fields_live_on_executor():
    bf = BoundaryFields(GPUExecutor(), 4, 1)
    assert bf.value.exec == GPUExecutor()
    assert bf.offset.exec == GPUExecutor()


def test_range(boundary):
    assert boundary.range(0) == (0, 2)
    assert boundary.range(1) == (2, 5)


def test_ranges_cover_all_faces(boundary):
    ranges = [boundary.range(p) for p in range(boundary.n_boundaries)]
    assert ranges[0][0] == 0
    assert ranges[-1][1] == boundary.n_boundary_faces
    for (_, end), (start, _) in zip(ranges, ranges[1:]):
        assert end == start


@pytest.mark.parametrize("patch", [-1, 2, 7])
def test_range_out_of_bounds(boundary, patch):
    with pytest.raises(IndexError):
        boundary.range(patch)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        BoundaryFields(SerialExecutor(), -1, 0)


def test_copy_to_other_executor(boundary):
    boundary.value.data()[:] = [1.0, 2.0, 3.0, 4.0, 5.0]
    copied = boundary.copy_to(CPUExecutor())
    assert copied.exec == CPUExecutor()
    assert copied.value.exec == CPUExecutor()
    assert list(copied.value) == [1.0, 2.0, 3.0, 4.0, 5.0]
    assert copied.range(1) == boundary.range(1)
    assert copied == boundary


def test_copy_is_independent(boundary):
    copied = boundary.copy_to(SerialExecutor())
    copied.value[0] = 9.0
    copied.offset[1] = 3
    assert boundary.value[0] == 0.0
    assert boundary.range(0) == (0, 2)
    assert copied.range(0) == (0, 3)
    assert copied != boundary