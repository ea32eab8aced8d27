import pytest

from foamcore.executors import CPUExecutor, Executor, GPUExecutor, SerialExecutor


def test_same_kind_equal():
    pairs = [
        (SerialExecutor(), SerialExecutor()),
        (CPUExecutor(), CPUExecutor()),
        (GPUExecutor(), GPUExecutor()),
    ]
    for left, right in pairs:
        assert (left == right) is True
        assert (left != right) is False
        assert hash(left) == hash(right)
        assert left.describe() == right.describe()


@pytest.mark.parametrize(
    "left,right",
    [
        (SerialExecutor, CPUExecutor),
        (SerialExecutor, GPUExecutor),
        (CPUExecutor, GPUExecutor),
    ],
)
def test_different_kinds_not_equal(left, right):
    assert (left() != right()) is True
    assert (left() == right()) is False


def test_names():
    assert SerialExecutor().name == "SerialExecutor"
    assert CPUExecutor().name == "CPUExecutor"
    assert GPUExecutor().name == "GPUExecutor"


def test_describe_serial():
    assert SerialExecutor().describe() == "Serial"


def test_describe_distinct_per_kind():
    descriptions = {e.describe() for e in (SerialExecutor(), CPUExecutor(), GPUExecutor())}
    assert len(descriptions) == 3


def test_usable_as_set_members():
    executors = {SerialExecutor(), SerialExecutor(), GPUExecutor()}
    assert len(executors) == 2


def test_all_kinds_are_executors_named_after_their_class():
    executors = [SerialExecutor(), CPUExecutor(), GPUExecutor()]
    assert [isinstance(e, Executor) for e in executors] == [True, True, True]
    assert [e.name for e in executors] == ["SerialExecutor", "CPUExecutor", "GPUExecutor"]


def test_compare_with_other_object():
    assert (SerialExecutor() == "SerialExecutor") is False
    assert (SerialExecutor() != "SerialExecutor") is True