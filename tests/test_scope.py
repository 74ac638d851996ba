import pytest

from shrubvm.errors import ErrorType, VMError
from shrubvm.scope import Scope


def test_store_then_load():
    scope = Scope(2)
    scope.store(0, 1.0)
    scope.store(1, "x")
    assert scope.load(0) == 1.0
    assert scope.load(1) == "x"
    assert len(scope) == 2


def test_overwrite():
    scope = Scope(1)
    scope.store(0, 1.0)
    scope.store(0, False)
    assert scope.load(0) is False


def test_store_out_of_range():
    with pytest.raises(VMError) as info:
        Scope(2).store(2, 1.0)
    assert str(info.value) == "Index Error: Index out of range in variable scope (insert)"


def test_load_out_of_range():
    with pytest.raises(VMError) as info:
        Scope(1).load(5)
    assert info.value.kind is ErrorType.INDEX_ERROR
    assert info.value.message == "Index out of range in variable scope (index)"


def test_negative_index_rejected():
    with pytest.raises(VMError):
        Scope(3).load(-1)