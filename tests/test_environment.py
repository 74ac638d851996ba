import pytest

from shrubvm.environment import Environment
from shrubvm.errors import ErrorType, VMError


def test_push_and_pop_change_depth():
    env = Environment()
    env.push(1)
    env.push(2)
    assert len(env) == 2
    env.pop()
    assert len(env) == 1


def test_pop_empty():
    with pytest.raises(VMError) as info:
        Environment().pop()
    assert str(info.value) == "Stack Error: Stack underflow in environment"


def test_depth_addresses_outer_scopes():
    env = Environment()
    env.push(2)
    env.set(1.0, 0, 0)
    env.push(2)
    env.set(5.0, 0, 0)
    assert env.get(0, 0) == 5.0
    assert env.get(1, 0) == 1.0
    env.set("outer", 1, 1)
    env.pop()
    assert env.get(0, 1) == "outer"


def test_too_deep():
    env = Environment()
    env.push(1)
    with pytest.raises(VMError) as info:
        env.get(1, 0)
    assert info.value.kind is ErrorType.STACK_ERROR
    assert info.value.message == "Tried to access variable from too many scopes back"
    with pytest.raises(VMError):
        env.set(1.0, 1, 0)


def test_offset_checked_by_scope():
    env = Environment()
    env.push(1)
    with pytest.raises(VMError) as info:
        env.set(1.0, 0, 1)
    assert info.value.kind is ErrorType.INDEX_ERROR


def test_popped_scope_values_are_gone():
    env = Environment()
    env.push(1)
    env.set(1.0, 0, 0)
    env.pop()
    env.push(1)
    assert env.get(0, 0) is None