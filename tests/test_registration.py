import functools

import pytest

from bazza import (
    Injectable,
    InvalidNameError,
    InvariantViolationError,
    Kind,
    Registration,
    RequiredArgumentError,
    injectable,
    make_registration,
)


@injectable("foo", "bar?")
class Service:
    def __init__(self, foo, bar):
        self.foo = foo
        self.bar = bar


class Plain:
    def build(self):
        return self


def test_raw_value_registration():
    reg = make_registration("foo", "bar")
    assert reg.full_name == "foo"
    assert reg.name == "foo"
    assert reg.kind is Kind.RAW
    assert reg.value == "bar"
    assert reg.is_array is False
    assert reg.is_function is False
    assert reg.injectables == ()


def test_falsy_values_are_not_absent():
    assert make_registration("zero", 0).value == 0
    assert make_registration("empty", "").value == ""


def test_class_without_declaration_is_constructible():
    reg = make_registration("plain", Plain)
    assert reg.kind is Kind.CONSTRUCTIBLE
    assert reg.is_function is True
    assert reg.injectables == ()


@pytest.mark.parametrize("factory", [lambda: 1, len, functools.partial(int, "1"), Plain().build])
def test_routines_are_constructible(factory):
    assert make_registration("f", factory).kind is Kind.CONSTRUCTIBLE


def test_callable_instance_is_raw():
    class Handler:
        def __call__(self): ...

    handler = Handler()
    reg = make_registration("handler", handler)
    assert reg.kind is Kind.RAW
    assert reg.value is handler


def test_decorated_dependencies_are_parsed_in_order():
    reg = make_registration("service", Service)
    assert reg.injectables == (
        Injectable(name="foo", base="foo", required=True),
        Injectable(name="bar", base="bar", required=False),
    )


def test_explicit_inject_overrides_decorated_dependencies():
    reg = make_registration("service", Service, inject=["x[]", "y"])
    assert [i.name for i in reg.injectables] == ["x[]", "y"]
    assert reg.injectables[0].base == "x"


def test_declaration_on_raw_value_is_ignored():
    reg = make_registration("foo", "bar", inject=["baz"])
    assert reg.injectables == ()


def test_array_registration_wraps_value_in_child():
    reg = make_registration("services[]", Service)
    assert reg.full_name == "services[]"
    assert reg.name == "services"
    assert reg.kind is Kind.COLLECTION
    assert reg.is_array is True
    assert len(reg.value) == 1

    child = reg.value[0]
    assert child.full_name == "services"
    assert child.is_array is False
    assert child.kind is Kind.CONSTRUCTIBLE
    assert child.value is Service
    assert len(child.injectables) == 2


def test_append_accumulates_children_and_returns_same_registration():
    reg = make_registration("items[]", "a")
    assert reg.append("b") is reg
    assert [child.value for child in reg.value] == ["a", "b"]
    assert all(child.name == "items" for child in reg.value)


def test_append_to_scalar_registration_raises():
    reg = make_registration("item", "a")
    with pytest.raises(InvariantViolationError):
        reg.append("b")


def test_registration_is_frozen():
    reg = make_registration("foo", "bar")
    with pytest.raises(AttributeError):
        reg.value = "baz"


@pytest.mark.parametrize(("name", "value"), [("", "x"), (None, "x"), ("foo", None)])
def test_missing_arguments_raise(name, value):
    with pytest.raises(RequiredArgumentError):
        Registration.create(name, value)


def test_invalid_name_raises():
    with pytest.raises(InvalidNameError):
        make_registration("1bad", "x")


def test_malformed_injectable_fails_whole_registration():
    @injectable("good", "9bad")
    class Broken: ...

    with pytest.raises(InvalidNameError):
        make_registration("broken", Broken)


@pytest.mark.parametrize("declared", ["foo", {"foo"}, {"foo": 1}, 42])
def test_non_sequence_declaration_raises(declared):
    with pytest.raises(InvariantViolationError):
        make_registration("service", Plain, inject=declared)


def test_non_string_dependency_raises():
    with pytest.raises(InvariantViolationError):
        make_registration("service", Plain, inject=["foo", 1])


def test_injectable_decorator_returns_target_unchanged():
    def factory(a):
        return a

    decorated = injectable("a")(factory)
    assert decorated is factory
    assert make_registration("f", decorated).injectables[0].name == "a"


def test_array_registration_is_hashable_by_identity():
    reg = make_registration("items[]", "a")
    other = make_registration("items[]", "a")

    assert {reg: 1}[reg] == 1
    assert reg != other
