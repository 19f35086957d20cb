"""Tests for spies."""

import pytest

from expectly import CallRecord, create_spy, expect, is_spy, restore_spies, spy_on


class Greeter:
    def greet(self, name):
        return f"hello {name}"


class TestCreateSpy:
    def test_records_calls(self):
        spy = create_spy()

        spy(1, 2, key="v")
        spy()

        assert spy.calls == [
            CallRecord(arguments=[1, 2], keywords={"key": "v"}),
            CallRecord(arguments=[]),
        ]
        assert spy.get_last_call() == CallRecord(arguments=[])

    def test_calls_through_to_wrapped_function(self):
        spy = create_spy(lambda x: x * 2)

        assert spy(4) == 8

    def test_and_return(self):
        spy = create_spy(lambda: 1).and_return(5)

        assert spy() == 5

    def test_and_throw(self):
        spy = create_spy().and_throw(RuntimeError("nope"))

        expect(spy).to_throw(RuntimeError)
        expect(spy).to_have_been_called()

    def test_and_call_through_restores_original_behaviour(self):
        spy = create_spy(lambda: "original").and_return("stub")

        assert spy() == "stub"
        assert spy.and_call_through()() == "original"

    def test_reset_clears_calls(self):
        spy = create_spy()
        spy()

        spy.reset()

        assert spy.calls == []
        assert spy.get_last_call() is None

    def test_create_spy_of_spy_returns_it(self):
        spy = create_spy()

        assert create_spy(spy) is spy


class TestIsSpy:
    def test_recognises_spies(self):
        assert is_spy(create_spy())

    @pytest.mark.parametrize("value", [None, 1, len, object()])
    def test_rejects_other_values(self, value):
        assert not is_spy(value)

    def test_requires_flag_to_be_exactly_true(self):
        class Impostor:
            __is_spy__ = "yes"
            calls = []

        assert not is_spy(Impostor())

    def test_capability_not_type(self):
        class HandRolled:
            __is_spy__ = True

            def __init__(self):
                self.calls = [CallRecord(arguments=["x"])]

        spy = HandRolled()

        assert is_spy(spy)
        expect(spy).to_have_been_called_with("x")


class TestSpyOn:
    def test_replaces_and_restores_instance_attribute(self):
        greeter = Greeter()

        spy = spy_on(greeter, "greet")

        assert greeter.greet("ada") == "hello ada"
        expect(spy).to_have_been_called_with("ada")

        spy.restore()

        assert not is_spy(greeter.greet)
        assert "greet" not in vars(greeter)

    def test_method_on_class_records_instance(self):
        spy = spy_on(Greeter, "greet")
        greeter = Greeter()

        assert greeter.greet("bob") == "hello bob"

        assert spy.calls == [CallRecord(context=greeter, arguments=["bob"])]
        expect(greeter.greet).to_have_been_called_with("bob")

    def test_restore_spies_restores_everything(self):
        original = Greeter.greet
        spy_on(Greeter, "greet")

        restore_spies()

        assert Greeter.greet is original

    def test_spying_twice_returns_same_spy(self):
        greeter = Greeter()

        assert spy_on(greeter, "greet") is spy_on(greeter, "greet")


class Util:
    @staticmethod
    def double(x):
        return x * 2

    @classmethod
    def create(cls, x):
        return cls, x


class TestSpyOnDescriptors:
    def test_staticmethod_is_not_bound(self):
        original = vars(Util)["double"]
        spy = spy_on(Util, "double")

        assert Util().double(2) == 4
        assert Util.double(3) == 6
        assert spy.calls == [CallRecord(arguments=[2]), CallRecord(arguments=[3])]

        spy.restore()

        assert vars(Util)["double"] is original
        assert Util().double(2) == 4

    def test_classmethod_receives_class(self):
        original = vars(Util)["create"]
        spy = spy_on(Util, "create")

        assert Util().create(1) == (Util, 1)
        assert Util.create(2) == (Util, 2)
        expect(spy).to_have_been_called_with(1)
        expect(spy).to_have_been_called_with(2)

        restore_spies()

        assert vars(Util)["create"] is original
        assert Util.create(3) == (Util, 3)

    def test_spying_static_method_twice_returns_same_spy(self):
        assert spy_on(Util, "double") is spy_on(Util, "double")
