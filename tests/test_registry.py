from unittest.mock import Mock

from middlestack import ArrayDefinition, MiddlewareRegistry, subtype_match


class Multiplier:
    def __init__(self, factor: int = 2) -> None:
        self.factor = factor

    def __call__(self, value):
        return value * self.factor


class Parentheses:
    def __call__(self, value):
        return f"({value})"


class Brackets:
    def __call__(self, value):
        return [f"[{value}]"]


def test_registration_order_is_execution_order() -> None:
    registry = MiddlewareRegistry()
    registry.register(Multiplier, factor=10)
    registry.register(Parentheses)
    registry.register(Brackets)

    stack = registry.build_stack()

    assert stack.call(10) == ["[(100)]"]


def test_build_definition_lists_unique_types() -> None:
    registry = MiddlewareRegistry()
    registry.register(Parentheses)
    registry.register(Multiplier)
    registry.register(Parentheses)

    definition = registry.build_definition()

    assert isinstance(definition, ArrayDefinition)
    assert definition.permitted_types == [Parentheses, Multiplier]
    assert len(registry.build_middlewares()) == 3


def test_repeated_registrations_run_as_ties() -> None:
    registry = MiddlewareRegistry()
    registry.register(Parentheses)
    registry.register(Multiplier, factor=3)
    registry.register(Parentheses)

    assert registry.build_stack().call(2) == ["((2))((2))((2))"]


def test_build_stack_passes_matcher() -> None:
    registry = MiddlewareRegistry()
    registry.register(Parentheses)

    stack = registry.build_stack(matcher=subtype_match)

    assert stack.definition.matcher is subtype_match


def test_decorator_registration() -> None:
    registry = MiddlewareRegistry()

    @registry.add
    class Upper:
        def __call__(self, value):
            return value.upper()

    @registry.add(suffix="!")
    class Exclaim:
        def __init__(self, suffix: str) -> None:
            self.suffix = suffix

        def __call__(self, value):
            return value + self.suffix

    assert registry.build_stack().call("hi") == ["HI!"]


def test_factory_is_used() -> None:
    registry = MiddlewareRegistry()
    factory_mock = Mock(return_value=Multiplier(4))

    registry.register(Multiplier, factory=factory_mock, foo="bar")

    middlewares = registry.build_middlewares()
    factory_mock.assert_called_once_with(foo="bar")
    assert middlewares[0].factor == 4


def test_entries_are_copied() -> None:
    registry = MiddlewareRegistry()
    registry.register(Parentheses)

    registry.entries.clear()

    assert len(registry.entries) == 1


def test_clear() -> None:
    registry = MiddlewareRegistry()
    registry.register(Parentheses)
    registry.clear()

    assert registry.build_middlewares() == []
    assert registry.build_stack().call("x") == ["x"]
