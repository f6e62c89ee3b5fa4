from middlestack.ports import (
    Definition,
    IDefinition,
    IMiddleware,
    Middleware,
    is_valid_definition,
    is_valid_middleware,
)


class CallableMiddleware(Middleware):
    def __call__(self, value):
        return [value]


class DuckMiddleware:
    def __call__(self, value):
        return [value]


class CompleteDefinition:
    def is_permitted(self, middleware) -> bool:
        return True

    def sort(self, middlewares):
        return middlewares


class NoSortDefinition:
    def is_permitted(self, middleware) -> bool:
        return True


class NoPermitDefinition:
    def sort(self, middlewares):
        return middlewares


class AttributeDefinition:
    is_permitted = True
    sort = "not callable"


# --- Middleware contract ---


def test_plain_object_is_not_a_middleware() -> None:
    assert is_valid_middleware("a random object") is False


def test_lambda_is_a_middleware() -> None:
    assert is_valid_middleware(lambda: "a random string") is True


def test_duck_typed_instance_is_a_middleware() -> None:
    assert is_valid_middleware(DuckMiddleware()) is True
    assert isinstance(DuckMiddleware(), IMiddleware)


def test_bare_marker_instance_is_not_a_middleware() -> None:
    assert Middleware.valid(Middleware()) is False


def test_marker_subclass_with_call_is_a_middleware() -> None:
    assert Middleware.valid(CallableMiddleware()) is True


def test_middleware_class_is_not_a_middleware() -> None:
    assert is_valid_middleware(DuckMiddleware) is False
    assert is_valid_middleware(CallableMiddleware) is False


# --- Definition contract ---


def test_definition_with_both_operations_is_valid() -> None:
    definition = CompleteDefinition()

    assert is_valid_definition(definition) is True
    assert isinstance(definition, IDefinition)


def test_definition_without_sort_is_invalid() -> None:
    assert is_valid_definition(NoSortDefinition()) is False


def test_definition_without_is_permitted_is_invalid() -> None:
    assert is_valid_definition(NoPermitDefinition()) is False


def test_bare_marker_instance_is_not_a_definition() -> None:
    assert Definition.valid(Definition()) is False


def test_non_callable_attributes_do_not_count() -> None:
    assert is_valid_definition(AttributeDefinition()) is False


def test_definition_class_is_not_a_definition() -> None:
    assert is_valid_definition(CompleteDefinition) is False
    assert Definition.valid(CompleteDefinition) is False


def test_validity_check_does_not_invoke_operations() -> None:
    calls: list[str] = []

    class SpyDefinition:
        def is_permitted(self, middleware) -> bool:
            calls.append("is_permitted")
            return True

        def sort(self, middlewares):
            calls.append("sort")
            return middlewares

    assert is_valid_definition(SpyDefinition()) is True
    assert calls == []
