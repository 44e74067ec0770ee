import pytest

from handler_chain import (ChainCycleError, ChainFrozenError, ConcreteHandler1, ConcreteHandler2, ConcreteHandler3,
                           Handled, TagHandler, Unhandled)


@pytest.fixture
def linked():
    handler1, handler2, handler3 = ConcreteHandler1(), ConcreteHandler2(), ConcreteHandler3()
    handler1.set_next(handler2).set_next(handler3)
    return handler1, handler2, handler3


def test_set_next_returns_successor():
    handler1, handler2 = ConcreteHandler1(), ConcreteHandler2()
    assert handler1.set_next(handler2) is handler2
    assert handler1.next_handler is handler2
    assert handler2.next_handler is None


@pytest.mark.parametrize("request_tag, expected", [
    ("A", "ConcreteHandler1"),
    ("B", "ConcreteHandler2"),
    ("C", "ConcreteHandler3"),
])
def test_first_matching_handler_services_request(linked, request_tag, expected):
    outcome = linked[0].handle(request_tag)
    assert isinstance(outcome, Handled)
    assert outcome.handled
    assert outcome.handler_name == expected
    assert outcome.message == f"{expected} is handling the request: {request_tag}"


def test_only_matching_handler_processes(linked, monkeypatch):
    processed = []
    for handler in linked:
        original = handler.process
        monkeypatch.setattr(handler, "process", lambda req, h=handler, p=original: processed.append(h.name) or p(req))

    linked[0].handle("B")
    assert processed == ["ConcreteHandler2"]


def test_unmatched_request_is_unhandled(linked, log_messages):
    outcome = linked[0].handle("D")
    assert isinstance(outcome, Unhandled)
    assert not outcome.handled
    assert outcome.message == "End of the chain. No handler found for the request: D"
    warnings = [r for r in log_messages if r["level"].name == "WARNING"]
    assert len(warnings) == 1
    assert not [r for r in log_messages if r["level"].name == "SUCCESS"]


def test_single_terminal_handler_without_match():
    assert isinstance(TagHandler("X").handle("A"), Unhandled)


def test_handling_starts_at_the_receiving_handler(linked):
    assert isinstance(linked[1].handle("A"), Unhandled)


def test_handle_is_idempotent(linked):
    assert linked[0].handle("C") == linked[0].handle("C")
    assert linked[0].handle("D") == linked[0].handle("D")


def test_order_does_not_matter_for_exclusive_tags():
    handler1, handler2, handler3 = ConcreteHandler1(), ConcreteHandler2(), ConcreteHandler3()
    handler2.set_next(handler1).set_next(handler3)
    assert handler2.handle("A").handler is handler1
    assert handler2.handle("B").handler is handler2


def test_order_decides_between_overlapping_handlers():
    first, second = TagHandler("A", name="first"), TagHandler("A", name="second")
    first.set_next(second)
    assert first.handle("A").handler_name == "first"
    second.set_next(first)
    first.set_next(None)
    assert second.handle("A").handler_name == "second"


def test_cyclic_chain_raises(linked):
    linked[2].set_next(linked[0])
    # A matching request is still found before the cycle is walked
    assert linked[0].handle("C").handled
    with pytest.raises(ChainCycleError) as exc_info:
        linked[0].handle("D")
    assert exc_info.value.handler is linked[0]


def test_self_loop_raises():
    handler = TagHandler("A")
    handler.set_next(handler)
    with pytest.raises(ChainCycleError):
        handler.handle("B")


def test_frozen_handler_refuses_relinking():
    handler = TagHandler("A")
    handler.freeze()
    with pytest.raises(ChainFrozenError):
        handler.set_next(TagHandler("B"))
