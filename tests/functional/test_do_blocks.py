"""Functional tests for do-blocks evaluated against the bundled instances."""

import pytest
from structlog.testing import capture_logs
from kungfu import Error, Ok

from monadic import (
    LIST,
    MAYBE,
    NOTHING,
    RESULT,
    Bound,
    DoPolicy,
    Just,
    Let,
    Of,
    PatternMatchError,
    Plain,
    Return,
    do,
    run,
)


def test_maybe_block_sums_payloads():
    """Test x <- Just(1); y <- Just(2); return x + y."""
    result = run(
        [
            Bound("x", lambda _: Just(1)),
            Bound("y", lambda _: Just(2)),
            Return(lambda s: s.x + s.y),
        ],
        MAYBE,
    )

    assert result == Just(3)


def test_maybe_block_short_circuits():
    """Test that a Nothing step stops the block before the return expression runs."""
    evaluated = []

    def add(s):
        evaluated.append("add")
        return s.x + s.y

    result = run(
        [
            Bound("x", lambda _: Just(1)),
            Bound("y", lambda _: NOTHING),
            Return(add),
        ],
        MAYBE,
    )

    assert result == NOTHING
    assert evaluated == []


def test_steps_run_left_to_right():
    """Test that statements are evaluated in order and see earlier names."""
    order = []

    def step(name, value):
        def thunk(scope):
            order.append((name, dict(scope)))
            return Just(value)

        return thunk

    result = (
        do(MAYBE)
        .bind("a", step("a", 1))
        .then(step("b", None))
        .bind("c", step("c", 3))
        .returns(lambda s: (s.a, s.c))
        .run()
    )

    assert result == Just((1, 3))
    assert order == [("a", {}), ("b", {"a": 1}), ("c", {"a": 1})]


def test_initial_environment():
    """Test that run() keyword arguments seed the scope."""

    def safe_div(n, d):
        return NOTHING if d == 0 else Just(n / d)

    block = do(MAYBE).bind("q", lambda s: safe_div(s.n, s.d)).returns(lambda s: s.q * 2)

    assert block.run(n=6, d=3) == Just(4.0)
    assert block.run(n=6, d=0) == NOTHING


def test_builder_is_persistent():
    """Test that extending a block leaves the original unchanged."""
    base = do(MAYBE).bind("x", lambda _: Just(1))
    plus = base.returns(lambda s: s.x + 1)
    minus = base.returns(lambda s: s.x - 1)

    assert len(base.statements) == 1
    assert plus.run() == Just(2)
    assert minus.run() == Just(0)


def test_let_binds_without_bind():
    """Test that let introduces a pure binding with destructuring."""
    result = run(
        [
            Bound("pair", lambda _: Just((3, 4))),
            Let(("a", "b"), lambda s: s.pair),
            Return(lambda s: s.a * s.b),
        ],
        MAYBE,
    )

    assert result == Just(12)


def test_destructuring_bind():
    """Test tuple and class patterns on bound values."""
    result = (
        do(MAYBE)
        .bind(("k", "v"), lambda _: Just(("key", 1)))
        .bind(Of(Just, "inner"), lambda _: Just(Just("nested")))
        .returns(lambda s: f"{s.k}={s.v}:{s.inner}")
        .run()
    )

    assert result == Just("key=1:nested")


def test_mismatch_raises_by_default():
    """Test that a failed pattern match is a programming error under the default policy."""
    block = do(MAYBE).bind(("a", "b"), lambda _: Just((1, 2, 3))).returns(lambda s: s.a)

    with pytest.raises(PatternMatchError, match="expected 2 items") as info:
        block.run()

    assert info.value.value == (1, 2, 3)


def test_mismatch_can_route_through_fail():
    """Test that the fail policy turns a failed match into Nothing."""
    block = (
        do(MAYBE, on_mismatch="fail")
        .bind(("a", "b"), lambda _: Just((1, 2, 3)))
        .returns(lambda s: s.a)
    )

    assert block.run() == NOTHING


def test_let_mismatch_follows_policy():
    """Test that let patterns obey the same mismatch policy."""
    statements = [Let(("a", "b"), lambda _: 5), Return(lambda s: s.a)]

    with pytest.raises(PatternMatchError):
        run(statements, MAYBE)
    assert run(statements, MAYBE, policy=DoPolicy(on_mismatch="fail")) == NOTHING


def test_invalid_policy():
    """Test that unknown mismatch policies are rejected up front."""
    with pytest.raises(ValueError, match="on_mismatch"):
        DoPolicy(on_mismatch="ignore")  # type: ignore[arg-type]


def test_reserved_binder_name_rejected():
    """Test that binding a name Scope would shadow fails when the block is built."""
    with pytest.raises(ValueError, match="reserved"):
        do(MAYBE).bind("items", lambda _: Just([1, 2]))
    with pytest.raises(ValueError, match="reserved"):
        Let("values", lambda _: 1)


def test_with_policy_overrides_fields():
    """Test that with_policy keeps fields that are not overridden."""
    block = do(MAYBE, trace=True).with_policy(on_mismatch="fail")

    assert block.policy == DoPolicy(on_mismatch="fail", trace=True)


def test_result_block_keeps_first_error():
    """Test do-blocks over kungfu Results."""

    def parse(text):
        return Ok(int(text)) if text.isdigit() else Error(f"not a number: {text}")

    block = (
        do(RESULT)
        .bind("a", lambda s: parse(s.left))
        .bind("b", lambda s: parse(s.right))
        .returns(lambda s: s.a + s.b)
    )

    match block.run(left="2", right="40"):
        case Ok(value):
            assert value == 42
        case Error(err):
            raise AssertionError(err)

    match block.run(left="x", right="y"):
        case Error(err):
            assert err == "not a number: x"
        case Ok(value):
            raise AssertionError(value)


def test_result_fail_policy_carries_reason():
    """Test that fail routes the mismatch description into Error."""
    block = do(RESULT, on_mismatch="fail").bind(("a",), lambda _: Ok((1, 2))).returns(lambda s: s.a)

    match block.run():
        case Error(reason):
            assert "expected 1 items" in reason
        case Ok(value):
            raise AssertionError(value)


def test_list_block_enumerates_combinations():
    """Test non-determinism: every combination, filtered by a guard statement."""
    result = (
        do(LIST)
        .bind("x", lambda _: [1, 2, 3])
        .bind("y", lambda _: ["a", "b"])
        .then(lambda s: [None] if s.x != 2 else [])
        .returns(lambda s: f"{s.x}{s.y}")
        .run()
    )

    assert result == ["1a", "1b", "3a", "3b"]


def test_trace_emits_structlog_events():
    """Test that trace mode logs desugaring and every step."""
    with capture_logs() as events:
        do(MAYBE, trace=True).bind("x", lambda _: Just(1)).returns(lambda s: s.x).run()

    names = [event["event"] for event in events]
    assert names == ["do.desugared", "do.step"]
    assert events[0]["binds"] == 1


def test_no_events_without_trace():
    """Test that the default policy is silent."""
    with capture_logs() as events:
        do(MAYBE).bind("x", lambda _: Just(1)).returns(lambda s: s.x).run()

    assert events == []
