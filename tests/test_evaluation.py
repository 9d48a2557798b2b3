import logging

import pytest

from owl.config import Config, FATAL_EXIT_STATUS
from owl.errors import OwlArityError, OwlInvalidSymbol, OwlNameError, OwlUnboundSymbol
from owl.evaluation.evaluator import Evaluator, eval_source
from owl.types.func import Func
from owl.types.nil import Nil
from owl.types.symbol import Atom, Symbol


# -----------------------------------------------------
# Self-evaluation and lookup
# -----------------------------------------------------

def test_self_evaluating_literals(evaluator, env):
    assert evaluator.evaluate(env, 1.0) == 1.0
    assert evaluator.evaluate(env, "hello") == "hello"
    assert evaluator.evaluate(env, True) is True
    assert evaluator.evaluate(env, Nil) is Nil
    assert evaluator.evaluate(env, Atom("ok")) == Atom("ok")
    fn = Func([], 1.0, env)
    assert evaluator.evaluate(env, fn) is fn


def test_empty_list_evaluates_to_itself(evaluator, env):
    assert evaluator.evaluate(env, []) == []
    assert evaluator.eval(env, "()") == []


def test_symbol_lookup(evaluator, env):
    env.set("x", 123.0)
    assert evaluator.evaluate(env, Symbol("x")) == 123.0


def test_unbound_symbol_is_nil(evaluator, env):
    assert evaluator.evaluate(env, Symbol("z")) is Nil


def test_unknown_operator_is_nil(evaluator, env):
    assert evaluator.eval(env, "(frobnicate 1 2)") is Nil


# -----------------------------------------------------
# Top-level eval
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", 6.0),
        ("(+ 1 (+ 1 2) 3)", 7.0),
        ('(eval "(+ 1 2 3)")', 6.0),
        ("(* 2 3 4)", 24.0),
        ("{ 1 2 3 }", 3.0),
        ("(do)", Nil),
        ("(if #t 1 2)", 1.0),
        ("(if #f 1 2)", 2.0),
        ("(if #f 1)", Nil),
        ("(if 0 1 2)", 2.0),
        ("(if 5 1 2)", 1.0),
        ('(if "" 1 2)', 1.0),
        ("(if nothing 1 2)", 2.0),
        ("(if (= 3 (+ 1 2)) 1 2)", 1.0),
        ("+(1 2)", 3.0),
        ('"text"', "text"),
        ("#t", True),
    ],
)
def test_eval_source(source, expected):
    assert eval_source(source) == expected


def test_eval_only_reads_one_form(evaluator, env):
    assert evaluator.eval(env, "(def x 1) (def x 2)") == 1.0
    assert env.get("x") == 1.0


def test_parse_errors_are_swallowed(evaluator, env, caplog):
    with caplog.at_level(logging.ERROR, logger="owl"):
        assert evaluator.eval(env, "(a (b c)") is Nil
    assert "UnbalancedParenthesis" in caplog.text


def test_empty_source_is_nil(evaluator, env):
    assert evaluator.eval(env, "") is Nil


def test_host_seeded_binding(evaluator, env):
    env.set("x", 123.0)
    assert evaluator.eval(env, "(+ x 1)") == 124.0


# -----------------------------------------------------
# Special forms
# -----------------------------------------------------

def test_do_sequences_and_returns_last(evaluator, env):
    assert evaluator.eval(env, "(do (def a 1) (def b 2) (+ a b))") == 3.0
    assert env.get("a") == 1.0


def test_if_evaluates_one_branch(evaluator, env):
    evaluator.eval(env, "(def hit 0)")
    evaluator.eval(env, "(if #t (set hit 1) (set hit 2))")
    assert env.get("hit") == 1.0


def test_if_requires_two_arguments(evaluator, env):
    with pytest.raises(OwlArityError):
        evaluator.eval(env, "(if #t)")


def test_def_set_get_round_trip(evaluator, env):
    assert evaluator.eval(env, "(def x 1)") == 1.0
    assert env.get("x") == 1.0
    assert evaluator.eval(env, "(set x 2)") == 2.0
    assert env.get("x") == 2.0


def test_def_overwrites_current_scope(evaluator, env):
    evaluator.eval(env, "(def x 1)")
    evaluator.eval(env, "(def x (+ x 1))")
    assert env.get("x") == 2.0


def test_def_shadows_in_innermost_scope(evaluator, env):
    env.define("x", 1.0)
    inner = env.child()
    evaluator.eval(inner, "(def x 5)")
    assert inner.get("x") == 5.0
    assert env.get("x") == 1.0


def test_set_rewrites_outer_scope(evaluator, env):
    env.define("x", 1.0)
    inner = env.child()
    evaluator.eval(inner, "(set x 9)")
    assert env.get("x") == 9.0
    assert not inner.has_local("x")


def test_set_unbound_is_fatal(evaluator, env):
    with pytest.raises(OwlUnboundSymbol):
        evaluator.eval(env, "(set y 2)")
    assert not env.has("y")


@pytest.mark.parametrize("source", ["(def 1 2)", '(def "x" 2)', "(set (x) 2)", "(fun 1)"])
def test_non_symbol_name_is_fatal(evaluator, env, source):
    with pytest.raises(OwlInvalidSymbol):
        evaluator.eval(env, source)


@pytest.mark.parametrize("source", ["(def x)", "(set)", "(fun)"])
def test_missing_arguments_are_fatal(evaluator, env, source):
    env.define("x", 1.0)
    with pytest.raises(OwlArityError):
        evaluator.eval(env, source)


def test_fun_is_a_stub(evaluator, env):
    assert evaluator.eval(env, "(fun add (a b) (+ a b))") is Nil
    assert not env.has("add")


def test_fun_cannot_redefine(evaluator, env):
    evaluator.eval(env, "(def add 1)")
    with pytest.raises(OwlNameError):
        evaluator.eval(env, "(fun add (a b) (+ a b))")


def test_fun_checks_current_scope_only(evaluator, env):
    env.define("add", 1.0)
    assert evaluator.eval(env.child(), "(fun add (a) a)") is Nil


def test_special_forms_win_over_intrinsics(evaluator, env):
    class Shadow:
        name = "do"

        def eval(self, evaluator, env, args):
            return "shadowed"

    evaluator.add_intrinsic(Shadow())
    assert evaluator.eval(env, "(do 1 2)") == 2.0


def test_string_head_dispatches_on_text(evaluator, env):
    assert evaluator.evaluate(env, ["+", 1.0, 2.0]) == 3.0


def test_exit_policy(env, caplog):
    evaluator = Evaluator(Config(fatal_policy="exit"))
    with caplog.at_level(logging.CRITICAL, logger="owl"):
        with pytest.raises(SystemExit) as exc:
            evaluator.eval(env, "(set nope 1)")
    assert exc.value.code == FATAL_EXIT_STATUS
    assert isinstance(exc.value.__cause__, OwlUnboundSymbol)
    assert "Cannot set unbound symbol nope" in caplog.text


def test_deep_nesting_is_swallowed(evaluator, env, caplog):
    with caplog.at_level(logging.ERROR, logger="owl"):
        assert evaluator.eval(env, "(" * 500) is Nil
    assert "nesting too deep" in caplog.text


def test_malformed_call_arguments_are_not_truncated(evaluator, env, caplog):
    env.set("f", 5.0)
    with caplog.at_level(logging.ERROR, logger="owl"):
        assert evaluator.eval(env, "f(1.2.3)") is Nil
    assert "InvalidNumber" in caplog.text


@pytest.mark.parametrize("source,expected", [("(def x 1 2)", 1.0), ("(set x 3 (set x 9))", 3.0)])
def test_extra_arguments_are_ignored(evaluator, env, source, expected):
    env.define("x", 0.0)
    assert evaluator.eval(env, source) == expected
    assert env.get("x") == expected


def test_evaluate_dispatches_through_get_intrinsic(evaluator, env):
    class Twice:
        name = "twice"

        def eval(self, evaluator, env, args):
            return 2.0 * evaluator.evaluate(env, args[0])

    evaluator.add_intrinsic(Twice())
    assert evaluator.get_intrinsic("twice").name == "twice"
    assert evaluator.get_intrinsic(Symbol("+")) is evaluator.intrinsics["+"]
    assert evaluator.get_intrinsic("nope") is None
    assert evaluator.eval(env, "(twice 21)") == 42.0
