import pytest

from algodrills.stacks import (
    bracket_value,
    evaluate_postfix,
    infix_to_postfix,
    next_greater,
    stack_sequence_ops,
)


def test_next_greater_example():
    assert next_greater([3, 5, 2, 7]) == [5, 7, 7, -1]


def test_next_greater_decreasing_has_none():
    values = [9, 5, 4, 1]
    assert next_greater(values) == [-1] * len(values)


def test_next_greater_invariant():
    values = [9, 5, 4, 8, 1, 2, 7, 3, 10, 6]
    result = next_greater(values)
    for i, answer in enumerate(result):
        larger_right = [v for v in values[i + 1:] if v > values[i]]
        if answer == -1:
            assert larger_right == []
        else:
            assert answer == larger_right[0]


def _replay(ops, n):
    stack, produced, following = [], [], 1
    for op in ops:
        if op == "+":
            stack.append(following)
            following += 1
        else:
            produced.append(stack.pop())
    assert following == n + 1
    return produced


def test_stack_sequence_ops_replays_target():
    target = [4, 3, 6, 8, 7, 5, 2, 1]
    ops = stack_sequence_ops(target)
    assert ops.count("+") == len(target)
    assert ops.count("-") == len(target)
    assert _replay(ops, len(target)) == target


def test_stack_sequence_ops_impossible():
    assert stack_sequence_ops([1, 2, 5, 3, 4]) is None


def test_stack_sequence_ops_rejects_non_permutation():
    with pytest.raises(ValueError):
        stack_sequence_ops([1, 1, 2])


def test_infix_to_postfix_example():
    assert infix_to_postfix("A*(B+C)") == "ABC+*"


def test_infix_to_postfix_left_associative():
    assert infix_to_postfix("A-B-C") == infix_to_postfix("(A-B)-C")


def test_infix_postfix_round_trip_evaluates():
    postfix = infix_to_postfix("A+B*C-D/E")
    assert sorted(postfix) == sorted("A+B*C-D/E")
    assert evaluate_postfix(postfix, [1, 2, 3, 4, 5]) == pytest.approx(1 + 2 * 3 - 4 / 5)


def test_infix_to_postfix_rejects_unbalanced():
    with pytest.raises(ValueError):
        infix_to_postfix("A+B)")
    with pytest.raises(ValueError):
        infix_to_postfix("(A+B")


def test_evaluate_postfix_operand_order():
    assert evaluate_postfix("AB-", [10, 4]) == pytest.approx(10 - 4)
    assert evaluate_postfix("AB/", [10, 4]) == pytest.approx(10 / 4)


def test_evaluate_postfix_malformed():
    with pytest.raises(ValueError):
        evaluate_postfix("A+", [1])
    with pytest.raises(ValueError):
        evaluate_postfix("AB", [1, 2])


def test_bracket_value_example():
    assert bracket_value("(()[[]])([])") == 28


def test_bracket_value_basic_pairs():
    assert bracket_value("()") == 2
    assert bracket_value("[]") == 3
    assert bracket_value("()[]") == bracket_value("()") + bracket_value("[]")
    assert bracket_value("([])") == bracket_value("()") * bracket_value("[]")


def test_bracket_value_invalid_is_zero():
    assert bracket_value("([)]") == 0
    assert bracket_value("((") == 0
    assert bracket_value("())") == 0