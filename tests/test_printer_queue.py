import pytest

from algodrills.printer_queue import print_order


def test_single_document_prints_first():
    assert print_order([5], 0) == 1


def test_equal_priorities_print_in_order():
    priorities = [3, 3, 3, 3]
    for target in range(len(priorities)):
        assert print_order(priorities, target) == target + 1


def test_examples():
    assert print_order([1, 2, 3, 4], 2) == 2
    assert print_order([1, 1, 9, 1, 1, 1], 0) == 5


def test_unique_highest_priority_prints_first():
    priorities = [2, 7, 1, 9, 4]
    assert print_order(priorities, priorities.index(max(priorities))) == 1


def test_turns_form_a_permutation():
    priorities = [1, 3, 2, 3, 1, 2]
    turns = [print_order(priorities, t) for t in range(len(priorities))]
    assert sorted(turns) == list(range(1, len(priorities) + 1))


def test_invalid_target_raises():
    with pytest.raises(ValueError):
        print_order([1, 2], 2)
    with pytest.raises(ValueError):
        print_order([], 0)