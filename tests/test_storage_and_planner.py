import pytest

from simple_budgets import planner
from simple_budgets.config import LEFTOVER_LABEL
from simple_budgets.exceptions import DecodeError, ValidationError
from simple_budgets.models import Budget, BudgetPart
from simple_budgets.storage import BudgetFileStorage


def test_save_then_load(tmp_path):
    path = tmp_path / 'nested' / 'budget.txt'
    budget = Budget([BudgetPart('Rent', 1000, False)], [BudgetPart('Fun', 50, True)])

    BudgetFileStorage(path).save(budget)

    assert path.read_text(encoding='utf-8') == '4?Rent1000?false\t\n3?Fun50?true\t'
    assert BudgetFileStorage(path).load() == budget


def test_save_replaces_longer_contents(tmp_path):
    path = tmp_path / 'budget.txt'
    path.write_text('x' * 500, encoding='utf-8')

    BudgetFileStorage(path).save(Budget())

    assert path.read_text(encoding='utf-8') == '\n'


def test_load_missing_file(tmp_path):
    storage = BudgetFileStorage(tmp_path / 'missing.txt')

    assert not storage.exists()
    with pytest.raises(FileNotFoundError):
        storage.load()


def test_load_malformed_file(tmp_path):
    path = tmp_path / 'budget.txt'
    path.write_text('not a budget', encoding='utf-8')

    with pytest.raises(DecodeError):
        BudgetFileStorage(path).load()


def test_save_failure_names_the_path(tmp_path):
    # A directory cannot be opened for writing.
    target = tmp_path / 'taken'
    target.mkdir()

    with pytest.raises(OSError, match='Failed to save budget'):
        BudgetFileStorage(target).save(Budget())


def test_planner_session_flow(tmp_path):
    budget = planner.new_budget()
    planner.insert(budget, 'Rent', 100, False)
    planner.insert(budget, 'A', 100, True)
    planner.insert(budget, 'B', 50, True)

    assert planner.preview(budget) == [('Rent', 100.0, False), ('A', 100.0, True), ('B', 50.0, True)]
    assert planner.allocate(budget, 220) == [
        ('Rent', 100.0),
        ('A', pytest.approx(70.0)),
        ('B', 50.0),
        (LEFTOVER_LABEL, pytest.approx(0.0)),
    ]

    text = planner.save_budget(budget)
    assert planner.load_budget(text) == budget

    path = tmp_path / 'budget.txt'
    planner.write_budget_file(path, budget)
    assert planner.open_budget_file(path) == budget


def test_planner_insert_rejects_empty_name():
    budget = planner.new_budget()
    with pytest.raises(ValidationError):
        planner.insert(budget, '', 10, False)
    assert budget.is_empty()


def test_load_file_that_is_not_utf8(tmp_path):
    path = tmp_path / 'budget.txt'
    path.write_bytes(b'4?R\xffnt30?false\t\n')

    with pytest.raises(DecodeError, match='not valid UTF-8') as excinfo:
        BudgetFileStorage(path).load()
    assert excinfo.value.position == 3
