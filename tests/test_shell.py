import io

import pytest

from simple_budgets import shell
from simple_budgets.codec import decode_budget
from simple_budgets.models import Budget, BudgetPart


def _scripted_input(lines):
    remaining = list(lines)

    def fake_input(prompt):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return fake_input


def _run(argv, lines):
    out = io.StringIO()
    code = shell.main(argv, input_func=_scripted_input(lines), output=out)
    return code, out.getvalue()


def test_new_session_inserts_and_saves(tmp_path):
    path = tmp_path / 'budget.txt'
    code, output = _run(
        [str(path), 'new'],
        ['insert "Rent and bills" 14400 false', 'i Fun 600 true', 'exit'],
    )

    assert code == 0
    assert 'Pushed budget: Rent and bills' in output
    assert 'Budget file saved.' in output
    budget = decode_budget(path.read_text(encoding='utf-8'))
    assert budget.preview() == [('Rent and bills', 1200.0, False), ('Fun', 50.0, True)]


def test_open_missing_file(tmp_path):
    code, output = _run([str(tmp_path / 'missing.txt'), 'open'], [])

    assert code == 1
    assert 'That file does not exist.' in output


def test_open_malformed_file_leaves_it_untouched(tmp_path):
    path = tmp_path / 'budget.txt'
    path.write_text('garbage', encoding='utf-8')

    code, output = _run([str(path), 'o'], ['exit'])

    assert code == 1
    assert 'Failed to read input file as a budget' in output
    assert path.read_text(encoding='utf-8') == 'garbage'


def test_open_calculate_and_preview(tmp_path):
    path = tmp_path / 'budget.txt'
    path.write_text('4?Rent30?false\t\n1?A100?true\t1?B50?true\t', encoding='utf-8')

    code, output = _run([str(path), 'open'], ['preview', 'calculate 150', 'e'])

    assert code == 0
    assert '$30.00' in output
    assert '$70.00' in output
    assert 'Leftover Money' in output


def test_end_of_input_saves(tmp_path):
    path = tmp_path / 'budget.txt'
    code, _ = _run([str(path), 'n'], ['insert Rent 1200 false'])

    assert code == 0
    assert path.read_text(encoding='utf-8') == '4?Rent100?false\t\n'


@pytest.mark.parametrize('line, message', [
    ('insert Rent lots false', 'not a valid number'),
    ('insert Rent 1200 yes', 'not a boolean value'),
    ('insert Rent -5 false', 'cannot be negative'),
    ('insert Rent 1_200 false', 'not a valid number'),
    ('insert Rent', 'required'),
    ('calculate', 'required'),
    ('calculate much', 'not a valid number'),
    ('fly away', 'invalid choice'),
    ('insert "Rent 1200 false', 'No closing quotation'),
    ('insert "" 1200 false', 'cannot be empty'),
])
def test_invalid_commands_are_reported_and_session_continues(tmp_path, line, message):
    budget_shell = shell.BudgetShell(tmp_path / 'budget.txt', Budget(), output=io.StringIO())

    assert budget_shell.execute(line) is False
    assert message in budget_shell._output.getvalue()
    assert budget_shell.budget.is_empty()


def test_blank_line_is_ignored(tmp_path):
    budget_shell = shell.BudgetShell(tmp_path / 'budget.txt', Budget(), output=io.StringIO())

    assert budget_shell.execute('   ') is False
    assert budget_shell._output.getvalue() == ''


def test_command_help_does_not_exit(tmp_path, capsys):
    budget_shell = shell.BudgetShell(tmp_path / 'budget.txt', Budget(), output=io.StringIO())

    assert budget_shell.execute('insert --help') is False
    assert 'annually' in capsys.readouterr().out


def test_negative_income_is_accepted(tmp_path):
    budget = Budget([BudgetPart('Rent', 100, False)])
    budget_shell = shell.BudgetShell(tmp_path / 'budget.txt', budget, output=io.StringIO())

    assert budget_shell.execute('c -20') is False
    assert '$-20.00' in budget_shell._output.getvalue()


def test_save_failure_returns_error(tmp_path):
    target = tmp_path / 'taken'
    target.mkdir()

    code, output = _run([str(target), 'new'], ['exit'])

    assert code == 1
    assert 'Failed to save budget' in output


def test_open_file_that_is_not_utf8(tmp_path):
    path = tmp_path / 'budget.txt'
    path.write_bytes(b'4?R\xffnt30?false\t\n')

    code, output = _run([str(path), 'open'], ['exit'])

    assert code == 1
    assert 'Failed to read input file as a budget' in output
    assert 'not valid UTF-8' in output
    assert path.read_bytes() == b'4?R\xffnt30?false\t\n'
