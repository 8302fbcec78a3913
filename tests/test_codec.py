import pytest

from simple_budgets.codec import (
    decode_budget,
    decode_part,
    encode_budget,
    encode_part,
    format_value,
)
from simple_budgets.exceptions import DecodeError
from simple_budgets.models import Budget, BudgetPart


def _sample_budget():
    return Budget(
        [BudgetPart('Rent', 1200, False), BudgetPart('Power', 80.25, False)],
        [BudgetPart('Fun', 50, True)],
    )


def test_encode_part_layout():
    assert encode_part(BudgetPart('Rent', 1200, False)) == '4?Rent1200?false'
    assert encode_part(BudgetPart('Fun', 12.5, True)) == '3?Fun12.5?true'


def test_encode_budget_layout():
    assert encode_budget(_sample_budget()) == (
        '4?Rent1200?false\t5?Power80.25?false\t\n3?Fun50?true\t'
    )


def test_encode_empty_budget():
    assert encode_budget(Budget()) == '\n'
    assert decode_budget('\n') == Budget()


def test_budget_round_trip():
    budget = _sample_budget()
    assert decode_budget(encode_budget(budget)) == budget


def test_name_with_delimiters_round_trips():
    part = BudgetPart('A?B', 12.5, True)
    decoded = decode_part(encode_part(part))

    assert (decoded.name, decoded.monthly_value, decoded.expandable) == ('A?B', 12.5, True)


def test_names_with_digits_tabs_and_newlines_round_trip():
    budget = Budget(
        [BudgetPart('401k', 100, False), BudgetPart('tab\there', 3, False)],
        [BudgetPart('multi\nline', 7.75, True), BudgetPart('9', 0, True)],
    )
    assert decode_budget(encode_budget(budget)) == budget


def test_format_value_is_positional():
    assert format_value(100.0) == '100'
    assert format_value(12.5) == '12.5'
    assert format_value(1e-7) == '0.0000001'
    assert format_value(1e21) == '1000000000000000000000'
    assert format_value(1000 / 12) == repr(1000 / 12)


def test_decode_without_section_separator_is_all_fixed():
    budget = decode_budget('4?Rent1200?false\t')
    assert [p.name for p in budget.fixed_parts] == ['Rent']
    assert budget.expandable_parts == ()


def test_decode_accepts_any_value_delimiter():
    assert decode_part('3?Fun12.5|true').monthly_value == 12.5


@pytest.mark.parametrize('text, reason', [
    ('?Rent1200?false\t\n', 'expected a name length'),
    ('Rent1200?false\t\n', 'expected a name length'),
    ('12', 'missing delimiter'),
    ('10?Rent\t\n', 'only'),
    ('4?Rentabc?false\t\n', 'invalid monthly value'),
    ('4?Rent1.2.3?false\t\n', 'invalid monthly value'),
    ('4?Rent1200?False\t\n', 'invalid expandable flag'),
    ('4?Rent1200?false\t\n3?Fun50?maybe\t', 'invalid expandable flag'),
    ('4?Rent1200', 'invalid expandable flag'),
    ('4?Rent1200?false', 'not terminated'),
    ('4?Rent1200?false\t\n3?Fun50?true', 'not terminated'),
    ('0?1200?false\t\n', 'cannot be empty'),
])
def test_decode_errors(text, reason):
    with pytest.raises(DecodeError) as excinfo:
        decode_budget(text)
    assert reason in str(excinfo.value)


def test_decode_rejects_part_in_wrong_section():
    with pytest.raises(DecodeError, match='among fixed parts'):
        decode_budget('3?Fun50?true\t\n')
    with pytest.raises(DecodeError, match='among expandable parts'):
        decode_budget('\n4?Rent1200?false\t')


def test_decode_part_rejects_trailing_separator():
    with pytest.raises(DecodeError):
        decode_part('3?Fun50?true\t')


def test_decode_error_reports_position():
    with pytest.raises(DecodeError) as excinfo:
        decode_budget('4?Rent1200?false\t5?Power80?nope\t\n')
    assert excinfo.value.position == len('4?Rent1200?false\t5?Power80?')
    assert excinfo.value.code == 'DECODE_ERROR'
