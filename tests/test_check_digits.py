import pytest

from cnpjalfa.core.check_digits import (
    WEIGHTS_1,
    WEIGHTS_2,
    calculate_check_digits,
    char_value,
    complete,
    compute_digit,
)
from cnpjalfa.errors import (
    AllZerosError,
    CNPJError,
    InternalComputationError,
    InvalidCharactersError,
    InvalidFormatError,
    InvalidLengthError,
)


def test_weights_share_the_tail():
    assert len(WEIGHTS_1) == 12
    assert len(WEIGHTS_2) == 13
    assert WEIGHTS_2[1:] == WEIGHTS_1


@pytest.mark.parametrize("ch,expected", [("0", 0), ("9", 9), ("A", 17), ("B", 18), ("Z", 42)])
def test_char_value(ch, expected):
    assert char_value(ch) == expected


@pytest.mark.parametrize("ch", ["a", "-", " ", "Ç", "", "AB"])
def test_char_value_rejects_outside_alphabet(ch):
    with pytest.raises(InvalidCharactersError):
        char_value(ch)


def test_compute_digit_folds_remainder():
    assert compute_digit([0] * 12, WEIGHTS_1) == 0
    assert compute_digit([1], [12]) == 0   # remainder 1
    assert compute_digit([2], [5]) == 1    # remainder 10
    assert compute_digit([1], [2]) == 9    # remainder 2


def test_compute_digit_accepts_shorter_values():
    assert compute_digit([1, 2], WEIGHTS_1) == compute_digit([1, 2], WEIGHTS_1[:2])


def test_compute_digit_rejects_longer_values():
    with pytest.raises(InternalComputationError):
        compute_digit([1] * 13, WEIGHTS_1)


def test_reference_base():
    assert calculate_check_digits("12ABC34501DE") == "35"


def test_masked_base():
    assert calculate_check_digits("12.ABC.345/01DE") == "35"


def test_lowercase_base():
    assert calculate_check_digits("12abc34501de") == "35"


def test_numeric_cnpj_keeps_legacy_digits():
    assert calculate_check_digits("11.222.333/0001") == "81"


def test_all_letters():
    assert calculate_check_digits("AAAAAAAAAAAA") == "45"


def test_complete():
    assert complete("12.abc.345/01de") == "12ABC34501DE35"


def test_deterministic():
    assert {calculate_check_digits("Z9Y8X7W6V5U4") for _ in range(5)} == {calculate_check_digits("Z9Y8X7W6V5U4")}


def test_all_zeros():
    with pytest.raises(AllZerosError):
        calculate_check_digits("000000000000")
    with pytest.raises(AllZerosError):
        calculate_check_digits("00.000.000/0000")


@pytest.mark.parametrize("base", ["12ABC34501D", "12ABC34501DE3", "12ABC34501DE35", "", "./-"])
def test_wrong_length(base):
    with pytest.raises(InvalidLengthError):
        calculate_check_digits(base)


@pytest.mark.parametrize("base", ["12ABC34501D*", "12 ABC34501DE", "12ÁBC34501DE", "12ABC34501DE\n"])
def test_disallowed_characters(base):
    with pytest.raises(InvalidCharactersError):
        calculate_check_digits(base)


def test_non_string_base():
    with pytest.raises(InvalidFormatError):
        calculate_check_digits(None)


def test_errors_share_a_base_class():
    with pytest.raises(CNPJError) as exc:
        calculate_check_digits("000000000000")
    assert exc.value.code == "all_zeros"
    assert isinstance(exc.value, ValueError)
