import pytest

from leadlookup.domain.matching import account_value, is_blank, matches_account


def test_blank_record_detection(make_record):
    assert is_blank(make_record()) is True
    assert is_blank(make_record(Date="", Name="  ", Suggestion=None)) is True
    # account alone doesn't make a row displayable
    assert is_blank(make_record(**{"Account ID": "X1"})) is True

    assert is_blank(make_record(Name="Alice")) is False
    assert is_blank(make_record(**{"Lead Quality": "Low"})) is False


@pytest.mark.parametrize("score", [0, 0.0, 55])
def test_numeric_score_is_never_blank(make_record, score):
    assert is_blank(make_record(**{"Lead Score": score})) is False


def test_false_score_counts_as_empty(make_record):
    assert is_blank(make_record(**{"Lead Score": False})) is True


def test_alias_priority_first_populated_alias_wins(make_record):
    r = make_record(**{"Account ID": "A1", "AccountID": "B2", "Account_ID": "C3"})
    assert account_value(r) == "A1"
    assert matches_account(r, "a1") is True
    assert matches_account(r, "B2") is False

    r2 = make_record(**{"AccountID": "B2", "Account_ID": "C3"})
    assert account_value(r2) == "B2"

    # empty higher-priority alias falls through
    r3 = make_record(**{"Account ID": "", "Account_ID": "C3"})
    assert matches_account(r3, "c3") is True


def test_missing_alias_never_matches(make_record):
    r = make_record(Name="Alice", account_id="X1")
    assert account_value(r) is None
    assert matches_account(r, "X1") is False


def test_match_is_case_insensitive_and_exact(make_record):
    r = make_record(**{"Account ID": "AbC123"})
    assert matches_account(r, "ABC123") == matches_account(r, "abc123") is True
    assert matches_account(r, "abc12") is False
    assert matches_account(r, "abc 123") is False
    assert matches_account(r, "  abc123 ") is True


def test_numeric_account_values(make_record):
    assert matches_account(make_record(AccountID=1042), "1042") is True
    assert matches_account(make_record(AccountID=1042.0), "1042") is True


def test_records_are_hashable_by_id(make_record):
    a = make_record("rec1", Name="Alice")
    b = make_record("rec1", Name="Alice")
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
