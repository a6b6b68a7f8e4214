import pytest

from library_core import ConfigurationError, InvalidAmountError, Librarians, UnknownCodeError


def test_default_roster_has_three_librarians():
    librarians = Librarians()
    assert librarians.get_auth_codes() == frozenset({"123456", "654321", "000000"})
    assert librarians.get_name("123456") == "Mike"
    assert librarians.get_name("654321") == "Ekim"
    assert librarians.get_name("000000") == "Ghost"


@pytest.mark.parametrize("code", ["12345", "1234567", "abcdef", "12 456", "", "12345a"])
def test_malformed_code_is_a_configuration_error(code):
    with pytest.raises(ConfigurationError):
        Librarians({code: "Broken"})


def test_roster_from_settings(monkeypatch):
    from config import settings

    monkeypatch.setattr(settings, "staff_roster", "111111:Ann, 222222:Ben")
    librarians = Librarians()
    assert librarians.get_auth_codes() == frozenset({"111111", "222222"})
    assert librarians.get_name("222222") == "Ben"


def test_malformed_roster_setting(monkeypatch):
    from config import settings

    monkeypatch.setattr(settings, "staff_roster", "111111")
    with pytest.raises(ConfigurationError):
        Librarians()


def test_authenticate(librarians):
    assert librarians.authenticate("123456") is True
    assert librarians.authenticate("999999") is False
    assert librarians.authenticate("") is False
    assert librarians.authenticate(None) is False


def test_get_name_unknown_code(librarians):
    with pytest.raises(UnknownCodeError):
        librarians.get_name("999999")


def test_record_salary_withdrawal_accumulates(librarians):
    librarians.record_salary_withdrawal("123456", 1000)
    librarians.record_salary_withdrawal("123456", 250.5)
    assert librarians.get_total_salary_withdrawn("123456") == pytest.approx(1250.5)
    assert librarians.get_total_salary_withdrawn("654321") == 0.0


def test_record_book_purchase(librarians):
    librarians.record_book_purchase("654321", 10)
    librarians.record_book_purchase("654321", 99.0)
    assert librarians.get_purchased_books("654321") == (10, 99.0)
    assert librarians.get_purchased_books("123456") == ()


def test_record_unknown_code(librarians):
    with pytest.raises(UnknownCodeError):
        librarians.record_book_purchase("999999", 10)
    with pytest.raises(UnknownCodeError):
        librarians.record_salary_withdrawal("999999", 10)
    with pytest.raises(UnknownCodeError):
        librarians.get_total_salary_withdrawn("999999")
    with pytest.raises(UnknownCodeError):
        librarians.get_purchased_books("999999")


def test_unknown_code_is_a_lookup_error(librarians):
    with pytest.raises(LookupError):
        librarians.get_name("999999")


def test_negative_values_rejected(librarians):
    with pytest.raises(InvalidAmountError):
        librarians.record_salary_withdrawal("123456", -1)
    with pytest.raises(InvalidAmountError):
        librarians.record_book_purchase("123456", -0.01)
    assert librarians.get_total_salary_withdrawn("123456") == 0.0
    assert librarians.get_purchased_books("123456") == ()


def test_purchase_history_is_read_only(librarians):
    librarians.record_book_purchase("123456", 42)
    history = librarians.get_purchased_books("123456")
    with pytest.raises(AttributeError):
        history.append(1)
    assert librarians.get_purchased_books("123456") == (42,)


def test_auth_codes_are_read_only(librarians):
    codes = librarians.get_auth_codes()
    with pytest.raises(AttributeError):
        codes.add("111111")
    assert len(librarians) == 3


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_values_rejected(librarians, value):
    with pytest.raises(InvalidAmountError):
        librarians.record_salary_withdrawal("123456", value)
    with pytest.raises(InvalidAmountError):
        librarians.record_book_purchase("123456", value)
    assert librarians.get_total_salary_withdrawn("123456") == 0.0
    assert librarians.get_purchased_books("123456") == ()


def test_empty_roster_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        Librarians({})


@pytest.mark.parametrize("raw", ["", " , ,"])
def test_empty_roster_setting(monkeypatch, raw):
    from config import settings

    monkeypatch.setattr(settings, "staff_roster", raw)
    with pytest.raises(ConfigurationError):
        Librarians()
