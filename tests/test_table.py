import pytest

from hstatus import ReasonPhrases, StatusCodes, code_to_phrase, phrase_to_code
from hstatus.constant.status import STATUS_ENTRIES, StatusEntry
from hstatus.table import StatusTable, reason_table, reverse_table, status_table


def test_table_sizes_match():
    assert len(reason_table()) == len(STATUS_ENTRIES)
    assert len(reverse_table()) == len(STATUS_ENTRIES)
    assert len(status_table()) == len(STATUS_ENTRIES)


def test_codes_are_unique():
    codes = [entry.code for entry in STATUS_ENTRIES]
    assert len(codes) == len(set(codes))


def test_reverse_maps_back():
    reasons = reason_table()
    for phrase, code in reverse_table().items():
        assert reasons[str(code)] == phrase


def test_table_built_once():
    assert status_table() is status_table()


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        reason_table()["999"] = "Custom"  # type: ignore

    with pytest.raises(TypeError):
        reverse_table()["Custom"] = 999  # type: ignore

    assert "999" not in reason_table()


def test_historical_entries():
    reasons = reason_table()
    assert reasons["203"] == "Non Authoritative Information"
    assert reasons["302"] == "Moved Temporarily"
    assert reasons["413"] == "Request Entity Too Large"
    assert reasons["419"] == "Insufficient Space on Resource"
    assert reasons["420"] == "Method Failure"
    assert "306" not in reasons
    assert "425" not in reasons


def test_last_phrase_wins():
    table = StatusTable.from_entries(
        [StatusEntry(600, "A", "Same"), StatusEntry(601, "B", "Same")]
    )
    assert table.codes["Same"] == 601
    assert table.reasons["600"] == table.reasons["601"] == "Same"


def test_enums_agree_with_tables():
    for entry in STATUS_ENTRIES:
        assert StatusCodes[entry.name] == entry.code
        assert ReasonPhrases[entry.name] == entry.phrase


def test_enum_members_as_keys():
    assert code_to_phrase(StatusCodes.NOT_FOUND) == "Not Found"
    assert phrase_to_code(ReasonPhrases.IM_A_TEAPOT) == StatusCodes.IM_A_TEAPOT
