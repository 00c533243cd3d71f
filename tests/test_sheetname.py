import pytest

from babelsheet.sheetname.api import sheet_name
from babelsheet.sheetname.sheetname import SheetNameError, SheetNamer


def test_stem_and_id():
    assert sheet_name("i18n/messages.json", 3) == "messages#3"
    assert sheet_name("C:\\proj\\i18n\\mail.properties", 12) == "mail#12"


def test_invalid_characters_removed():
    assert sheet_name("dir/we?ird*[name].json", 0) == "weirdname#0"


def test_suffix_survives_truncation():
    name = sheet_name("a_very_long_message_file_name_that_goes_on.json", 123)
    assert len(name) <= 31
    assert name.endswith("#123")


def test_empty_stem_falls_back():
    assert sheet_name("dir/[].json", 1) == "sheet#1"


def test_too_short_limit():
    with pytest.raises(SheetNameError):
        sheet_name("a.json", 12345, max_length=5)


def test_limit_below_minimum_rejected_up_front():
    with pytest.raises(SheetNameError):
        SheetNamer(max_length=2)
    assert SheetNamer(max_length=12).sheet_name("messages.json", 9999999999) == "m#9999999999"
