"""Test the headless date field."""
from datebox.field import DateField


def _field(locale, today, value=""):
    return DateField(locale=locale, value=value, today=today)


class TestValidate:
    def test_rewrites_to_canonical(self, en, today):
        field = _field(en, today, "jan 4 2010")
        assert field.validate() is True
        assert field.value == "01/04/2010"
        assert field.message == "Monday, January 4, 2010"
        assert field.is_error is False

    def test_relative_input(self, da, today):
        field = _field(da, today, "i morgen")
        field.validate()
        assert field.value == "07-01-2010"
        assert field.message == "torsdag den 7. januar 2010"

    def test_failure_keeps_raw_text(self, en, today):
        field = _field(en, today, "feb 30")
        assert field.validate() is False
        assert field.value == "feb 30"
        assert field.message == "Invalid day. Valid days for February are 1 thru 28."
        assert field.is_error is True

    def test_empty_clears_message(self, en, today):
        field = _field(en, today, "nonsense")
        field.validate()
        field.value = ""
        assert field.validate() is False
        assert field.message == ""
        assert field.is_error is False


class TestStep:
    def test_step_up(self, en, today):
        field = _field(en, today, "01/31/2023")
        assert field.step_up() is True
        assert field.value == "02/01/2023"

    def test_step_down(self, da, today):
        field = _field(da, today, "01-03-2024")
        assert field.step_down() is True
        assert field.value == "29-02-2024"

    def test_empty_field_not_stepped(self, en, today):
        field = _field(en, today)
        assert field.step_up() is False
        assert field.value == ""

    def test_unparseable_field_not_stepped(self, en, today):
        field = _field(en, today, "garbage")
        assert field.step_up() is False
        assert field.value == "garbage"
        assert field.is_error is True

    def test_scroll_down_moves_forward(self, en, today):
        field = _field(en, today, "01/04/2010")
        field.scroll(-120)
        assert field.value == "01/05/2010"

    def test_scroll_up_moves_back(self, en, today):
        field = _field(en, today, "01/04/2010")
        field.scroll(120)
        assert field.value == "01/03/2010"


class TestInsertToday:
    def test_fills_empty_field(self, en, today):
        field = _field(en, today)
        assert field.insert_today() is True
        assert field.value == "01/06/2010"
        assert field.message == "Wednesday, January 6, 2010"

    def test_leaves_filled_field(self, en, today):
        field = _field(en, today, "01/04/2010")
        assert field.insert_today() is False
        assert field.value == "01/04/2010"
