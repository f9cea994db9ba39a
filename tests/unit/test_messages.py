"""Test error message rendering."""
from datebox.messages import render_error
from datebox.models.errors import DateError, ErrorKind
from datebox.parsing.calendar import check_date


class TestRenderError:
    def test_day_out_of_range_english(self, en):
        error = check_date(2010, 1, 30)
        assert render_error(error, en) == "Invalid day. Valid days for February are 1 thru 28."

    def test_day_out_of_range_danish(self, da):
        error = check_date(2012, 1, 30)
        assert render_error(error, da) == "Ugyldig værdi for dag. Gyldige dage for februar er 1 til 29."

    def test_unsupported_locale(self, en):
        error = DateError(kind=ErrorKind.UNSUPPORTED_LOCALE, value="fr", locale="fr")
        assert render_error(error, en) == "Unsupported locale: fr"

    def test_plain_template(self, da):
        assert render_error(DateError(kind=ErrorKind.UNKNOWN_FORMAT), da) == "Ukendt dato-format"

    def test_month_out_of_range(self, en):
        assert render_error(check_date(2010, 12, 1), en) == "Invalid month. Valid months are 1 thru 12."
