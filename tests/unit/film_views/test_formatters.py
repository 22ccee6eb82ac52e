"""Tests for the table-row and list-item formatters."""

from markupsafe import Markup

from film_views.models import FilmRecord
from film_views.rendering import format_list_item, format_table_row


class TestTableRowFormatter:
    """Tests for format_table_row."""

    def test_row_contains_title_and_director(self, inception):
        """Test the row holds the title and director."""
        row = format_table_row(inception)

        assert "Inception" in row
        assert "Christopher Nolan" in row
        assert row.startswith("<tr>")
        assert row.endswith("</tr>")
        assert row.count("<td>") == 2

    def test_row_contains_no_other_film_data(self, inception, nolan_films):
        """Test only this record's title and director appear."""
        row = format_table_row(inception)

        assert "The Dark Knight" not in row
        assert "2010" not in row
        assert "Leonardo DiCaprio" not in row

    def test_row_is_markup(self, inception):
        """Test the row is marked safe so mounts do not escape it again."""
        assert isinstance(format_table_row(inception), Markup)

    def test_row_escapes_record_text(self):
        """Test HTML in record fields is escaped."""
        row = format_table_row(FilmRecord(title="<script>x</script>", director="Tom & Jerry"))

        assert "<script>" not in row
        assert "&lt;script&gt;" in row
        assert "Tom &amp; Jerry" in row

    def test_row_for_malformed_record_has_empty_cells(self):
        """Test missing title and director render as empty cells."""
        row = format_table_row(FilmRecord(year=2000))

        assert row.count("<td></td>") == 2


class TestListItemFormatter:
    """Tests for format_list_item."""

    def test_list_item_exact_text(self, inception):
        """Test the exact line produced for Inception."""
        assert format_list_item(inception) == "Inception - Directed by Christopher Nolan"

    def test_list_item_is_plain_text(self, inception):
        """Test the list line is not pre-marked as markup."""
        assert not isinstance(format_list_item(inception), Markup)

    def test_list_item_for_malformed_record(self):
        """Test missing title and director render as empty text."""
        assert format_list_item(FilmRecord()) == " - Directed by "

    def test_formatters_are_pure(self, inception):
        """Test repeated calls give identical output."""
        assert format_list_item(inception) == format_list_item(inception)
        assert format_table_row(inception) == format_table_row(inception)
