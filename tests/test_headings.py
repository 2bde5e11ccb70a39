"""Unit tests for heading resolution."""

from html_table_reader.cursor import RowCursor, cell_texts
from html_table_reader.headings import heading_names, resolve_headings


class TestResolveHeadings:
    """Test resolve_headings behavior."""

    def test_header_row(self, make_soup, headed_html):
        """Header cells of the first row become the headings."""
        table = make_soup(headed_html).table

        headings = resolve_headings(table)

        assert heading_names(headings) == ["Name", "Age", "City"]
        assert all(th.name == "th" for th in headings)

    def test_synthesized_names(self, make_soup, headless_html):
        """Without header cells, names are col0..colN-1."""
        table = make_soup(headless_html).table

        headings = resolve_headings(table)

        assert heading_names(headings) == ["col0", "col1", "col2"]
        assert [th.name for th in headings] == ["th", "th", "th"]

    def test_synthesis_does_not_touch_document(self, make_soup, headless_html):
        """The first data row keeps its original cells."""
        table = make_soup(headless_html).table

        resolve_headings(table)

        first_row = RowCursor.over(table).next()
        assert [cell.name for cell in first_row] == ["td", "td", "td"]
        assert cell_texts(first_row) == ["1", "2", "3"]

    def test_synthesized_cells_keep_attributes(self, make_soup):
        """Synthesized headings preserve the shape of the source cell."""
        table = make_soup('<table><tr><td colspan="2"><b>x</b></td></tr></table>').table

        headings = resolve_headings(table)

        assert headings[0]["colspan"] == "2"
        assert headings[0].get_text() == "col0"

    def test_duplicate_and_empty_headers_pass_through(self, make_soup):
        """Heading text is not deduplicated or filled in."""
        table = make_soup("<table><tr><th>a</th><th>a</th><th></th></tr></table>").table

        assert heading_names(resolve_headings(table)) == ["a", "a", ""]

    def test_table_without_rows(self, make_soup):
        """A rowless table has no headings."""
        assert resolve_headings(make_soup("<table></table>").table) == []

    def test_idempotent(self, make_soup, headless_html):
        """Resolving twice gives the same names."""
        table = make_soup(headless_html).table

        assert heading_names(resolve_headings(table)) == heading_names(resolve_headings(table))

    def test_inline_markup_keeps_word_gaps(self, make_soup):
        """Text split across inline elements keeps its spaces."""
        table = make_soup(
            "<table><tr><th>First <b>Name</b></th><th>Weight\n  <span>(kg)</span></th></tr></table>"
        ).table

        assert heading_names(resolve_headings(table)) == ["First Name", "Weight (kg)"]
