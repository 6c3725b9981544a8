"""Tests for text folding utilities."""

from jlr_mcp.matching.normalizers import fold_case, fold_text, mentions_locality


class TestFoldText:
    """Tests for fold_text."""

    def test_lowercases_latin(self) -> None:
        assert fold_text("Mahane YEHUDA") == "mahane yehuda"

    def test_hebrew_unchanged(self) -> None:
        assert fold_text("שוק מחנה יהודה") == "שוק מחנה יהודה"

    def test_trims_whitespace(self) -> None:
        assert fold_text("  הכותל  ") == "הכותל"

    def test_empty(self) -> None:
        assert fold_text("") == ""

    def test_unicode_casefold(self) -> None:
        """casefold handles characters lower() does not."""
        assert fold_text("Straße") == "strasse"


class TestFoldCase:
    """Tests for fold_case."""

    def test_lowercases_latin(self) -> None:
        assert fold_case("Har HERZL") == "har herzl"

    def test_keeps_whitespace(self) -> None:
        assert fold_case("  הכותל ") == "  הכותל "


class TestMentionsLocality:
    """Tests for city-name detection."""

    def test_hebrew_city_name(self) -> None:
        assert mentions_locality("שוק מחנה יהודה, ירושלים") is True

    def test_latin_city_name_any_case(self) -> None:
        assert mentions_locality("Jaffa Gate, JERUSALEM") is True

    def test_no_city_name(self) -> None:
        assert mentions_locality("שער יפו") is False
        assert mentions_locality("Tel Aviv") is False
