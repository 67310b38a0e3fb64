# tests/test_language.py
"""
Parser engine and query tests for borr.language.Language.
"""

from __future__ import annotations

import logging

import pytest

from borr.errors import BorrError, LanguageFileError, LanguageFileNotFound, LanguageFormatError
from borr.language import GLOBAL_SECTION, Language, ParserState, from_file, from_string


class TestMetadata:
    def test_global_metadata_round_trip(self):
        lang = Language.from_string('lang_id = "in"\nlang_desc = "desc"\nlang_ver = "1.2.3"\n')
        assert lang.lang_id == "in"
        assert lang.lang_description == "desc"
        assert lang.version.as_tuple() == (1, 2, 3)
        assert lang.sections() == []

    def test_version_with_leading_v(self):
        lang = Language.from_string('lang_ver = "v2.4.6"')
        assert lang.version.as_tuple() == (2, 4, 6)

    def test_unknown_global_fields_are_discarded(self, sample_language):
        assert sample_language.get_string(GLOBAL_SECTION, "unknown_global") is None
        assert sample_language.get_section(GLOBAL_SECTION) == {
            "lang_id": "en_GB",
            "lang_desc": "English (United Kingdom)",
            "lang_ver": "1.2.3",
        }

    def test_metadata_only_in_global_section(self):
        lang = Language.from_string('[section]\nlang_id = "not_global"\n')
        assert lang.lang_id == ""
        assert lang.get_string("section", "lang_id") == "not_global"

    def test_defaults_when_metadata_missing(self):
        lang = Language.from_string('[section]\nfield = "value"\n')
        assert lang.lang_id == ""
        assert lang.lang_description == ""
        assert lang.version.as_tuple() == (None, None, None)


class TestFields:
    @pytest.mark.parametrize(
        "line",
        ['f = "v"', 'f="v"', 'f    =   "v"', 'f\t=\t"v"'],
    )
    def test_single_line_field(self, line):
        lang = Language.from_string(f"[section]\n{line}\n")
        assert lang.get_string("section", "f", expand=False) == "v"

    def test_inline_comments(self, sample_language):
        assert sample_language.get_string("normal_tests", "greeting") == "Hello, world!"
        assert sample_language.get_string("normal_tests", "hashtag") == "this # is inside quotes"

    def test_empty_value(self, sample_language):
        assert sample_language.get_string("normal_tests", "empty") == ""

    def test_last_write_wins(self):
        lang = Language.from_string('[s]\nf = "first"\nf = "second"\n')
        assert lang.get_string("s", "f") == "second"

    def test_multiline_field(self, sample_language):
        assert sample_language.get_string("normal_tests", "copyright_info") == (
            "Copyright line one.\nCopyright line two."
        )

    def test_multiline_with_interleaved_fields(self):
        text = "\n".join(
            [
                "[s]",
                'text[] = "one"',
                'other = "x"',
                'text[] = "two"',
                'another[] = "y"',
                'text[] = "three"',
            ]
        )
        lang = Language.from_string(text)
        assert lang.get_string("s", "text") == "one\ntwo\nthree"
        assert lang.get_string("s", "other") == "x"
        assert lang.get_string("s", "another") == "y"

    def test_stored_key_has_no_multiline_marker(self):
        lang = Language.from_string('[s]\ntext[] = "one"\n')
        assert lang.get_section("s") == {"text": "one"}
        assert lang.get_string("s", "text[]") is None

    def test_single_line_assignment_overwrites_multiline(self):
        lang = Language.from_string('[s]\nf[] = "one"\nf[] = "two"\nf = "three"\n')
        assert lang.get_string("s", "f") == "three"

    def test_multiline_marker_appends_to_existing_field(self):
        lang = Language.from_string('[s]\nf = "one"\nf[] = "two"\n')
        assert lang.get_string("s", "f") == "one\ntwo"

    def test_section_reopened_later(self):
        lang = Language.from_string('[a]\nx = "1"\n[b]\ny = "2"\n[a]\nz = "3"\n')
        assert lang.get_section("a") == {"x": "1", "z": "3"}
        assert lang.sections() == ["a", "b"]

    def test_malformed_lines_are_skipped(self):
        text = "\n".join(
            [
                "[good]",
                "garbage line",
                "[bad section]",
                "field = unquoted",
                "0field = \"starts with digit\"",
                'kept = "yes"',
            ]
        )
        lang = Language.from_string(text)
        assert lang.get_section("good") == {"kept": "yes"}
        assert lang.sections() == ["good"]

    def test_crlf_line_endings(self):
        lang = Language.from_string('lang_id = "crlf"\r\n[s]\r\nf = "v"\r\n')
        assert lang.lang_id == "crlf"
        assert lang.get_string("s", "f") == "v"

    def test_unicode_values(self):
        lang = Language.from_string('[s]\ngreeting = "Grüß Gott, 世界"\n')
        assert lang.get_string("s", "greeting") == "Grüß Gott, 世界"


class TestQueries:
    def test_missing_lookups_return_none(self, sample_language):
        assert sample_language.get_string("missingSection", "missingField") is None
        assert sample_language.get_section("missingSection") is None
        assert sample_language.get_string("normal_tests", "missingField") is None

    def test_get_section_returns_copy(self, sample_language):
        section = sample_language.get_section("normal_tests")
        section["greeting"] = "changed"
        section["added"] = "new"
        assert sample_language.get_string("normal_tests", "greeting") == "Hello, world!"
        assert sample_language.get_string("normal_tests", "added") is None

    def test_get_section_is_not_expanded(self, sample_language):
        section = sample_language.get_section("variables_tests")
        assert section["reference"] == "${normal_tests:greeting}"

    def test_contains(self, sample_language):
        assert "normal_tests" in sample_language
        assert "missing" not in sample_language

    def test_sections_exclude_global(self, sample_language):
        assert sample_language.sections() == ["normal_tests", "variables_tests"]


class TestParsing:
    @pytest.mark.parametrize("text", ["", "\n", "\n\n\n"])
    def test_unsplittable_text_raises(self, text):
        with pytest.raises(LanguageFormatError):
            Language.from_string(text)

    def test_non_string_raises(self):
        with pytest.raises(LanguageFormatError):
            Language.from_string(b'lang_id = "bytes"')  # type: ignore[arg-type]

    def test_format_error_is_value_error(self):
        with pytest.raises(ValueError):
            Language.from_string("")

    def test_comment_only_text_parses_to_empty_table(self):
        lang = Language.from_string("# just a comment\n")
        assert lang.sections() == []
        assert lang.lang_id == ""

    def test_parse_replaces_previous_contents(self):
        lang = Language.from_string('lang_id = "first"\n[a]\nx = "1"\n')
        lang.parse('lang_id = "second"\n[b]\ny = "2"\n')
        assert lang.lang_id == "second"
        assert lang.sections() == ["b"]
        assert lang.get_section("a") is None

    def test_clear(self, sample_language):
        sample_language.clear()
        assert sample_language.lang_id == ""
        assert sample_language.version.as_tuple() == (None, None, None)
        assert sample_language.sections() == []

    def test_section_state_is_not_shared_between_parses(self):
        Language.from_string('[leaked]\nfield = "x"\n')
        other = Language.from_string('lang_id = "fresh"\n')
        assert other.lang_id == "fresh"
        assert "leaked" not in other

    def test_parse_line_with_explicit_state(self):
        lang = Language()
        state = ParserState()
        lang.parse_line('lang_id = "manual"', state)
        lang.parse_line("[section]", state)
        assert state.current_section == "section"
        lang.parse_line('field = "value" # comment', state)
        assert lang.lang_id == "manual"
        assert lang.get_string("section", "field") == "value"

    def test_module_level_helper(self, sample_text):
        assert from_string(sample_text).lang_id == "en_GB"


class TestFromFile:
    def test_reads_file(self, tmp_path, sample_text):
        path = tmp_path / "en_GB.borr"
        path.write_text(sample_text, encoding="utf-8")

        lang = Language.from_file(path)
        assert lang.lang_id == "en_GB"
        assert from_file(str(path)).get_string("normal_tests", "greeting") == "Hello, world!"

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(LanguageFileNotFound) as excinfo:
            Language.from_file(tmp_path / "missing.borr")
        assert isinstance(excinfo.value, FileNotFoundError)
        assert isinstance(excinfo.value, BorrError)
        assert "missing.borr" in str(excinfo.value)

    def test_directory_raises(self, tmp_path):
        with pytest.raises(LanguageFileError):
            Language.from_file(tmp_path)

    def test_undecodable_file_raises(self, tmp_path):
        path = tmp_path / "broken.borr"
        path.write_bytes(b'lang_id = "\xff\xfe"\n')
        with pytest.raises(LanguageFileError):
            Language.from_file(path, encoding="utf-8")

    def test_empty_file_raises_format_error(self, tmp_path):
        path = tmp_path / "empty.borr"
        path.write_text("", encoding="utf-8")
        with pytest.raises(LanguageFormatError):
            Language.from_file(path)


class TestLogging:
    def test_parse_writes_nothing_without_logging_setup(self, capsys):
        lang = Language.from_string('[s]\ngarbage\nf = "v"\n')
        assert lang.get_string("s", "f") == "v"
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_events_go_through_the_borr_logger(self, caplog):
        caplog.set_level(logging.DEBUG, logger="borr")
        Language.from_string('[s]\ngarbage\nf = "v"\n')
        names = {record.name for record in caplog.records}
        assert names == {"borr.language"}
        assert "line_ignored" in caplog.text
        assert "language_parsed" in caplog.text
