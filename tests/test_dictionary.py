"""
Dictionary facade and QueryEngine tests.
"""

import logging
import os

import pytest

from olelo.dictionary import Dictionary
from olelo.query_engine import QueryEngine
from olelo.records import Record


CSV_HEADER = "text,translation,explanation,translated_explanation\n"


class TestDictionary:

    def test_empty(self):
        d = Dictionary()
        assert len(d) == 0
        assert d.first() is None
        assert d.last() is None
        assert d.lookup("Aloha") is None

    def test_insert_reports_duplicates(self, caplog):
        d = Dictionary()
        assert d.insert(Record("Aloha", "Hello"))
        with caplog.at_level(logging.DEBUG, logger="olelo.dictionary"):
            assert not d.insert(Record("Aloha", "Hi"))
        assert "Duplicate key ignored" in caplog.text
        assert d.lookup("Aloha").translation == "Hello"

    def test_add_entry_returns_stored_record(self):
        d = Dictionary()
        first = d.add_entry("Aloha", "Hello", "He aloha.")
        again = d.add_entry("Aloha", "Goodbye")
        assert again is first
        assert len(d) == 1

    def test_first_last(self, filled_dictionary):
        assert filled_dictionary.first().text == "A hui hou kākou"
        assert filled_dictionary.last().text == "ʻOhana"

    def test_previous_next(self, filled_dictionary):
        ordered = list(filled_dictionary)
        assert filled_dictionary.next(ordered[0].text) == ordered[1]
        assert filled_dictionary.previous(ordered[1].text) == ordered[0]
        assert filled_dictionary.previous(ordered[0].text) is None
        assert filled_dictionary.next(ordered[-1].text) is None

    def test_contains(self, filled_dictionary):
        assert "Mahalo nui loa" in filled_dictionary
        assert "Mahalo" not in filled_dictionary

    def test_search_fields(self, filled_dictionary):
        assert [r.text for r in filled_dictionary.search("komo")] == ["E komo mai"]
        assert [r.text for r in filled_dictionary.search("Family", field="translated")] == ["ʻOhana"]

    def test_search_rejects_unknown_field(self, filled_dictionary):
        with pytest.raises(ValueError, match="field must be one of"):
            filled_dictionary.search("x", field="explanation")


class TestIngestCSV:

    def test_ingest(self, write_csv):
        path = write_csv(
            CSV_HEADER
            + "Aloha,Hello,He aloha.,A greeting.\n"
            + "Mahalo,Thank you,,\n"
        )
        d = Dictionary()
        assert d.ingest_csv(path) == 2
        assert d.lookup("Aloha").translated_explanation == "A greeting."
        assert d.lookup("Mahalo").explanation == ""

    def test_ingest_skips_incomplete_rows_and_duplicates(self, write_csv, caplog):
        path = write_csv(
            CSV_HEADER
            + "Aloha,Hello,,\n"
            + ",No text,,\n"
            + "Mahalo,,,\n"
            + "Aloha,Hi again,,\n"
        )
        d = Dictionary()
        with caplog.at_level(logging.WARNING, logger="olelo.dictionary"):
            assert d.ingest_csv(path) == 1
        assert len(d) == 1
        assert "Skipping line 3" in caplog.text
        assert "Skipping line 4" in caplog.text
        assert d.lookup("Aloha").translation == "Hello"

    def test_ingest_only_required_columns(self, write_csv):
        path = write_csv("text,translation\nAloha,Hello\n")
        d = Dictionary()
        assert d.ingest_csv(path) == 1
        assert d.lookup("Aloha").explanation == ""

    def test_missing_columns(self, write_csv):
        path = write_csv("phrase,meaning\nAloha,Hello\n")
        with pytest.raises(ValueError, match="missing required columns"):
            Dictionary().ingest_csv(path)

    def test_missing_file(self, tmpdir):
        with pytest.raises(FileNotFoundError):
            Dictionary().ingest_csv(os.path.join(tmpdir, "nope.csv"))


class TestQueryEngine:

    def test_by_text_and_translation(self, filled_dictionary):
        engine = QueryEngine(filled_dictionary)
        assert [r.text for r in engine.by_text("honua")] == ["Ka honua"]
        assert [r.text for r in engine.by_translation("morning")] == ["Aloha kakahiaka"]

    def test_anywhere_unions_without_duplicates(self, filled_dictionary):
        engine = QueryEngine(filled_dictionary)
        results = engine.anywhere("a")
        assert results == sorted(results)
        assert len(results) == len(set(results))
        assert len(results) == len(filled_dictionary)

    def test_anywhere_mixes_fields(self, filled_dictionary):
        engine = QueryEngine(filled_dictionary)
        # "The Earth" is a translation, "Mahalo nui loa" is primary text
        texts = [r.text for r in engine.anywhere("Ea")]
        assert texts == ["Ka honua"]
        texts = [r.text for r in engine.anywhere("nui")]
        assert texts == ["Mahalo nui loa"]

    def test_neighbours(self, filled_dictionary):
        engine = QueryEngine(filled_dictionary)
        ordered = list(filled_dictionary)
        assert engine.neighbours(ordered[2].text) == (ordered[1], ordered[3])
        assert engine.neighbours("absent") == (None, None)
