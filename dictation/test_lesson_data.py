from unittest.mock import MagicMock, patch

import pytest
import requests

from dictation.lesson_data import (
    Lesson,
    LessonDataError,
    extract_sentences,
    extract_sentences_from_section,
    load_lesson_document,
)


def test_sentences_are_trimmed_non_blank_lines():
    section = {"id": "x", "content": "  Erster Satz. \n\n Zweiter Satz.\n  \n"}
    assert extract_sentences_from_section(section) == ["Erster Satz.", "Zweiter Satz."]


def test_extract_sentences_with_audio(lesson_document):
    lesson = extract_sentences(lesson_document, "lesson-1")
    assert lesson == Lesson(
        sentences=["Es ist ein schöner Montagmorgen in Berlin.", "Die Sonne scheint."],
        audio_url="https://example.org/audio/lesson-1.mp3",
    )


def test_extract_sentences_without_audio(lesson_document):
    lesson = extract_sentences(lesson_document, "lesson-2")
    assert lesson.audio_url is None
    assert lesson.sentences == ["Wir treffen uns um 6:30 Uhr.", "Das war ein Kaffee-Desaster!"]


def test_unknown_lesson(lesson_document):
    assert extract_sentences(lesson_document, "nope") is None


def test_load_from_file(lesson_file, lesson_document):
    assert load_lesson_document(str(lesson_file)) == lesson_document


def test_load_missing_file(tmp_path):
    with pytest.raises(LessonDataError):
        load_lesson_document(str(tmp_path / "missing.json"))


def test_load_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(LessonDataError):
        load_lesson_document(str(path))


def test_load_document_without_sections(tmp_path):
    path = tmp_path / "empty.json"
    path.write_text('{"lessons": []}', encoding="utf-8")
    with pytest.raises(LessonDataError):
        load_lesson_document(str(path))


@pytest.mark.parametrize(
    "sections",
    [
        '["oops"]',
        '[{"id": "a", "content": 42}]',
        '[{"id": "a"}]',
    ],
)
def test_load_document_with_malformed_section(tmp_path, sections):
    path = tmp_path / "malformed.json"
    path.write_text('{"sections": ' + sections + "}", encoding="utf-8")
    with pytest.raises(LessonDataError):
        load_lesson_document(str(path))


@patch("dictation.lesson_data.requests.get")
def test_load_from_url(mock_get, lesson_document):
    response = MagicMock()
    response.json.return_value = lesson_document
    mock_get.return_value = response

    assert load_lesson_document("https://example.org/lessons.json", timeout=3) == lesson_document
    mock_get.assert_called_once_with("https://example.org/lessons.json", timeout=3)
    response.raise_for_status.assert_called_once()


@patch("dictation.lesson_data.requests.get")
def test_load_from_url_http_error(mock_get):
    response = MagicMock()
    response.raise_for_status.side_effect = requests.HTTPError("404 Not Found")
    mock_get.return_value = response

    with pytest.raises(LessonDataError):
        load_lesson_document("https://example.org/lessons.json")


@patch("dictation.lesson_data.requests.get", side_effect=requests.ConnectionError("refused"))
def test_load_from_url_unreachable(mock_get):
    with pytest.raises(LessonDataError):
        load_lesson_document("http://localhost:9/lessons.json")
