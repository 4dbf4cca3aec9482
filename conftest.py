import json

import pytest


@pytest.fixture
def lesson_document():
    return {
        "sections": [
            {
                "id": "lesson-1",
                "content": "Es ist ein schöner Montagmorgen in Berlin.\n\n  Die Sonne scheint.  \n",
                "audio": "https://example.org/audio/lesson-1.mp3",
            },
            {
                "id": "lesson-2",
                "content": "Wir treffen uns um 6:30 Uhr.\nDas war ein Kaffee-Desaster!",
            },
        ]
    }


@pytest.fixture
def lesson_file(tmp_path, lesson_document):
    path = tmp_path / "lessons.json"
    path.write_text(json.dumps(lesson_document, ensure_ascii=False), encoding="utf-8")
    return path
