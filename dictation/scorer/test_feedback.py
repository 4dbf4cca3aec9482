from dictation.scorer import FeedbackItem, build_feedback, render_spans, summarize
from dictation.models import Insert, Match, Remove


def test_empty_transcript_gives_no_feedback():
    assert build_feedback("", "Guten Tag") == []


def test_missing_word_is_added():
    assert build_feedback("a c", "a b c") == [
        FeedbackItem("correct", "a", "exact"),
        FeedbackItem("added", "b"),
        FeedbackItem("correct", "c", "exact"),
    ]


def test_extra_word_is_removed():
    assert build_feedback("Es ist ja gut", "Es ist gut.") == [
        FeedbackItem("correct", "Es", "exact"),
        FeedbackItem("correct", "ist", "exact"),
        FeedbackItem("removed", "ja"),
        FeedbackItem("correct", "gut.", "exact"),
    ]


def test_merge_shows_sentence_spelling():
    items = build_feedback("ein Kaffee Desaster test", "ein Kaffee-Desaster test")
    assert items[1] == FeedbackItem("correct", "Kaffee-Desaster", "merge")
    assert [i.status for i in items] == ["correct"] * 3


def test_clock_match_joins_sentence_words():
    items = build_feedback("Wir treffen uns um 6:30 Uhr", "Wir treffen uns um halb sieben.")
    assert items[-1] == FeedbackItem("correct", "halb sieben.", "clock")


def test_listening_trims_unattempted_tail():
    sentence = "Es ist halb sieben."
    assert build_feedback("Es ist", sentence, listening=True) == [
        FeedbackItem("correct", "Es", "exact"),
        FeedbackItem("correct", "ist", "exact"),
    ]
    assert [i.status for i in build_feedback("Es ist", sentence)] == ["correct", "correct", "added", "added"]


def test_listening_keeps_one_item():
    assert build_feedback(" ", "Guten Tag", listening=True) == [FeedbackItem("added", "Guten")]


def test_render_spans():
    source = ["a", "x"]
    target = ["a", "b"]
    spans = [Match.one(0, 0), Remove(1), Insert(1)]
    assert render_spans(spans, source, target) == [
        FeedbackItem("correct", "a", "exact"),
        FeedbackItem("removed", "x"),
        FeedbackItem("added", "b"),
    ]


def test_summarize():
    items = build_feedback("Es ist ja gut", "Es ist gut.")
    assert summarize(items) == {"correct": 3, "added": 0, "removed": 1, "accuracy": 75.0}
    assert summarize([]) == {"correct": 0, "added": 0, "removed": 0, "accuracy": 0.0}


def test_feedback_item_to_dict():
    assert FeedbackItem("added", "Tag").to_dict() == {"status": "added", "text": "Tag", "kind": None}
