import os
import sys
import logging

from flask import Flask, request, jsonify

# Ensure project root is in path for imports
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from dictation.alignment import align, trim_trailing_inserts
from dictation.config import LESSONS_SOURCE, LOG_LEVEL
from dictation.lesson_data import LessonDataError, extract_sentences, load_lesson_document
from dictation.models import Insert, Match, Remove
from dictation.numbers_to_words import number_to_words
from dictation.scorer import build_feedback, summarize

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config["LESSONS_SOURCE"] = LESSONS_SOURCE

# ============================================================================
# LESSON CACHE
# ============================================================================
LESSON_DOCUMENTS = {}  # {source: parsed lesson document}


def get_lesson_document(source):
    """Load the lesson document once per source and keep it in memory."""
    if source not in LESSON_DOCUMENTS:
        LESSON_DOCUMENTS[source] = load_lesson_document(source)
    return LESSON_DOCUMENTS[source]

# ============================================================================
# UTILITY
# ============================================================================
def span_to_dict(span):
    """Serialize an alignment span to JSON-friendly data."""
    if isinstance(span, Insert):
        return {"op": "insert", "target_index": span.target_index}
    if isinstance(span, Remove):
        return {"op": "remove", "source_index": span.source_index}
    if isinstance(span, Match):
        return {
            "op": "match",
            "kind": span.kind,
            "source_start": span.source_range.start,
            "source_end": span.source_range.stop,
            "target_start": span.target_range.start,
            "target_end": span.target_range.stop,
        }
    raise TypeError(f"Unknown span type: {type(span).__name__}")


def _is_word_list(value):
    return isinstance(value, list) and all(isinstance(w, str) for w in value)


def _json_body():
    """Request body as a dict, or None when it is not a JSON object."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    return data if isinstance(data, dict) else None

# ============================================================================
# ROUTES - HEALTH
# ============================================================================
@app.route('/health')
def health():
    return jsonify({"status": "ok"})

# ============================================================================
# ROUTES - FEEDBACK
# ============================================================================
@app.route('/api/feedback', methods=['POST'])
def feedback():
    """Compare a transcript with its reference sentence.

    Body: {"sentence": str, "transcript": str, "listening": bool}
    """
    data = _json_body()
    if data is None:
        return jsonify({"error": "Request body must be a JSON object"}), 400
    sentence = data.get('sentence')
    transcript = data.get('transcript')
    listening = data.get('listening', False)
    if not isinstance(sentence, str) or not isinstance(transcript, str):
        return jsonify({"error": "Both 'sentence' and 'transcript' must be strings"}), 400
    if not isinstance(listening, bool):
        return jsonify({"error": "'listening' must be a boolean"}), 400

    items = build_feedback(transcript, sentence, listening=listening)
    return jsonify({
        "items": [item.to_dict() for item in items],
        "summary": summarize(items),
    })


@app.route('/api/align', methods=['POST'])
def align_words():
    """Raw alignment of two word lists.

    Body: {"source": [str], "target": [str], "trim": bool}
    """
    data = _json_body()
    if data is None:
        return jsonify({"error": "Request body must be a JSON object"}), 400
    source = data.get('source')
    target = data.get('target')
    trim = data.get('trim', False)
    if not _is_word_list(source) or not _is_word_list(target):
        return jsonify({"error": "'source' and 'target' must be lists of strings"}), 400
    if not isinstance(trim, bool):
        return jsonify({"error": "'trim' must be a boolean"}), 400

    result = align(source, target)
    spans = trim_trailing_inserts(result.spans) if trim else result.spans
    return jsonify({
        "cost": result.cost,
        "spans": [span_to_dict(s) for s in spans],
    })

# ============================================================================
# ROUTES - LESSONS
# ============================================================================
@app.route('/api/lessons/<lesson_id>')
def get_lesson(lesson_id):
    """Reference sentences and audio URL of one lesson section."""
    source = app.config.get("LESSONS_SOURCE")
    if not source:
        return jsonify({"error": "No lesson source configured"}), 503
    try:
        document = get_lesson_document(source)
    except LessonDataError as e:
        logger.warning("Lesson document unavailable: %s", e)
        return jsonify({"error": str(e)}), 502

    lesson = extract_sentences(document, lesson_id)
    if lesson is None:
        return jsonify({"error": f"Unknown lesson: {lesson_id}"}), 404
    return jsonify({
        "id": lesson_id,
        "sentences": lesson.sentences,
        "audio_url": lesson.audio_url,
    })

# ============================================================================
# ROUTES - NUMBERS
# ============================================================================
@app.route('/api/numbers/<int(signed=True):n>')
def spell_number(n):
    """German spelling of a number, as used by the numeral matcher."""
    words = number_to_words(n)
    if words is None:
        return jsonify({"error": f"Number out of supported range: {n}"}), 422
    return jsonify({"number": n, "words": words})


if __name__ == '__main__':
    logging.basicConfig(level=LOG_LEVEL)
    app.run(debug=True, host='0.0.0.0', port=5000)
