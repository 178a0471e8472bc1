# detect.py (JSON API Blueprint)
from flask import Blueprint, request, jsonify, current_app

from analysis import AnalysisError, InputValidationError

# Create the blueprint
detect_api = Blueprint('detect_api', __name__)


@detect_api.route('/analyze', methods=['POST'])
def analyze():
    data = request.get_json(silent=True) or {}
    text = data.get('text') if isinstance(data, dict) else None
    if not isinstance(text, str):
        text = ''

    analyzer = current_app.extensions['content_analyzer']
    try:
        result = analyzer.analyze(text)
    except InputValidationError as e:
        return jsonify({'error': e.user_message}), 400
    except AnalysisError as e:
        current_app.logger.error(f"--- Analysis Error ---: {e}")
        return jsonify({'error': e.user_message}), 502

    return jsonify(result.to_payload())
