# app.py (Main File)
# To run the checker locally: python app.py

from flask import Blueprint, Flask, render_template, request, redirect, url_for, current_app

from analysis import AnalysisError, ContentAnalyzer, InputValidationError
from config import load_settings
from detect import detect_api
from gemini import GeminiClient
from view import FormState, build_report, format_percent

# The checker page itself
pages = Blueprint('pages', __name__)


@pages.route('/', methods=['GET'])
def home():
    """Renders the empty checker page."""
    return _render(_blank_state())


@pages.route('/', methods=['POST'])
def check():
    """Runs one analysis for the submitted form and renders the outcome."""
    state = _blank_state().edit(request.form.get('text', '')).begin()
    analyzer = current_app.extensions['content_analyzer']
    try:
        state = state.succeed(analyzer.analyze(state.text))
    except InputValidationError as e:
        return _render(state.fail(e.user_message)), 400
    except AnalysisError as e:
        current_app.logger.error(f"--- Analysis Error ---: {e}")
        return _render(state.fail(e.user_message)), 502
    return _render(state)


@pages.route('/reset', methods=['POST'])
def reset():
    return redirect(url_for('pages.home'))


def _blank_state():
    return FormState(
        min_chars=current_app.config['MIN_CHARS'],
        max_chars=current_app.config['MAX_CHARS'],
    )


def _render(state):
    return render_template('index.html', state=state, report=build_report(state.result))


def create_app(settings=None, backend=None):
    """
    Builds the app. Tests pass their own settings and a stub backend;
    otherwise settings come from the environment and Gemini is used.
    """
    if settings is None:
        settings = load_settings()
    if backend is None:
        backend = GeminiClient(settings)

    app = Flask(__name__)
    app.config.update(
        DEBUG=settings.debug,
        MIN_CHARS=settings.min_chars,
        MAX_CHARS=settings.max_chars,
    )
    app.extensions['content_analyzer'] = ContentAnalyzer(settings, backend)
    app.jinja_env.filters['percent'] = format_percent

    # Register the blueprints to connect them to the main app
    app.register_blueprint(pages)
    app.register_blueprint(detect_api)

    return app


if __name__ == '__main__':
    app = create_app()
    app.run(debug=app.config['DEBUG'])
