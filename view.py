# view.py
# What the page shows: the form's transient state and the report built from a result.

from dataclasses import dataclass, replace

from config import MAX_CHARS, MIN_CHARS

HIGH_METRIC_COLOR = "#4F46E5"
NEUTRAL_METRIC_COLOR = "#94A3B8"
HIGH_METRIC_THRESHOLD = 70


@dataclass(frozen=True)
class FormState:
    """
    The only state the page keeps between renders. At most one analysis
    can be pending; `begin()` refuses to start a second one.
    """

    text: str = ""
    is_analyzing: bool = False
    error: str = None
    result: object = None
    min_chars: int = MIN_CHARS
    max_chars: int = MAX_CHARS

    @property
    def char_count(self):
        return len(self.text)

    @property
    def can_submit(self):
        return not self.is_analyzing and self.char_count >= self.min_chars

    def edit(self, text):
        return replace(self, text=(text or "")[:self.max_chars])

    def begin(self):
        if self.is_analyzing:
            raise RuntimeError("an analysis is already in progress")
        return replace(self, is_analyzing=True, error=None)

    def succeed(self, result):
        return replace(self, is_analyzing=False, result=result)

    def fail(self, message):
        # Input is kept so the user can resubmit.
        return replace(self, is_analyzing=False, error=message)

    def reset(self):
        return replace(self, text="", is_analyzing=False, error=None, result=None)


@dataclass(frozen=True)
class Gauge:
    label: str
    percent: float
    accent: str


@dataclass(frozen=True)
class MetricBar:
    label: str
    value: float
    color: str


@dataclass(frozen=True)
class Report:
    gauges: tuple
    bars: tuple
    findings: tuple
    suggestions: tuple
    readability: str
    tone: str


def metric_color(value):
    return HIGH_METRIC_COLOR if value > HIGH_METRIC_THRESHOLD else NEUTRAL_METRIC_COLOR


def format_percent(value):
    """80.0 -> '80%', 42.5 -> '42.5%'. Rounded to one decimal so tiny values never print as 1e-05."""
    return f"{round(value, 1):g}%"


def build_report(result):
    """Maps an AnalysisResult onto what the template renders. None in, None out."""
    if result is None:
        return None

    return Report(
        gauges=(
            Gauge("AI Probability", result.ai_score, "indigo"),
            Gauge("Human Probability", result.human_score, "emerald"),
        ),
        bars=tuple(MetricBar(m.label, m.value, metric_color(m.value)) for m in result.detailed_metrics),
        findings=tuple(enumerate(result.key_findings, start=1)),
        suggestions=tuple((s.title, s.description) for s in result.suggestions),
        readability=result.readability,
        tone=result.tone,
    )
