# prompt.py
# Builds the request sent to the generative model: persona, prompt and output schema.

from dataclasses import dataclass, field

SYSTEM_INSTRUCTION = (
    "You are an expert content analyst and AI detection specialist. "
    "Your goal is to evaluate text for its likelihood of being AI-generated versus human-written, "
    "and provide constructive feedback on its quality, tone, and readability. "
    "Be objective and precise."
)

REQUIRED_FIELDS = [
    "aiScore",
    "humanScore",
    "readability",
    "tone",
    "keyFindings",
    "suggestions",
    "detailedMetrics",
]

RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "aiScore": {
            "type": "NUMBER",
            "description": "Likelihood percentage that the text is AI-generated (0-100)",
        },
        "humanScore": {
            "type": "NUMBER",
            "description": "Likelihood percentage that the text is human-written (0-100)",
        },
        "readability": {
            "type": "STRING",
            "description": "Readability level (e.g., Easy, Moderate, Academic)",
        },
        "tone": {
            "type": "STRING",
            "description": "The perceived tone of the writing",
        },
        "keyFindings": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
            "description": "3-4 key observations about the text structure and patterns",
        },
        "suggestions": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "title": {"type": "STRING"},
                    "description": {"type": "STRING"},
                },
                "required": ["title", "description"],
            },
            "description": "Actionable suggestions to improve the content or make it more human-like",
        },
        "detailedMetrics": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "label": {
                        "type": "STRING",
                        "description": "Metric name (e.g., Perplexity, Burstiness, Emotional Depth)",
                    },
                    "value": {"type": "NUMBER", "description": "Score from 0-100"},
                },
                "required": ["label", "value"],
            },
        },
    },
    "required": REQUIRED_FIELDS,
}


@dataclass(frozen=True)
class AnalysisRequest:
    system_instruction: str
    contents: str
    response_schema: dict = field(repr=False)
    response_mime_type: str = "application/json"


def build_prompt(text):
    """Embeds the user's text verbatim. Nothing is escaped."""
    return (
        "Analyze the following text for AI-generated patterns and content quality. "
        "Provide a detailed breakdown of its characteristics.\n\n"
        "Text to analyze:\n"
        f"\"{text}\""
    )


def build_request(text):
    return AnalysisRequest(
        system_instruction=SYSTEM_INSTRUCTION,
        contents=build_prompt(text),
        response_schema=RESPONSE_SCHEMA,
    )
