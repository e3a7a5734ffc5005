"""Prompt templates for the suggestion generator."""

SUGGESTION_PROMPT = """
User wants help making a decision:
Decision Name: "{title}"
Description: "{description}"
Options: {options}

Generate:
1. 4-6 meaningful evaluation criteria with weight (1-5).
2. Pros & Cons with impact score (1-5) for each option per criteria.

Return STRICTLY in this JSON format (no explanation, no markdown):

{{
  "criteria": [
    {{ "name": "string", "weight": number }}
  ],
  "evaluations": [
    {{
      "optionName": "string",
      "criteriaName": "string",
      "pros": [{{ "text": "string", "impactScore": number }}],
      "cons": [{{ "text": "string", "impactScore": number }}]
    }}
  ]
}}
"""


def build_suggestion_prompt(title: str, description: str, options: list[str]) -> str:
    """Render the prompt asking for criteria and per-option pros/cons."""
    return SUGGESTION_PROMPT.format(
        title=title,
        description=description or "none",
        options=", ".join(options),
    )
