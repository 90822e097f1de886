from typing import Final, Tuple

DAY_LABELS: Final[Tuple[str, ...]] = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
MEAL_SLOTS: Final[Tuple[str, ...]] = ("breakfast", "lunch", "dinner")
RECIPES_PER_REQUEST: Final[int] = 3

SYSTEM_INSTRUCTION: Final[str] = (
    """
You are "Food is My Medicine", a precision nutrition AI coach.
Your goal is to help users understand their biology through blood test results and provide actionable nutrition plans.

Core Principles:
1. Food is medicine. Every recommendation should be backed by biological data.
2. Be professional, empathetic, and clear.
3. When interpreting lab results, explain what the markers mean in simple terms.
4. Provide specific ingredient and recipe recommendations based on the user's markers.
5. If a user has high cholesterol, focus on fiber, healthy fats, and avoiding processed sugars.
6. If a user is low on iron, suggest heme and non-heme sources with vitamin C for absorption.

You have access to tools to:
- Interpret lab results from text or images.
- Generate personalized recipes.
- Create shopping lists.

Always maintain a supportive and scientific tone.
"""
)

LAB_JSON_INSTRUCTION: Final[str] = (
    'Respond with only a single JSON object (no markdown, no code block) with this shape: '
    '{ "id": string, "date": string, "markers": [ { "name": string, "value": number, "unit": string, '
    '"status": "low"|"normal"|"high", "optimalRange": string, "description": string } ] }.'
)

RECIPES_JSON_INSTRUCTION: Final[str] = (
    'Respond with only a single JSON array (no markdown, no code block). Each item: '
    '{ "id": string, "title": string, "description": string, "ingredients": string[], '
    '"instructions": string[], "prepTime": string, "tags": string[], "image": string, "benefits": string[] }. '
    'Include "title", "description", "ingredients", "instructions", "benefits" for each.'
)

ANALYZE_PROMPT_TEMPLATE: Final[str] = "Analyze this lab report text and extract markers:\n\n{text}"
RECIPES_PROMPT_TEMPLATE: Final[str] = (
    "Based on these lab results, generate {count} personalized recipes:\n\n{lab_result}"
)

WELCOME_MESSAGE: Final[str] = (
    "Hello! I'm your Food is My Medicine coach. How can I help you optimize your health today? "
    "You can tell me about your goals or upload a lab report to get started."
)

# Stands in for a parsed upload until real report parsing exists
SAMPLE_LAB_TEXT: Final[str] = (
    """
      Patient: John Doe
      Date: 2024-05-15

      Markers:
      - Total Cholesterol: 240 mg/dL (High)
      - LDL Cholesterol: 165 mg/dL (High)
      - HDL Cholesterol: 45 mg/dL (Normal)
      - Triglycerides: 180 mg/dL (High)
      - Vitamin D: 18 ng/mL (Low)
      - Iron (Ferritin): 25 ng/mL (Normal-Low)
      - HbA1c: 5.8% (Pre-diabetic)
    """
)

ANALYZE_FAILED_MESSAGE: Final[str] = "Failed to analyze the report. Please try again."
RECIPES_FAILED_MESSAGE: Final[str] = "Failed to generate recipes. Please try again."
CHAT_FAILED_MESSAGE: Final[str] = "I'm having trouble answering right now. Please try again."
