import logging
from typing import Any

import httpx

from fitcoach.core.config import settings

logger = logging.getLogger(__name__)


WEEKLY_REVIEW_PROMPT = """
You are an experienced online fitness coach and nutritionist.

Your job:
- Analyze the user's last 7 days of nutrition and training.
- Compare to the target calories and macros.
- Highlight strengths, mistakes and concrete next steps.

Rules:
- Be friendly, but direct.
- Focus on 3-5 key points, not a huge essay.
- Use short paragraphs and bullet points.
- If data is missing (no meals / no workouts), explain that first and give suggestions.
"""

WORKOUT_PLAN_PROMPT = """
You are an expert strength and hypertrophy coach.

Your job:
- Create a weekly workout plan based on the user's profile and preferences.
- Assume the user trains in a normal commercial gym with basic equipment.

Rules:
- Always return the plan as clear, structured text.
- Use headings per day (e.g. "Day 1 - Upper", "Day 2 - Lower").
- For each exercise include: name, sets, reps, RIR.
- Adapt volume to the user's experience level and days per week.
- Keep it realistic and safe.
- If the goal is fat loss, keep volume similar but mention cardio suggestions at the end.
"""

MEAL_PLAN_PROMPT = """
You are an expert nutritionist and fitness coach.

Your job:
- Create a simple daily meal plan based on target calories and macros.
- Respect the user's preferences and foods they want to avoid.

Rules:
- Output a 1-day example plan only.
- Split into the given number of meals per day.
- For each meal, list:
  - meal name
  - foods with approximate grams
  - estimated calories and macros for that meal
- At the end, show an approximate total vs target macros.
- Use simple, realistic foods (e.g. chicken, rice, oats, eggs, yoghurt, veggies).
- Keep text short and practical, not a long essay.
"""


class AiCoachError(RuntimeError):
    pass


class AiNotConfiguredError(AiCoachError):
    pass


class AiCoachClient:
    """
    Thin client for an OpenAI-compatible chat completion endpoint.

    Every call sends one system prompt and one user message and returns the
    text of the first choice.
    """

    def __init__(
        self,
        api_key: str | None = None,
        api_base: str | None = None,
        model: str | None = None,
        timeout: float | None = None,
        temperature: float = 0.7,
        max_tokens: int = 1500,
        transport: httpx.BaseTransport | None = None,
    ):
        self.api_key = api_key if api_key is not None else settings.AI_API_KEY
        self.api_base = (api_base or settings.AI_API_BASE).rstrip("/")
        self.model = model or settings.AI_MODEL
        self.timeout = timeout or settings.AI_TIMEOUT_SECONDS
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.transport = transport

    def _complete(self, system_prompt: str, user_content: str) -> str:
        if not self.api_key:
            raise AiNotConfiguredError("AI_API_KEY is missing")

        body = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_content},
            ],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                resp = client.post(
                    f"{self.api_base}/chat/completions",
                    json=body,
                    headers={"Authorization": f"Bearer {self.api_key}"},
                )
        except httpx.HTTPError as e:
            logger.error("AI request failed: %s", e)
            raise AiCoachError("AI request failed") from e

        if resp.status_code != 200:
            logger.error("AI API error: %s %s", resp.status_code, resp.text)
            raise AiCoachError(f"AI request failed with status {resp.status_code}")

        try:
            data: Any = resp.json()
        except ValueError as e:
            raise AiCoachError("AI response is not valid JSON") from e

        choices = data.get("choices") if isinstance(data, dict) else None
        message = None
        if choices and isinstance(choices[0], dict):
            message = (choices[0].get("message") or {}).get("content")

        if not message:
            raise AiCoachError("Empty response from AI")
        return message

    def weekly_review(self, summary: str) -> str:
        return self._complete(WEEKLY_REVIEW_PROMPT, summary)

    def workout_plan(self, summary: str) -> str:
        return self._complete(WORKOUT_PLAN_PROMPT, summary)

    def meal_plan(self, summary: str) -> str:
        return self._complete(MEAL_PLAN_PROMPT, summary)


def get_ai_coach() -> AiCoachClient:
    return AiCoachClient()
