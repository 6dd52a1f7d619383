# filename: insight_service.py
# location: recruitment/services/

import json
import logging

from flask import current_app
from openai import OpenAI

from recruitment.errors import OperationAborted, ValidationFailed

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = """
You are an expert in analyzing candidate hiring data.
Your goal is to identify the optimal time to approach candidates with similar profiles for future hiring campaigns.
Analyze the following candidate flow data and provide insights on the best moment to engage candidates, maximizing the effectiveness of the hiring efforts.

Candidate Flow Data: {flow}
Job Profile: {job_profile}

Provide clear, actionable insights that can be used to improve the timing and approach of future hiring campaigns for similar roles.
"""


def serialize_flow(candidates):
    """JSON summary of every candidate's status history, as sent to the model."""
    return json.dumps([
        {
            "id": candidate.id,
            "status_history": [
                {
                    "status": entry.status.value,
                    "date": entry.date.isoformat(),
                    "notes": entry.notes,
                }
                for entry in candidate.status_history
            ],
        }
        for candidate in candidates
    ], ensure_ascii=False)


class InsightService:
    def __init__(self, client, model="gpt-3.5-turbo"):
        self.client = client
        self.model = model

    @classmethod
    def from_app(cls):
        api_key = current_app.config.get("OPENAI_API_KEY")
        client = None
        if api_key:
            try:
                client = OpenAI(api_key=api_key)
            except Exception as e:
                logger.error(f"❌ Error initializing OpenAI client: {e}")
        return cls(client, model=current_app.config.get("OPENAI_MODEL", "gpt-3.5-turbo"))

    def analyze(self, candidates, job_profile):
        """Ask the model when to approach candidates with a similar profile."""
        if not job_profile or not job_profile.strip():
            raise ValidationFailed("Please describe the job profile")
        if self.client is None:
            raise OperationAborted("The insight generator is not configured. Please check the OpenAI API key.")

        prompt = PROMPT_TEMPLATE.format(flow=serialize_flow(candidates), job_profile=job_profile.strip())
        try:
            completion = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": "You are a helpful assistant for recruitment analytics."},
                    {"role": "user", "content": prompt},
                ],
                temperature=0.7,
            )
            insights = completion.choices[0].message.content.strip()
        except Exception as e:
            logger.error(f"❌ An error occurred while calling OpenAI API: {e}")
            raise OperationAborted("An error occurred while analyzing the flow. Please try again.") from e

        logger.info(f"✅ Generated insights for {len(candidates)} candidates")
        return insights
