"""
AI-generated executive summary of recent canteen performance.
"""
import json
import logging

import google.generativeai as genai
from django.conf import settings

from .services import summary, cost_trend

logger = logging.getLogger(__name__)

NO_API_KEY_MESSAGE = "API Key not configured. Unable to generate AI insights."
UNAVAILABLE_MESSAGE = "Unable to analyze data at this time. Please try again later."
EMPTY_MESSAGE = "No insights generated."

PROMPT_TEMPLATE = """
You are an expert Data Analyst for ACI Limited's Canteen Management System.
Analyze the following canteen metrics and trend data.

Current Metrics:
{metrics}

Recent Trend Data (JSON):
{trend}

Please provide a concise Executive Summary (max 150 words) focusing on:
1. Cost efficiency (Cost Per Head anomalies).
2. Participation trends.
3. Actionable recommendations for the Admin Manager to reduce waste or improve operations.

Format the output as a clean text paragraph.
"""


def build_prompt():
    overview = summary()
    currency = settings.CURRENCY_SYMBOL
    metrics = (
        f"Date: {overview['date']}, "
        f"Total Cost: {currency}{overview['total_daily_cost']:.2f}, "
        f"Total Participants: {overview['total_participants']}, "
        f"Global Per Head: {currency}{overview['global_per_head_cost']:.2f}"
    )
    trend = json.dumps(cost_trend()[-7:])
    return PROMPT_TEMPLATE.format(metrics=metrics, trend=trend)


def generate_insights():
    """
    Ask Gemini for an executive summary. Never raises: configuration and API
    problems come back as a readable message.
    """
    api_key = settings.GEMINI_API_KEY
    if not api_key:
        return NO_API_KEY_MESSAGE

    prompt = build_prompt()
    try:
        genai.configure(api_key=api_key)
        model = genai.GenerativeModel(settings.GEMINI_MODEL)
        response = model.generate_content(prompt)
        text = response.text
    except Exception as e:
        logger.error(f"Gemini API error: {e}", exc_info=True)
        return UNAVAILABLE_MESSAGE

    return text.strip() if text and text.strip() else EMPTY_MESSAGE
