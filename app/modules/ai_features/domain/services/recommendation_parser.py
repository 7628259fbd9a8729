# 📄 File: app/modules/ai_features/domain/services/recommendation_parser.py
# 🧭 Purpose (Layman Explanation):
# AI answers are not always tidy. This file digs the list of plants out of the
# answer, patches small formatting slips and turns it into plant suggestions.
#
# 🧪 Purpose (Technical Summary):
# Tolerant JSON extraction for chat completion content: strips surrounding
# prose, takes the first array-of-objects block (or wraps a lone object),
# removes trailing commas and closes unbalanced brackets before decoding into
# PlantRecommendation models. Items failing validation are skipped.
#
# 🔗 Dependencies:
# - json, re (standard library)
# - app.modules.ai_features.presentation.api.schemas.recommendation_schemas
#
# 🔄 Connected Modules / Calls From:
# - app.modules.ai_features.domain.services.plant_recommendation_service

import json
import logging
import re
from typing import List

from pydantic import ValidationError as PydanticValidationError

from app.modules.ai_features.presentation.api.schemas.recommendation_schemas import PlantRecommendation

logger = logging.getLogger(__name__)

ARRAY_BLOCK = re.compile(r"\[\s*\{.*?\}\s*\]", re.DOTALL)
TRAILING_COMMA = re.compile(r",\s*([\]}])")

MAX_MISSING_CLOSERS = 100
CLOSERS = {"{": "}", "[": "]"}


class RecommendationParseError(ValueError):
    """The model's answer holds no usable JSON."""


def _loads(text: str):
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return None


def extract_json_block(content: str) -> str:
    """Pull the JSON payload out of whatever prose or fences surround it."""
    content = content.strip()
    if content.startswith("[") and _loads(content) is not None:
        return content

    match = ARRAY_BLOCK.search(content)
    if match:
        return match.group(0)

    # a truncated array is left for repair_json
    if content.startswith("["):
        return content
    start, end = content.find("{"), content.rfind("}")
    if start != -1 and end > start:
        return f"[{content[start:end + 1]}]"
    if content.startswith("{"):
        return f"[{content}"

    raise RecommendationParseError("Unable to find a JSON array or object in the response")


def close_unbalanced(text: str) -> str:
    """Append the closers for every bracket left open outside string literals."""
    stack = []
    in_string = escaped = False
    for ch in text:
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif ch in CLOSERS:
            stack.append(CLOSERS[ch])
        elif ch in ("}", "]") and stack and stack[-1] == ch:
            stack.pop()

    if len(stack) > MAX_MISSING_CLOSERS:
        raise RecommendationParseError(f"Too many unmatched brackets ({len(stack)})")

    if in_string:
        text += '"'
    return text + "".join(reversed(stack))


def repair_json(text: str) -> str:
    repaired = close_unbalanced(TRAILING_COMMA.sub(r"\1", text))
    # closing may expose new trailing commas, e.g. '[{"a": 1},' -> '[{"a": 1},]'
    return TRAILING_COMMA.sub(r"\1", repaired)


def parse_recommendations(content: str) -> List[PlantRecommendation]:
    """
    Decode the model's answer into recommendations.

    Raises:
        RecommendationParseError: When no JSON can be recovered
    """
    if not content or not content.strip():
        return []

    logger.debug(f"Raw content from OpenAI: {content}")
    block = extract_json_block(content)

    data = _loads(block)
    if data is None:
        logger.warning("Invalid JSON in recommendations, attempting to repair")
        data = _loads(repair_json(block))
        if data is None:
            raise RecommendationParseError("Could not repair JSON in the response")

    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise RecommendationParseError("Expected a JSON array of recommendations")

    recommendations = []
    for item in data:
        if not isinstance(item, dict):
            continue
        try:
            recommendations.append(PlantRecommendation.model_validate(item))
        except PydanticValidationError as e:
            logger.warning(f"Skipping malformed recommendation {item.get('name')!r}: {e.error_count()} errors")
    return recommendations
