"""
Parsing of documentation update plans from model output
"""

import json
import logging
from typing import Any, Dict, Iterator, Optional

from pydantic import ValidationError

from ..models.pr_models import DocUpdatePlan

logger = logging.getLogger(__name__)

_decoder = json.JSONDecoder()


def iter_json_objects(text: str) -> Iterator[Dict[str, Any]]:
    """
    Yield every JSON object that decodes cleanly from an opening brace in text

    Decoding uses the JSON grammar itself, so braces inside string values and
    prose or code fences around the object do not confuse it.
    """
    index = text.find("{")
    while index != -1:
        try:
            value, _ = _decoder.raw_decode(text, index)
        except ValueError:
            value = None
        if isinstance(value, dict):
            yield value
        index = text.find("{", index + 1)


def extract_first_json_object(text: str) -> Optional[Dict[str, Any]]:
    """Return the first JSON object found in text, or None"""
    return next(iter_json_objects(text), None)


def parse_doc_update_plan(response_text: str) -> Optional[DocUpdatePlan]:
    """
    Extract and validate a documentation update plan

    The plan is the first JSON object carrying an "updates" key. When none is
    found or it does not validate, the raw response is logged and None is
    returned so that no file is written.

    Args:
        response_text: Raw model output

    Returns:
        Optional[DocUpdatePlan]: Validated plan, or None
    """
    candidate = next((obj for obj in iter_json_objects(response_text) if "updates" in obj), None)

    if candidate is None:
        logger.error("No JSON found in response")
        logger.error(f"Response: {response_text}")
        return None

    try:
        return DocUpdatePlan.model_validate(candidate)
    except ValidationError as e:
        logger.error(f"Error parsing model response: {str(e)}")
        logger.error(f"Response: {response_text}")
        return None


__all__ = ["iter_json_objects", "extract_first_json_object", "parse_doc_update_plan"]
