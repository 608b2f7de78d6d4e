"""
Grader configuration.

Stock rules and messages ship with the package. Either can be replaced by a
JSON file (e.g. in .env):
  GRADER_RULES_PATH=rules/2026.json
  GRADER_MESSAGES_PATH=messages/fr.json

A messages override only needs the keys it changes.
"""

import logging
import os
from functools import lru_cache
from pathlib import Path

from grading.messages import DEFAULT_MESSAGES, MessageCatalog
from grading.specs import DEFAULT_RULES
from models.rules import RuleConfig

logger = logging.getLogger(__name__)

RULES_PATH = os.environ.get("GRADER_RULES_PATH")
MESSAGES_PATH = os.environ.get("GRADER_MESSAGES_PATH")
LOG_LEVEL = os.environ.get("GRADER_LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("GRADER_CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]


@lru_cache(maxsize=1)
def load_rules() -> RuleConfig:
    if not RULES_PATH:
        return DEFAULT_RULES
    logger.info("Loading rule configuration from %s", RULES_PATH)
    return RuleConfig.model_validate_json(Path(RULES_PATH).read_text(encoding="utf-8"))


@lru_cache(maxsize=1)
def load_messages() -> MessageCatalog:
    if not MESSAGES_PATH:
        return DEFAULT_MESSAGES
    logger.info("Loading message catalog from %s", MESSAGES_PATH)
    return MessageCatalog.model_validate_json(Path(MESSAGES_PATH).read_text(encoding="utf-8"))
