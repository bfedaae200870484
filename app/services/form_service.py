"""Lead form state and submission flow"""
import enum
import logging
import math
import re
from typing import Dict, Mapping, Optional

import httpx

from app.models.forms import CAPTCHA_FIELD, FormDefinition
from app.services.webhook_service import post_json

logger = logging.getLogger(__name__)

CAPTCHA_ANSWER = 4
WRONG_CAPTCHA_MESSAGE = "Wrong captcha answer. Please try again."
GENERIC_ERROR_MESSAGE = "Something went wrong. Please try again."

_PREFIXED_INT = re.compile(r"0([xob])([0-9a-f]+)", re.IGNORECASE | re.ASCII)
_DECIMAL = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)(e[+-]?[0-9]+)?", re.IGNORECASE | re.ASCII)

# Characters a browser's String.prototype.trim() removes
JS_WHITESPACE = (
    "\t\n\v\f\r\u0020\u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


class SubmissionStatus(str, enum.Enum):
    IDLE = "idle"
    SUCCESS = "success"
    ERROR = "error"


def parse_number(value: str) -> float:
    """
    Convert a field value to a number the way a browser's Number() does.

    Surrounding whitespace is ignored and an empty string is 0. Anything that
    is not a decimal, exponent or 0x/0o/0b literal is NaN.
    """
    text = value.strip(JS_WHITESPACE)
    if not text:
        return 0.0

    match = _PREFIXED_INT.fullmatch(text)
    if match:
        base = {"x": 16, "o": 8, "b": 2}[match.group(1).lower()]
        try:
            return float(int(match.group(2), base))
        except ValueError:
            return math.nan

    unsigned = text.lstrip("+-")
    if unsigned == "Infinity" and len(text) - len(unsigned) <= 1:
        return -math.inf if text.startswith("-") else math.inf

    if _DECIMAL.fullmatch(text):
        return float(text)
    return math.nan


def captcha_passes(value: str) -> bool:
    return parse_number(value) == CAPTCHA_ANSWER


def build_payload(state: Mapping[str, str]) -> Dict[str, str]:
    """Copy of the form state without the captcha answer"""
    return {key: value for key, value in state.items() if key != CAPTCHA_FIELD}


class FormSession:
    """
    State of one lead form instance.

    Mirrors what the user sees: the current field values, the outcome of the
    last submission attempt and whether a submission is in flight.
    """

    def __init__(self, definition: FormDefinition, url: str):
        self.definition = definition
        self.url = url
        self.state: Dict[str, str] = self._empty_state()
        self.status = SubmissionStatus.IDLE
        self.error_message = ""
        self.is_submitting = False

    def _empty_state(self) -> Dict[str, str]:
        return {name: "" for name in self.definition.field_names}

    def handle_change(self, name: str, value: str) -> None:
        if name not in self.state:
            raise KeyError(f"Unknown field '{name}' for form '{self.definition.key}'")
        self.state = {**self.state, name: value}

    def update(self, values: Mapping[str, str]) -> None:
        """Merge several posted values at once; unknown keys are ignored"""
        for name, value in values.items():
            if name in self.state:
                self.handle_change(name, value)

    def reset(self) -> None:
        self.state = self._empty_state()

    async def handle_submit(self, client: Optional[httpx.AsyncClient] = None) -> SubmissionStatus:
        """
        Run one submission attempt and record its outcome on the session.

        A call made while another submission is in flight does nothing.
        """
        if self.is_submitting:
            logger.warning(f"Submission already in flight for {self.definition.key} form")
            return self.status

        self.is_submitting = True
        self.status = SubmissionStatus.IDLE
        self.error_message = ""

        if not captcha_passes(self.state.get(CAPTCHA_FIELD, "")):
            logger.info(f"Rejected {self.definition.key} form submission: wrong captcha answer")
            self.status = SubmissionStatus.ERROR
            self.error_message = WRONG_CAPTCHA_MESSAGE
            self.is_submitting = False
            return self.status

        payload = build_payload(self.state)

        try:
            await post_json(self.url, payload, client=client)

            self.status = SubmissionStatus.SUCCESS
            self.reset()
        except Exception as e:
            logger.error(f"{self.definition.title} submission failed: {e}")
            self.status = SubmissionStatus.ERROR
            self.error_message = GENERIC_ERROR_MESSAGE
        finally:
            self.is_submitting = False

        return self.status
