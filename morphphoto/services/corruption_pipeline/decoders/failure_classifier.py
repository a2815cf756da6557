# morphphoto/services/corruption_pipeline/decoders/failure_classifier.py
"""
Decode Failure Classifier

Maps a decode exception to a structured DecodeFailureReason and from there to
a CorruptnessVerdict through a lookup table.

The exception type is consulted first. Message substrings are only a fallback
for decoders that report everything through a generic exception, and are
tied to the upstream libraries' wording.
"""

from typing import Dict, Optional, Tuple, Type

from PIL import UnidentifiedImageError

from ....constants import DECODE_FAILURE_MESSAGE_PATTERNS, DECODE_FAILURE_VERDICTS
from ....enums import CorruptnessVerdict, DecodeFailureReason
from ....models.image_model import DecodeFailure

# Checked in order, so subclasses must come before their bases
EXCEPTION_TYPE_REASONS: Tuple[Tuple[Type[BaseException], DecodeFailureReason], ...] = (
    (UnidentifiedImageError, DecodeFailureReason.UNIDENTIFIED_FORMAT),
    (FileNotFoundError, DecodeFailureReason.FILE_NOT_FOUND),
    (EOFError, DecodeFailureReason.UNEXPECTED_END_OF_FILE),
)


class DecodeFailureClassifier:
    """Classifies decode exceptions into failure reasons and verdicts."""

    def __init__(
        self,
        verdicts: Optional[Dict[DecodeFailureReason, CorruptnessVerdict]] = None,
        message_patterns: Optional[Tuple[Tuple[str, DecodeFailureReason], ...]] = None,
    ):
        self.verdicts = verdicts or DECODE_FAILURE_VERDICTS
        self.message_patterns = (
            message_patterns
            if message_patterns is not None
            else DECODE_FAILURE_MESSAGE_PATTERNS
        )

    def reason_for(self, error: BaseException) -> DecodeFailureReason:
        """Structured reason for an exception; UNKNOWN when nothing matches."""
        for exc_type, reason in EXCEPTION_TYPE_REASONS:
            if isinstance(error, exc_type):
                return reason

        return self.reason_for_message(str(error))

    def reason_for_message(self, message: str) -> DecodeFailureReason:
        """Substring fallback over the decoder's error text."""
        lowered = message.lower()
        for fragment, reason in self.message_patterns:
            if fragment in lowered:
                return reason
        return DecodeFailureReason.UNKNOWN

    def verdict_for(self, reason: DecodeFailureReason) -> CorruptnessVerdict:
        return self.verdicts.get(reason, CorruptnessVerdict.INVALID_DECODER)

    def classify(self, error: BaseException) -> DecodeFailure:
        """Build the DecodeFailure value for an exception."""
        reason = self.reason_for(error)
        return DecodeFailure(
            reason=reason,
            message=str(error) or error.__class__.__name__,
            verdict=self.verdict_for(reason),
        )
