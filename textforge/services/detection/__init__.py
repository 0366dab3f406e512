"""Format detection: candidate lists, confidence scores and layer peeling."""

from textforge.services.detection.format_detector import (
    DetectionResult,
    FormatDetector,
    detect,
    detect_multi_layer,
    detect_with_confidence,
)

__all__ = [
    "DetectionResult",
    "FormatDetector",
    "detect",
    "detect_multi_layer",
    "detect_with_confidence",
]
