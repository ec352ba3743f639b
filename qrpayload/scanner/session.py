"""
==============================================================================
Scan Session Module
==============================================================================

Turns a stream of detections into delivered barcode results.

Features:
---------
- Format filtering (only requested formats are counted)
- Debouncing: a symbol must be seen confirm_threshold times
- Application filter callback that can reject a built barcode
- Success / failure callbacks
- Stops after the first delivery (configurable)

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Optional

from qrpayload.config import get_settings
from qrpayload.core.exceptions import invalid_threshold, session_stopped

from .models import Barcode, Detection
from .results import build_barcode


# Module logger
logger = logging.getLogger(__name__)


SuccessCallback = Callable[[List[Barcode]], None]
FailureCallback = Callable[[Exception], None]
BarcodeFilter = Callable[[Barcode], bool]


class ScanSession:
    """
    Debouncing scan session with application callbacks.

    Attributes:
        is_running: False once a barcode was delivered (or after dispose)
        confirm_threshold: Sightings required before a barcode is delivered

    Example:
        >>> session = ScanSession(on_success=handle_barcodes)
        >>> detections = [Detection(value="HELLO", format="QR_CODE")]
        >>> session.submit(detections)  # first sighting
        >>> barcode = session.submit(detections)
        >>> barcode.raw_bytes
        b'HELLO'
    """

    def __init__(
        self,
        on_success: SuccessCallback,
        on_failed: Optional[FailureCallback] = None,
        barcode_filter: Optional[BarcodeFilter] = None,
        formats: Optional[Iterable[str]] = None,
        confirm_threshold: Optional[int] = None,
        stop_after_success: Optional[bool] = None
    ) -> None:
        """
        Initialize a scan session.

        Args:
            on_success: Called with a one-element list per delivered barcode
            on_failed: Called with errors raised while building or filtering
                (errors propagate when not set)
            barcode_filter: Returns False to reject a built barcode
            formats: Format labels to accept (all formats if empty)
            confirm_threshold: Sightings required (settings default if None)
            stop_after_success: Stop after delivery (settings default if None)

        Raises:
            ScanException: If confirm_threshold is below 1
        """
        settings = get_settings()

        if confirm_threshold is None:
            confirm_threshold = settings.confirm_threshold
        if confirm_threshold < 1:
            raise invalid_threshold(confirm_threshold)

        if stop_after_success is None:
            stop_after_success = settings.stop_after_success

        self._on_success = on_success
        self._on_failed = on_failed
        self._filter = barcode_filter
        self._formats = {label.upper() for label in formats or ()}
        self._threshold = confirm_threshold
        self._stop_after_success = stop_after_success
        self._sightings: Dict[str, int] = {}
        self._running = True

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def confirm_threshold(self) -> int:
        return self._threshold

    # =========================================================================
    # DETECTION PROCESSING
    # =========================================================================

    def is_requested(self, detection: Detection) -> bool:
        """Check if the detection's format was requested."""
        if not self._formats:
            return True
        return detection.format.upper() in self._formats

    def submit(self, detections: Iterable[Detection]) -> Optional[Barcode]:
        """
        Process the detections reported for one frame.

        Args:
            detections: Symbols reported by the vision backend

        Returns:
            The first barcode delivered for this batch, or None

        Raises:
            ScanException: If the session is stopped
        """
        if not self._running:
            raise session_stopped()

        first_delivered = None

        for detection in detections:
            # A delivery may have stopped the session mid-batch
            if not self._running:
                break
            if not self.is_requested(detection):
                continue

            barcode = self._confirm(detection)
            if barcode is not None and first_delivered is None:
                first_delivered = barcode

        return first_delivered

    def _confirm(self, detection: Detection) -> Optional[Barcode]:
        key = detection.key
        sightings = self._sightings.get(key, 0) + 1
        self._sightings[key] = sightings

        if sightings < self._threshold:
            return None

        try:
            barcode = build_barcode(detection)
            accepted = self._filter(barcode) if self._filter else True
        except Exception as e:
            if self._on_failed is None:
                raise
            logger.error(f"Barcode processing error: {e}")
            self._on_failed(e)
            return None

        if not accepted:
            logger.debug(f"Barcode rejected by filter: {barcode.data!r}")
            return None

        self._on_success([barcode])
        self._sightings.clear()
        logger.info(f"✅ Delivered {barcode.format}: {barcode.data!r}")

        if self._stop_after_success:
            self._running = False

        return barcode

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def restart(self) -> None:
        """Re-arm a stopped session."""
        self._sightings.clear()
        self._running = True

    def dispose(self) -> None:
        """Stop the session and forget all sightings."""
        self._running = False
        self._sightings.clear()
