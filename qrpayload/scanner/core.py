"""
==============================================================================
Barcode Scanner Core Module
==============================================================================

Frame scanner that adapts pyzbar detections to scan sessions.

Features:
---------
- Frame decoding with pyzbar
- Detections fed to a debouncing ScanSession
- Static image scanning
- Live camera scanning with OpenCV capture

This module needs the zbar shared library, so it is not imported by the
package __init__. Import it directly:

    from qrpayload.scanner.core import BarcodeScanner

==============================================================================
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import cv2
import numpy as np
from pyzbar.pyzbar import decode

from qrpayload.config import get_settings
from qrpayload.core.exceptions import camera_unavailable

from .models import Barcode, Detection
from .results import build_barcode
from .session import ScanSession


# Module logger
logger = logging.getLogger(__name__)


class BarcodeScanner:
    """
    Barcode scanner backed by pyzbar and OpenCV.

    Attributes:
        session: ScanSession receiving detections from processed frames

    Example:
        >>> session = ScanSession(on_success=handle_barcodes)
        >>> scanner = BarcodeScanner(session)
        >>> barcode = scanner.process_frame(frame)
    """

    def __init__(
        self,
        session: Optional[ScanSession] = None,
        camera_index: Optional[int] = None
    ) -> None:
        """
        Initialize scanner instance.

        Args:
            session: Session to feed (required for frame/camera scanning)
            camera_index: Camera device index (settings default if None)
        """
        settings = get_settings()
        self.session = session
        self._camera_index = (
            settings.camera_index if camera_index is None else camera_index
        )
        self._cap = None

        logger.debug(f"Scanner created (camera {self._camera_index})")

    # =========================================================================
    # FRAME PROCESSING METHODS
    # =========================================================================

    def detect(self, frame: np.ndarray) -> List[Detection]:
        """
        Detect symbols in a single frame.

        Args:
            frame: OpenCV image (numpy array)

        Returns:
            List of detections, empty when nothing was found
        """
        if frame is None or frame.size == 0:
            return []

        try:
            symbols = decode(frame)
        except Exception as e:
            logger.error(f"Decode error: {e}")
            return []

        return [
            Detection(
                value=symbol.data.decode("utf-8", errors="replace"),
                format=symbol.type
            )
            for symbol in symbols
        ]

    def process_frame(self, frame: np.ndarray) -> Optional[Barcode]:
        """
        Detect symbols in a frame and feed them to the session.

        Returns:
            Barcode delivered by the session for this frame, or None
        """
        if self.session is None:
            raise ValueError("process_frame requires a ScanSession")

        detections = self.detect(frame)
        if not detections:
            return None

        return self.session.submit(detections)

    def scan_image(self, image_path: Path) -> List[Barcode]:
        """Scan barcodes from a static image file (no debouncing)."""
        image_path = Path(image_path)
        if not image_path.exists():
            logger.error(f"Image not found: {image_path}")
            return []

        frame = cv2.imread(str(image_path))
        if frame is None:
            logger.error(f"Could not read image: {image_path}")
            return []

        return [build_barcode(detection) for detection in self.detect(frame)]

    # =========================================================================
    # CAMERA METHODS
    # =========================================================================

    def scan_camera(self, duration_seconds: Optional[int] = None) -> Optional[Barcode]:
        """
        Read camera frames until the session delivers a barcode.

        Args:
            duration_seconds: How long to scan (0 = indefinite,
                settings default if None)

        Returns:
            Delivered barcode, or None if the duration elapsed

        Raises:
            ScanException: If the camera cannot be opened
        """
        if self.session is None:
            raise ValueError("scan_camera requires a ScanSession")

        if duration_seconds is None:
            duration_seconds = get_settings().scan_timeout_seconds

        self._cap = cv2.VideoCapture(self._camera_index)

        if not self._cap.isOpened():
            self.close()
            raise camera_unavailable(self._camera_index)

        logger.info(f"📷 Starting camera scan (camera {self._camera_index})")

        start_time = cv2.getTickCount()

        try:
            while self.session.is_running:
                ret, frame = self._cap.read()
                if not ret:
                    logger.warning("Failed to read frame")
                    break

                barcode = self.process_frame(frame)
                if barcode is not None:
                    return barcode

                if duration_seconds > 0:
                    elapsed = (cv2.getTickCount() - start_time) / cv2.getTickFrequency()
                    if elapsed >= duration_seconds:
                        logger.info(f"Duration {duration_seconds}s reached")
                        break
        finally:
            self.close()

        return None

    def close(self) -> None:
        """Release the capture device."""
        if self._cap is not None:
            self._cap.release()
            self._cap = None
        logger.debug("Scanner closed")
