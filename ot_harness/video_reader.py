import logging

import cv2

from .errors import EmptyVideoError, SourceOpenError

logger = logging.getLogger(__name__)

DEFAULT_FPS = 30.0


class VideoReader:
    def __init__(self, video_path):
        self.video_path = video_path
        self.cap = cv2.VideoCapture(video_path)

        if not self.cap.isOpened():
            raise SourceOpenError(f"Cannot open video file: {video_path}")

        self.frame_width = int(self.cap.get(cv2.CAP_PROP_FRAME_WIDTH))
        self.frame_height = int(self.cap.get(cv2.CAP_PROP_FRAME_HEIGHT))
        fps = self.cap.get(cv2.CAP_PROP_FPS)
        self.fps = fps if fps and fps > 0 else DEFAULT_FPS
        self.frame_count = int(self.cap.get(cv2.CAP_PROP_FRAME_COUNT))

    def read_frame(self):
        ret, frame = self.cap.read()
        if not ret:
            return None
        return frame

    def rewind(self):
        self.cap.set(cv2.CAP_PROP_POS_FRAMES, 0)

    def peek_first_frame(self):
        """Read the first frame and rewind so the loop sees it again."""
        frame = self.read_frame()
        if frame is None:
            raise EmptyVideoError(f"The video had no frames: {self.video_path}")
        self.rewind()
        if frame.shape[1] != self.frame_width or frame.shape[0] != self.frame_height:
            logger.debug("Container frame size differs from decoded frame, using decoded size")
            self.frame_height, self.frame_width = frame.shape[:2]
        return frame

    def release(self):
        self.cap.release()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
