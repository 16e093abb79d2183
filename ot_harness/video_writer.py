import cv2

from .errors import OutputOpenError


class VideoWriter:
    def __init__(self, output_path, frame_width, frame_height, fps=30, codec='mp4v'):
        self.output_path = output_path
        self.frame_width = frame_width
        self.frame_height = frame_height
        self.fps = fps
        self.frames_written = 0
        self.fourcc = cv2.VideoWriter_fourcc(*codec)
        self.writer = cv2.VideoWriter(self.output_path, self.fourcc, self.fps, (self.frame_width, self.frame_height))

        if not self.writer.isOpened():
            self.writer = None
            raise OutputOpenError(f"Failed to create output video: {output_path}")

    def write_frame(self, frame):
        if self.writer is not None:
            self.writer.write(frame)
            self.frames_written += 1

    def release(self):
        if self.writer is not None:
            self.writer.release()
            self.writer = None
