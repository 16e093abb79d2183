#!/usr/bin/env python3
"""
Generate a synthetic clip for trying out the trackers
"""

import argparse

import cv2
import numpy as np


def create_test_video(output_path="test_input.mp4", duration_sec=5, fps=30, width=640, height=480):
    """Write a clip with a textured square drifting across a gradient."""
    total_frames = int(duration_sec * fps)

    fourcc = cv2.VideoWriter_fourcc(*'mp4v')
    out = cv2.VideoWriter(output_path, fourcc, fps, (width, height))

    print(f"Creating test video: {output_path}")
    print(f"Duration: {duration_sec}s, FPS: {fps}, Frames: {total_frames}")

    gradient = np.zeros((height, width, 3), dtype=np.uint8)
    gradient[:, :, 0] = np.linspace(0, 255, width, dtype=np.uint8)[None, :]
    gradient[:, :, 1] = np.linspace(0, 255, height, dtype=np.uint8)[:, None]

    for frame_num in range(total_frames):
        frame = gradient.copy()

        # the target: a checkered square so appearance trackers have texture
        t = frame_num / max(total_frames - 1, 1)
        cx = int(width * 0.2 + width * 0.6 * t)
        cy = int(height * 0.5 + 40 * np.sin(2 * np.pi * t))
        cv2.rectangle(frame, (cx - 20, cy - 20), (cx + 20, cy + 20), (255, 255, 255), -1)
        cv2.rectangle(frame, (cx - 20, cy - 20), (cx, cy), (0, 0, 0), -1)
        cv2.rectangle(frame, (cx, cy), (cx + 20, cy + 20), (0, 0, 0), -1)

        out.write(frame)

    out.release()
    print(f"Target starts at {int(width * 0.2)},{height // 2}")
    return total_frames


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create a synthetic tracking test video")
    parser.add_argument("--output", default="test_input.mp4")
    parser.add_argument("--duration", type=float, default=5)
    parser.add_argument("--fps", type=int, default=30)
    args = parser.parse_args()
    create_test_video(args.output, args.duration, args.fps)
