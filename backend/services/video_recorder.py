"""
Video Recording Service for Snake Grid sessions

Collects every rendered frame of a session and encodes them to MP4 using
MoviePy/FFmpeg once the session ends. Playback runs at the tick rate, so a
300ms tick interval gives a clip of about 3.3 frames per second.
"""

import logging
import os
from typing import List

import numpy as np
from PIL import Image
from moviepy import ImageSequenceClip

logger = logging.getLogger(__name__)


class SessionRecorder:
    """Accumulate frames in memory and write them out as one clip."""

    def __init__(self, output_path: str, tick_interval_ms: int):
        self.output_path = output_path
        self.fps = 1000.0 / tick_interval_ms
        self.frames: List[np.ndarray] = []

    def add_frame(self, frame: Image.Image) -> None:
        self.frames.append(np.array(frame.convert('RGB')))

    def __len__(self) -> int:
        return len(self.frames)

    def save(self) -> str:
        """
        Encode the collected frames to self.output_path.

        Returns:
            Path to the written video file

        Raises:
            ValueError: if no frame was recorded
        """
        if not self.frames:
            raise ValueError("No frames recorded; nothing to write.")

        output_dir = os.path.dirname(os.path.abspath(self.output_path))
        os.makedirs(output_dir, exist_ok=True)

        logger.info(f"Writing {len(self.frames)} frames to {self.output_path} at {self.fps:.2f} fps")
        clip = ImageSequenceClip(self.frames, fps=self.fps)
        clip.write_videofile(
            self.output_path,
            codec='libx264',
            audio=False,
            logger=None
        )
        clip.close()

        logger.info(f"Video created successfully at {self.output_path}")
        return self.output_path
