import threading

import cv2
import numpy as np
import pygame

from sadlines.config import WEBCAM_CAPTURE_SIZE


class WebcamPreview:
    """Decorative camera feed. Any failure just means nothing gets drawn.

    Frames are grabbed on a background thread so a slow camera never holds
    back the animation; ``read`` only converts the latest grabbed frame.
    """

    def __init__(self, index=0, size=WEBCAM_CAPTURE_SIZE):
        self.index = index
        self.size = size
        self.cap = None
        self.failed = False
        self.latest_frame = None
        self.thread = None
        self.thread_running = False
        self.open()

    def open(self):
        cap = cv2.VideoCapture(self.index)
        if not cap.isOpened():
            print(f"Webcam {self.index} unavailable, preview disabled.")
            cap.release()
            self.failed = True
            return
        cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.size[0])
        cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.size[1])
        self.cap = cap
        print(f"Webcam {self.index} opened.")
        self.start_thread()

    def start_thread(self):
        self.thread_running = True
        self.thread = threading.Thread(target=self.grab_frames, daemon=True)
        self.thread.start()

    def grab_frames(self):
        while self.thread_running:
            ok, frame = self.cap.read()
            if not ok or frame is None:
                print(f"Webcam {self.index} stopped delivering frames, preview disabled.")
                self.failed = True
                break
            self.latest_frame = frame
        self.thread_running = False

    def stop_thread(self):
        self.thread_running = False
        if self.thread is not None and self.thread.is_alive():
            self.thread.join(timeout=1.0)
        self.thread = None

    @property
    def available(self):
        return self.cap is not None and not self.failed

    def read(self):
        frame = self.latest_frame
        if not self.available or frame is None:
            return None
        frame = cv2.flip(frame, 1)
        rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        return pygame.surfarray.make_surface(np.transpose(rgb, (1, 0, 2)))

    def close(self):
        self.stop_thread()
        if self.cap is not None:
            self.cap.release()
            self.cap = None
        self.latest_frame = None
