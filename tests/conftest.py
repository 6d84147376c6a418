import numpy as np
import pytest

from tennisShotCoach.constants import (
    NOSE, L_EYE, R_EYE, L_EAR, R_EAR, L_SH, R_SH, L_EL, R_EL, L_WR, R_WR,
    L_HIP, R_HIP, L_KNE, R_KNE, L_ANK, R_ANK,
)
from tennisShotCoach.entity.pose_entity import MotionDescriptor, PoseObservation
from tennisShotCoach.entity.shot_entity import SegmentFrame, ShotSegment

# subject seen from behind: right shoulder on image right, torso length 100 px
BASE_POSE = {
    NOSE: (300, 60), L_EYE: (295, 55), R_EYE: (305, 55), L_EAR: (290, 60), R_EAR: (310, 60),
    L_SH: (260, 100), R_SH: (340, 100),
    L_EL: (250, 130), R_EL: (350, 130),
    L_WR: (240, 150), R_WR: (360, 150),
    L_HIP: (280, 200), R_HIP: (320, 200),
    L_KNE: (280, 260), R_KNE: (320, 260),
    L_ANK: (280, 320), R_ANK: (320, 320),
}


def make_pose(time, right_wrist=None, left_wrist=None, score=0.9, scale=1.0,
              left_shoulder=None, right_shoulder=None):
    kpts = np.zeros((17, 3))
    kpts[:, 2] = score
    for idx, (x, y) in BASE_POSE.items():
        kpts[idx, :2] = (x, y)
    if right_wrist is not None:
        kpts[R_WR, :2] = right_wrist
    if left_wrist is not None:
        kpts[L_WR, :2] = left_wrist
    if left_shoulder is not None:
        kpts[L_SH, :2] = left_shoulder
    if right_shoulder is not None:
        kpts[R_SH, :2] = right_shoulder
    kpts[:, :2] *= scale
    return PoseObservation.from_array(time, kpts)


def swing_stream(n=30, spike=range(10, 15), spike_px=20.0, racket="right"):
    """
    n frames, 0.1 s apart. The racket wrist jitters 1 px per frame
    (0.1 torso/s) and moves spike_px per frame outward during `spike`.
    """
    sign = 1.0 if racket == "right" else -1.0
    x = 360.0 if racket == "right" else 240.0
    stream = []
    for i in range(n):
        if i > 0:
            x += sign * spike_px if i in spike else (1.0 if i % 2 else -1.0)
        t = round(i * 0.1, 6)
        if racket == "right":
            stream.append(make_pose(t, right_wrist=(x, 150.0)))
        else:
            stream.append(make_pose(t, left_wrist=(x, 150.0)))
    return stream


def make_motion(**overrides):
    values = dict(
        dt=0.1,
        racket_wrist_velocity=0.1,
        off_wrist_velocity=0.0,
        racket_elbow_velocity=0.0,
        shoulder_rotation_rate=0.0,
        hands_distance=1.2,
        racket_wrist_height=0.5,
        off_wrist_height=0.5,
        side_sign=1.0,
        is_horizontal=False,
        is_vertical=False,
        is_upward=False,
        movement_intensity=0.05,
        keypoint_confidence=0.9,
    )
    values.update(overrides)
    return MotionDescriptor(**values)


def velocity_frames(velocities, dt=0.1, keypoint_confidence=0.9):
    return [
        SegmentFrame(time=round(i * dt, 6),
                     motion=make_motion(racket_wrist_velocity=v, keypoint_confidence=keypoint_confidence),
                     features=None)
        for i, v in enumerate(velocities)
    ]


def make_segment(motions, start=1.0, dt=0.1):
    frames = [SegmentFrame(time=round(start + i * dt, 6), motion=m, features=None)
              for i, m in enumerate(motions)]
    seg = ShotSegment.start(frames[0])
    for f in frames[1:]:
        seg.add(f, high=True)
    return seg


@pytest.fixture
def forehand_stream():
    return swing_stream()
