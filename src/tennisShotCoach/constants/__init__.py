from pathlib import Path

from tennisShotCoach.constants.pose_definition import (
    KEYPOINT_NAMES, NUM_KEYPOINTS,
    NOSE, L_EYE, R_EYE, L_EAR, R_EAR,
    L_SH, R_SH, L_EL, R_EL, L_WR, R_WR,
    L_HIP, R_HIP, L_KNE, R_KNE, L_ANK, R_ANK,
    TENNIS_LANDMARKS,
)

CONFIG_FILE_PATH = Path("config/config.yaml")
PARAMS_FILE_PATH = Path("params.yaml")
