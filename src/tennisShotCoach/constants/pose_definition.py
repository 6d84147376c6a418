# --- COCO keypoint indices (17 points) ---
KEYPOINT_NAMES = [
    "nose", "left_eye", "right_eye", "left_ear", "right_ear",
    "left_shoulder", "right_shoulder",
    "left_elbow", "right_elbow",
    "left_wrist", "right_wrist",
    "left_hip", "right_hip",
    "left_knee", "right_knee",
    "left_ankle", "right_ankle"
]
NUM_KEYPOINTS = len(KEYPOINT_NAMES)

# --- Index aliases for convenience ---
NOSE = 0
L_EYE, R_EYE = 1, 2
L_EAR, R_EAR = 3, 4
L_SH, R_SH = 5, 6
L_EL, R_EL = 7, 8
L_WR, R_WR = 9, 10
L_HIP, R_HIP = 11, 12
L_KNE, R_KNE = 13, 14
L_ANK, R_ANK = 15, 16

# landmarks used for swing analysis: field name on TennisFeatures -> keypoint index
TENNIS_LANDMARKS = {
    "left_wrist": L_WR, "right_wrist": R_WR,
    "left_elbow": L_EL, "right_elbow": R_EL,
    "left_shoulder": L_SH, "right_shoulder": R_SH,
    "left_hip": L_HIP, "right_hip": R_HIP,
    "nose": NOSE,
}
