import os
import json
import math
from pathlib import Path
from typing import List

import yaml
from box import ConfigBox
from box.exceptions import BoxValueError

from tennisShotCoach import logger
from tennisShotCoach.constants import NUM_KEYPOINTS
from tennisShotCoach.entity.pose_entity import PoseObservation


def read_yaml(path_to_yaml: Path) -> ConfigBox:
    """reads yaml file and returns

    Args:
        path_to_yaml (str): path like input

    Raises:
        ValueError: if yaml file is empty
        e: empty file

    Returns:
        ConfigBox: ConfigBox type
    """
    try:
        with open(path_to_yaml) as yaml_file:
            content = yaml.safe_load(yaml_file)
            logger.info(f"yaml file: {path_to_yaml} loaded successfully")
            return ConfigBox(content)
    except BoxValueError:
        raise ValueError("yaml file is empty")
    except Exception as e:
        raise e


def create_directories(path_to_directories: list, verbose=True):
    """create list of directories

    Args:
        path_to_directories (list): list of path of directories
        verbose (bool, optional): log each created directory. Defaults to True.
    """
    for path in path_to_directories:
        os.makedirs(path, exist_ok=True)
        if verbose:
            logger.info(f"created directory at: {path}")


def save_json(path: Path, data: dict):
    """save json data

    Args:
        path (Path): path to json file
        data (dict): data to be saved in json file
    """
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(data, f, indent=4)

    logger.info(f"json file saved at: {path}")


def load_json(path: Path) -> ConfigBox:
    """load json files data

    Args:
        path (Path): path to json file

    Returns:
        ConfigBox: data as class attributes instead of dict
    """
    with open(path) as f:
        content = json.load(f)

    logger.info(f"json file loaded succesfully from: {path}")
    return ConfigBox(content)


def _finite(v) -> bool:
    try:
        return math.isfinite(float(v))
    except (TypeError, ValueError):
        return False


def _seq_frame_ok(kps) -> bool:
    if not isinstance(kps, list) or len(kps) != NUM_KEYPOINTS:
        return False
    return all(isinstance(kp, list) and len(kp) >= 3 and all(_finite(v) for v in kp[:3]) for kp in kps)


def load_pose_observations(path: Path) -> List[PoseObservation]:
    """load a pose observation stream

    Accepts either
        {"observations": [{"time", "keypoints": [{"x","y","score","name"}, ...], "confidence"}]}
    or the extractor dump
        {"fps_sample": 15, "seq": [[[x, y, score] * 17] * T]}   (frame i at i / fps_sample)

    Frames with a malformed keypoint list are dropped with a warning.

    Returns:
        List[PoseObservation]: observations in time order
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"observation file not found: {path}")
    content = load_json(path)

    observations: List[PoseObservation] = []
    skipped = 0
    if "observations" in content:
        for rec in content.observations or []:
            try:
                observations.append(PoseObservation.from_dict(rec))
            except (AttributeError, KeyError, IndexError, TypeError, ValueError) as e:
                skipped += 1
                t = rec.get("time") if isinstance(rec, dict) else None
                logger.warning(f"[SKIP] observation at t={t}: {e}")
    elif "seq" in content:
        fps = float(content.get("fps_sample", 15))
        for i, kps in enumerate(content.seq or []):
            if not _seq_frame_ok(kps):
                skipped += 1
                continue
            observations.append(PoseObservation.from_array(i / fps, [kp[:3] for kp in kps]))
    else:
        raise ValueError(f"{path}: expected an 'observations' or 'seq' key")

    if skipped:
        logger.warning(f"{path}: dropped {skipped} malformed frame(s)")
    observations.sort(key=lambda o: o.time)
    return observations
