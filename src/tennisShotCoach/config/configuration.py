from dataclasses import fields

from tennisShotCoach.constants import *
from tennisShotCoach.utils.common import *
from tennisShotCoach.entity.config_entity import *


def _params_from_section(params_cls, section, **nested):
    """dataclass from a params.yaml section; keys absent from the yaml keep their defaults"""
    section = section or {}
    values = {f.name: section[f.name] for f in fields(params_cls) if f.name in section}
    values.update(nested)
    return params_cls(**values)


class ConfigurationManager:
    def __init__(
        self,
        config_filepath = CONFIG_FILE_PATH,
        params_filepath = PARAMS_FILE_PATH):

        self.config = read_yaml(config_filepath)
        self.params = read_yaml(params_filepath)

        create_directories([self.config.artifacts_root])

    def get_shot_detection_params(self) -> ShotDetectionParams:
        shot_detection_params = _params_from_section(
            ShotDetectionParams,
            self.params.get("shot_detection"),
            handedness=_params_from_section(HandednessParams, self.params.get("handedness")),
            segmenter=_params_from_section(SegmenterParams, self.params.get("segmentation")),
            classifier=_params_from_section(ClassifierParams, self.params.get("classification")),
            interpolation=_params_from_section(InterpolationParams, self.params.get("interpolation")),
        )
        return shot_detection_params

    def get_shot_analysis_config(self) -> ShotAnalysisConfig:
        config = self.config.shot_analysis

        create_directories([config.root_dir])

        shot_analysis_config = ShotAnalysisConfig(
            root_dir=Path(config.root_dir),
            observations_path=Path(config.observations_path),
            report_path=Path(config.report_path),
            params=self.get_shot_detection_params(),
        )
        return shot_analysis_config
