from tennisShotCoach.config.configuration import ConfigurationManager
from tennisShotCoach.components.shot_analysis import ShotAnalysis
from tennisShotCoach import logger

STAGE_NAME = "Shot Analysis stage"


class ShotAnalysisPipeline:
    def __init__(self):
        pass

    def main(self):
        config = ConfigurationManager()
        shot_analysis_config = config.get_shot_analysis_config()
        shot_analysis = ShotAnalysis(config=shot_analysis_config)
        result = shot_analysis.run()
        logger.info(f"shots: {result.summary.shot_counts} -> {shot_analysis_config.report_path}")
        return result


if __name__ == '__main__':
    try:
        logger.info(f">>>>>>>> stage {STAGE_NAME} start <<<<<<<<")
        obj = ShotAnalysisPipeline()
        obj.main()
        logger.info(f">>>>>>>> stage {STAGE_NAME} completed <<<<<<<<\n\nx===============")
    except Exception as e:
        logger.exception(e)
        raise e
