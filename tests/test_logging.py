import logging

from curtain_sim.logging_config import setup_logging


def test_setup_logging(tmp_path):
    log_file = tmp_path / "curtain.log"
    logger = setup_logging(logging.DEBUG, log_file=str(log_file))
    assert len(logger.handlers) == 2

    logger = setup_logging(logging.INFO)
    assert len(logger.handlers) == 1
    assert logger.name == "curtain_sim"

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
