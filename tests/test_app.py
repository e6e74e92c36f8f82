"""
Test suite for logging setup and the headless frame loop.
"""

import json
import logging

import numpy as np
import pygame
import pytest

import constants
import logger_setup
import main
from comet_field import CometField


@pytest.fixture
def config_file(tmp_path):
    config = {
        'run_id': 'test-run',
        'logging': {'level': 'DEBUG', 'format': '%(levelname)s %(message)s'},
    }
    path = tmp_path / 'config.json'
    path.write_text(json.dumps(config))
    return path


@pytest.fixture
def comet_logger():
    yield logging.getLogger("comet_sim")
    logger = logging.getLogger("comet_sim")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


class TestLoggerSetup:
    """Test the dedicated application logger."""

    def test_creates_run_log(self, config_file, tmp_path, comet_logger):
        logger = logger_setup.setup_logging(str(config_file), log_root=str(tmp_path / 'runs'))
        assert logger is comet_logger
        assert logger.level == logging.DEBUG
        assert logger.propagate is False

        logger.debug("hello comets")
        for handler in logger.handlers:
            handler.flush()
        log_text = (tmp_path / 'runs' / 'test-run' / 'comets.log').read_text()
        assert "hello comets" in log_text

    def test_reentrant_setup_does_not_duplicate_handlers(self, config_file, tmp_path, comet_logger):
        logger_setup.setup_logging(str(config_file), log_root=str(tmp_path / 'runs'))
        logger = logger_setup.setup_logging(str(config_file), log_root=str(tmp_path / 'runs'))
        assert len(logger.handlers) == 2


class TestFrameLoop:
    """Test the pygame loop with the dummy video driver."""

    def test_runs_bounded_number_of_ticks(self, size_config):
        pygame.init()
        try:
            screen = pygame.display.set_mode((constants.WIDTH, constants.HEIGHT))
            field = CometField(
                {'comet_count': 3, 'min_speed': 2.0, 'max_speed': 4.0, 'margin': 20},
                size_config,
                np.random.default_rng(1),
                (constants.WIDTH, constants.HEIGHT),
            )
            start = [c.position for c in field.comets]

            ticks = main.run_loop(field, screen, pygame.time.Clock(), {'max_ticks': 3, 'log_interval': 1})

            assert ticks == 3
            assert [c.position for c in field.comets] != start
        finally:
            pygame.quit()
