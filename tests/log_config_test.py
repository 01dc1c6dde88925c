import logging
import unittest
from unittest.mock import patch

from kelvin_converter.config.constants import LOG_FORMAT
from kelvin_converter.utils.log_config import configure_logging


class TestConfigureLogging(unittest.TestCase):

    @patch('kelvin_converter.utils.log_config.logging.basicConfig')
    def test_configure_logging(self, mock_basic_config):
        logger = configure_logging(logging.DEBUG)

        mock_basic_config.assert_called_once_with(level=logging.DEBUG, format=LOG_FORMAT)
        self.assertEqual(logger.name, "kelvin_converter")


if __name__ == '__main__':
    unittest.main()
