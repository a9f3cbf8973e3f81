import io
import logging
import unittest

from buglab.utils.logger import configure_logging, get_logger


class LoggerTests(unittest.TestCase):
    def tearDown(self) -> None:
        configure_logging()

    def test_short_names_are_namespaced(self) -> None:
        self.assertEqual(get_logger("cli").name, "buglab.cli")
        self.assertEqual(get_logger("buglab.engine.search").name, "buglab.engine.search")
        self.assertEqual(get_logger().name, "buglab")

    def test_search_level_is_set_separately(self) -> None:
        stream = io.StringIO()
        configure_logging(logging.WARNING, search_level=logging.DEBUG, stream=stream)

        get_logger("engine.strategies").debug("Current best: 4")
        get_logger("engine.record_store").info("Record 4 saved")

        output = stream.getvalue()
        self.assertIn("Current best: 4", output)
        self.assertIn("| DEBUG   | buglab.engine.strategies |", output)
        self.assertNotIn("Record 4 saved", output)

    def test_reconfiguring_replaces_handler(self) -> None:
        configure_logging(stream=io.StringIO())
        configure_logging(stream=io.StringIO())
        self.assertEqual(len(logging.getLogger("buglab").handlers), 1)
        self.assertEqual(logging.getLogger("buglab.engine.strategies").level, logging.NOTSET)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
