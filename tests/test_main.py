"""
Entry Point Tests

End-to-end runs of cli.main.main against the bundled catalog with scripted
console input; fatal errors map to messages and exit codes.

Run:
----
    pytest tests/test_main.py -v
"""

import io as std_io

import pytest
from sklearn.ensemble import GradientBoostingClassifier

from cli.config import AppConfig
from cli.main import CLOSE_PROMPT, EXIT_END_OF_INPUT, EXIT_FATAL, EXIT_OK, WELCOME, main
from recommender.errors import EndOfInputError
from recommender.services.line_io import ConsoleIO
from recommender.session import ACCEPTED_MESSAGE

from .helpers import DATA_DIR, CapturingIO

RECOMMENDS = "The phone we recommend that will suit you the most is:"


def _config(**overrides) -> AppConfig:
    values = {"catalog_path": DATA_DIR / "smartphones.csv"}
    values.update(overrides)
    return AppConfig(**values)


class TestMain:
    def test_accepting_session_exits_ok(self):
        io = CapturingIO(["ios", "90", "yes", ""])

        code = main(io=io, config=_config())

        assert code == EXIT_OK
        assert io.output[0] == WELCOME
        assert io.count(ACCEPTED_MESSAGE) == 1
        assert io.count(CLOSE_PROMPT) == 1
        assert io.remaining == 0

    def test_missing_close_line_still_ok(self):
        io = CapturingIO(["android", "30", "yes"])

        assert main(io=io, config=_config()) == EXIT_OK

    def test_end_of_input_exit_code(self):
        io = CapturingIO(["ios"])

        assert main(io=io, config=_config()) == EXIT_END_OF_INPUT

    def test_missing_catalog_is_fatal(self, tmp_path):
        io = CapturingIO([])

        code = main(io=io, config=_config(catalog_path=tmp_path / "missing.csv"))

        assert code == EXIT_FATAL
        assert io.count("Could not load the smartphone catalog") == 1

    def test_single_device_catalog_is_fatal(self, tmp_path):
        path = tmp_path / "phones.csv"
        path.write_text("header\nOnly,1h,IOS\nOnly,2h,IOS\n", encoding="utf-8")
        io = CapturingIO([])

        code = main(io=io, config=_config(catalog_path=path))

        assert code == EXIT_FATAL
        assert io.count("The recommendation model failed") == 1

    def test_bad_recommender_settings_are_fatal(self, tmp_path):
        path = tmp_path / "recommender.json"
        path.write_text("{")
        io = CapturingIO([])

        code = main(io=io, config=_config(recommender_config_path=path))

        assert code == EXIT_FATAL
        assert io.count("Configuration error") == 1

    def test_non_object_settings_section_is_fatal(self, tmp_path):
        path = tmp_path / "recommender.json"
        path.write_text('{"session": 5}')
        io = CapturingIO([])

        code = main(io=io, config=_config(recommender_config_path=path))

        assert code == EXIT_FATAL
        assert io.count("Configuration error") == 1

    def test_prediction_failure_is_fatal(self, monkeypatch):
        def fail(self, features):
            raise RuntimeError("estimator cannot score input")

        monkeypatch.setattr(GradientBoostingClassifier, "predict", fail)
        io = CapturingIO(["ios", "90", "yes"])

        code = main(io=io, config=_config())

        assert code == EXIT_FATAL
        assert io.count("The recommendation model failed") == 1
        assert io.count(RECOMMENDS) == 0


class TestConsoleIO:
    def test_reads_lines_and_writes_output(self):
        stdin = std_io.StringIO("ios\n90\r\n")
        stdout = std_io.StringIO()
        console = ConsoleIO(stdin=stdin, stdout=stdout)

        assert console.read_line() == "ios"
        assert console.read_line() == "90"
        console.write("hello")

        assert stdout.getvalue() == "hello\n"

    def test_blank_line_is_not_end_of_input(self):
        console = ConsoleIO(stdin=std_io.StringIO("\n"), stdout=std_io.StringIO())

        assert console.read_line() == ""

    def test_end_of_stream_raises(self):
        console = ConsoleIO(stdin=std_io.StringIO(""), stdout=std_io.StringIO())

        with pytest.raises(EndOfInputError):
            console.read_line()
