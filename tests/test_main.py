"""
Testes da linha de comando.
"""

import io
import json

import main
from main import create_parser, run_stats

from conftest import text_stream, trade_line


def write_input(tmp_path, lines):
    path = tmp_path / "trades.txt"
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    return path


class TestMain:

    def test_file_to_file(self, tmp_path, example_lines):
        input_path = write_input(tmp_path, example_lines)
        output_path = tmp_path / "out.jsonl"

        exit_code = main.main([str(input_path), "-o", str(output_path)])

        assert exit_code == 0
        lines = output_path.read_text(encoding="utf-8").splitlines()
        assert [json.loads(line) for line in lines] == [{
            "total_volume": 20.0,
            "mean_price": 3.0,
            "mean_volume": 10.0,
            "volume_weighted_average_price": 3.0,
            "percentage_buy": 0.5,
        }]

    def test_stdin_to_stdout(self, monkeypatch, capsys, example_lines):
        monkeypatch.setattr("sys.stdin", text_stream(*example_lines))

        exit_code = main.main(["--include-market"])

        assert exit_code == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["market"] == 1
        assert payload["percentage_buy"] == 0.5

    def test_strict_mode_fails_on_malformed_line(self, tmp_path):
        input_path = write_input(tmp_path, ["BEGIN", trade_line(id=1), "{broken", "END"])
        output_path = tmp_path / "out.jsonl"

        exit_code = main.main([str(input_path), "-o", str(output_path), "--strict"])

        assert exit_code == 1
        assert not output_path.exists()

    def test_failed_run_keeps_previous_output(self, tmp_path):
        input_path = write_input(tmp_path, ["BEGIN", trade_line(id=1), "{broken", "END"])
        output_path = tmp_path / "out.jsonl"
        output_path.write_text("resultado anterior\n", encoding="utf-8")

        exit_code = main.main([str(input_path), "-o", str(output_path), "--strict"])

        assert exit_code == 1
        assert output_path.read_text(encoding="utf-8") == "resultado anterior\n"

    def test_skip_mode_is_default(self, tmp_path):
        input_path = write_input(tmp_path, ["BEGIN", trade_line(id=1), "{broken", "END"])
        output_path = tmp_path / "out.jsonl"

        exit_code = main.main([str(input_path), "-o", str(output_path)])

        assert exit_code == 0
        assert len(output_path.read_text(encoding="utf-8").splitlines()) == 1

    def test_missing_input_file(self, tmp_path):
        exit_code = main.main([str(tmp_path / "nao_existe.txt")])

        assert exit_code == 1

    def test_show_report_goes_to_stderr(self, tmp_path, capsys, example_lines):
        input_path = write_input(tmp_path, example_lines)

        exit_code = main.main([str(input_path), "--show-report"])

        assert exit_code == 0
        captured = capsys.readouterr()
        assert "Negócios aplicados" in captured.err
        assert "Negócios aplicados" not in captured.out
        assert json.loads(captured.out)["total_volume"] == 20.0


class TestParser:

    def test_defaults_defer_to_config(self):
        args = create_parser().parse_args([])

        assert args.input is None
        assert args.output is None
        assert args.include_market is None
        assert args.sort_markets is None
        assert args.show_report is None
        assert args.strict is False
        assert args.log_level is None

    def test_flags(self):
        args = create_parser().parse_args(
            ["in.txt", "-o", "out.jsonl", "--sort-markets", "--strict", "--log-level", "DEBUG"]
        )

        assert args.input == "in.txt"
        assert args.output == "out.jsonl"
        assert args.sort_markets is True
        assert args.strict is True
        assert args.log_level == "DEBUG"


def test_run_stats_returns_report(example_lines):
    out = io.StringIO()

    report = run_stats(text_stream(*example_lines), out, include_market=False, sort_markets=False)

    assert report.records_applied == 2
    assert len(out.getvalue().splitlines()) == 1
