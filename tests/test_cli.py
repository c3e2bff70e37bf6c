import io
import math
import random

import pytest

from tinynn.cli import list_csv_files, load_input_from_file, main, run_inference
from tinynn.generator import PRESETS, generate_model
from tinynn.manager import is_valid_model_dir
from tinynn.model import load_model


def _answers(*values):
    it = iter(values)
    return lambda _text: next(it)


@pytest.fixture
def micro_model(tmp_path):
    models = tmp_path / "models"
    path = models / "micro"
    generate_model(PRESETS[0], path, random.Random(7))
    return models, path


def test_load_input_reads_comma_separated(tmp_path):
    f = tmp_path / "in.csv"
    f.write_text("1.5,2,3\n")
    assert load_input_from_file(f, 3) == [1.5, 2.0, 3.0]


def test_load_input_reads_whitespace_separated(tmp_path):
    f = tmp_path / "in.csv"
    f.write_text("1.5\n-2 3e1")
    assert load_input_from_file(f, 3) == [1.5, -2.0, 30.0]


def test_load_input_pads_with_zeros_and_warns(tmp_path, capsys):
    f = tmp_path / "in.csv"
    f.write_text("4,5")
    assert load_input_from_file(f, 4) == [4.0, 5.0, 0.0, 0.0]
    assert "(2/4)" in capsys.readouterr().err


def test_load_input_truncates_extra_values(tmp_path):
    f = tmp_path / "in.csv"
    f.write_text("1,2,3,4,5")
    assert load_input_from_file(f, 2) == [1.0, 2.0]


def test_load_input_stops_at_unreadable_value(tmp_path):
    f = tmp_path / "in.csv"
    f.write_text("1,abc,3")
    assert load_input_from_file(f, 3) == [1.0, 0.0, 0.0]


def test_load_input_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        load_input_from_file(tmp_path / "missing.csv", 2)


def test_list_csv_files_filters_and_sorts(tmp_path):
    (tmp_path / "b.csv").write_text("1")
    (tmp_path / "a.csv").write_text("1")
    (tmp_path / "notes.txt").write_text("x")
    (tmp_path / ".csv").write_text("x")
    (tmp_path / "folder.csv").mkdir()
    result = list_csv_files(tmp_path)
    assert [p.rsplit("/", 1)[-1].rsplit("\\", 1)[-1] for p in result] == ["a.csv", "b.csv"]


def test_list_csv_files_missing_directory(tmp_path):
    assert list_csv_files(tmp_path / "nope") == []


def test_run_inference_with_dummy_data(micro_model):
    models, path = micro_model
    output = run_inference(models, models, _answers("1", "1"))
    expected = load_model(path).forward([1.0] * PRESETS[0].input_size)
    assert output == pytest.approx(expected)
    assert math.isclose(sum(output), 1.0, rel_tol=1e-9)
    assert len(output) == PRESETS[0].layer_sizes[-1]


def test_run_inference_with_csv_input(micro_model, tmp_path, capsys):
    models, path = micro_model
    data = tmp_path / "data"
    data.mkdir()
    values = [0.5] * PRESETS[0].input_size
    (data / "sample.csv").write_text(",".join(str(v) for v in values))
    output = run_inference(models, data, _answers("1", "2", "1"))
    assert output == pytest.approx(load_model(path).forward(values))
    assert "Sum of probabilities" in capsys.readouterr().out


def test_run_inference_retries_invalid_choices(micro_model):
    models, path = micro_model
    output = run_inference(models, models, _answers("x", "5", "1", "0", "1"))
    assert output == pytest.approx(load_model(path).forward([1.0] * PRESETS[0].input_size))


def test_run_inference_without_models(tmp_path, capsys):
    assert run_inference(tmp_path / "models", tmp_path, _answers()) is None
    assert "No models found" in capsys.readouterr().err


def test_run_inference_without_csv_files(micro_model, tmp_path, capsys):
    models, _ = micro_model
    empty = tmp_path / "empty"
    empty.mkdir()
    assert run_inference(models, empty, _answers("1", "2")) is None
    assert "No CSV files found" in capsys.readouterr().out


def test_run_inference_broken_model(tmp_path, capsys):
    broken = tmp_path / "models" / "broken"
    broken.mkdir(parents=True)
    (broken / "architecture.txt").write_text("2\n1\n0\n1\n")
    assert run_inference(tmp_path / "models", tmp_path, _answers("1")) is None
    assert "Failed to load model" in capsys.readouterr().err


def test_main_exits_on_zero(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main([]) == 0
    assert "Exiting. Goodbye!" in capsys.readouterr().out


def test_main_reports_invalid_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n9\n0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Invalid input. Please enter a number." in out
    assert "Invalid choice. Please try again." in out


def test_main_ends_on_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 0
    assert "TinyNN Main Menu" in capsys.readouterr().out


def test_main_generates_then_runs_model(monkeypatch, tmp_path, capsys):
    models = tmp_path / "models"
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n1\n2\n1\n1\n0\n"))
    assert main(["--models-dir", str(models), "--data-dir", str(tmp_path)]) == 0
    assert is_valid_model_dir(models / "generated_model")
    assert "Sum of probabilities: 1.000000" in capsys.readouterr().out