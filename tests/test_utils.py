import csv
import json

from car_chat_parser.assembler import assemble
from car_chat_parser.utils import save_to_csv, save_to_file, save_to_json


def test_save_to_json(tmp_path, sample_reply):
    path = tmp_path / "out.json"
    save_to_json([assemble(sample_reply), assemble("nothing")], str(path), names=["a.md", "b.md"])

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["metadata"]["total_responses"] == 2
    assert data["metadata"]["with_details"] == 1
    assert data["responses"][0]["input"] == "a.md"
    assert data["responses"][0]["details"]["make"] == "Toyota"
    assert data["responses"][1]["details"] is None


def test_save_to_csv(tmp_path, sample_reply):
    path = tmp_path / "out.csv"
    save_to_csv([assemble(sample_reply), assemble("nothing")], str(path))

    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))

    assert len(rows) == 2
    assert rows[0]["make"] == "Toyota"
    assert rows[0]["monthly_from"] == "€320"
    assert rows[0]["source_names"] == "Carzone"
    assert rows[1]["make"] == ""
    assert rows[1]["source_urls"] == ""


def test_save_to_file_detects_format(tmp_path, sample_reply):
    responses = [assemble(sample_reply)]

    save_to_file(responses, str(tmp_path / "out.csv"))
    save_to_file(responses, str(tmp_path / "out.txt"))
    save_to_file(responses, str(tmp_path / "forced.json"), format="csv")

    assert (tmp_path / "out.csv").read_text(encoding="utf-8").startswith("input,make,")
    assert json.loads((tmp_path / "out.txt").read_text(encoding="utf-8"))["responses"]
    assert (tmp_path / "forced.json").read_text(encoding="utf-8").startswith("input,")
