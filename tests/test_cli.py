import json

import pytest

from grill_pairing.entrypoints.auto_route_supply_air_grills import (
    EXIT_FAILED,
    EXIT_NOTHING_ROUTED,
    EXIT_OK,
    main,
)


def test_main_writes_report(tmp_path, model_file):
    report = tmp_path / "out" / "routing.json"
    code = main(["--model", str(model_file), "--device-id", "ADB-1", "--report-out", str(report)])

    assert code == EXIT_OK
    data = json.loads(report.read_text(encoding="utf-8"))
    assert data["status"] == "ok"
    assert data["inlet_id"] == "ADB-1:in"
    assert [(s["from_connector"], s["to_connector"]) for s in data["segments"]] == [
        ("ADB-1:out1", "G1:c"),
        ("ADB-1:out2", "G2:c"),
    ]
    assert [s["route_name"] for s in data["segments"]] == ["Supply Air_2", "Supply Air_3"]


def test_main_reads_paths_from_config(tmp_path, model_file):
    report = tmp_path / "cfg_routing.json"
    cfg = tmp_path / "config.yaml"
    cfg.write_text(
        "paths:\n"
        f"  model_path: {model_file}\n"
        f"  report_out: {report}\n"
        "logging:\n"
        "  level: DEBUG\n",
        encoding="utf-8",
    )
    assert main(["--config", str(cfg), "--device-id", "ADB-1"]) == EXIT_OK
    assert report.is_file()


def test_main_unknown_device(tmp_path, model_file):
    report = tmp_path / "routing.json"
    code = main(["--model", str(model_file), "--device-id", "missing", "--report-out", str(report)])
    assert code == EXIT_NOTHING_ROUTED
    assert json.loads(report.read_text(encoding="utf-8"))["status"] == "device_not_found"


def test_main_missing_model(tmp_path, caplog):
    code = main(["--model", str(tmp_path / "nope.json"), "--device-id", "ADB-1"])
    assert code == EXIT_FAILED
    assert "MODEL_NOT_FOUND" in caplog.text


def test_main_without_model_path(caplog):
    assert main(["--device-id", "ADB-1"]) == EXIT_FAILED
    assert "MODEL_NOT_SET" in caplog.text


def test_main_rejects_duplicate_connector_ids(tmp_path, model_dict, caplog):
    model_dict["elements"][1]["connectors"][0]["id"] = "G2:c"
    path = tmp_path / "dup.json"
    path.write_text(json.dumps(model_dict), encoding="utf-8")

    assert main(["--model", str(path), "--device-id", "ADB-1"]) == EXIT_FAILED
    assert "DUPLICATE_CONNECTOR_ID" in caplog.text


def test_main_reports_invalid_frame(tmp_path, model_dict, caplog):
    model_dict["elements"][0]["connectors"][0]["coordinate_system"]["basis_z"] = [0.0, 0.0, 0.0]
    path = tmp_path / "degenerate.json"
    path.write_text(json.dumps(model_dict), encoding="utf-8")
    report = tmp_path / "routing.json"

    code = main(["--model", str(path), "--device-id", "ADB-1", "--report-out", str(report)])
    assert code == EXIT_FAILED
    assert "INVALID_FRAME" in caplog.text
    assert json.loads(report.read_text(encoding="utf-8"))["status"] == "invalid_frame"


def test_main_writes_plot(tmp_path, model_file):
    pytest.importorskip("matplotlib")
    plot = tmp_path / "pairing.png"
    assert main(["--model", str(model_file), "--device-id", "ADB-1", "--plot-out", str(plot)]) == EXIT_OK
    assert plot.is_file() and plot.stat().st_size > 0


def test_device_id_is_required(model_file):
    with pytest.raises(SystemExit):
        main(["--model", str(model_file)])


def test_main_rejects_non_box_device(tmp_path, model_file):
    report = tmp_path / "routing.json"
    code = main(["--model", str(model_file), "--device-id", "G1", "--report-out", str(report)])
    assert code == EXIT_NOTHING_ROUTED
    assert json.loads(report.read_text(encoding="utf-8"))["status"] == "invalid_device"


def test_main_with_python_backend(tmp_path, model_file):
    report = tmp_path / "routing.json"
    code = main(["--model", str(model_file), "--device-id", "ADB-1", "--report-out", str(report),
                 "--backend", "python"])
    assert code == EXIT_OK
    segments = json.loads(report.read_text(encoding="utf-8"))["segments"]
    assert [(s["from_connector"], s["to_connector"]) for s in segments] == [
        ("ADB-1:out1", "G1:c"),
        ("ADB-1:out2", "G2:c"),
    ]


def test_main_rejects_non_finite_frame(tmp_path, model_dict, caplog):
    model_dict["elements"][0]["connectors"][0]["coordinate_system"]["basis_x"] = [float("nan"), 0.0, 0.0]
    path = tmp_path / "nan.json"
    path.write_text(json.dumps(model_dict), encoding="utf-8")

    assert main(["--model", str(path), "--device-id", "ADB-1"]) == EXIT_FAILED
    assert "NON_FINITE_FRAME" in caplog.text
