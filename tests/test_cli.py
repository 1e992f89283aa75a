from __future__ import annotations

import json

import pytest

from jmx4py.main import main
from jmx4py.protocol import INVALID_FIELD, INVALID_TYPE, MISSING_FIELD, OK, UNSUPPORTED_TYPE


@pytest.fixture(autouse=True)
def isolated(monkeypatch, tmp_path):
    for name in ("JMX4PY_MAX_DEPTH", "JMX4PY_MAX_OBJECTS", "JMX4PY_MAX_LIST_SIZE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def run(capsys, *argv):
    code = main(list(argv))
    return code, json.loads(capsys.readouterr().out)


def test_types_lists_every_request_type(capsys):
    code, types = run(capsys, "types")

    assert code == 0
    assert types == ["read", "write", "exec", "list", "search", "regnotif", "remnotif"]


def test_build_positional_read(capsys):
    code, response = run(capsys, "build", "read", "java.lang:type=Memory", "HeapMemoryUsage", "used")

    assert code == 0
    assert response["ok"] is True
    assert response["code"] == OK
    assert response["data"] == {
        "type": "read",
        "mbean": "java.lang:type=Memory",
        "attribute": "HeapMemoryUsage",
        "path": "used",
    }


def test_build_exec_collects_arguments(capsys):
    code, response = run(capsys, "build", "exec", "Foo:name=bar", "doIt", "1", "2", "3")

    assert code == 0
    assert response["data"]["args"] == ["1", "2", "3"]


def test_build_applies_limits_and_method(capsys):
    code, response = run(capsys, "build", "list", "--max-depth", "2", "--method", "post")

    assert code == 0
    assert response["data"] == {"type": "list", "max_depth": 2, "method": "post"}


def test_build_uses_config_defaults(capsys, tmp_path):
    (tmp_path / "config.toml").write_text("[limits]\nmax_objects = 500\n", encoding="utf-8")

    code, response = run(capsys, "build", "search", "hadoop:*")

    assert code == 0
    assert response["data"]["max_objects"] == 500


def test_build_from_json_request(capsys):
    request = json.dumps({"type": "write", "mbean": "java.lang:type=Memory", "attribute": "Verbose", "value": True})

    code, response = run(capsys, "build", "--request", request)

    assert code == 0
    assert response["data"]["value"] is True


def test_json_request_overrides_config_defaults(capsys, tmp_path):
    (tmp_path / "config.toml").write_text("[limits]\nmax_depth = 4\n", encoding="utf-8")
    request = json.dumps({"type": "list", "max_depth": 1})

    code, response = run(capsys, "build", "--request", request)

    assert code == 0
    assert response["data"]["max_depth"] == 1


@pytest.mark.parametrize(
    "argv, error_code",
    [
        (("build", "reed", "Foo:name=bar"), INVALID_TYPE),
        (("build", "regnotif"), UNSUPPORTED_TYPE),
        (("build", "read", "Foo:name=bar"), MISSING_FIELD),
        (("build", "list", "--max-depth", "0"), INVALID_FIELD),
    ],
)
def test_build_errors_become_envelopes(capsys, argv, error_code):
    code, response = run(capsys, *argv)

    assert code == 1
    assert response["ok"] is False
    assert response["code"] == error_code
    assert response["data"] == {}


def test_build_needs_type_or_request(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["build"])
    assert excinfo.value.code == 2


def test_build_rejects_non_object_request(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["build", "--request", "[1, 2]"])
    assert excinfo.value.code == 2


def test_build_path_option(capsys):
    code, response = run(capsys, "build", "list", "--path", "java.lang")

    assert code == 0
    assert response["data"] == {"type": "list", "path": "java.lang"}


def test_positional_path_wins_over_path_option(capsys):
    code, response = run(capsys, "build", "read", "Foo:name=bar", "Attr", "inner", "--path", "outer")

    assert code == 0
    assert response["data"]["path"] == "inner"


def test_build_values_after_options(capsys):
    code, response = run(capsys, "build", "read", "Foo:name=bar", "--max-depth", "2", "Attr")

    assert code == 0
    assert response["data"] == {
        "type": "read",
        "mbean": "Foo:name=bar",
        "attribute": "Attr",
        "max_depth": 2,
    }


def test_types_rejects_unknown_arguments(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["types", "--bogus"])
    assert excinfo.value.code == 2
