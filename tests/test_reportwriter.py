import json
import urllib.error
import urllib.request

import pytest

from media_finder.checker import FileType
from media_finder.reportwriter import (
    EMPTY_REPORT,
    HTTPWriter,
    JSONWriter,
    build_report,
    home_dir,
)

RAW = {
    FileType.AUDIO: ["/m/a.mp3", "/m/b.ogg"],
    FileType.IMAGE: ["/p/c.png"],
}


def test_build_report_sections():
    report = build_report(RAW)
    assert report == {
        "audio": ["/m/a.mp3", "/m/b.ogg"],
        "video": [],
        "images": ["/p/c.png"],
    }


def test_build_report_empty():
    assert build_report({}) == json.loads(EMPTY_REPORT)


def test_home_dir_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert home_dir() == tmp_path


def test_home_dir_missing(monkeypatch):
    monkeypatch.delenv("HOME", raising=False)
    with pytest.raises(RuntimeError):
        home_dir()


def test_json_writer_explicit_path(tmp_path):
    target = tmp_path / "report.json"
    JSONWriter(target).write_report(RAW)
    assert json.loads(target.read_text(encoding="utf-8")) == build_report(RAW)


def test_json_writer_default_path_and_format(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    JSONWriter().write_report({})
    report_path = home_dir() / ".media_files"
    assert report_path == tmp_path / ".media_files"
    text = report_path.read_text(encoding="utf-8")
    assert json.loads(text) == build_report({})
    assert text == '{\n  "audio": [],\n  "images": [],\n  "video": []\n}'


def test_json_writer_unwritable_path(tmp_path):
    with pytest.raises(RuntimeError):
        JSONWriter(tmp_path / "missing" / "report.json").write_report(RAW)


def _fetch(writer, route="/media_files"):
    url = f"http://127.0.0.1:{writer.port}{route}"
    with urllib.request.urlopen(url, timeout=5) as response:
        return response.headers.get("Content-Type"), response.read().decode("utf-8")


def test_http_writer_serves_reports():
    with HTTPWriter("127.0.0.1", 0) as writer:
        content_type, body = _fetch(writer)
        assert content_type == "application/json"
        assert body == EMPTY_REPORT

        writer.write_report(RAW)
        _, body = _fetch(writer)
        assert json.loads(body) == build_report(RAW)
        assert body == writer.current_report()


def test_http_writer_unknown_route():
    with HTTPWriter("127.0.0.1", 0) as writer:
        with pytest.raises(urllib.error.HTTPError) as info:
            _fetch(writer, "/other")
        assert info.value.code == 404
        assert writer.current_report() == EMPTY_REPORT
        _, body = _fetch(writer)
        assert body == writer.current_report()


def test_http_writer_port_in_use():
    with HTTPWriter("127.0.0.1", 0) as first:
        with pytest.raises(RuntimeError):
            HTTPWriter("127.0.0.1", first.port)