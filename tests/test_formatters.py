from itayki.core import formatters as fm


class DummyResponse:
    def __init__(self, json_data=None, exc=None, content=b""):
        self._json = json_data
        self._exc = exc
        self.content = content

    def json(self):
        if self._exc:
            raise self._exc
        return self._json


def test_format_exec_missing_fields_render_none():
    assert fm.format_exec({"Stats": "s"}) == "Language: None\n\nCode: None\n\nResults: None\n\nStats: s"


def test_format_exec_without_markers():
    assert fm.format_exec({}) is None


def test_format_ocr_prefers_text_over_error():
    assert fm.format_ocr({"ocr": "a", "error": "b"}) == "ocr: a"


def test_try_json_object():
    assert fm.try_json(DummyResponse({"error": "x"})) == {"error": "x"}


def test_try_json_decode_failure_keeps_body():
    r = DummyResponse(exc=ValueError("no json"), content=b"\x89PNG")
    assert fm.try_json(r) is None
    assert r.content == b"\x89PNG"


def test_try_json_non_object_is_not_a_payload():
    assert fm.try_json(DummyResponse([1, 2])) is None


def test_as_object():
    assert fm.as_object({"a": 1}) == {"a": 1}
    assert fm.as_object([1, 2]) == {}
    assert fm.as_object("error") == {}
