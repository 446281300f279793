import json

from todo_server.generate_openapi import generate_openapi


def test_generate_openapi_writes_schema(tmp_path):
    out = tmp_path / "interfaces" / "openapi.json"
    written = generate_openapi(str(out))
    assert written == str(out)

    schema = json.loads(out.read_text(encoding="utf-8"))
    assert "/todos" in schema["paths"]
    assert "/todos/{todo_id}" in schema["paths"]
    assert set(schema["paths"]["/todos/{todo_id}"]) == {"get", "put", "delete"}
    assert any(tag["name"] == "todos" for tag in schema["tags"])
