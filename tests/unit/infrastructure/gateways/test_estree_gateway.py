import json
from pathlib import Path

import pytest

from adjacent_overloads.domain.exceptions import SourceLoadError
from adjacent_overloads.infrastructure.gateways.estree_gateway import EstreeGateway


def test_load_document(tmp_path: Path):
    program = {"type": "Program", "body": [], "sourceType": "module"}
    doc = tmp_path / "a.estree.json"
    doc.write_text(json.dumps(program), encoding="utf-8")
    assert EstreeGateway().load_document(str(doc)) == program


def test_missing_file(tmp_path: Path):
    with pytest.raises(SourceLoadError):
        EstreeGateway().load_document(str(tmp_path / "none.estree.json"))


def test_invalid_json_names_the_file():
    with pytest.raises(SourceLoadError) as excinfo:
        EstreeGateway.loads("{not json", "bad.estree.json")
    assert excinfo.value.path == "bad.estree.json"
    assert "invalid JSON" in excinfo.value.reason


@pytest.mark.parametrize("text", ["[]", '"Program"', "{}", '{"type": 1}'])
def test_root_must_be_a_typed_node(text: str):
    with pytest.raises(SourceLoadError) as excinfo:
        EstreeGateway.loads(text)
    assert excinfo.value.path == "<string>"


def test_nested_nodes_are_not_validated():
    document = EstreeGateway.loads('{"type": "Program", "body": [{"weird": true}]}')
    assert document["body"] == [{"weird": True}]
