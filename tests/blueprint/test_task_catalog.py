# -*- coding: utf-8 -*-
"""
Tests for task templates and the task catalog

Tests cover:
- Integrity checks on task content
- Frozen templates
- Loading task packs from JSON / TOML
- Catalog indexing
"""
import json
import pytest
from pydantic import ValidationError

from src.blueprint.core.base_node import NodeKind
from src.blueprint.core.pins import PinType
from src.blueprint.tasks.arrow_dot import ARROW_DOT_TASKS
from src.blueprint.tasks.catalog import TaskCatalog
from src.blueprint.tasks.models import NodeTemplate, TaskIntegrityError, TaskTemplate


def raw_task(**overrides):
    """Minimal valid task in authoring format."""
    data = {
        "id": 7,
        "context": "Reach the member.",
        "nodes": [
            {"id": "v", "type": "VARIABLE", "content": "Player p1",
             "outputs": [{"id": "out", "type": "OBJECT"}]},
            {"id": "op", "type": "OPERATOR", "content": ".",
             "inputs": [{"id": "in", "type": "OBJECT"}],
             "outputs": [{"id": "out", "type": "MEMBER"}]},
            {"id": "m", "type": "MEMBER", "inputs": [{"id": "in", "type": "MEMBER"}]},
        ],
        "correctPath": ["v", "op", "m"],
    }
    data.update(overrides)
    return data


class TestTaskTemplate:

    def test_authoring_format_accepted(self):
        """Uppercase kinds and the correctPath alias load."""
        task = TaskTemplate.model_validate(raw_task())
        assert task.expected_path == ("v", "op", "m")
        assert task.node("v").kind is NodeKind.VARIABLE
        assert task.node("op").outputs[0].type is PinType.MEMBER
        assert task.start_node_id == "v"

    def test_templates_are_frozen(self, object_task):
        with pytest.raises(ValidationError):
            object_task.context = "changed"

    def test_missing_path_node(self):
        with pytest.raises(TaskIntegrityError) as exc:
            TaskTemplate.model_validate(raw_task(correctPath=["v", "ghost", "m"]))
        assert exc.value.task_id == 7
        assert "ghost" in str(exc.value)

    def test_duplicate_node_ids(self):
        data = raw_task()
        data["nodes"].append({"id": "m", "type": "MEMBER"})
        with pytest.raises(TaskIntegrityError):
            TaskTemplate.model_validate(data)

    def test_duplicate_pin_ids(self):
        data = raw_task()
        data["nodes"][1]["outputs"] = [{"id": "in"}]
        with pytest.raises(TaskIntegrityError):
            TaskTemplate.model_validate(data)

    def test_needs_exactly_one_variable(self):
        data = raw_task()
        data["nodes"][0]["type"] = "RESULT"
        with pytest.raises(TaskIntegrityError, match="one variable"):
            TaskTemplate.model_validate(data)

        data = raw_task()
        data["nodes"].append({"id": "v2", "type": "VARIABLE"})
        with pytest.raises(TaskIntegrityError, match="found 2"):
            TaskTemplate.model_validate(data)

    def test_path_starts_at_variable(self):
        with pytest.raises(TaskIntegrityError, match="must start"):
            TaskTemplate.model_validate(raw_task(correctPath=["op", "m"]))

    def test_path_too_short(self):
        with pytest.raises(TaskIntegrityError, match="at least two"):
            TaskTemplate.model_validate(raw_task(correctPath=["v"]))

    def test_unknown_kind_is_schema_error(self):
        data = raw_task()
        data["nodes"][2]["type"] = "WIDGET"
        with pytest.raises(ValidationError):
            TaskTemplate.model_validate(data)

    def test_node_lookup_miss(self, object_task):
        with pytest.raises(TaskIntegrityError):
            object_task.node("nope")

    def test_node_template_kind_by_name(self):
        node = NodeTemplate(id="n", kind="operator")
        assert node.kind is NodeKind.OPERATOR


class TestTaskCatalog:

    def test_default_catalog(self):
        catalog = TaskCatalog.default()
        assert len(catalog) == len(ARROW_DOT_TASKS) == 5
        assert [task.id for task in catalog] == [1, 2, 3, 4, 5]

    def test_index_out_of_range(self):
        catalog = TaskCatalog.default()
        with pytest.raises(IndexError):
            catalog[5]
        with pytest.raises(IndexError):
            catalog.get(-1)

    def test_empty_catalog_rejected(self):
        with pytest.raises(ValueError):
            TaskCatalog([])

    def test_duplicate_task_ids_rejected(self):
        with pytest.raises(TaskIntegrityError):
            TaskCatalog([ARROW_DOT_TASKS[0], ARROW_DOT_TASKS[0]])

    def test_from_json_list(self, tmp_path):
        path = tmp_path / "tasks.json"
        path.write_text(json.dumps([raw_task(), raw_task(id=8)]), encoding="utf-8")
        catalog = TaskCatalog.from_file(path)
        assert [task.id for task in catalog] == [7, 8]

    def test_from_json_table(self, tmp_path):
        path = tmp_path / "tasks.json"
        path.write_text(json.dumps({"tasks": [raw_task()]}), encoding="utf-8")
        assert TaskCatalog.from_file(str(path))[0].context == "Reach the member."

    def test_from_toml(self, tmp_path):
        path = tmp_path / "tasks.toml"
        path.write_text(
            '[[tasks]]\n'
            'id = 1\n'
            'context = "Pointer access"\n'
            'correctPath = ["v", "m"]\n'
            '\n'
            '[[tasks.nodes]]\n'
            'id = "v"\n'
            'type = "VARIABLE"\n'
            'content = "Player* ptr"\n'
            'outputs = [{ id = "out", type = "POINTER" }]\n'
            '\n'
            '[[tasks.nodes]]\n'
            'id = "m"\n'
            'type = "MEMBER"\n'
            'inputs = [{ id = "in", type = "MEMBER" }]\n',
            encoding="utf-8",
        )
        task = TaskCatalog.from_file(path)[0]
        assert task.node("v").content == "Player* ptr"
        assert task.expected_path == ("v", "m")

    def test_corrupt_file_raises(self, tmp_path):
        path = tmp_path / "tasks.json"
        path.write_text(json.dumps([raw_task(correctPath=["v", "x"])]), encoding="utf-8")
        with pytest.raises(TaskIntegrityError):
            TaskCatalog.from_file(path)
