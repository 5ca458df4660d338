"""Tests for documentation models."""

from datetime import datetime

import pytest
from bson import ObjectId
from pydantic import ValidationError

from mcp_docdb.models import (
    DocumentationSearchResponse,
    GroupCount,
    OperationResult,
    Record,
    SearchHit,
)


class TestRecord:

    def test_create_sets_defaults(self):
        record = Record.create("react", {"title": "React"})

        assert record.id is None
        assert record.version == "latest"
        assert record.tags == ["react"]
        assert isinstance(record.last_updated, datetime)
        assert record.last_updated.tzinfo is not None

    @pytest.mark.parametrize("version", [None, "", "   ", "\t\n"])
    def test_blank_version_means_latest(self, version):
        assert Record.create("react", {}, version).version == "latest"

    def test_version_is_trimmed(self):
        assert Record.create("react", {}, " 18 ").version == "18"

    def test_technology_required(self):
        with pytest.raises(ValidationError):
            Record.create("", {})

    def test_from_document_uses_store_keys(self):
        object_id = ObjectId()
        document = {
            "_id": object_id,
            "technology": "vue",
            "version": "3",
            "content": {"title": "Vue", "ref": ObjectId()},
            "tags": ["vue"],
            "lastUpdated": datetime(2024, 1, 1),
            "score": 1.2,
        }

        record = Record.from_document(document)

        assert record.id == str(object_id)
        assert record.last_updated == datetime(2024, 1, 1)
        assert isinstance(record.content["ref"], str)

    def test_to_document_omits_identifier(self):
        record = Record.create("react", {"title": "React"}, "18")
        document = record.to_document()

        assert set(document) == {"technology", "version", "content", "tags", "lastUpdated"}

    def test_to_json(self):
        record = Record.create("react", {"title": "React"}, "18").model_copy(update={"id": "abc"})
        data = record.to_json()

        assert data["_id"] == "abc"
        assert data["technology"] == "react"
        assert isinstance(data["lastUpdated"], str)

    def test_preview_truncates_encoded_content(self):
        record = Record.create("react", {"title": "x" * 500})

        preview = record.preview(100)

        assert len(preview) == 100
        assert preview.startswith('{"title": "xxx')

    def test_preview_of_short_content(self):
        assert Record.create("react", "short").preview() == '"short"'


class TestSearchModels:

    def test_response_totals_follow_results(self):
        hits = [
            SearchHit(item=Record.create("react", {}), score=3.0, rank=1),
            SearchHit(item=Record.create("vue", {}), score=1.0, rank=2),
        ]

        response = DocumentationSearchResponse(query="hooks", limit=10, results=hits)

        assert response.total_count == 2
        assert response.max_score == 3.0

    def test_empty_response(self):
        response = DocumentationSearchResponse(query="hooks", limit=10)

        assert response.total_count == 0
        assert response.results == []

    def test_rank_and_score_bounds(self):
        with pytest.raises(ValidationError):
            SearchHit(item=Record.create("react", {}), score=-1.0, rank=1)
        with pytest.raises(ValidationError):
            SearchHit(item=Record.create("react", {}), score=1.0, rank=0)


class TestGroupCount:

    def test_group_value_alias(self):
        group = GroupCount.model_validate({"_id": "react", "count": 4})

        assert group.value == "react"
        assert group.to_json() == {"_id": "react", "count": 4}

    def test_object_id_group_value(self):
        object_id = ObjectId()
        group = GroupCount.model_validate({"_id": object_id, "count": 1})

        assert group.value == str(object_id)


class TestOperationResult:

    def test_failure_result(self):
        result = OperationResult(success=False, message="Error: nope", error_code="VALIDATION_ERROR")

        assert not result.success
        assert result.data is None
