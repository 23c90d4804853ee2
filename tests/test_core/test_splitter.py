from __future__ import annotations

from textwrap import dedent

import pytest

from chartkeeper.core.splitter import ParsedDocument, parse_document, split_documents
from chartkeeper.exceptions import ManifestParseError


@pytest.mark.unit
class TestSplitDocuments:
    """Tests for split_documents."""

    def test_single_document(self) -> None:
        documents = list(split_documents("kind: Profile\n"))

        assert len(documents) == 1
        assert documents[0].ok
        assert documents[0].data == {"kind": "Profile"}
        assert documents[0].index == 0
        assert documents[0].line_number == 1

    def test_multiple_documents_in_order(self) -> None:
        content = "a: 1\n---\nb: 2\n---\nc: 3\n"

        documents = list(split_documents(content))

        assert [d.data for d in documents] == [{"a": "1"}, {"b": "2"}, {"c": "3"}]
        assert [d.index for d in documents] == [0, 1, 2]
        assert [d.line_number for d in documents] == [1, 3, 5]

    def test_leading_marker_yields_empty_document(self) -> None:
        documents = list(split_documents("---\nkind: Profile\n"))

        assert documents[0].ok
        assert documents[0].data is None
        assert documents[1].data == {"kind": "Profile"}

    def test_marker_with_trailing_comment(self) -> None:
        documents = list(split_documents("a: 1\n--- # next\nb: 2\n"))

        assert [d.data for d in documents] == [{"a": "1"}, {"b": "2"}]

    def test_dashes_inside_values_are_not_markers(self) -> None:
        content = "a: ---\nb: x---y\nc: ----\n"

        documents = list(split_documents(content))

        assert len(documents) == 1
        assert documents[0].data == {"a": "---", "b": "x---y", "c": "----"}

    def test_parse_failure_is_local(self) -> None:
        content = "a: [unclosed\n---\nb: 2\n"

        documents = list(split_documents(content))

        assert not documents[0].ok
        assert isinstance(documents[0].error, ManifestParseError)
        assert documents[0].error.document_index == 0
        assert documents[0].error.line_number == 1
        assert documents[1].ok
        assert documents[1].data == {"b": "2"}

    def test_crlf_line_endings(self) -> None:
        content = "a: 1\r\n---\r\nb: 2\r\n--- \r\nc: 3\r\n"

        documents = list(split_documents(content))

        assert [d.data for d in documents] == [{"a": "1"}, {"b": "2"}, {"c": "3"}]
        assert [d.line_number for d in documents] == [1, 3, 5]

    def test_marker_at_end_of_crlf_file(self) -> None:
        documents = list(split_documents("a: 1\r\n---\r"))

        assert [d.data for d in documents] == [{"a": "1"}, None]

    @pytest.mark.parametrize(
        "tagged",
        ["!!int abc", "!!float abc", "!!timestamp abc"],
    )
    def test_unconstructable_tag_is_local(self, tagged: str) -> None:
        content = f"foo: {tagged}\n---\nb: 2\n"

        documents = list(split_documents(content))

        assert len(documents) == 2
        assert not documents[0].ok
        assert isinstance(documents[0].error, ManifestParseError)
        assert documents[0].error.document_index == 0
        assert documents[1].data == {"b": "2"}

    def test_is_lazy(self) -> None:
        iterator = split_documents("a: 1\n---\nb: [\n")

        first = next(iterator)

        assert isinstance(first, ParsedDocument)
        assert first.data == {"a": "1"}

    def test_all_documents_fail(self) -> None:
        documents = list(split_documents("a: [\n---\nb: {\n"))

        assert len(documents) == 2
        assert not any(d.ok for d in documents)


@pytest.mark.unit
class TestParseDocument:
    """Scalar handling of the manifest loader."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("1.10", "1.10"),
            ("23.4.0", "23.4.0"),
            ("2", "2"),
            ("true", "true"),
            ("2024-01-01", "2024-01-01"),
            ("'quoted'", "quoted"),
        ],
        ids=["float", "semver", "int", "bool", "date", "quoted"],
    )
    def test_plain_scalars_stay_text(self, raw: str, expected: str) -> None:
        assert parse_document(f"value: {raw}\n") == {"value": expected}

    def test_null_still_resolved(self) -> None:
        assert parse_document("a: null\nb: ~\nc:\n") == {"a": None, "b": None, "c": None}

    def test_nested_structures(self) -> None:
        data = parse_document(
            dedent(
                """\
                spec:
                  helmCharts:
                  - chartName: a/b
                    chartVersion: 1.0
                """
            )
        )

        assert data == {"spec": {"helmCharts": [{"chartName": "a/b", "chartVersion": "1.0"}]}}
