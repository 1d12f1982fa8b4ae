import pytest

from core.errors import MalformedResponse, ResponseDecodeError, UnexpectedShape
from core.services.aliases_decoder import decode_aliases


def test_empty_object_yields_empty_result() -> None:
    result = decode_aliases(b"{}")

    assert len(result) == 0
    assert result.anomalies == 0


def test_aliases_become_entries() -> None:
    result = decode_aliases(b'{"idx":{"aliases":{"a":{}, "b":{}}}}')

    assert result.index_names() == ["idx"]
    assert set(result.indices["idx"].alias_names()) == {"a", "b"}
    assert result.indices_by_alias("a") == ["idx"]
    assert result.indices_by_alias("missing") == []


def test_index_without_aliases_key_is_kept() -> None:
    result = decode_aliases(b'{"idx":{}}')

    entry = result.indices["idx"]
    assert entry.aliases == ()
    assert not result.index_has_alias(entry, "anything")
    assert result.anomalies == 0


def test_alias_metadata_is_ignored() -> None:
    body = b"""
    {
      "logs-2024": {"aliases": {"logs-current": {"filter": {"term": {"user": "kimchy"}}, "index_routing": "1"}}},
      "logs-2023": {"aliases": {}}
    }
    """

    result = decode_aliases(body)

    assert result.to_mapping() == {"logs-2024": ["logs-current"], "logs-2023": []}


@pytest.mark.parametrize(
    "body",
    [
        b'{"idx": 1}',
        b'{"idx": null}',
        b'{"idx": ["a"]}',
        b'{"idx": {"aliases": ["a", "b"]}}',
        b'{"idx": {"aliases": "a"}}',
    ],
)
def test_foreign_substructure_degrades_to_empty_aliases(body: bytes) -> None:
    result = decode_aliases(body)

    assert result.index_names() == ["idx"]
    assert result.indices["idx"].aliases == ()
    assert result.anomalies == 1


def test_one_bad_index_does_not_affect_the_others() -> None:
    result = decode_aliases(b'{"bad": "x", "good": {"aliases": {"a": {}}}}')

    assert result.to_mapping() == {"bad": [], "good": ["a"]}
    assert result.anomalies == 1


def test_accepts_text_body() -> None:
    assert decode_aliases('{"idx":{"aliases":{"a":{}}}}').indices_by_alias("a") == ["idx"]


@pytest.mark.parametrize("body", [b"[1,2,3]", b'"idx"', b"42", b"null"])
def test_non_object_top_level_is_unexpected_shape(body: bytes) -> None:
    with pytest.raises(UnexpectedShape):
        decode_aliases(body)


@pytest.mark.parametrize("body", [b"not json", b"", b'{"idx":', b"\xc3\x28"])
def test_invalid_json_is_malformed(body: bytes) -> None:
    with pytest.raises(MalformedResponse):
        decode_aliases(body)


def test_decode_errors_share_a_base_class() -> None:
    assert issubclass(MalformedResponse, ResponseDecodeError)
    assert issubclass(UnexpectedShape, ResponseDecodeError)
